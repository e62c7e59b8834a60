from enum import Enum


class ItemCategory(Enum):
    """
    The closed set of item kinds the shop knows how to age.
    Each member's value is the exact item name that selects it, except
    ORDINARY, which is the fallback for every other name.
    """

    LEGENDARY = "Sulfuras, Hand of Ragnaros"
    AGED_BRIE = "Aged Brie"
    BACKSTAGE_PASS = "Backstage passes to a TAFKAL80ETC concert"
    CONJURED = "Conjured"
    ORDINARY = ""

    @classmethod
    def from_name(cls, name: str) -> "ItemCategory":
        """Resolves an item name to its category (exact match, ordinary otherwise)."""
        for category in cls:
            if category is not cls.ORDINARY and category.value == name:
                return category
        return cls.ORDINARY


class Item:
    """
    One stocked product. Mutated in place by the nightly update.
    The category is resolved from the name when the item is built,
    and again whenever the name is reassigned.
    """

    def __init__(self, name: str, sell_in: int, quality: int):
        self.name = name
        self.sell_in = sell_in
        self.quality = quality

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value
        self.category = ItemCategory.from_name(value)

    @property
    def is_legendary(self) -> bool:
        return self.category is ItemCategory.LEGENDARY

    def as_triple(self) -> tuple[str, int, int]:
        return self.name, self.sell_in, self.quality

    def __repr__(self):
        return f"{self.name}, {self.sell_in}, {self.quality}"
