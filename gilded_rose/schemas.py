from pydantic import BaseModel, Field

from .items import Item


class ItemRecord(BaseModel):
    """
    One row of a seed inventory file.
    Only types are checked here; out-of-range values are left for the updater.
    """

    name: str = Field(..., alias="Name")
    sell_in: int = Field(..., alias="Sell In")
    quality: int = Field(..., alias="Quality")

    class Config:
        populate_by_name = True

    def to_item(self) -> Item:
        return Item(self.name, self.sell_in, self.quality)


class InventorySnapshot(BaseModel):
    """
    The state of a single item at the end of a simulated day.
    Day 0 is the stock as loaded, before any update ran.
    """

    day: int = Field(..., ge=0, alias="Day")
    name: str = Field(..., alias="Name")
    sell_in: int = Field(..., alias="Sell In")
    quality: int = Field(..., alias="Quality")
    category: str = Field(..., alias="Category")

    class Config:
        # Build from keyword names, export with the friendly aliases.
        populate_by_name = True

    @classmethod
    def from_item(cls, day: int, item: Item) -> "InventorySnapshot":
        return cls(
            day=day,
            name=item.name,
            sell_in=item.sell_in,
            quality=item.quality,
            category=item.category.name,
        )
