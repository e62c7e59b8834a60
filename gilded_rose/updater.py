import logging
from typing import Sequence

from .items import Item, ItemCategory

logger = logging.getLogger(__name__)


class InventoryUpdater:
    """
    Applies one night of aging to every item it holds.

    Rules, per item and in this order:
    1. Legendary items are pinned to LEGENDARY_QUALITY and never age.
    2. Quality only moves while it sits strictly inside the bounds.
    3. The move depends on the category and on the sell-in value from
       *before* tonight's decrement.
    4. Sell-in always drops by one for everything but legendary items.
    """

    MIN_QUALITY = 0
    MAX_QUALITY = 50
    LEGENDARY_QUALITY = 80

    # Backstage passes speed up as the concert approaches.
    BACKSTAGE_SECOND_TIER_DAYS = 10
    BACKSTAGE_FINAL_TIER_DAYS = 5

    # sell_in at or below this value means the sell-by date has passed.
    EXPIRY_DAY = 0

    APPRECIATION_RATE = 1
    DEPRECIATION_RATE = 1
    CONJURED_FACTOR = 2
    EXPIRED_FACTOR = 2

    def __init__(self, items: Sequence[Item]):
        self.items = items

    def advance_one_day(self):
        """Ages every item by one day, in stored order."""
        for item in self.items:
            self._age_item(item)

    def _age_item(self, item: Item):
        if item.category is ItemCategory.LEGENDARY:
            item.quality = self.LEGENDARY_QUALITY
            return

        if self.MIN_QUALITY < item.quality < self.MAX_QUALITY:
            self._adjust_quality(item)

        item.sell_in -= 1
        logger.debug("Aged %r", item)

    def _adjust_quality(self, item: Item):
        if item.category is ItemCategory.AGED_BRIE:
            self._alter_quality(item, self.APPRECIATION_RATE)
        elif item.category is ItemCategory.BACKSTAGE_PASS:
            self._appreciate_backstage_pass(item)
        elif item.category is ItemCategory.CONJURED:
            self._depreciate(item, self.DEPRECIATION_RATE * self.CONJURED_FACTOR)
        else:
            self._depreciate(item, self.DEPRECIATION_RATE)

    def _is_expired(self, item: Item) -> bool:
        return item.sell_in <= self.EXPIRY_DAY

    def _backstage_rate(self, item: Item) -> int:
        if item.sell_in <= self.BACKSTAGE_FINAL_TIER_DAYS:
            return self.APPRECIATION_RATE * 3
        if item.sell_in <= self.BACKSTAGE_SECOND_TIER_DAYS:
            return self.APPRECIATION_RATE * 2
        return self.APPRECIATION_RATE

    def _appreciate_backstage_pass(self, item: Item):
        if self._is_expired(item):
            # Concert is over; direct reset, not clamped.
            item.quality = self.MIN_QUALITY
        else:
            self._alter_quality(item, self._backstage_rate(item))

    def _depreciate(self, item: Item, rate: int):
        if self._is_expired(item):
            rate *= self.EXPIRED_FACTOR
        self._alter_quality(item, -rate)

    def _alter_quality(self, item: Item, delta: int):
        item.quality = max(self.MIN_QUALITY, min(self.MAX_QUALITY, item.quality + delta))


def advance_one_day(items: Sequence[Item]):
    """Ages ``items`` in place by one day."""
    InventoryUpdater(items).advance_one_day()
