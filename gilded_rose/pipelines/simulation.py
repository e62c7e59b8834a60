import logging
from datetime import date
from pathlib import Path
from typing import Optional
from pydantic import ValidationError

from gilded_rose import parsers, settings
from gilded_rose.items import Item
from gilded_rose.pipeline import DataPipeline
from gilded_rose.schemas import InventorySnapshot
from gilded_rose.updater import InventoryUpdater

logger = logging.getLogger(__name__)


class SimulationPipeline(DataPipeline):
    """
    Runs the nightly update over a stock for a number of days and reports
    every item's state at the end of each day (day 0 is the starting stock).
    """

    def __init__(
        self,
        days: Optional[int] = None,
        items: Optional[list[Item]] = None,
        input_path: Optional[Path] = None,
        test_mode: bool = False,
    ):
        if days is None:
            days = settings.DEFAULT_DAYS
        if days < 0:
            raise ValueError(f"days must be >= 0, got {days}")

        super().__init__(
            "inventory", output_name=settings.REPORT_FILENAME_BASE, test_mode=test_mode
        )
        self.days = days
        self.items = items
        self.input_path = input_path
        self.system_date = date.today()

    def extract(self) -> list[Item] | None:
        logger.info("--- Loading Stock ---")

        if self.items is not None:
            source = "caller"
            items = self.items
        else:
            path = self.input_path or settings.INPUT_DIR / settings.ITEMS_FILENAME
            if path.exists():
                source = path.name
                items = parsers.parse_items_report(path)
            elif self.input_path is not None:
                logger.error(f"  > ERROR: Seed file {path} not found.")
                return None
            else:
                logger.info(f"  > INFO: No seed file at {path}. Using default stock.")
                source = "default"
                items = parsers.items_from_triples(settings.DEFAULT_INVENTORY)

        if items is None:
            return None

        self.metadata.update(
            {
                "source": source,
                "items": len(items),
                "days": self.days,
                "runDate": self.system_date.isoformat(),
            }
        )
        return items

    def transform(self, items: list[Item]) -> list[InventorySnapshot] | None:
        logger.info("\n--- Advancing Days ---")
        updater = InventoryUpdater(items)

        snapshots = []
        try:
            for day in range(self.days + 1):
                if day > 0:
                    updater.advance_one_day()
                self._log_day(day, items)
                snapshots.extend(InventorySnapshot.from_item(day, item) for item in items)
        except ValidationError as e:
            logger.error("❌ Snapshot validation failed!")
            logger.error(e)
            return None

        return snapshots

    @staticmethod
    def _log_day(day: int, items: list[Item]):
        logger.info(f"-------- day {day} --------")
        logger.info("name, sellIn, quality")
        for item in items:
            logger.info(repr(item))
        logger.info("")
