import logging
from pathlib import Path
from typing import Iterable
from pydantic import ValidationError

from .items import Item
from .schemas import ItemRecord
from .utils import load_csv

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["Name", "Sell In", "Quality"]


def items_from_triples(triples: Iterable[tuple[str, int, int]]) -> list[Item]:
    """Builds items from (name, sell_in, quality) triples, keeping their order."""
    return [Item(name, sell_in, quality) for name, sell_in, quality in triples]


def parse_items_report(file_path: Path) -> list[Item] | None:
    """
    Loads a seed inventory CSV (Name, Sell In, Quality) into Item objects.
    Returns None if the file is missing, unreadable, or fails validation.
    """
    # Names are free text: "1001" stays a string and a blank cell is the name "".
    df = load_csv(file_path, dtype={"Name": str}, keep_default_na=False)
    if df is None:
        return None

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        logger.error(f"{file_path.name} is missing required columns: {missing}")
        return None

    df = df[REQUIRED_COLUMNS]

    try:
        records = [ItemRecord(**row) for row in df.to_dict("records")]
    except ValidationError as e:
        logger.error(f"❌ Validation failed for {file_path.name}!")
        logger.error(e)
        return None

    logger.info(f"✅ Parsed {file_path.name} successfully ({len(records)} items).")
    return [record.to_item() for record in records]
