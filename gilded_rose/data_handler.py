import json
import logging
from pathlib import Path
from typing import Any, Optional
import pandas as pd
import requests

from . import settings
from . import utils
from .schemas import InventorySnapshot

logger = logging.getLogger(__name__)


def save_outputs(validated_data: list[InventorySnapshot], base_name: str) -> Optional[Path]:
    """Saves the snapshots to CSV and conditionally to JSON, with dated filenames."""
    if not validated_data:
        logger.warning("No data to save to disk.")
        return None

    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = settings.OUTPUT_DIR / f"{base_name}_{date_suffix}.csv"
    json_path = settings.OUTPUT_DIR / f"{base_name}_{date_suffix}.json"

    df = pd.DataFrame([item.model_dump(by_alias=True) for item in validated_data])
    df.to_csv(csv_path, index=False)
    logger.info(f"✅ Report saved to: {csv_path}")

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w", encoding="utf-8") as f:
            json_data = [item.model_dump(mode="json", by_alias=True) for item in validated_data]
            json.dump(json_data, f, indent=2)
        logger.info(f"✅ JSON output saved to: {json_path}")
    else:
        logger.info("Skipping JSON file save as per configuration.")

    return csv_path


def post_to_webhook(
    validated_data: list[InventorySnapshot],
    metadata: dict[str, Any],
    report_type: str,
) -> bool:
    """
    Posts the snapshots and run metadata to the webhook.
    Returns True only when the post went through.
    """
    if not settings.WEBHOOK_URL:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting {report_type} report to webhook.")

    payload = {
        "reportType": report_type,
        "reportData": [
            item.model_dump(mode="json", by_alias=True) for item in validated_data
        ],
        "metadata": metadata,
    }

    try:
        response = requests.post(settings.WEBHOOK_URL, json=payload, timeout=15)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False

    logger.info("✅ Report successfully posted to webhook.")
    return True
