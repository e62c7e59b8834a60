import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from . import data_handler
from .items import Item

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for inventory pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, output_name: Optional[str] = None, test_mode: bool = False):
        self.report_type = report_type
        self.output_name = output_name or f"{report_type}_report"
        self.test_mode = test_mode
        # Run details shipped alongside the data (filled by subclasses)
        self.metadata: dict[str, Any] = {}

    def run(self) -> Optional[list[Any]]:
        """
        Orchestrates the pipeline execution.
        Returns the validated records (empty for an empty stock), or None on failure.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        items = self.extract()
        if items is None:
            logger.warning(f"⚠️ No stock could be loaded for {self.report_type}.")
            return None

        # --- 2. TRANSFORM ---
        validated_data = self.transform(items)
        if validated_data is None:
            logger.error(f"❌ Transformation failed for {self.report_type}.")
            return None

        # --- 3. LOAD ---
        self.load(validated_data)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.\n")
        logger.info("=" * 60)
        return validated_data

    @abstractmethod
    def extract(self) -> list[Item] | None:
        """Responsible for producing the stock the pipeline will work on."""
        pass

    @abstractmethod
    def transform(self, items: list[Item]) -> list[Any] | None:
        """
        Responsible for running the business logic and validation.
        Returns a list of validated Pydantic models.
        """
        pass

    def load(self, validated_data: list[Any]):
        """
        Saves data to disk and posts to webhook.
        """
        if self.metadata:
            logger.info("\n--- Run Summary ---")
            for key, value in self.metadata.items():
                logger.info(f"{key}: {value}")

        data_handler.save_outputs(validated_data, self.output_name)

        if not self.test_mode:
            data_handler.post_to_webhook(
                validated_data=validated_data,
                metadata=self.metadata,
                report_type=self.report_type,
            )
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")
