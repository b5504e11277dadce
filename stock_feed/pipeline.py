import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for feed pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern. Any exception
    raised by a step aborts the run; nothing is retried.
    """

    def __init__(self, report_type: str, test_mode: bool = False):
        self.report_type = report_type
        self.test_mode = test_mode

    def run(self) -> Optional[Any]:
        """
        Orchestrates the pipeline execution and returns whatever `load` returns.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()}")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()

        # --- 2. TRANSFORM ---
        validated_data = self.transform(raw_data)

        # --- 3. LOAD ---
        result = self.load(validated_data)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.")
        logger.info("=" * 60)
        return result

    @abstractmethod
    def extract(self) -> Any:
        """Pulls everything the transform step needs from the source system."""
        pass

    @abstractmethod
    def transform(self, raw_data: Any) -> list[Any]:
        """Turns the raw data into validated rows. Must raise if nothing qualifies."""
        pass

    @abstractmethod
    def load(self, validated_data: list[Any]) -> Any:
        pass
