import logging
from typing import Any, Mapping, Sequence

from retail_insights import settings, validation
from retail_insights.pipeline import DatasetPipeline
from retail_insights.schemas import DatasetKind, InventoryRecord, ValidationResult

logger = logging.getLogger(__name__)


class InventoryPipeline(DatasetPipeline):
    kind = DatasetKind.INVENTORY
    file_prefix = settings.INVENTORY_FILENAME_PREFIX

    def validate(self, rows: Sequence[Mapping[str, Any]]) -> ValidationResult:
        return validation.validate_inventory(rows)

    def log_stats(self, records: list[InventoryRecord]):
        total_units = sum(record.stock for record in records)
        without_threshold = [r.product for r in records if r.min_alert is None]

        logger.info("  > 📊 Stats for inventory:")
        logger.info(f"    - Items: {len(records)}")
        logger.info(f"    - Units in Stock: {total_units}")
        if without_threshold:
            logger.info(
                f"    - No Min_Alert ({len(without_threshold)}), using default of "
                f"{settings.DEFAULT_MIN_ALERT}: {', '.join(without_threshold)}"
            )
