import logging
from typing import Any, Mapping, Sequence

from retail_insights import settings, validation
from retail_insights.pipeline import DatasetPipeline
from retail_insights.schemas import DatasetKind, SalesRecord, ValidationResult

logger = logging.getLogger(__name__)


class SalesPipeline(DatasetPipeline):
    kind = DatasetKind.SALES
    file_prefix = settings.SALES_FILENAME_PREFIX

    def validate(self, rows: Sequence[Mapping[str, Any]]) -> ValidationResult:
        return validation.validate_sales(rows)

    def log_stats(self, records: list[SalesRecord]):
        products = {record.product for record in records}
        revenue = sum(record.amount for record in records)
        dates = [record.date for record in records]

        logger.info("  > 📊 Stats for sales:")
        logger.info(f"    - Orders: {len(records)}")
        logger.info(f"    - Distinct Products: {len(products)}")
        logger.info(f"    - Revenue: {revenue:,.2f}")
        if dates:
            logger.info(f"    - Period: {min(dates)} to {max(dates)}")
