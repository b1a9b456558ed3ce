import logging
from collections import Counter
from typing import Any, Mapping, Sequence

from retail_insights import settings, validation
from retail_insights.pipeline import DatasetPipeline
from retail_insights.schemas import DatasetKind, ReviewRecord, ValidationResult

logger = logging.getLogger(__name__)


class ReviewsPipeline(DatasetPipeline):
    kind = DatasetKind.REVIEWS
    file_prefix = settings.REVIEWS_FILENAME_PREFIX

    def validate(self, rows: Sequence[Mapping[str, Any]]) -> ValidationResult:
        return validation.validate_reviews(rows)

    def log_stats(self, records: list[ReviewRecord]):
        ratings = Counter(record.rating for record in records)
        empty = sum(1 for record in records if not record.review_text.strip())

        logger.info("  > 📊 Stats for reviews:")
        logger.info(f"    - Reviews: {len(records)}")
        logger.info(
            "    - Ratings: "
            + ", ".join(f"{stars}★ x{ratings[stars]}" for stars in range(5, 0, -1))
        )
        if empty:
            logger.warning(f"    - ⚠️  Reviews without text: {empty}")
