import logging
from pathlib import Path
from typing import Optional

from retail_insights import settings
from retail_insights.aggregation import summarize
from retail_insights.pipelines.inventory import InventoryPipeline
from retail_insights.pipelines.reviews import ReviewsPipeline
from retail_insights.pipelines.sales import SalesPipeline
from retail_insights.schemas import AnalysisBundle, DatasetKind, IngestionResult

logger = logging.getLogger(__name__)


def ingest_all(
    input_dir: Optional[Path] = None,
    sources: Optional[dict[DatasetKind, Path]] = None,
) -> dict[DatasetKind, IngestionResult]:
    """
    Runs the three dataset pipelines. They are independent of each other, so a
    failure in one does not stop the others from reporting their own problems.
    """
    sources = sources or {}
    pipelines = [
        SalesPipeline(sources.get(DatasetKind.SALES), input_dir),
        InventoryPipeline(sources.get(DatasetKind.INVENTORY), input_dir),
        ReviewsPipeline(sources.get(DatasetKind.REVIEWS), input_dir),
    ]
    return {pipeline.kind: pipeline.run() for pipeline in pipelines}


def build_bundle(
    results: dict[DatasetKind, IngestionResult],
    low_stock_limit: int = settings.LOW_STOCK_LIMIT,
) -> AnalysisBundle | None:
    """
    Summarizes the three datasets once every one of them passed validation.
    Returns None when any dataset failed.
    """
    failed = [kind for kind in DatasetKind if kind not in results or not results[kind].ok]
    if failed:
        logger.error(
            f"❌ Cannot build summary. Failed datasets: {', '.join(k.value for k in failed)}"
        )
        return None

    sales = results[DatasetKind.SALES].records
    inventory = results[DatasetKind.INVENTORY].records
    reviews = results[DatasetKind.REVIEWS].records

    summary = summarize(sales, inventory, reviews, low_stock_limit=low_stock_limit)
    logger.info("✅ Business summary generated.")
    return AnalysisBundle.from_records(summary, sales, inventory, reviews)


def run_analysis(
    input_dir: Optional[Path] = None,
    sources: Optional[dict[DatasetKind, Path]] = None,
    low_stock_limit: int = settings.LOW_STOCK_LIMIT,
) -> tuple[AnalysisBundle | None, dict[DatasetKind, IngestionResult]]:
    results = ingest_all(input_dir, sources)
    return build_bundle(results, low_stock_limit), results
