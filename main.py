import argparse
import logging
from pathlib import Path

from retail_insights import data_handler, demo, settings
from retail_insights.analysis import run_analysis
from retail_insights.context import render_overview
from retail_insights.logger import setup_logger

logger = logging.getLogger(__name__)


def run_process(
    use_demo: bool = False,
    test_mode: bool = False,
    input_dir: Path | None = None,
    seed: int | None = None,
):
    """Main orchestration function: ingest the three datasets, summarize, hand off."""
    logger.info("--- Starting Business Analysis ---")

    if use_demo:
        logger.info("🧪 Demo Mode: generating sample data for 'Mumbai Fashion Hub'.")
        bundle = demo.demo_bundle(seed)
    else:
        bundle, results = run_analysis(input_dir=input_dir)

        logger.info("\n--- Final Status Summary ---")
        for kind, result in results.items():
            date_val = result.report_date
            status = "✅" if result.ok else "❌"
            logger.info(
                f"{status} {kind.value}: {date_val.isoformat() if date_val else 'No data'}"
                f" ({result.record_count} records)"
            )
            for message in result.errors:
                logger.info(f"    - {message}")

    if bundle is None:
        logger.error("❌ Analysis aborted. Fix the files above and run again.")
        return None

    logger.info("")
    logger.info(render_overview(bundle.summary))
    logger.info("")

    data_handler.save_outputs(bundle)

    if not test_mode:
        data_handler.post_to_webhook(bundle)
    else:
        logger.info("🧪 Test Mode: Skipping webhook post.")

    logger.info("\n--- Process Finished Successfully ---")
    return bundle


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate sales, inventory and review CSVs and build the business summary."
    )
    parser.add_argument("--demo", action="store_true", help="Use generated demo data.")
    parser.add_argument("--test", action="store_true", help="Skip the webhook post.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for demo data.")
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=settings.INPUT_DIR,
        help="Folder holding the sales_/inventory_/reviews_ CSV files.",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    setup_logger()
    run_process(
        use_demo=args.demo,
        test_mode=args.test,
        input_dir=args.input_dir,
        seed=args.seed,
    )
