import json
import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import requests

from . import settings
from . import utils
from .schemas import AnalysisBundle

logger = logging.getLogger(__name__)


def build_payload(bundle: AnalysisBundle) -> dict[str, Any]:
    """The JSON document handed to the presentation / session layer."""
    return bundle.model_dump(mode="json", by_alias=True)


def save_outputs(
    bundle: AnalysisBundle, output_dir: Optional[Path] = None
) -> dict[str, Path]:
    """
    Saves the summary to CSV and, conditionally, the full bundle to JSON, with dated filenames.
    Returns the paths written.
    """
    output_dir = output_dir if output_dir is not None else settings.OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()
    written = {}

    csv_path = output_dir / f"{settings.SUMMARY_FILENAME_BASE}_{date_suffix}.csv"
    json_path = output_dir / f"{settings.SUMMARY_FILENAME_BASE}_{date_suffix}.json"

    # One row of headline metrics; the ranked lists live in the JSON output
    summary = bundle.summary.model_dump(
        by_alias=True, exclude={"top_products", "low_stock_items"}
    )
    summary.update(bundle.data_stats.model_dump(by_alias=True))
    pd.DataFrame([summary]).to_csv(csv_path, index=False)
    written["csv"] = csv_path
    logger.info(f"✅ Summary saved to: {csv_path}")

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(build_payload(bundle), f, indent=2, ensure_ascii=False)
        written["json"] = json_path
        logger.info(f"✅ JSON output saved to: {json_path}")
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return written


def post_to_webhook(bundle: AnalysisBundle, url: Optional[str] = None) -> bool:
    """
    Posts the bundle to the webhook. Returns True when the post went through.
    """
    url = url or settings.WEBHOOK_URL
    if not url:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting summary and data to webhook: {url}")

    try:
        response = requests.post(url, json=build_payload(bundle), timeout=15)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False

    logger.info("✅ Summary and data successfully posted to webhook.")
    return True
