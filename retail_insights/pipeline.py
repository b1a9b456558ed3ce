import logging
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from pydantic import ValidationError

from retail_insights import settings, utils
from retail_insights.decoder import decode
from retail_insights.errors import DecodeError
from retail_insights.schemas import (
    RECORD_MODELS,
    DatasetKind,
    DecodedDataset,
    IngestionResult,
    ValidationResult,
)

logger = logging.getLogger(__name__)

PARSE_FAILURE_MESSAGE = "Failed to parse CSV file"


class DatasetPipeline(ABC):
    """
    Abstract base class for the per-dataset ingestion pipelines (Sales, Inventory, Reviews).
    Follows an Extract -> Validate -> Transform pattern. The three results are only
    joined afterwards, when the business summary is computed.
    """

    kind: DatasetKind
    file_prefix: str

    def __init__(self, source: Optional[Path] = None, input_dir: Optional[Path] = None):
        # An explicit source file wins over searching the input directory
        self.source = source
        self.input_dir = input_dir if input_dir is not None else settings.INPUT_DIR
        self.path: Optional[Path] = None
        self.report_date: Optional[date] = None
        self.errors: list[str] = []

    @property
    def record_model(self):
        return RECORD_MODELS[self.kind]

    def run(self) -> IngestionResult:
        """
        Orchestrates the pipeline execution.
        """
        logger.info(f"🚀 STEP: {self.kind.value.upper()} DATA")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        try:
            decoded = self.extract()
        except DecodeError as e:
            logger.error(f"❌ Could not parse {self.kind.value} file: {e}")
            return self._result("error", errors=[PARSE_FAILURE_MESSAGE])

        if decoded is None:
            logger.warning(f"⚠️ No {self.kind.value} file found. Skipping.")
            return self._result(
                "error", errors=[f"No {self.kind.value} file found in {self.input_dir}"]
            )

        # --- 2. VALIDATE ---
        validation = self.validate(decoded.rows)
        if not validation.valid:
            logger.error(f"❌ {self.kind.value.capitalize()} validation failed!")
            for message in validation.errors:
                logger.error(f"  > {message}")
            return self._result(
                "error", errors=validation.errors, warnings=decoded.warnings
            )

        # --- 3. TRANSFORM ---
        records = self.transform(decoded.rows)
        if records is None:
            logger.error(f"❌ Transformation failed for {self.kind.value}.")
            return self._result("error", errors=self.errors, warnings=decoded.warnings)

        self.log_stats(records)
        logger.info(f"✅ {len(records)} {self.kind.value} records processed.\n")
        return self._result("success", records=records, warnings=decoded.warnings)

    def locate(self) -> Optional[Path]:
        """Picks the file to ingest: the explicit source, or the newest matching report."""
        if self.source is not None:
            if not self.source.is_file():
                logger.info(f"INFO: Report not found at {self.source}, skipping.")
                return None
            self.path = self.source
            self.report_date = utils.get_report_date(self.source)
            return self.path

        found_info = utils.find_latest_report(self.input_dir, self.file_prefix)
        if not found_info:
            return None

        self.path, self.report_date = found_info
        logger.info(f"  > Found: {self.path.name} (File Date: {self.report_date})")
        return self.path

    def extract(self) -> DecodedDataset | None:
        """
        Reads the located file and decodes it into field -> value rows.
        Raises DecodeError when the file is not readable as CSV.
        """
        path = self.locate()
        if path is None:
            return None

        decoded = decode(path.read_bytes())
        logger.info(f"  > Rows decoded: {len(decoded.rows)}")
        for failure in decoded.failures:
            logger.warning(
                f"  > ⚠️ Row {failure.row}: '{failure.value}' in {failure.field} is not a number."
            )
        return decoded

    @abstractmethod
    def validate(self, rows: Sequence[Mapping[str, Any]]) -> ValidationResult:
        """
        Runs the dataset's structural contract.
        """
        pass

    def transform(self, rows: Sequence[Mapping[str, Any]]) -> list[Any] | None:
        """
        Builds typed records from validated rows.
        Every failing row is reported; returns None if any row fails.
        """
        self.errors = []
        records = []

        for index, row in enumerate(rows, start=1):
            try:
                records.append(self.record_model.model_validate(row))
            except ValidationError as e:
                for error in e.errors():
                    field = ".".join(str(part) for part in error["loc"])
                    self.errors.append(f"Row {index}: {field}: {error['msg']}")

        if self.errors:
            logger.error("❌ Data validation failed!")
            for message in self.errors:
                logger.error(f"  > {message}")
            return None
        return records

    def log_stats(self, records: list[Any]):
        """Hook for dataset-specific stats after a successful run."""
        pass

    def _result(self, status: str, **kwargs) -> IngestionResult:
        return IngestionResult(
            kind=self.kind,
            status=status,
            source=self.path,
            report_date=self.report_date,
            **kwargs,
        )
