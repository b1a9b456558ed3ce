"""
Structural checks for uploaded datasets.

Validation is advisory: problems are collected into a ValidationResult and
returned, never raised, so the caller can show everything wrong at once.
"""

import logging
from typing import Any, Mapping, Sequence

from . import settings
from .decoder import coerce_number
from .schemas import DatasetKind, ValidationResult

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data found in the file"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate(
    rows: Sequence[Mapping[str, Any]], required_fields: Sequence[str]
) -> ValidationResult:
    """
    Checks that the dataset has rows and that the first row carries every
    required field. Later rows are not inspected here.
    """
    if not rows:
        return ValidationResult(valid=False, errors=[NO_DATA_MESSAGE])

    first_row = rows[0]
    errors = [
        f"Missing required field: {field}"
        for field in required_fields
        if field not in first_row
    ]
    return ValidationResult(valid=not errors, errors=errors)


def _numeric_errors(
    rows: Sequence[Mapping[str, Any]], fields: Sequence[str], limit: int
) -> list[str]:
    errors = []
    for index, row in enumerate(rows[:limit], start=1):
        for field in fields:
            value = row.get(field)
            if _is_blank(value):
                continue
            _, ok = coerce_number(value)
            if not ok:
                errors.append(f"Row {index}: {field} must be a number")
    return errors


def validate_sales(rows: Sequence[Mapping[str, Any]]) -> ValidationResult:
    result = validate(rows, settings.REQUIRED_FIELDS[DatasetKind.SALES.value])
    if not rows:
        return result

    errors = result.errors + _numeric_errors(
        rows, ("Quantity", "Amount"), settings.NUMERIC_CHECK_ROWS
    )
    return ValidationResult(valid=not errors, errors=errors)


def validate_inventory(rows: Sequence[Mapping[str, Any]]) -> ValidationResult:
    return validate(rows, settings.REQUIRED_FIELDS[DatasetKind.INVENTORY.value])


def validate_reviews(rows: Sequence[Mapping[str, Any]]) -> ValidationResult:
    return validate(rows, settings.REQUIRED_FIELDS[DatasetKind.REVIEWS.value])


VALIDATORS = {
    DatasetKind.SALES: validate_sales,
    DatasetKind.INVENTORY: validate_inventory,
    DatasetKind.REVIEWS: validate_reviews,
}


def validate_dataset(
    kind: DatasetKind | str, rows: Sequence[Mapping[str, Any]]
) -> ValidationResult:
    """Runs the contract for one dataset kind."""
    result = VALIDATORS[DatasetKind(kind)](rows)
    if not result.valid:
        logger.debug(f"{DatasetKind(kind).value} validation: {result.errors}")
    return result
