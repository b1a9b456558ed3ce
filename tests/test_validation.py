"""Tests for the per-dataset schema validator."""

import pytest

from retail_insights.schemas import DatasetKind
from retail_insights.validation import (
    NO_DATA_MESSAGE,
    validate,
    validate_dataset,
    validate_inventory,
    validate_reviews,
    validate_sales,
)


def sales_row(**overrides):
    row = {"Date": "2024-08-01", "Product": "Kurta", "Quantity": 1.0, "Amount": 500.0}
    row.update(overrides)
    return row


@pytest.mark.parametrize(
    "validator", [validate_sales, validate_inventory, validate_reviews]
)
def test_empty_dataset_is_rejected(validator):
    result = validator([])

    assert result.valid is False
    assert result.errors == [NO_DATA_MESSAGE]
    assert NO_DATA_MESSAGE == "No data found in the file"


@pytest.mark.parametrize("kind", list(DatasetKind))
def test_validate_dataset_dispatches_on_kind(kind):
    assert validate_dataset(kind, []).errors == ["No data found in the file"]
    assert validate_dataset(kind.value, []).valid is False


def test_valid_sales():
    result = validate_sales([sales_row(), sales_row(Product="Saree")])

    assert result.valid is True
    assert result.errors == []


def test_missing_fields_are_all_reported_in_order():
    result = validate_inventory([{"Product": "Kurta", "Category": "Ethnic"}])

    assert result.valid is False
    assert result.errors == [
        "Missing required field: Stock",
        "Missing required field: Price",
    ]


def test_reviews_contract():
    result = validate_reviews([{"Date": "2024-08-01", "Rating": 5.0, "Product": "Kurta"}])

    assert result.errors == ["Missing required field: Review"]


def test_only_first_row_is_checked_for_fields():
    rows = [sales_row(), {"Product": "Kurta"}]

    assert validate_sales(rows).valid is True


def test_generic_validate_with_custom_contract():
    result = validate([{"a": 1}], ["a", "b"])

    assert result.errors == ["Missing required field: b"]


class TestSalesNumericCheck:
    def test_non_numeric_values_are_flagged_per_row(self):
        rows = [sales_row(), sales_row(Quantity="two", Amount="abc")]
        result = validate_sales(rows)

        assert result.valid is False
        assert result.errors == [
            "Row 2: Quantity must be a number",
            "Row 2: Amount must be a number",
        ]

    def test_numeric_text_is_accepted(self):
        assert validate_sales([sales_row(Quantity="3", Amount="120.50")]).valid is True

    def test_blank_values_are_not_flagged(self):
        assert validate_sales([sales_row(Quantity="", Amount=None)]).valid is True

    def test_only_first_five_rows_are_checked(self):
        rows = [sales_row() for _ in range(5)] + [sales_row(Amount="oops")]

        assert validate_sales(rows).valid is True

    def test_field_and_numeric_errors_are_combined(self):
        rows = [{"Date": "2024-08-01", "Product": "Kurta", "Quantity": "x"}]
        result = validate_sales(rows)

        assert result.errors == [
            "Missing required field: Amount",
            "Row 1: Quantity must be a number",
        ]

    def test_inventory_has_no_numeric_check(self):
        rows = [{"Product": "Kurta", "Stock": "many", "Price": "cheap"}]

        assert validate_inventory(rows).valid is True
