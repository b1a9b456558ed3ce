import datetime as dt
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DatasetKind(str, Enum):
    SALES = "sales"
    INVENTORY = "inventory"
    REVIEWS = "reviews"


class _Record(BaseModel):
    """
    Base for one typed row of an uploaded dataset.
    Aliases are the CSV column names, so decoded rows can be passed in directly
    and exported back with `model_dump(by_alias=True)`.
    """

    # inf/nan cells are rejected like any other non-number
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="ignore", allow_inf_nan=False
    )

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        # Empty cells arrive as "" from the decoder; optional fields treat them as missing.
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SalesRecord(_Record):
    date: dt.date = Field(..., alias="Date")
    product: str = Field(..., min_length=1, alias="Product")
    category: Optional[str] = Field(default=None, alias="Category")
    quantity: int = Field(..., ge=0, alias="Quantity")
    amount: float = Field(..., ge=0, alias="Amount")
    customer_age: Optional[int] = Field(default=None, alias="Customer_Age")
    location: Optional[str] = Field(default=None, alias="Location")


class InventoryRecord(_Record):
    product: str = Field(..., min_length=1, alias="Product")
    category: Optional[str] = Field(default=None, alias="Category")
    stock: int = Field(..., ge=0, alias="Stock")
    price: float = Field(..., ge=0, alias="Price")
    supplier: Optional[str] = Field(default=None, alias="Supplier")
    # Left empty when the file has none; aggregation falls back to the default threshold.
    min_alert: Optional[int] = Field(default=None, alias="Min_Alert")


class ReviewRecord(_Record):
    date: dt.date = Field(..., alias="Date")
    rating: int = Field(..., ge=1, le=5, alias="Rating")
    review_text: Optional[str] = Field(default="", alias="Review")
    product: str = Field(..., min_length=1, alias="Product")
    platform: Optional[str] = Field(default=None, alias="Platform")

    @field_validator("review_text", mode="after")
    @classmethod
    def _none_to_empty(cls, value: Optional[str]) -> str:
        # A review may legitimately be blank; keep it as text.
        return value or ""


RECORD_MODELS: dict[DatasetKind, type[_Record]] = {
    DatasetKind.SALES: SalesRecord,
    DatasetKind.INVENTORY: InventoryRecord,
    DatasetKind.REVIEWS: ReviewRecord,
}


class CoercionFailure(BaseModel):
    """A designated numeric cell the decoder had to keep as text."""

    model_config = ConfigDict(frozen=True)

    row: int
    field: str
    value: str


class DecodedDataset(BaseModel):
    rows: list[dict[str, Any]] = Field(default_factory=list)
    failures: list[CoercionFailure] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)


class ProductRevenue(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: str
    revenue: float


class StockAlert(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: str
    stock: int


class BusinessSummary(BaseModel):
    """
    The compact analytical summary handed to the presentation layer.
    Serialized with camelCase aliases, which is what the chat/UI side reads.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_revenue: float = Field(default=0.0, alias="totalRevenue")
    total_orders: int = Field(default=0, ge=0, alias="totalOrders")
    average_order_value: float = Field(default=0.0, alias="averageOrderValue")
    top_products: list[ProductRevenue] = Field(
        default_factory=list, alias="topProducts"
    )
    low_stock_items: list[StockAlert] = Field(
        default_factory=list, alias="lowStockItems"
    )
    average_rating: float = Field(default=0.0, alias="averageRating")
    sentiment_score: float = Field(default=0.0, ge=-1, le=1, alias="sentimentScore")


class IngestionResult(BaseModel):
    kind: DatasetKind
    status: str = "success"
    source: Optional[Path] = None
    report_date: Optional[dt.date] = None
    records: list[Any] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @property
    def record_count(self) -> int:
        return len(self.records)


class DataStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sales_records: int = Field(default=0, alias="salesRecords")
    inventory_items: int = Field(default=0, alias="inventoryItems")
    review_count: int = Field(default=0, alias="reviewCount")


class AnalysisBundle(BaseModel):
    """Summary plus the three validated datasets it was computed from."""

    model_config = ConfigDict(populate_by_name=True)

    summary: BusinessSummary
    sales: list[SalesRecord] = Field(default_factory=list)
    inventory: list[InventoryRecord] = Field(default_factory=list)
    reviews: list[ReviewRecord] = Field(default_factory=list)
    data_stats: DataStats = Field(default_factory=DataStats, alias="dataStats")
    generated_at: dt.datetime = Field(
        default_factory=dt.datetime.now, alias="generatedAt"
    )

    @classmethod
    def from_records(
        cls,
        summary: BusinessSummary,
        sales: list[SalesRecord],
        inventory: list[InventoryRecord],
        reviews: list[ReviewRecord],
    ) -> "AnalysisBundle":
        return cls(
            summary=summary,
            sales=sales,
            inventory=inventory,
            reviews=reviews,
            data_stats=DataStats(
                sales_records=len(sales),
                inventory_items=len(inventory),
                review_count=len(reviews),
            ),
        )
