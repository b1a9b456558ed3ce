import logging
import math
from typing import Any, Iterable, Mapping

import pandas as pd
from pydantic import BaseModel

from . import settings
from . import sentiment
from .schemas import BusinessSummary, ProductRevenue, StockAlert

logger = logging.getLogger(__name__)


def _frame(items: Iterable[Any]) -> pd.DataFrame:
    """
    Builds a DataFrame keyed by CSV column names from records or decoded rows.
    Items that are neither (e.g. bare review strings) carry no columns and are skipped.
    """
    rows = []
    for item in items:
        if isinstance(item, BaseModel):
            rows.append(item.model_dump(by_alias=True))
        elif isinstance(item, Mapping):
            rows.append(dict(item))
    return pd.DataFrame(rows)


def _finite(values: pd.Series) -> pd.Series:
    """Numeric view of a column; text, inf and nan all become NaN."""
    numbers = pd.to_numeric(values, errors="coerce")
    return numbers.mask(numbers.abs() == math.inf)


def _numeric(df: pd.DataFrame, column: str) -> pd.Series:
    """Missing, non-numeric or non-finite values count as 0."""
    if column not in df.columns:
        return pd.Series(0.0, index=df.index)
    return _finite(df[column]).fillna(0)


def _label(value: Any) -> str:
    return "" if pd.isna(value) else str(value)


def top_products(
    sales_df: pd.DataFrame, limit: int = settings.TOP_PRODUCTS_LIMIT
) -> list[ProductRevenue]:
    """Revenue per product, highest first. Ties keep first-seen order."""
    if sales_df.empty or "Product" not in sales_df.columns:
        return []

    revenue = _numeric(sales_df, "Amount")
    # sort=False keeps groups in first-seen order so the stable sort below breaks ties by it
    by_product = revenue.groupby(sales_df["Product"], sort=False).sum()
    ranked = by_product.sort_values(ascending=False, kind="stable").head(limit)

    return [
        ProductRevenue(product=_label(product), revenue=float(total))
        for product, total in ranked.items()
    ]


def low_stock_items(
    inventory_df: pd.DataFrame,
    limit: int = settings.LOW_STOCK_LIMIT,
    default_min_alert: float = settings.DEFAULT_MIN_ALERT,
) -> list[StockAlert]:
    """
    Items whose stock is below their own Min_Alert (or the default threshold
    when Min_Alert is missing, zero or not a finite number), lowest stock first.
    """
    if inventory_df.empty or "Stock" not in inventory_df.columns:
        return []

    stock = _finite(inventory_df["Stock"])
    if "Min_Alert" in inventory_df.columns:
        threshold = _finite(inventory_df["Min_Alert"])
        threshold = threshold.where(threshold.notna() & (threshold != 0), default_min_alert)
    else:
        threshold = pd.Series(default_min_alert, index=inventory_df.index)

    # NaN stock compares False, so unreadable or infinite stock is never flagged
    flagged = inventory_df.loc[stock < threshold].assign(_stock=stock)
    flagged = flagged.sort_values("_stock", kind="stable").head(max(limit, 0))

    products = flagged["Product"] if "Product" in flagged.columns else [None] * len(flagged)
    return [
        StockAlert(product=_label(product), stock=int(level))
        for product, level in zip(products, flagged["_stock"])
    ]


def summarize(
    sales: Iterable[Any],
    inventory: Iterable[Any],
    reviews: Iterable[Any],
    *,
    low_stock_limit: int = settings.LOW_STOCK_LIMIT,
    top_n: int = settings.TOP_PRODUCTS_LIMIT,
    lexicon: sentiment.Lexicon = sentiment.DEFAULT_LEXICON,
) -> BusinessSummary:
    """
    Recomputes the business summary from the three datasets.
    Accepts typed records or decoded rows; never raises on empty or partial data.
    """
    reviews = list(reviews)
    sales_df = _frame(sales)
    inventory_df = _frame(inventory)
    reviews_df = _frame(reviews)

    total_revenue = float(_numeric(sales_df, "Amount").sum())
    total_orders = len(sales_df)
    average_order_value = total_revenue / total_orders if total_orders > 0 else 0.0

    average_rating = (
        float(_numeric(reviews_df, "Rating").mean()) if len(reviews_df) > 0 else 0.0
    )

    summary = BusinessSummary(
        total_revenue=total_revenue,
        total_orders=total_orders,
        average_order_value=average_order_value,
        top_products=top_products(sales_df, top_n),
        low_stock_items=low_stock_items(inventory_df, low_stock_limit),
        average_rating=average_rating,
        sentiment_score=sentiment.score(reviews, lexicon),
    )

    logger.debug(
        f"Summarized {total_orders} orders, {len(inventory_df)} inventory items, "
        f"{len(reviews_df)} reviews."
    )
    return summary
