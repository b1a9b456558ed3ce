"""
Synthetic datasets for the "Mumbai Fashion Hub" demo store.

Generation is seeded so the same seed always yields the same store, which keeps
demo runs reproducible and testable.
"""

import logging
import random
from datetime import date, timedelta
from typing import Optional

from . import settings
from .aggregation import summarize
from .schemas import AnalysisBundle, InventoryRecord, ReviewRecord, SalesRecord

logger = logging.getLogger(__name__)

PRODUCTS = [
    "Blue Kurta",
    "Red Saree",
    "Cotton Shirt",
    "Denim Jeans",
    "Silk Dupatta",
    "Woolen Shawl",
]
CATEGORIES = ["Ethnic", "Western", "Accessories"]
LOCATIONS = ["Mumbai", "Delhi", "Bangalore", "Chennai", "Kolkata", "Pune"]
SUPPLIERS = ["Fashion_Co", "Style_Hub", "Trend_Makers", "Elite_Fashion"]
PLATFORMS = ["Google", "Facebook", "Website", "Amazon"]

POSITIVE_REVIEWS = [
    "Excellent quality and fast delivery!",
    "Great product, highly recommended",
    "Good value for money",
    "Beautiful design and comfortable fit",
    "Amazing customer service",
    "Perfect for festive occasions",
]
NEGATIVE_REVIEWS = [
    "Product quality could be better",
    "Delivery was delayed",
    "Not as shown in pictures",
    "Expensive for the quality",
    "Size was not accurate",
    "Customer support needs improvement",
]

START_DATE = date(2024, 8, 1)
WINDOW_DAYS = 90
SALES_COUNT = 100
REVIEW_COUNT = 50


def generate_sales(rng: random.Random, count: int = SALES_COUNT) -> list[SalesRecord]:
    sales = []
    for _ in range(count):
        quantity = rng.randint(1, 5)
        base_price = rng.randint(500, 2499)
        sales.append(
            SalesRecord(
                date=START_DATE + timedelta(days=rng.randrange(WINDOW_DAYS)),
                product=rng.choice(PRODUCTS),
                category=rng.choice(CATEGORIES),
                quantity=quantity,
                amount=float(base_price * quantity),
                customer_age=rng.randint(20, 59),
                location=rng.choice(LOCATIONS),
            )
        )
    return sales


def generate_inventory(rng: random.Random) -> list[InventoryRecord]:
    """One inventory line per demo product."""
    return [
        InventoryRecord(
            product=product,
            category=rng.choice(CATEGORIES),
            stock=rng.randint(5, 54),
            price=float(rng.randint(500, 2499)),
            supplier=rng.choice(SUPPLIERS),
            min_alert=rng.randint(5, 14),
        )
        for product in PRODUCTS
    ]


def generate_reviews(
    rng: random.Random, count: int = REVIEW_COUNT
) -> list[ReviewRecord]:
    reviews = []
    for _ in range(count):
        rating = rng.randint(1, 5)
        texts = POSITIVE_REVIEWS if rating >= 4 else NEGATIVE_REVIEWS
        reviews.append(
            ReviewRecord(
                date=START_DATE + timedelta(days=rng.randrange(WINDOW_DAYS)),
                rating=rating,
                review_text=rng.choice(texts),
                product=rng.choice(PRODUCTS),
                platform=rng.choice(PLATFORMS),
            )
        )
    return reviews


def demo_bundle(seed: Optional[int] = None) -> AnalysisBundle:
    """Builds a complete demo store and its summary, ready for the presentation layer."""
    rng = random.Random(seed)
    sales = generate_sales(rng)
    inventory = generate_inventory(rng)
    reviews = generate_reviews(rng)

    summary = summarize(
        sales, inventory, reviews, low_stock_limit=settings.DEMO_LOW_STOCK_LIMIT
    )
    logger.info(
        f"✅ Demo store generated: {len(sales)} sales, {len(inventory)} products, {len(reviews)} reviews."
    )
    return AnalysisBundle.from_records(summary, sales, inventory, reviews)
