import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
# Use Path objects for robust, OS-agnostic path handling.
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")

# --- Filename Configuration ---
SALES_FILENAME_PREFIX = os.getenv("SALES_FILENAME_PREFIX", "sales_")
INVENTORY_FILENAME_PREFIX = os.getenv("INVENTORY_FILENAME_PREFIX", "inventory_")
REVIEWS_FILENAME_PREFIX = os.getenv("REVIEWS_FILENAME_PREFIX", "reviews_")
SUMMARY_FILENAME_BASE = os.getenv("SUMMARY_FILENAME", "business_summary")

# --- Outputs ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() == "true"

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Shared Business Logic ---
# Columns the decoder tries to turn into numbers.
NUMERIC_FIELDS = frozenset(
    {
        "Quantity",
        "Amount",
        "Stock",
        "Price",
        "Rating",
        "Customer_Age",
        "Min_Alert",
    }
)

# Minimum column contract per dataset, checked against the first row.
REQUIRED_FIELDS = {
    "sales": ("Date", "Product", "Quantity", "Amount"),
    "inventory": ("Product", "Stock", "Price"),
    "reviews": ("Date", "Rating", "Review", "Product"),
}

# Only the first rows of a sales file get the numeric sanity check.
NUMERIC_CHECK_ROWS = 5

# Stock threshold used when an inventory item has no Min_Alert of its own.
DEFAULT_MIN_ALERT = 5

TOP_PRODUCTS_LIMIT = 5
LOW_STOCK_LIMIT = int(os.getenv("LOW_STOCK_LIMIT", "5"))
DEMO_LOW_STOCK_LIMIT = 5

# Number of records per dataset shipped to the chat consumer.
CONTEXT_SAMPLE_SIZE = 10

# --- Sentiment Lexicon ---
POSITIVE_WORDS = (
    "good",
    "great",
    "excellent",
    "amazing",
    "love",
    "perfect",
    "wonderful",
)
NEGATIVE_WORDS = (
    "bad",
    "terrible",
    "awful",
    "hate",
    "worst",
    "horrible",
    "disappointing",
)
