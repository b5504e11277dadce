import os
from pathlib import Path
from dotenv import load_dotenv

from .product_mappings import DESCRIPTION_OVERRIDES, TARGET_SKUS
from .schemas import FeedConfig

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Shopify ---
SHOPIFY_STORE_NAME = os.getenv("SHOPIFY_STORE_NAME")
SHOPIFY_ACCESS_TOKEN = os.getenv("SHOPIFY_ACCESS_TOKEN")
SHOPIFY_API_KEY = os.getenv("SHOPIFY_API_KEY")
SHOPIFY_PASSWORD = os.getenv("SHOPIFY_PASSWORD")
SHOPIFY_API_VERSION = os.getenv("SHOPIFY_API_VERSION", "2023-04")
# Empty means "use the transport default" (no explicit timeout).
SHOPIFY_TIMEOUT = float(os.getenv("SHOPIFY_TIMEOUT")) if os.getenv("SHOPIFY_TIMEOUT") else None

RESULTS_PER_PAGE = int(os.getenv("RESULTS_PER_PAGE", "250"))

METAFIELD_NAMESPACE = os.getenv("METAFIELD_NAMESPACE", "custom")
METAFIELD_KEY = os.getenv("METAFIELD_KEY", "temple_webster_next_availability_date")

# --- Feed ---
SUPPLIER_ID = os.getenv("SUPPLIER_ID", "")

# --- FTP Drop ---
FTP_HOST = os.getenv("FTP_HOST")
FTP_PORT = int(os.getenv("FTP_PORT", "21"))
FTP_USER = os.getenv("FTP_USER")
FTP_PASSWORD = os.getenv("FTP_PASSWORD")
FTP_REMOTE_PATH = os.getenv("FTP_REMOTE_PATH", "")

# --- Shared Business Logic ---
# Each target location maps to exactly one feed column. Order here is the
# column order in the feed.
LOCATION_COLUMNS = {
    72401355001: "quantity",
    72401322233: "qty_on_order",
}

# Stock at this location decides whether the preorder date is filled in.
PRIMARY_LOCATION_ID = 72401355001

# Products whose title contains this keyword never go into the feed.
EXCLUDED_TITLE_KEYWORD = "Runner"

DESCRIPTION_SUFFIX = "Machine Washable"


def build_feed_config(supplier_id: str | None = None) -> FeedConfig:
    """Assembles the feed rules from the module constants and product mappings."""
    return FeedConfig(
        supplier_id=supplier_id if supplier_id is not None else SUPPLIER_ID,
        location_columns=LOCATION_COLUMNS,
        primary_location_id=PRIMARY_LOCATION_ID,
        excluded_title_keyword=EXCLUDED_TITLE_KEYWORD,
        description_suffix=DESCRIPTION_SUFFIX,
        target_skus=TARGET_SKUS,
        description_overrides=DESCRIPTION_OVERRIDES,
    )
