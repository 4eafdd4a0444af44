"""
Application-wide configuration settings for the storefront reports.
"""
import os
from typing import Dict, List

# Catalog source
DEFAULT_DATA_DIR = os.environ.get("STOREFRONT_DATA_DIR", "data")
DEFAULT_CATALOG_TABLE = os.environ.get("STOREFRONT_CATALOG_TABLE", "bangles")
DEFAULT_LOG_DIR = os.environ.get("STOREFRONT_LOG_DIR", "logs")
DEFAULT_OUTPUT_DIR = None  # Will be generated based on timestamp if None

# Stock tier boundaries (inclusive upper bounds)
OUT_OF_STOCK_MAX = 0
LAST_FEW_LEFT_MAX = 5
BUY_BEFORE_SOLD_OUT_MAX = 15
LIMITED_STOCK_MAX = 30

# Reports produced by default, in output order
REPORT_TYPES: List[str] = ["stock_urgency", "last_few_left", "color_palette"]

# Legacy column names mapped to the names used by the core
CATALOG_COLUMN_MAP: Dict[str, str] = {
    "number_of_stock": "stock_count",
    "stockCount": "stock_count",
    "available_colours": "available_colors",
}

# Columns every catalog table must provide after renaming
REQUIRED_CATALOG_COLUMNS: List[str] = ["id", "name", "price", "stock_count"]
