"""
Utility package for the storefront core.
"""
from bangle_storefront.utils.validation import (
    validate_stock_count,
    parse_sizes,
    validate_dataframe
)
from bangle_storefront.utils.date_helpers import (
    get_timestamp_str,
    get_default_output_dir
)
from bangle_storefront.utils.logging_config import setup_logging, get_logger
