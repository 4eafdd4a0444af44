"""
Date helper utilities for report output.
"""
from datetime import datetime
from typing import Optional


def get_timestamp_str() -> str:
    """
    Get a timestamp string for filenames.
    
    Returns:
        str: Timestamp string (YYYYMMDD_HHMMSS)
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def get_default_output_dir(prefix: str = "storefront_reports", timestamp: Optional[str] = None) -> str:
    """
    Build a timestamped output directory name.
    
    Args:
        prefix (str): Directory name prefix
        timestamp (Optional[str]): Timestamp to use (defaults to now)
    
    Returns:
        str: Directory name such as storefront_reports_20240101_120000
    """
    return f"{prefix}_{timestamp or get_timestamp_str()}"
