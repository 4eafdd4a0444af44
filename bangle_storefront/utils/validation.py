"""
Validation utilities for loosely-typed catalog values.
"""
import json
from typing import Any, List, Optional
import pandas as pd


def validate_stock_count(stock_count: Any) -> int:
    """
    Validate and convert a stock count.
    
    Args:
        stock_count (Any): Raw stock value (int, float, numeric string, None, NaN)
        
    Returns:
        int: The stock count, or 0 when it cannot be interpreted
    """
    if stock_count is None:
        return 0
    try:
        if pd.isna(stock_count):
            return 0
    except (TypeError, ValueError):
        # Sequences and other non-scalars
        return 0
    try:
        return int(float(stock_count))
    except (ValueError, TypeError, OverflowError):
        return 0


def parse_sizes(raw_sizes: Any, default: Optional[List[str]] = None) -> List[str]:
    """
    Parse a stored size list.
    
    Accepts a list, a JSON-encoded list or a comma-separated string.
    
    Args:
        raw_sizes (Any): The stored sizes
        default (Optional[List[str]]): Returned when nothing usable is found
        
    Returns:
        List[str]: Sizes as strings, in stored order
    """
    fallback = list(default) if default else []
    
    if isinstance(raw_sizes, str):
        text = raw_sizes.strip()
        if text.startswith('['):
            try:
                raw_sizes = json.loads(text)
            except (ValueError, RecursionError):
                raw_sizes = text.strip('[]').split(',')
        else:
            raw_sizes = text.split(',')
    
    if not isinstance(raw_sizes, (list, tuple)):
        return fallback
    
    sizes = [str(size).strip().strip('"\'') for size in raw_sizes if size is not None]
    sizes = [size for size in sizes if size]
    return sizes or fallback


def validate_dataframe(df: pd.DataFrame, required_columns: List[str]) -> bool:
    """
    Validate that a DataFrame contains the required columns.
    
    Args:
        df (pd.DataFrame): The DataFrame to validate
        required_columns (List[str]): List of required column names
        
    Returns:
        bool: True if all required columns exist, False otherwise
    """
    if df is None or df.empty:
        return False
    
    missing_columns = [col for col in required_columns if col not in df.columns]
    return len(missing_columns) == 0
