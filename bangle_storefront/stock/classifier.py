"""
Stock urgency classification.

Maps a stock count to one of five urgency tiers plus the message and flags
shown on product badges.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, TypeVar
import numpy as np
import pandas as pd
from bangle_storefront.config.app_config import (
    OUT_OF_STOCK_MAX,
    LAST_FEW_LEFT_MAX,
    BUY_BEFORE_SOLD_OUT_MAX,
    LIMITED_STOCK_MAX
)
from bangle_storefront.utils.validation import validate_stock_count

T = TypeVar('T')


class StockTier(str, Enum):
    """
    Urgency tiers, derived from a stock count and never persisted.
    """
    OUT_OF_STOCK = "out_of_stock"
    LAST_FEW_LEFT = "last_few_left"  # 1-5 items
    BUY_BEFORE_SOLD_OUT = "buy_before_sold_out"  # 6-15 items
    LIMITED_STOCK = "limited_stock"  # 16-30 items
    ABUNDANT_STOCK = "abundant_stock"  # 31+ items


@dataclass(frozen=True)
class StockMessage:
    """
    Badge metadata for a stock tier.
    """
    tier: StockTier
    message: str
    show_urgency: bool
    disabled: bool


STOCK_MESSAGES = {
    StockTier.OUT_OF_STOCK: StockMessage(StockTier.OUT_OF_STOCK, "Out of stock", True, True),
    StockTier.LAST_FEW_LEFT: StockMessage(StockTier.LAST_FEW_LEFT, "Last few left — shop now", True, False),
    StockTier.BUY_BEFORE_SOLD_OUT: StockMessage(StockTier.BUY_BEFORE_SOLD_OUT, "Buy now, before it sells out", True, False),
    StockTier.LIMITED_STOCK: StockMessage(StockTier.LIMITED_STOCK, "Limited stock available", True, False),
    StockTier.ABUNDANT_STOCK: StockMessage(StockTier.ABUNDANT_STOCK, "", False, False),
}

URGENCY_VARIANTS = {
    StockTier.OUT_OF_STOCK: "destructive",
    StockTier.LAST_FEW_LEFT: "destructive",
    StockTier.BUY_BEFORE_SOLD_OUT: "secondary",
    StockTier.LIMITED_STOCK: "secondary",
}


def get_stock_tier(stock_count: Optional[int]) -> StockTier:
    """
    Determine the stock tier for a stock count.
    
    Args:
        stock_count (Optional[int]): Number of items in stock; None counts as 0
    
    Returns:
        StockTier: The tier whose range contains the count
    """
    stock = validate_stock_count(stock_count)
    
    if stock <= OUT_OF_STOCK_MAX:
        return StockTier.OUT_OF_STOCK
    if stock <= LAST_FEW_LEFT_MAX:
        return StockTier.LAST_FEW_LEFT
    if stock <= BUY_BEFORE_SOLD_OUT_MAX:
        return StockTier.BUY_BEFORE_SOLD_OUT
    if stock <= LIMITED_STOCK_MAX:
        return StockTier.LIMITED_STOCK
    return StockTier.ABUNDANT_STOCK


def classify(stock_count: Optional[int]) -> StockMessage:
    """
    Classify a stock count into its tier, message and badge flags.
    
    Args:
        stock_count (Optional[int]): Number of items in stock; None counts as 0
    
    Returns:
        StockMessage: Tier plus message, show_urgency and disabled flags
    """
    return STOCK_MESSAGES[get_stock_tier(stock_count)]


def is_out_of_stock(stock_count: Optional[int]) -> bool:
    """Return True when nothing can be sold (None counts as 0)."""
    return validate_stock_count(stock_count) <= OUT_OF_STOCK_MAX


def show_urgency_badge(stock_count: Optional[int]) -> bool:
    """Return True for counts that get an urgency badge (1 to 30)."""
    stock = validate_stock_count(stock_count)
    return OUT_OF_STOCK_MAX < stock <= LIMITED_STOCK_MAX


def get_urgency_variant(tier: StockTier) -> str:
    """Badge color variant for a tier."""
    return URGENCY_VARIANTS.get(tier, "outline")


def _get_stock(item: Any, key: str) -> Any:
    if isinstance(item, dict):
        return item.get(key)
    return getattr(item, key, None)


def filter_last_few_left(items: Iterable[T], key: str = "stock_count") -> List[T]:
    """
    Select items with 1 to 5 left, lowest stock first.
    
    Ties keep their input order. Returns an empty list when nothing qualifies;
    callers hide the "last few left" section in that case.
    
    Args:
        items (Iterable[T]): Dicts or objects carrying a stock count
        key (str): Name of the stock field (e.g. "number_of_stock" for raw rows)
    
    Returns:
        List[T]: The matching items sorted ascending by stock
    """
    matching = [
        item for item in items
        if get_stock_tier(_get_stock(item, key)) == StockTier.LAST_FEW_LEFT
    ]
    return sorted(matching, key=lambda item: validate_stock_count(_get_stock(item, key)))


def annotate_stock_frame(df: pd.DataFrame, column: str = "stock_count") -> pd.DataFrame:
    """
    Add stock tier columns to a catalog DataFrame.
    
    Args:
        df (pd.DataFrame): Catalog rows
        column (str): Name of the stock count column
    
    Returns:
        pd.DataFrame: A copy with stock_tier, stock_message, show_urgency and
        disabled columns
    """
    annotated = df.copy()
    if column in annotated.columns:
        stock = annotated[column].map(validate_stock_count).astype(int)
    else:
        stock = pd.Series(0, index=annotated.index)
    
    conditions = [
        stock <= OUT_OF_STOCK_MAX,
        stock <= LAST_FEW_LEFT_MAX,
        stock <= BUY_BEFORE_SOLD_OUT_MAX,
        stock <= LIMITED_STOCK_MAX,
    ]
    tiers = [
        StockTier.OUT_OF_STOCK.value,
        StockTier.LAST_FEW_LEFT.value,
        StockTier.BUY_BEFORE_SOLD_OUT.value,
        StockTier.LIMITED_STOCK.value,
    ]
    annotated['stock_tier'] = np.select(conditions, tiers, default=StockTier.ABUNDANT_STOCK.value)
    
    messages = annotated['stock_tier'].map(lambda tier: STOCK_MESSAGES[StockTier(tier)])
    annotated['stock_message'] = messages.map(lambda m: m.message)
    annotated['show_urgency'] = messages.map(lambda m: m.show_urgency).astype(bool)
    annotated['disabled'] = messages.map(lambda m: m.disabled).astype(bool)
    
    return annotated
