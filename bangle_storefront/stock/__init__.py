"""
Stock urgency package.
"""
from bangle_storefront.stock.classifier import (
    StockTier,
    StockMessage,
    classify,
    get_stock_tier,
    is_out_of_stock,
    show_urgency_badge,
    get_urgency_variant,
    filter_last_few_left,
    annotate_stock_frame
)
