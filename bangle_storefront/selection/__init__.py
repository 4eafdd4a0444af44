"""
Selection grid package.
"""
from bangle_storefront.selection.grid import (
    SelectionEntry,
    SelectionState,
    OrderSummary,
    set_quantity,
    get_quantity,
    derive_selections,
    derive_totals,
    clear,
    bulk_set,
    fill_column,
    build_summary,
    to_order_payload
)
