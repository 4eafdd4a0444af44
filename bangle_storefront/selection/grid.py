"""
Color x size selection grid aggregation.

The selection state is a sparse mapping of (color, size) -> quantity. A cell
holding 0 is the same as an absent cell and never shows up in derived views.
All operations return new mappings and leave their input untouched.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Tuple
from bangle_storefront.utils.logging_config import get_logger

logger = get_logger(__name__)

SelectionKey = Tuple[str, str]
SelectionState = Dict[SelectionKey, int]


@dataclass(frozen=True)
class SelectionEntry:
    """
    One non-zero cell of the selection grid.
    """
    color: str
    size: str
    quantity: int


@dataclass
class OrderSummary:
    """
    Derived summary shown next to the grid and handed to order creation.
    """
    selections: List[SelectionEntry] = field(default_factory=list)
    total_quantity: int = 0
    total_amount: float = 0
    unit_price: float = 0


def set_quantity(state: SelectionState, color: str, size: str, value: int) -> SelectionState:
    """
    Set the quantity of one cell.
    
    The stepper control never produces negatives, so the value is stored as
    given. Setting 0 removes the cell.
    
    Args:
        state (SelectionState): Current selection
        color (str): Color name of the cell
        size (str): Size of the cell
        value (int): New quantity
    
    Returns:
        SelectionState: The updated selection
    """
    new_state = dict(state)
    if value:
        new_state[(color, size)] = value
    else:
        new_state.pop((color, size), None)
    return new_state


def get_quantity(state: SelectionState, color: str, size: str) -> int:
    """Quantity of one cell, 0 when absent."""
    return state.get((color, size), 0) or 0


def _order_index(order: Sequence[str], value: str) -> int:
    try:
        return order.index(value)
    except ValueError:
        # Unknown values sort after every known one
        return len(order)


def derive_selections(
    state: SelectionState,
    color_order: Sequence[str],
    size_order: Sequence[str]
) -> List[SelectionEntry]:
    """
    List the non-zero cells in grid order.
    
    Rows follow color_order and columns follow size_order, whatever order the
    cells were clicked in. Colors or sizes missing from the orders sort last,
    keeping their relative insertion order.
    
    Args:
        state (SelectionState): Current selection
        color_order (Sequence[str]): Color names in grid row order
        size_order (Sequence[str]): Sizes in grid column order
    
    Returns:
        List[SelectionEntry]: The selected cells
    """
    color_order = list(color_order)
    size_order = list(size_order)
    
    entries = [
        SelectionEntry(color=color, size=size, quantity=quantity)
        for (color, size), quantity in state.items()
        if quantity > 0
    ]
    return sorted(
        entries,
        key=lambda entry: (
            _order_index(color_order, entry.color),
            _order_index(size_order, entry.size)
        )
    )


def derive_totals(state: SelectionState, unit_price: float = 0) -> Dict[str, float]:
    """
    Total quantity and amount of a selection.
    
    Every cell is charged the same product price; there is no per-color or
    per-size pricing.
    
    Args:
        state (SelectionState): Current selection
        unit_price (float): Price of one item
    
    Returns:
        Dict[str, float]: total_quantity and total_amount
    """
    total_quantity = sum(quantity for quantity in state.values() if quantity > 0)
    return {
        'total_quantity': total_quantity,
        'total_amount': total_quantity * (unit_price or 0),
    }


def clear(state: SelectionState) -> SelectionState:
    """Reset the selection."""
    return {}


def bulk_set(
    color_order: Iterable[str],
    size_order: Iterable[str],
    quantity: int
) -> SelectionState:
    """
    Set every (color, size) pair to the same quantity.
    
    The result replaces the previous selection entirely; it is not merged into
    it. A quantity of 0 gives an empty selection.
    
    Args:
        color_order (Iterable[str]): Colors to fill
        size_order (Iterable[str]): Sizes to fill
        quantity (int): Quantity for every cell
    
    Returns:
        SelectionState: The new selection
    """
    if not quantity or quantity <= 0:
        return {}
    sizes = list(size_order)
    return {(color, size): quantity for color in color_order for size in sizes}


def fill_column(color_order: Iterable[str], size: str, quantity: int) -> SelectionState:
    """Set one size column to the same quantity for every color, replacing the selection."""
    return bulk_set(color_order, [size], quantity)


def build_summary(
    state: SelectionState,
    color_order: Sequence[str],
    size_order: Sequence[str],
    unit_price: float = 0
) -> OrderSummary:
    """
    Build the order summary for a selection.
    
    Args:
        state (SelectionState): Current selection
        color_order (Sequence[str]): Color names in grid row order
        size_order (Sequence[str]): Sizes in grid column order
        unit_price (float): Price of one item
    
    Returns:
        OrderSummary: Sorted selections and totals
    """
    selections = derive_selections(state, color_order, size_order)
    totals = derive_totals(state, unit_price)
    logger.debug(f"Summarized {len(selections)} selections, {totals['total_quantity']} items")
    return OrderSummary(
        selections=selections,
        total_quantity=totals['total_quantity'],
        total_amount=totals['total_amount'],
        unit_price=unit_price or 0
    )


def to_order_payload(summary: OrderSummary) -> Dict[str, Any]:
    """
    Convert a summary into the payload for order creation.
    
    Args:
        summary (OrderSummary): The summary to send
    
    Returns:
        Dict[str, Any]: items (color, size, quantity, unitPrice), totalQuantity
        and totalAmount
    """
    return {
        'items': [
            {
                'color': entry.color,
                'size': entry.size,
                'quantity': entry.quantity,
                'unitPrice': summary.unit_price,
            }
            for entry in summary.selections
        ],
        'totalQuantity': summary.total_quantity,
        'totalAmount': summary.total_amount,
    }
