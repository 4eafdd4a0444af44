"""
Shopping cart line aggregation.
"""
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple
from bangle_storefront.utils.logging_config import get_logger

logger = get_logger(__name__)

ORDER_TYPES = ("retail", "wholesale")


@dataclass(frozen=True)
class CartItem:
    """
    One cart line. Lines are identified by product, size and color.
    """
    product_id: str
    name: str
    price: float
    size: str
    color: str
    quantity: int
    color_hex: str = ""
    image_url: Optional[str] = None
    order_type: str = "retail"
    
    @property
    def key(self) -> Tuple[str, str, str]:
        return (self.product_id, self.size, self.color)
    
    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class Cart:
    """
    An in-memory cart. Persistence is left to the caller via to_records().
    """
    
    def __init__(self, items: Optional[Iterable[CartItem]] = None):
        self._items: List[CartItem] = []
        for item in items or []:
            self.add_item(item)
    
    @property
    def items(self) -> List[CartItem]:
        return list(self._items)
    
    def _index(self, product_id: str, size: str, color: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.key == (product_id, size, color):
                return index
        return None
    
    def add_item(self, item: CartItem) -> None:
        """
        Add a line, summing quantities when the same product, size and color
        is already in the cart.
        
        Args:
            item (CartItem): The line to add
        """
        if item.order_type not in ORDER_TYPES:
            item = replace(item, order_type="retail")
        
        index = self._index(*item.key)
        if index is None:
            self._items.append(item)
        else:
            existing = self._items[index]
            self._items[index] = replace(existing, quantity=existing.quantity + item.quantity)
        logger.debug(f"Added {item.quantity} x {item.name} ({item.color}, {item.size}) to cart")
    
    def remove_item(self, product_id: str, size: str, color: str) -> None:
        """Remove a line if present."""
        self._items = [item for item in self._items if item.key != (product_id, size, color)]
    
    def update_quantity(self, product_id: str, size: str, color: str, quantity: int) -> None:
        """
        Set a line's quantity; zero or less removes the line.
        
        Args:
            product_id (str): Product of the line
            size (str): Size of the line
            color (str): Color of the line
            quantity (int): New quantity
        """
        if quantity <= 0:
            self.remove_item(product_id, size, color)
            return
        
        index = self._index(product_id, size, color)
        if index is not None:
            self._items[index] = replace(self._items[index], quantity=quantity)
    
    def clear(self) -> None:
        self._items = []
    
    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items)
    
    @property
    def total_amount(self) -> float:
        return sum(item.line_total for item in self._items)
    
    def to_records(self) -> List[Dict[str, Any]]:
        """Serialize the lines as plain dicts."""
        return [asdict(item) for item in self._items]
    
    @classmethod
    def from_records(cls, records: Optional[Iterable[Dict[str, Any]]]) -> "Cart":
        """
        Rebuild a cart from saved records, skipping records that are missing
        required fields.
        
        Args:
            records (Optional[Iterable[Dict[str, Any]]]): Output of to_records()
        
        Returns:
            Cart: The restored cart
        """
        cart = cls()
        for record in records or []:
            try:
                cart.add_item(CartItem(**record))
            except TypeError as e:
                logger.warning(f"Skipping invalid cart record {record!r}: {e}")
        return cart
