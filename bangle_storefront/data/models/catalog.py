"""
Catalog data models.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from bangle_storefront.colors.normalizer import ColorSwatch


@dataclass
class CatalogItem:
    """
    Represents a catalog product as read from the backend.
    """
    id: str
    name: str
    price: float
    stock_count: int = 0
    available_colors: List[ColorSwatch] = field(default_factory=list)
    available_sizes: List[str] = field(default_factory=list)
    image_url: Optional[str] = None
    is_active: bool = True
    
    @property
    def color_names(self) -> List[str]:
        """Color names in configured order, used as grid row order."""
        return [color.name for color in self.available_colors]
