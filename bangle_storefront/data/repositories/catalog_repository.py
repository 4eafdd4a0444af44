"""
Catalog repository for accessing product data.
"""
from typing import Any, List, Optional
import pandas as pd
from bangle_storefront.data.repositories.base_repository import BaseRepository
from bangle_storefront.data.models.catalog import CatalogItem
from bangle_storefront.data.connectors.base_connector import BaseConnector
from bangle_storefront.colors.normalizer import parse_colors
from bangle_storefront.config.app_config import (
    DEFAULT_CATALOG_TABLE,
    CATALOG_COLUMN_MAP,
    REQUIRED_CATALOG_COLUMNS
)
from bangle_storefront.config.palette_config import DEFAULT_SIZES
from bangle_storefront.utils.validation import validate_stock_count, parse_sizes, validate_dataframe
from bangle_storefront.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

TRUE_VALUES = {"true", "t", "1", "yes", "y"}


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    if value is None:
        return False
    try:
        if pd.isna(value):
            return False
    except (TypeError, ValueError):
        pass
    return bool(value)


class CatalogRepository(BaseRepository[CatalogItem]):
    """
    Repository for accessing catalog products.
    """
    
    def __init__(self, connector: BaseConnector, table: Optional[str] = None):
        """
        Initialize the catalog repository.
        
        Args:
            connector (BaseConnector): The connector to read from
            table (Optional[str]): Catalog table name (DEFAULT_CATALOG_TABLE if None)
        """
        super().__init__(connector)
        self.table = table or DEFAULT_CATALOG_TABLE
    
    def get_raw_data(self, active_only: bool = True) -> pd.DataFrame:
        """
        Get catalog rows with legacy column names mapped and types cleaned.
        
        Args:
            active_only (bool): Keep only rows flagged is_active when the column exists
        
        Returns:
            pd.DataFrame: The catalog data
        """
        logger.info(f"Fetching catalog data from {self.table}...")
        df = self._read_table(self.table)
        df = df.rename(columns={old: new for old, new in CATALOG_COLUMN_MAP.items() if old in df.columns})
        
        if 'stock_count' not in df.columns:
            logger.warning("Catalog has no stock column; treating every product as out of stock")
            df['stock_count'] = 0
        df['stock_count'] = df['stock_count'].map(validate_stock_count).astype(int)
        
        if 'price' in df.columns:
            df['price'] = pd.to_numeric(df['price'], errors='coerce').fillna(0.0)
        
        if 'is_active' in df.columns:
            df['is_active'] = df['is_active'].map(_to_bool).astype(bool)
            if active_only:
                original_count = len(df)
                df = df[df['is_active']].reset_index(drop=True)
                logger.info(f"Retrieved {len(df)} active products (filtered {original_count - len(df)} inactive).")
        
        if not df.empty and not validate_dataframe(df, REQUIRED_CATALOG_COLUMNS):
            missing = [col for col in REQUIRED_CATALOG_COLUMNS if col not in df.columns]
            logger.warning(f"Catalog is missing columns: {', '.join(missing)}")
        
        return df
    
    def get_all(self, active_only: bool = True) -> List[CatalogItem]:
        """
        Get catalog products with normalized colors and sizes.
        
        Args:
            active_only (bool): Keep only active products
        
        Returns:
            List[CatalogItem]: A list of CatalogItem objects
        """
        df = self.get_raw_data(active_only=active_only)
        
        items = []
        for _, row in df.iterrows():
            image_url = row.get('image_url')
            items.append(CatalogItem(
                id=str(row.get('id', '')),
                name=str(row.get('name', '')),
                price=float(row.get('price', 0.0) or 0.0),
                stock_count=int(row['stock_count']),
                available_colors=parse_colors(row.get('available_colors')),
                available_sizes=parse_sizes(row.get('available_sizes'), default=list(DEFAULT_SIZES)),
                image_url=image_url if isinstance(image_url, str) and image_url else None,
                is_active=_to_bool(row.get('is_active', True))
            ))
        
        logger.info(f"Loaded {len(items)} catalog items.")
        return items
