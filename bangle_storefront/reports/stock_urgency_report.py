"""
Stock urgency report: every product with its urgency badge data.
"""
import pandas as pd
from bangle_storefront.reports.base_report import BaseReport
from bangle_storefront.stock.classifier import annotate_stock_frame, get_urgency_variant, StockTier
from bangle_storefront.utils.logging_config import get_logger

logger = get_logger(__name__)

OUTPUT_COLUMNS = ['id', 'name', 'price', 'stock_count', 'stock_tier', 'stock_message',
                  'show_urgency', 'disabled', 'badge_variant']


class StockUrgencyReport(BaseReport):
    """
    Annotates each product with its stock tier.
    """
    
    name = "stock_urgency"
    
    def build(self, catalog_data: pd.DataFrame) -> pd.DataFrame:
        if catalog_data is None or catalog_data.empty:
            return pd.DataFrame(columns=OUTPUT_COLUMNS)
        
        annotated = annotate_stock_frame(catalog_data, column='stock_count')
        annotated['badge_variant'] = annotated['stock_tier'].map(
            lambda tier: get_urgency_variant(StockTier(tier))
        )
        
        columns = [col for col in OUTPUT_COLUMNS if col in annotated.columns]
        result = annotated[columns].sort_values('stock_count', kind='stable').reset_index(drop=True)
        
        disabled_count = int(result['disabled'].sum())
        logger.info(f"Classified {len(result)} products; {disabled_count} out of stock.")
        return result
