"""
"Last few left" listing: products with 1 to 5 in stock.
"""
import pandas as pd
from bangle_storefront.reports.base_report import BaseReport
from bangle_storefront.stock.classifier import filter_last_few_left, classify
from bangle_storefront.utils.logging_config import get_logger

logger = get_logger(__name__)

OUTPUT_COLUMNS = ['id', 'name', 'price', 'stock_count', 'stock_message']


class LastFewLeftReport(BaseReport):
    """
    Lists low-stock products, lowest stock first.
    
    An empty result means the listing should not be shown at all.
    """
    
    name = "last_few_left"
    
    def build(self, catalog_data: pd.DataFrame) -> pd.DataFrame:
        if catalog_data is None or catalog_data.empty:
            return pd.DataFrame(columns=OUTPUT_COLUMNS)
        
        records = catalog_data.to_dict(orient='records')
        low_stock = filter_last_few_left(records, key='stock_count')
        if not low_stock:
            logger.info("No products in the last-few-left range; listing suppressed.")
            return pd.DataFrame(columns=OUTPUT_COLUMNS)
        
        for record in low_stock:
            record['stock_message'] = classify(record['stock_count']).message
        
        result = pd.DataFrame(low_stock)
        columns = [col for col in OUTPUT_COLUMNS if col in result.columns]
        logger.info(f"Found {len(result)} last-few-left products.")
        return result[columns]
