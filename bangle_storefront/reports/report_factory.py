"""
Factory for creating catalog reports.
"""
from typing import Dict, Type, Optional
from bangle_storefront.reports.base_report import BaseReport
from bangle_storefront.reports.stock_urgency_report import StockUrgencyReport
from bangle_storefront.reports.last_few_left_report import LastFewLeftReport
from bangle_storefront.reports.color_palette_report import ColorPaletteReport
from bangle_storefront.data.repositories.catalog_repository import CatalogRepository
from bangle_storefront.utils.logging_config import get_logger

logger = get_logger(__name__)


class ReportFactory:
    """
    Factory for creating the different catalog reports.
    """
    
    def __init__(self, catalog_repository: CatalogRepository):
        """
        Initialize the report factory.
        
        Args:
            catalog_repository (CatalogRepository): Repository for catalog data
        """
        self.catalog_repository = catalog_repository
        
        # Register reports
        self._reports: Dict[str, Type[BaseReport]] = {
            StockUrgencyReport.name: StockUrgencyReport,
            LastFewLeftReport.name: LastFewLeftReport,
            ColorPaletteReport.name: ColorPaletteReport,
        }
    
    def get_report(self, name: str) -> Optional[BaseReport]:
        """
        Get a report by name.
        
        Args:
            name (str): The report name ('stock_urgency', 'last_few_left', 'color_palette')
        
        Returns:
            Optional[BaseReport]: A report instance, or None if the name is unknown
        """
        if name not in self._reports:
            logger.warning(f"Unknown report: {name}")
            return None
        
        return self._reports[name](catalog_repository=self.catalog_repository)
    
    def get_all_reports(self) -> Dict[str, BaseReport]:
        """
        Get instances of every registered report.
        
        Returns:
            Dict[str, BaseReport]: Report instances by name
        """
        return {name: self.get_report(name) for name in self._reports}
