"""
Base report for catalog reports.
"""
from abc import ABC, abstractmethod
from typing import Optional
import pandas as pd
from bangle_storefront.data.repositories.catalog_repository import CatalogRepository


class BaseReport(ABC):
    """
    Base class for catalog reports.
    """
    
    name = "base"
    
    def __init__(self, catalog_repository: CatalogRepository):
        """
        Initialize the base report.
        
        Args:
            catalog_repository (CatalogRepository): Repository for catalog data
        """
        self.catalog_repository = catalog_repository
        self.catalog_data: Optional[pd.DataFrame] = None
    
    def prepare_data(self) -> pd.DataFrame:
        """
        Load the catalog once per report instance.
        
        Returns:
            pd.DataFrame: Active catalog rows
        """
        if self.catalog_data is None:
            self.catalog_data = self.catalog_repository.get_raw_data()
        return self.catalog_data
    
    @abstractmethod
    def build(self, catalog_data: pd.DataFrame) -> pd.DataFrame:
        """
        Build the report from catalog rows.
        
        Args:
            catalog_data (pd.DataFrame): The catalog rows
        
        Returns:
            pd.DataFrame: The report rows
        """
        pass
    
    def run(self) -> pd.DataFrame:
        """Load the catalog and build the report."""
        return self.build(self.prepare_data())
