"""
Base catalog connector interface.
"""
from abc import ABC, abstractmethod
import pandas as pd
from typing import Dict, Any, Optional


class BaseConnector(ABC):
    """
    Abstract base class for catalog data sources.
    """
    
    @abstractmethod
    def connect(self) -> Any:
        """
        Open the data source.
        
        Returns:
            Any: The underlying handle
        """
        pass
    
    @abstractmethod
    def disconnect(self) -> None:
        """
        Release the data source.
        """
        pass
    
    @abstractmethod
    def read_table(self, table: str, filters: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Read a table and return its rows as a DataFrame.
        
        Args:
            table (str): Name of the table to read
            filters (Optional[Dict[str, Any]]): Column equality filters
            
        Returns:
            pd.DataFrame: The matching rows
        """
        pass
    
    def __enter__(self):
        self.connect()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
