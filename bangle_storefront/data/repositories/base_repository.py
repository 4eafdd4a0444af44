"""
Base repository interface for data access.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Dict, Optional, Generic, TypeVar
import pandas as pd
from bangle_storefront.data.connectors.base_connector import BaseConnector
from bangle_storefront.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Generic type for repository entities
T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for repositories that provide data access.
    """
    
    def __init__(self, connector: BaseConnector):
        """
        Initialize the repository with a connector.
        
        Args:
            connector (BaseConnector): The connector to read from
        """
        self.connector = connector
    
    @abstractmethod
    def get_all(self, *args, **kwargs) -> List[T]:
        """
        Get all entities that match the specified criteria.
        
        Returns:
            List[T]: A list of entity objects
        """
        pass
    
    @abstractmethod
    def get_raw_data(self, *args, **kwargs) -> pd.DataFrame:
        """
        Get raw data as a pandas DataFrame.
        
        Returns:
            pd.DataFrame: The raw data as a pandas DataFrame
        """
        pass
    
    def _read_table(self, table: str, filters: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Read a table through the connector.
        
        Args:
            table (str): The table to read
            filters (Optional[Dict[str, Any]]): Column equality filters
            
        Returns:
            pd.DataFrame: The table rows
        """
        if not hasattr(self.connector, 'read_table'):
            raise NotImplementedError("Connector does not implement read_table method")
        logger.debug(f"Reading table {table} with filters {filters}")
        return self.connector.read_table(table, filters)
