"""
File-based connector reading exported catalog tables.
"""
import os
import pandas as pd
from typing import Dict, Any, Optional
from bangle_storefront.data.connectors.base_connector import BaseConnector
from bangle_storefront.config.app_config import DEFAULT_DATA_DIR
from bangle_storefront.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".csv", ".json")


class FileConnector(BaseConnector):
    """
    Connector for tables exported from the backend as CSV or JSON files.
    """
    
    def __init__(self, data_dir: Optional[str] = None):
        """
        Initialize the file connector.
        
        Args:
            data_dir (Optional[str]): Directory holding <table>.csv / <table>.json files.
                                      If None, uses DEFAULT_DATA_DIR
        """
        self.data_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        self.connected = False
    
    def connect(self) -> str:
        """
        Check that the data directory exists.
        
        Returns:
            str: The data directory
        """
        if not os.path.isdir(self.data_dir):
            raise FileNotFoundError(f"Catalog data directory not found: {self.data_dir}")
        self.connected = True
        logger.info(f"Using catalog data directory {self.data_dir}")
        return self.data_dir
    
    def disconnect(self) -> None:
        self.connected = False
    
    def _table_path(self, table: str) -> str:
        base, ext = os.path.splitext(table)
        if ext:
            if ext.lower() not in SUPPORTED_EXTENSIONS:
                raise ValueError(f"Unsupported table format: {ext}")
            return os.path.join(self.data_dir, table)
        
        for extension in SUPPORTED_EXTENSIONS:
            path = os.path.join(self.data_dir, f"{table}{extension}")
            if os.path.exists(path):
                return path
        raise FileNotFoundError(f"No CSV or JSON file for table '{table}' in {self.data_dir}")
    
    def read_table(self, table: str, filters: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Read a table file into a DataFrame.
        
        Args:
            table (str): Table name, with or without extension
            filters (Optional[Dict[str, Any]]): Column equality filters; filters on
                                                missing columns are ignored
            
        Returns:
            pd.DataFrame: The table rows
        """
        if not self.connected:
            self.connect()
        
        path = self._table_path(table)
        logger.debug(f"Reading table {table} from {path}")
        
        if path.lower().endswith(".json"):
            df = pd.read_json(path, orient="records", dtype=False)
        else:
            # Keep ids and sizes such as "2.10" as text
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        
        for column, value in (filters or {}).items():
            if column in df.columns:
                df = df[df[column] == value]
        
        return df.reset_index(drop=True)
