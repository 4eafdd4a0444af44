"""
Base exporter interface for report output.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional
import pandas as pd


class BaseExporter(ABC):
    """
    Abstract base class for exporters that write report results.
    """
    
    @abstractmethod
    def export(self, results: Dict[str, pd.DataFrame], output_dir: str) -> Dict[str, str]:
        """
        Export report results.
        
        Args:
            results (Dict[str, pd.DataFrame]): Report frames by report name
            output_dir (str): Directory for output files
        
        Returns:
            Dict[str, str]: Paths of the written files by report name
        """
        pass
    
    def prepare_dataframe(self, df: Optional[pd.DataFrame]) -> pd.DataFrame:
        """
        Prepare a report frame for output.
        
        Boolean flags become lowercase text so files read the same way the
        backend stores them.
        
        Args:
            df (Optional[pd.DataFrame]): Report rows
        
        Returns:
            pd.DataFrame: The frame to write
        """
        if df is None or df.empty:
            return pd.DataFrame()
        
        prepared = df.copy()
        for column in prepared.columns:
            if prepared[column].dtype == bool:
                prepared[column] = prepared[column].map({True: "true", False: "false"})
        return prepared
