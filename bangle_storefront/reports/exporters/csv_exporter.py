"""
CSV exporter for report results.
"""
from typing import Dict
import os
import pandas as pd
from bangle_storefront.reports.exporters.base_exporter import BaseExporter
from bangle_storefront.utils.logging_config import get_logger

logger = get_logger(__name__)


class CSVExporter(BaseExporter):
    """
    Exporter for report results to CSV files.
    """
    
    def export(self, results: Dict[str, pd.DataFrame], output_dir: str) -> Dict[str, str]:
        """
        Export each non-empty report to <report>.csv.
        
        Args:
            results (Dict[str, pd.DataFrame]): Report frames by report name
            output_dir (str): Directory for output files
        
        Returns:
            Dict[str, str]: Paths of the written files by report name
        """
        os.makedirs(output_dir, exist_ok=True)
        
        written = {}
        for name, df in results.items():
            prepared = self.prepare_dataframe(df)
            if prepared.empty:
                logger.info(f"Skipping empty report: {name}")
                continue
            
            output_path = os.path.join(output_dir, f"{name}.csv")
            prepared.to_csv(output_path, index=False)
            logger.info(f"Exported {name} report ({len(prepared)} rows) to {output_path}")
            written[name] = output_path
        
        return written
