"""
Main entry point for the storefront catalog reports.
"""
import logging
from typing import Dict, List, Optional

from bangle_storefront.config.app_config import (
    DEFAULT_DATA_DIR,
    DEFAULT_CATALOG_TABLE,
    DEFAULT_LOG_DIR,
    REPORT_TYPES
)
from bangle_storefront.data.connectors.file_connector import FileConnector
from bangle_storefront.data.repositories.catalog_repository import CatalogRepository
from bangle_storefront.reports.report_factory import ReportFactory
from bangle_storefront.reports.exporters.csv_exporter import CSVExporter
from bangle_storefront.utils.date_helpers import get_default_output_dir
from bangle_storefront.utils.logging_config import setup_logging


class StorefrontReportApp:
    """
    Main application class for catalog reports.
    """
    
    def __init__(self, log_level=logging.INFO, log_dir: str = DEFAULT_LOG_DIR):
        """
        Initialize the application.
        
        Args:
            log_level: Logging level
            log_dir (str): Directory for log files
        """
        self.logger = setup_logging(log_level=log_level, log_dir=log_dir)
        
        self.data_dir = DEFAULT_DATA_DIR
        self.catalog_table = DEFAULT_CATALOG_TABLE
        self.report_names: List[str] = list(REPORT_TYPES)
        self.output_dir: Optional[str] = None
        self.connector: Optional[FileConnector] = None
    
    def configure(
        self,
        data_dir: Optional[str] = None,
        catalog_table: Optional[str] = None,
        report_names: Optional[List[str]] = None,
        output_dir: Optional[str] = None
    ) -> None:
        """
        Configure the application.
        
        Args:
            data_dir (Optional[str]): Directory holding the exported catalog tables
            catalog_table (Optional[str]): Name of the catalog table
            report_names (Optional[List[str]]): Reports to run (all if None)
            output_dir (Optional[str]): Output directory for results
        """
        if data_dir:
            self.data_dir = data_dir
        if catalog_table:
            self.catalog_table = catalog_table
        
        if report_names:
            unknown = [name for name in report_names if name not in REPORT_TYPES]
            if unknown:
                self.logger.warning(f"Ignoring unknown reports: {', '.join(unknown)}")
            self.report_names = [name for name in report_names if name in REPORT_TYPES]
        
        self.output_dir = output_dir or get_default_output_dir()
    
    def run_report(self) -> Dict[str, str]:
        """
        Run the configured reports and export them.
        
        Returns:
            Dict[str, str]: Paths of the written files by report name
        """
        if self.output_dir is None:
            self.configure()
        
        self.logger.info(f"Starting catalog reports for {self.data_dir}/{self.catalog_table}")
        self.connector = FileConnector(self.data_dir)
        
        try:
            repository = CatalogRepository(self.connector, table=self.catalog_table)
            factory = ReportFactory(repository)
            catalog_data = repository.get_raw_data()
            
            results = {}
            for name in self.report_names:
                report = factory.get_report(name)
                if report is None:
                    continue
                results[name] = report.build(catalog_data)
            
            written = CSVExporter().export(results, self.output_dir)
            self.logger.info(f"Catalog reports complete. Results saved in {self.output_dir}")
            return written
            
        except Exception as e:
            self.logger.error(f"Error while building reports: {str(e)}", exc_info=True)
            raise
        finally:
            self.connector.disconnect()


def run_report(
    data_dir: Optional[str] = None,
    catalog_table: Optional[str] = None,
    report_names: Optional[List[str]] = None,
    output_dir: Optional[str] = None,
    log_level: int = logging.INFO
) -> Dict[str, str]:
    """
    Run catalog reports with the specified parameters.
    
    Args:
        data_dir (Optional[str]): Directory holding the exported catalog tables
        catalog_table (Optional[str]): Name of the catalog table
        report_names (Optional[List[str]]): Reports to run (all if None)
        output_dir (Optional[str]): Output directory for results
        log_level (int): Logging level
    
    Returns:
        Dict[str, str]: Paths of the written files by report name
    """
    app = StorefrontReportApp(log_level=log_level)
    app.configure(
        data_dir=data_dir,
        catalog_table=catalog_table,
        report_names=report_names,
        output_dir=output_dir
    )
    return app.run_report()
