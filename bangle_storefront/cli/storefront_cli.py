"""
Command-line interface for the storefront catalog reports.
"""
import argparse
import logging
import sys
from typing import List, Optional
from bangle_storefront.main import run_report
from bangle_storefront.config.app_config import DEFAULT_DATA_DIR, DEFAULT_CATALOG_TABLE, REPORT_TYPES


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.
    
    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)
    
    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Bangle storefront reports - stock urgency, last few left and color palette"
    )
    
    parser.add_argument(
        "--data-dir",
        type=str,
        default=DEFAULT_DATA_DIR,
        help=f"Directory holding exported catalog tables (default: {DEFAULT_DATA_DIR})"
    )
    
    parser.add_argument(
        "--catalog-table",
        type=str,
        default=DEFAULT_CATALOG_TABLE,
        help=f"Catalog table name, read from <name>.csv or <name>.json (default: {DEFAULT_CATALOG_TABLE})"
    )
    
    parser.add_argument(
        "--reports",
        type=str,
        help=f"Comma-separated list of reports to run (default: {','.join(REPORT_TYPES)})"
    )
    
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Output directory for results (default: auto-generated based on timestamp)"
    )
    
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    
    return parser.parse_args(args)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.
    
    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)
    
    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    parsed_args = parse_args(args)
    
    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
    
    report_names = None
    if parsed_args.reports:
        report_names = [name.strip() for name in parsed_args.reports.split(',') if name.strip()]
        unknown = [name for name in report_names if name not in REPORT_TYPES]
        if unknown:
            print(f"Error: Unknown report(s): {', '.join(unknown)}. Choose from {', '.join(REPORT_TYPES)}.")
            return 1
    
    try:
        written = run_report(
            data_dir=parsed_args.data_dir,
            catalog_table=parsed_args.catalog_table,
            report_names=report_names,
            output_dir=parsed_args.output_dir,
            log_level=log_level
        )
        
        if written:
            print("\nReports written:")
            for name, path in written.items():
                print(f"  {name}: {path}")
        else:
            print("\nNo reports had any rows to write.")
        return 0
    
    except Exception as e:
        print(f"\nError while building reports: {str(e)}")
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
