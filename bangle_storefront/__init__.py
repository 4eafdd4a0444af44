"""
Bangle Storefront core package.

This package provides the business logic behind the storefront: stock
urgency classification, color normalization, color x size selection
aggregation and cart totals, plus reports over exported catalog data.
"""
from bangle_storefront.main import run_report

__version__ = "1.0.0"
