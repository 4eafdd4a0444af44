#!/usr/bin/env python3
"""
CLI entry point for the storefront catalog reports.
"""
import sys
from bangle_storefront.cli.storefront_cli import main

if __name__ == "__main__":
    sys.exit(main())
