"""
Configuration package for the storefront core.
"""
