#!/usr/bin/env python3
"""
Setup script for the Bangle Storefront core.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="bangle-storefront",
    version="1.0.0",
    author="Bangle Storefront Team",
    description="Stock urgency, color normalization and selection-grid logic for a bangle storefront",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "storefront-report=bangle_storefront.cli.storefront_cli:main",
        ],
    },
)
