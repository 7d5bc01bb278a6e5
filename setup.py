#!/usr/bin/env python3
"""
Setup script for csvviz package.
"""

from setuptools import setup, find_packages

setup(
    name="csvviz",
    version="0.1.0",
    description="Column role inference and chart data for tabular CSV files",
    author="csvviz Team",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["csvviz", "csvviz.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=2.0",
        "python-dateutil>=2.8",
        "python-dotenv>=1.0",
        "rich>=13.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "csvviz=csvviz.cli.main:main",
        ],
    },
)
