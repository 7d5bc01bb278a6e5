"""
Input adapters for csvviz.

Usage:
    from csvviz.io import load_csv, LoadResult
"""

from .csv_loader import LoadResult, load_csv

__all__ = ["LoadResult", "load_csv"]
