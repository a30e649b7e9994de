"""Processing module for employee data ingestion.

This module contains:
- Built-in sample employees for demonstration runs
- The CSV loader for custom employee files
"""

from .csv_loader import DataLoadError, load_employees_csv
from .sample_data import sample_employees

__all__ = [
    "DataLoadError",
    "load_employees_csv",
    "sample_employees",
]
