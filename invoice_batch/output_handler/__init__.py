"""
Output Handler Module for the Invoice Batch Extractor.

This module provides functionality for:
    - CSV file generation (default)
    - Excel file generation
    - Format selection by output file suffix

Author: ML Engineering Team
"""

from .handler import OutputHandler
from .csv_writer import CSVWriter
from .excel_exporter import ExcelExporter

__all__ = ['OutputHandler', 'CSVWriter', 'ExcelExporter']
