"""
Input Handler Module for the Invoice Batch Extractor.

This module provides functionality for:
    - Discovering the invoice documents of a run
    - Extracting plain text from PDF documents

Author: ML Engineering Team
"""

from .handler import InputHandler
from .pdf_processor import PDFProcessor

__all__ = ['InputHandler', 'PDFProcessor']
