"""
Utility Module for the Invoice Batch Extractor.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Exception hierarchy
    - File and formatting helpers
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, get_file_extension, format_duration

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'get_file_extension',
    'format_duration'
]
