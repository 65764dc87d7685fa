"""
Invoice Batch Extractor - Source Package.

This package extracts invoice header fields from a batch of PDF invoices
with regular-expression rules and writes one sorted table.

Modules:
    - input_handler: Document discovery and PDF text extraction
    - extraction: Pattern rules and field extraction
    - pipeline: Worker pool, result ordering and orchestration
    - output_handler: CSV and Excel output
    - utils: Logging, exceptions and helpers

Architecture:
    Discover -> Worker Pool (Text -> Fields) -> Collate -> Output
"""

__version__ = "1.0.0"
__author__ = "ML Engineering Team"

__all__ = [
    'input_handler',
    'extraction',
    'pipeline',
    'output_handler',
    'utils'
]
