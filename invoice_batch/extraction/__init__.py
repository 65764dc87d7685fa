"""
Extraction Module for the Invoice Batch Extractor.

This module provides rule-driven field extraction:
    - RuleSet: compiled pattern rules loaded from template.json
    - extract_record: text + rules -> ExtractedRecord
    - Normalizers for amounts, dates and client references
"""

from .record import ExtractedRecord
from .rules import RuleSet, load_rules
from .field_extractor import extract_record, REGISTRATION_PATTERN

__all__ = ['ExtractedRecord', 'RuleSet', 'load_rules', 'extract_record', 'REGISTRATION_PATTERN']
