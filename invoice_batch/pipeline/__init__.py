"""
Pipeline Module for the Invoice Batch Extractor.

Components:
    - WorkerPool: bounded thread pool over a shared job queue
    - ResultCollator: deterministic ordering by invoice number
    - InvoicePipeline: rules -> discovery -> pool -> collate -> output
"""

from .dispatcher import WorkerPool, RunStatistics, PoolResult
from .collator import ResultCollator, compare_invoice_ids, sort_records
from .orchestrator import InvoicePipeline, PipelineSummary

__all__ = [
    'WorkerPool',
    'RunStatistics',
    'PoolResult',
    'ResultCollator',
    'compare_invoice_ids',
    'sort_records',
    'InvoicePipeline',
    'PipelineSummary',
]
