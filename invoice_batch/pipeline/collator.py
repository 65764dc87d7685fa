"""
Result Collator Module.

Orders the records produced by the worker pool. Completion order depends
on thread scheduling, so the output order is derived from the invoice
numbers alone.

Ordering rule for two invoice numbers a and b:
    1. Split both on "/". If either has no second segment, compare a and b
       as strings.
    2. Parse both second segments as integers (surrounding whitespace
       ignored). If either does not parse, compare a and b as strings.
    3. Otherwise compare the integers.

The rule is applied pairwise, so a batch mixing numeric and non-numeric
suffixes is not guaranteed a transitive order. Existing outputs depend on
this exact behaviour; see DESIGN.md.
"""

import re
from functools import cmp_to_key
from typing import Iterable, List, Optional

from invoice_batch.utils.logger import get_logger
from invoice_batch.extraction.record import ExtractedRecord

# Initialize module logger
logger = get_logger(__name__)

_INTEGER = re.compile(r'[+-]?[0-9]+')


def invoice_sequence(invoice_id: str) -> Optional[int]:
    """
    Parse the numeric suffix of an invoice number.

    Example:
        >>> invoice_sequence("FT 2023/12345")
        12345
        >>> invoice_sequence("Y/abc") is None
        True
    """
    parts = invoice_id.split("/")
    if len(parts) < 2:
        return None
    segment = parts[1].strip()
    if not _INTEGER.fullmatch(segment):
        return None
    return int(segment)


def compare_invoice_ids(a: str, b: str) -> int:
    """
    Compare two invoice numbers.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal.
    """
    seq_a = invoice_sequence(a)
    seq_b = invoice_sequence(b)

    if seq_a is None or seq_b is None:
        return (a > b) - (a < b)
    return (seq_a > seq_b) - (seq_a < seq_b)


def sort_records(records: Iterable[ExtractedRecord]) -> List[ExtractedRecord]:
    """Return the records sorted by invoice number; the sort is stable."""
    return sorted(
        records,
        key=cmp_to_key(lambda left, right: compare_invoice_ids(left.invoice_id, right.invoice_id))
    )


class ResultCollator:
    """
    Collects records from the worker pool and orders them.

    Example:
        >>> collator = ResultCollator()
        >>> ordered = collator.collate(pool_result.records)
    """

    def collate(self, records: Iterable[ExtractedRecord]) -> List[ExtractedRecord]:
        """
        Order a complete set of records.

        Args:
            records: Every record of the run, in any order.

        Returns:
            New list in deterministic invoice order.
        """
        records = list(records)
        unsequenced = sum(1 for r in records if invoice_sequence(r.invoice_id) is None)

        ordered = sort_records(records)

        if unsequenced:
            logger.warning(
                f"{unsequenced} of {len(ordered)} records have no numeric invoice "
                f"suffix and were ordered by string comparison"
            )

        return ordered
