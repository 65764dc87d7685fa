"""
Extracted Record Data Class.

This module defines the output unit of the pipeline: one invoice's
extracted fields, in the fixed column order used by every output sink.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ExtractedRecord:
    """
    Fields extracted from a single invoice document.

    Every field is a string and defaults to empty; a field that could not
    be matched stays empty rather than becoming None. ``source_file`` is
    metadata for logs and reports and takes no part in equality or in the
    tabular row.

    Attributes:
        invoice_id: Invoice number, e.g. "FT 2023/12345"
        client_ref: Client name and/or registration code
        start_date: Contract start date as YYYY-MM-DD
        amount: Amount with thousands separators removed
        term_months: Contract term in months
        source_file: Document the record was extracted from

    Example:
        >>> record = ExtractedRecord(invoice_id="FT 2023/1001", amount="1234,56")
        >>> record.to_row()
        ['FT 2023/1001', '', '', '1234,56', '']
    """
    invoice_id: str = ""
    client_ref: str = ""
    start_date: str = ""
    amount: str = ""
    term_months: str = ""

    source_file: str = field(default="", compare=False)

    # Tabular field order shared by the CSV and Excel sinks
    FIELD_NAMES = ('invoice_id', 'client_ref', 'start_date', 'amount', 'term_months')

    @property
    def fields(self) -> Dict[str, str]:
        """Extracted fields as an ordered dictionary."""
        return {name: getattr(self, name) for name in self.FIELD_NAMES}

    @property
    def missing_fields(self) -> List[str]:
        """Names of the fields left empty."""
        return [name for name, value in self.fields.items() if not value]

    def to_row(self) -> List[str]:
        """Return the field values in output column order."""
        return [getattr(self, name) for name in self.FIELD_NAMES]

    def to_dict(self) -> Dict[str, str]:
        data = self.fields
        data['source_file'] = self.source_file
        return data

    def __repr__(self) -> str:
        return (
            f"ExtractedRecord("
            f"invoice={self.invoice_id!r}, "
            f"client={self.client_ref!r}, "
            f"missing={len(self.missing_fields)})"
        )
