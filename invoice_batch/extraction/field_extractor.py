"""
Field Extractor Module.

Turns the plain text of one invoice into an ExtractedRecord using a
compiled RuleSet. Extraction is a pure function of its inputs: it holds no
state, never raises for unmatched fields and can run in any number of
worker threads at once.

Resolution rules:
    invoice_id   group 1 of ``fatura``
    client_ref   group 1 of ``cliente_matricula`` and/or the fixed
                 registration code pattern, joined with "/"
    start_date   groups 3-2-1 of ``data_inicio``
    amount       group 1 of ``valor`` without "." separators
    term_months  group 1 of ``prazo_meses``
"""

import re
from typing import Optional

from invoice_batch.utils.logger import get_logger
from .normalizers import compose_client_ref, compose_start_date, normalize_amount
from .record import ExtractedRecord
from .rules import RuleSet

# Initialize module logger
logger = get_logger(__name__)

# Vehicle registration code (XX-XX-XX); fixed, not part of the rule file
REGISTRATION_PATTERN = re.compile(r'matricula\s+([A-Z0-9]{2}-[A-Z0-9]{2}-[A-Z0-9]{2})')


def _first_group(pattern: re.Pattern, text: str) -> Optional[str]:
    """
    Return group 1 of the first match.

    None when the pattern does not match or defines no group; an empty
    string when group 1 did not participate in the match.
    """
    match = pattern.search(text)
    if match is None or pattern.groups < 1:
        return None
    return match.group(1) or ""


def extract_record(text: str, rules: RuleSet, source_file: str = "") -> ExtractedRecord:
    """
    Extract invoice fields from document text.

    Each field is resolved independently; a field whose pattern does not
    match is left empty.

    Args:
        text: Plain text of the document.
        rules: Compiled pattern rules.
        source_file: Document path kept on the record as metadata.

    Returns:
        ExtractedRecord, always.

    Example:
        >>> record = extract_record("Valor: 1.234,56", rules)
        >>> record.amount
        "1234,56"
    """
    record = ExtractedRecord(source_file=source_file)

    record.invoice_id = _first_group(rules.fatura, text) or ""

    record.client_ref = compose_client_ref(
        _first_group(rules.cliente_matricula, text),
        _first_group(REGISTRATION_PATTERN, text)
    )

    date_match = rules.data_inicio.search(text)
    if date_match is not None:
        record.start_date = compose_start_date(date_match.groups())

    amount = _first_group(rules.valor, text)
    if amount:
        record.amount = normalize_amount(amount)

    record.term_months = _first_group(rules.prazo_meses, text) or ""

    if record.missing_fields:
        logger.debug(
            f"{source_file or 'document'}: no match for {', '.join(record.missing_fields)}"
        )

    return record
