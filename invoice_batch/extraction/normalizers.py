"""
Field Normalizers Module.

Small, pure helpers that turn raw regex captures into the values written
to the output. They never validate: malformed input is passed through.
"""

from typing import Optional, Sequence


def normalize_amount(raw: str) -> str:
    """
    Remove thousands separators from an amount.

    Every "." is dropped; the decimal comma is kept as is.

    Example:
        >>> normalize_amount("1.234,56")
        "1234,56"
    """
    return raw.replace(".", "")


def compose_start_date(groups: Sequence[Optional[str]]) -> str:
    """
    Reassemble day, month and year captures into YYYY-MM-DD.

    Args:
        groups: Captured groups in day, month, year order. Groups past
            the third are ignored; a group that did not participate in
            the match is treated as empty.

    Returns:
        "{year}-{month}-{day}", or "" when fewer than three groups exist.

    Example:
        >>> compose_start_date(("26", "10", "2023"))
        "2023-10-26"
        >>> compose_start_date(("26", "10"))
        ""
    """
    if len(groups) < 3:
        return ""
    day, month, year = (g or "" for g in groups[:3])
    return f"{year}-{month}-{day}"


def compose_client_ref(client: Optional[str], registration: Optional[str]) -> str:
    """
    Combine the client name and registration code.

    None means the corresponding pattern did not match.

    Example:
        >>> compose_client_ref("ACME Lda", "AB-12-CD")
        "ACME Lda/AB-12-CD"
        >>> compose_client_ref(None, "AB-12-CD")
        "AB-12-CD"
    """
    if client is not None and registration is not None:
        return f"{client}/{registration}"
    if client is not None:
        return client
    if registration is not None:
        return registration
    return ""
