"""
Custom Exceptions Module.

This module defines the exceptions raised by the invoice batch extractor.
Fatal errors (configuration, output) abort a run; per-document errors are
caught by the worker pool, counted and logged.

Exception Hierarchy:
    InvoiceBatchError (base)
    ├── ConfigurationError
    │   └── RuleSetError
    ├── InputError
    │   └── UnreadableDocumentError
    └── OutputError
        └── WriteFailedError
"""


class InvoiceBatchError(Exception):
    """
    Base exception for all invoice batch extraction errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(InvoiceBatchError):
    """Raised when settings or command-line options are invalid."""
    pass


class RuleSetError(ConfigurationError):
    """
    Raised when a pattern rule file cannot be turned into a rule set.

    Covers a missing or unreadable file, malformed content, a missing rule
    and a pattern that does not compile.

    Example:
        >>> raise RuleSetError("template.json", "missing rule 'valor'")
    """

    def __init__(self, filepath: str, reason: str = None, rule: str = None):
        message = f"Invalid rule set: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        if rule:
            details["rule"] = rule
        super().__init__(message, details)


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(InvoiceBatchError):
    """Base exception for input handling errors."""
    pass


class UnreadableDocumentError(InputError):
    """Raised when text cannot be extracted from a document."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Unreadable document: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


# =============================================================================
# OUTPUT ERRORS
# =============================================================================

class OutputError(InvoiceBatchError):
    """Base exception for output handling errors."""
    pass


class WriteFailedError(OutputError):
    """Raised when the ordered records cannot be persisted."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to write output file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


# Export all exceptions
__all__ = [
    'InvoiceBatchError',
    'ConfigurationError',
    'RuleSetError',
    'InputError',
    'UnreadableDocumentError',
    'OutputError',
    'WriteFailedError',
]
