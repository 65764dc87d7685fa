"""
Main Input Handler Module.

This module provides the InputHandler class that turns an input path into
the list of document jobs for a run.

Usage:
    from invoice_batch.input_handler import InputHandler

    handler = InputHandler()
    documents = handler.discover("./pdfs/")

Classes:
    InputHandler: Document discovery for files and directories
"""

import fnmatch
from pathlib import Path
from typing import List, Optional, Union

from config import get_config
from invoice_batch.utils.logger import get_logger
from invoice_batch.utils.exceptions import InputError

# Initialize module logger
logger = get_logger(__name__)


class InputHandler:
    """
    Discovers the documents to process.

    A directory is listed (non-recursively) and its file names are
    matched against the configured glob pattern ignoring case, so that
    "INVOICE.PDF" and "a.Pdf" are picked up by "*.pdf". A single file is
    accepted as is.

    Attributes:
        pattern: Glob pattern applied to directory inputs

    Example:
        >>> handler = InputHandler()
        >>> files = handler.discover("pdfs")
        >>> print(f"Found {len(files)} documents")
    """

    DEFAULT_PATTERN = "*.pdf"

    def __init__(self, pattern: Optional[str] = None) -> None:
        """
        Initialize the InputHandler.

        Args:
            pattern: Glob pattern for directory inputs. Defaults to
                ``input.pattern`` from configuration.
        """
        self.pattern = pattern or get_config("input.pattern", self.DEFAULT_PATTERN)
        logger.debug(f"InputHandler initialized with pattern: {self.pattern}")

    def _matches(self, name: str) -> bool:
        return fnmatch.fnmatchcase(name.lower(), self.pattern.lower())

    def discover(self, input_path: Union[str, Path]) -> List[Path]:
        """
        List the documents under an input path.

        Args:
            input_path: A document file or a directory of documents.

        Returns:
            Sorted, de-duplicated list of document paths.

        Raises:
            InputError: If the path does not exist.
        """
        path = Path(input_path)

        if not path.exists():
            raise InputError(f"Input path not found: {path}", {"path": str(path)})

        if path.is_file():
            return [path]

        documents = sorted(
            p for p in path.iterdir() if p.is_file() and self._matches(p.name)
        )

        if not documents:
            logger.warning(f"No documents matching '{self.pattern}' found in: {path}")
        else:
            logger.info(f"Found {len(documents)} documents to process in {path}")

        return documents
