"""
PDF Processor Module.

This module extracts the plain text of digital PDF invoices using
pdfplumber. Text from every page is joined with newlines so that
patterns may span the whole document.

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Union

import pdfplumber

from invoice_batch.utils.logger import get_logger
from invoice_batch.utils.exceptions import UnreadableDocumentError

# Initialize module logger
logger = get_logger(__name__)


class PDFProcessor:
    """
    Plain-text extractor for PDF files.

    Instances hold no per-document state, so a single processor can be
    shared by all worker threads.

    Example:
        >>> processor = PDFProcessor()
        >>> text = processor.extract_text("pdfs/invoice_001.pdf")
    """

    def extract_text(self, filepath: Union[str, Path]) -> str:
        """
        Extract the text of every page of a PDF.

        Args:
            filepath: Path to the PDF file.

        Returns:
            Page texts joined with newlines. Pages without a text layer
            contribute an empty string.

        Raises:
            UnreadableDocumentError: If the file is missing, empty or
                cannot be parsed as a PDF.
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            raise UnreadableDocumentError(str(filepath), "file not found")

        if filepath.stat().st_size == 0:
            raise UnreadableDocumentError(str(filepath), "file is empty")

        try:
            with pdfplumber.open(filepath) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as e:
            raise UnreadableDocumentError(str(filepath), str(e))

        logger.debug(f"Extracted text from {filepath.name} ({len(pages)} page(s))")
        return "\n".join(pages)

