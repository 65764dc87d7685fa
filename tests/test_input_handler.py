"""
Unit tests for document discovery and PDF text extraction.
"""

from unittest.mock import MagicMock, patch

import pytest

from invoice_batch.input_handler import InputHandler, PDFProcessor
from invoice_batch.utils.exceptions import InputError, UnreadableDocumentError


class TestInputHandler:
    """Test cases for InputHandler.discover."""

    def test_directory_listing_sorted(self, tmp_path):
        for name in ("b.pdf", "a.pdf", "c.PDF", "notes.txt"):
            (tmp_path / name).write_bytes(b"%PDF")

        documents = InputHandler().discover(tmp_path)

        assert [d.name for d in documents] == ["a.pdf", "b.pdf", "c.PDF"]

    def test_mixed_case_extensions(self, tmp_path):
        for name in ("a.Pdf", "b.pdf", "c.pDF"):
            (tmp_path / name).write_bytes(b"%PDF")

        documents = InputHandler().discover(tmp_path)

        assert [d.name for d in documents] == ["a.Pdf", "b.pdf", "c.pDF"]

    def test_subdirectories_not_searched(self, tmp_path):
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "inner.pdf").write_bytes(b"%PDF")
        (tmp_path / "outer.pdf").write_bytes(b"%PDF")

        documents = InputHandler().discover(tmp_path)
        assert [d.name for d in documents] == ["outer.pdf"]

    def test_single_file(self, tmp_path):
        document = tmp_path / "invoice.pdf"
        document.write_bytes(b"%PDF")

        assert InputHandler().discover(document) == [document]

    def test_custom_pattern(self, tmp_path):
        (tmp_path / "fatura_1.pdf").write_bytes(b"%PDF")
        (tmp_path / "recibo_1.pdf").write_bytes(b"%PDF")

        documents = InputHandler(pattern="fatura_*.pdf").discover(tmp_path)
        assert [d.name for d in documents] == ["fatura_1.pdf"]

    def test_empty_directory(self, tmp_path):
        assert InputHandler().discover(tmp_path) == []

    def test_missing_input(self, tmp_path):
        with pytest.raises(InputError):
            InputHandler().discover(tmp_path / "missing")


class TestPDFProcessor:
    """Test cases for PDFProcessor.extract_text."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(UnreadableDocumentError) as exc_info:
            PDFProcessor().extract_text(tmp_path / "absent.pdf")
        assert exc_info.value.details["reason"] == "file not found"

    def test_empty_file(self, tmp_path):
        document = tmp_path / "empty.pdf"
        document.write_bytes(b"")

        with pytest.raises(UnreadableDocumentError) as exc_info:
            PDFProcessor().extract_text(document)
        assert exc_info.value.details["reason"] == "file is empty"

    def test_not_a_pdf(self, tmp_path):
        document = tmp_path / "fake.pdf"
        document.write_text("this is not a pdf", encoding='utf-8')

        with pytest.raises(UnreadableDocumentError):
            PDFProcessor().extract_text(document)

    def test_pages_joined(self, tmp_path):
        document = tmp_path / "invoice.pdf"
        document.write_bytes(b"%PDF-1.4")

        pages = [MagicMock(), MagicMock(), MagicMock()]
        pages[0].extract_text.return_value = "Fatura Nº: FT 2023/1"
        pages[1].extract_text.return_value = None
        pages[2].extract_text.return_value = "Prazo: 12 meses"

        pdf = MagicMock()
        pdf.pages = pages
        pdf.__enter__.return_value = pdf

        with patch("invoice_batch.input_handler.pdf_processor.pdfplumber.open", return_value=pdf):
            text = PDFProcessor().extract_text(document)

        assert text == "Fatura Nº: FT 2023/1\n\nPrazo: 12 meses"

    def test_parser_error_wrapped(self, tmp_path):
        document = tmp_path / "invoice.pdf"
        document.write_bytes(b"%PDF-1.4")

        with patch(
            "invoice_batch.input_handler.pdf_processor.pdfplumber.open",
            side_effect=ValueError("broken xref")
        ):
            with pytest.raises(UnreadableDocumentError) as exc_info:
                PDFProcessor().extract_text(document)

        assert "broken xref" in exc_info.value.details["reason"]
