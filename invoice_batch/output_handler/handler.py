"""
Main Output Handler Module.

This module provides the OutputHandler class that persists the ordered
records of a run, choosing the writer from the output file suffix.

Author: ML Engineering Team
"""

from pathlib import Path
from typing import List, Optional, Union

from invoice_batch.utils.logger import get_logger
from invoice_batch.utils.helpers import get_file_extension
from invoice_batch.utils.exceptions import WriteFailedError
from invoice_batch.extraction.record import ExtractedRecord
from .csv_writer import CSVWriter
from .excel_exporter import ExcelExporter

# Initialize module logger
logger = get_logger(__name__)


class OutputHandler:
    """
    Output sink for extraction results.

    Supported formats:
        - .csv: CSVWriter
        - .xlsx: ExcelExporter

    The whole result set is written in one call; there is no partial or
    incremental output.

    Example:
        >>> handler = OutputHandler()
        >>> handler.write(ordered_records, "invoices.csv")
        'invoices.csv'
    """

    SUPPORTED_EXTENSIONS = ('.csv', '.xlsx')

    def __init__(
        self,
        csv_writer: Optional[CSVWriter] = None,
        excel_exporter: Optional[ExcelExporter] = None
    ) -> None:
        self._csv_writer = csv_writer
        self._excel_exporter = excel_exporter

    @property
    def csv_writer(self) -> CSVWriter:
        """Get or create the CSV writer."""
        if self._csv_writer is None:
            self._csv_writer = CSVWriter()
        return self._csv_writer

    @property
    def excel_exporter(self) -> ExcelExporter:
        """Get or create the Excel exporter."""
        if self._excel_exporter is None:
            self._excel_exporter = ExcelExporter()
        return self._excel_exporter

    def write(self, records: List[ExtractedRecord], filepath: Union[str, Path]) -> str:
        """
        Persist ordered records.

        Args:
            records: Records in final output order.
            filepath: Destination file (.csv or .xlsx).

        Returns:
            Path of the written file.

        Raises:
            WriteFailedError: If the format is unsupported or writing fails.
        """
        extension = get_file_extension(filepath)

        if extension == '.csv':
            return self.csv_writer.write(records, filepath)
        if extension == '.xlsx':
            return self.excel_exporter.export(records, filepath)

        raise WriteFailedError(
            str(filepath),
            f"unsupported output format '{extension or '(none)'}', "
            f"expected one of {', '.join(self.SUPPORTED_EXTENSIONS)}"
        )
