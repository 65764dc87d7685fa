"""
Excel Exporter Module.

This module writes ordered extraction records to an .xlsx workbook using
openpyxl.

Features:
    - Formatted headers
    - Auto-column width
    - Optional metadata sheet with the source document of each row

Author: ML Engineering Team
"""

from pathlib import Path
from typing import List, Optional, Union

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from config import get_config
from invoice_batch.utils.logger import get_logger
from invoice_batch.utils.helpers import ensure_directory
from invoice_batch.utils.exceptions import WriteFailedError
from invoice_batch.extraction.record import ExtractedRecord

# Initialize module logger
logger = get_logger(__name__)


class ExcelExporter:
    """
    Exports extraction records to Excel format.

    Attributes:
        sheet_name: Title of the data sheet
        include_metadata: Whether to add the metadata sheet

    Example:
        >>> exporter = ExcelExporter()
        >>> filepath = exporter.export(records, "invoices.xlsx")
        >>> print(f"Saved to: {filepath}")
    """

    # Column definitions
    COLUMNS = [
        ('Fatura', 'invoice_id'),
        ('Cliente/Matricula', 'client_ref'),
        ('Data Inicio', 'start_date'),
        ('Valor', 'amount'),
        ('Prazo Meses', 'term_months'),
    ]

    METADATA_COLUMNS = [
        ('Fatura', 'invoice_id'),
        ('Source File', 'source_file'),
        ('Missing Fields', 'missing_fields'),
    ]

    def __init__(
        self,
        sheet_name: Optional[str] = None,
        include_metadata: Optional[bool] = None
    ) -> None:
        """Initialize the Excel exporter with configuration."""
        self.sheet_name = sheet_name or get_config("output.excel.sheet_name", "Faturas")
        self.include_metadata = include_metadata if include_metadata is not None else \
            get_config("output.excel.include_metadata", True)

        logger.debug(f"ExcelExporter initialized (sheet: {self.sheet_name})")

    def export(self, records: List[ExtractedRecord], filepath: Union[str, Path]) -> str:
        """
        Export records to an Excel file, keeping their order.

        Args:
            records: Ordered records.
            filepath: Destination .xlsx file.

        Returns:
            Path to the created Excel file.

        Raises:
            WriteFailedError: If the workbook cannot be saved.
        """
        filepath = Path(filepath)

        try:
            ensure_directory(filepath.parent)

            workbook = openpyxl.Workbook()
            self._create_data_sheet(workbook, records)

            if self.include_metadata:
                self._create_metadata_sheet(workbook, records)

            workbook.save(filepath)

        except Exception as e:
            logger.error(f"Excel export failed: {e}")
            raise WriteFailedError(str(filepath), str(e))

        logger.info(f"Excel file saved: {filepath} ({len(records)} records)")
        return str(filepath)

    def _create_data_sheet(self, workbook, records: List[ExtractedRecord]) -> None:
        """
        Create the main data sheet.

        Args:
            workbook: openpyxl Workbook instance.
            records: Ordered records.
        """
        sheet = workbook.active
        sheet.title = self.sheet_name

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
        header_alignment = Alignment(horizontal="center", vertical="center")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        for col, (header_name, _) in enumerate(self.COLUMNS, 1):
            cell = sheet.cell(row=1, column=col, value=header_name)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = header_alignment
            cell.border = thin_border

        for row_num, record in enumerate(records, 2):
            for col, (_, field_name) in enumerate(self.COLUMNS, 1):
                cell = sheet.cell(row=row_num, column=col, value=getattr(record, field_name))
                cell.border = thin_border

        # Adjust column widths
        for col, (header_name, field_name) in enumerate(self.COLUMNS, 1):
            max_length = max(
                [len(header_name)] + [len(getattr(r, field_name)) for r in records]
            )
            sheet.column_dimensions[get_column_letter(col)].width = min(max_length + 2, 50)

        # Freeze header row
        sheet.freeze_panes = 'A2'

    def _create_metadata_sheet(self, workbook, records: List[ExtractedRecord]) -> None:
        """
        Create a sheet mapping each row to its source document.

        Args:
            workbook: openpyxl Workbook instance.
            records: Ordered records.
        """
        sheet = workbook.create_sheet(title="Metadata")

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="548235", end_color="548235", fill_type="solid")

        for col, (header_name, _) in enumerate(self.METADATA_COLUMNS, 1):
            cell = sheet.cell(row=1, column=col, value=header_name)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")

        for row_num, record in enumerate(records, 2):
            sheet.cell(row=row_num, column=1, value=record.invoice_id)
            sheet.cell(row=row_num, column=2, value=record.source_file)
            sheet.cell(row=row_num, column=3, value=", ".join(record.missing_fields))

        for col in range(1, len(self.METADATA_COLUMNS) + 1):
            sheet.column_dimensions[get_column_letter(col)].width = 30
