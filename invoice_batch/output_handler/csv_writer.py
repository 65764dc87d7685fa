"""
CSV Writer Module.

Writes ordered extraction records to a CSV file with a fixed header row.

Author: ML Engineering Team
"""

import csv
import io
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from config import get_config
from invoice_batch.utils.logger import get_logger
from invoice_batch.utils.helpers import ensure_directory
from invoice_batch.utils.exceptions import WriteFailedError
from invoice_batch.extraction.record import ExtractedRecord

# Initialize module logger
logger = get_logger(__name__)


class CSVWriter:
    """
    Writes records to CSV.

    Attributes:
        delimiter: Field delimiter
        encoding: File encoding

    Example:
        >>> writer = CSVWriter()
        >>> writer.write(records, "invoices.csv")
    """

    HEADER = ['Fatura', 'Cliente/Matricula', 'Data Inicio', 'Valor', 'Prazo Meses']

    def __init__(
        self,
        delimiter: Optional[str] = None,
        encoding: Optional[str] = None
    ) -> None:
        self.delimiter = delimiter or get_config("output.csv.delimiter", ",")
        self.encoding = encoding or get_config("output.csv.encoding", "utf-8")

    def write(self, records: List[ExtractedRecord], filepath: Union[str, Path]) -> str:
        """
        Write records in the given order.

        Args:
            records: Ordered records.
            filepath: Destination file; parent directories are created.

        Returns:
            Path of the written file.

        Raises:
            WriteFailedError: If the file cannot be written.
        """
        filepath = Path(filepath)

        # Render and encode everything before touching the destination
        buffer = io.StringIO(newline='')
        try:
            writer = csv.writer(buffer, delimiter=self.delimiter)
            writer.writerow(self.HEADER)
            for record in records:
                writer.writerow(record.to_row())
            content = buffer.getvalue().encode(self.encoding)
        except (csv.Error, UnicodeEncodeError, LookupError) as e:
            raise WriteFailedError(str(filepath), str(e))

        temp_path = None
        try:
            ensure_directory(filepath.parent)
            fd, temp_path = tempfile.mkstemp(
                prefix=f".{filepath.name}.", suffix=".tmp", dir=str(filepath.parent)
            )
            with os.fdopen(fd, 'wb') as f:
                f.write(content)
            os.chmod(temp_path, 0o644)
            os.replace(temp_path, filepath)
            temp_path = None
        except OSError as e:
            raise WriteFailedError(str(filepath), str(e))
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.remove(temp_path)

        logger.info(f"Successfully wrote {len(records)} invoices to {filepath}")
        return str(filepath)
