"""CSV dataset loader.

The lexicon dataset is a spreadsheet export: a fixed block of header
rows followed by one glossary line per row. Blank lines are skipped
before the header block is counted, so a leading empty line does not
eat into the data.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, List

from ..interfaces.loader import IRecordLoader
from ..models.glossary import Row
from .exceptions import (
    DatasetCorruptedError,
    DatasetFormatError,
    DatasetNotFoundError,
    DatasetUnreadableError,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADER_ROWS = 3
DEFAULT_MIN_COLUMNS = 13


class CSVRecordLoader(IRecordLoader):
    """
    Loads lexicon rows from a delimited text file.

    In strict mode a data row shorter than `min_columns` aborts the load
    with DatasetFormatError. Otherwise the row is kept as is, missing
    cells are read as absent by the table builder, and a warning is
    logged.
    """

    def __init__(
        self,
        encoding: str = "utf-8-sig",
        delimiter: str = ",",
        header_rows: int = DEFAULT_HEADER_ROWS,
        min_columns: int = DEFAULT_MIN_COLUMNS,
        strict_columns: bool = True,
    ):
        self.encoding = encoding
        self.delimiter = delimiter
        self.header_rows = header_rows
        self.min_columns = min_columns
        self.strict_columns = strict_columns

    def load(self, file_path: str) -> List[Row]:
        path = Path(file_path)

        if not path.exists():
            raise DatasetNotFoundError(
                message="Dataset file not found",
                file_path=str(file_path),
            )

        # newline="" leaves carriage returns inside quoted cells to the csv reader
        try:
            with open(path, encoding=self.encoding, newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise DatasetCorruptedError(
                message=f"Dataset is not valid {self.encoding}: {e.reason}",
                file_path=str(file_path),
                location=f"byte {e.start}",
                details={"encoding": self.encoding},
            ) from e
        except OSError as e:
            raise DatasetUnreadableError(
                message=f"Dataset cannot be read: {e.strerror or e}",
                file_path=str(file_path),
                details={"errno": e.errno},
            ) from e

        rows = self.parse_text(text, file_path=str(file_path))
        logger.info(f"Loaded {len(rows)} data rows from: {file_path}")
        return rows

    def parse_text(self, text: str, file_path: str = "") -> List[Row]:
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=self.delimiter)

        try:
            rows = [row for row in reader if not self._is_blank(row)]
        except csv.Error as e:
            raise DatasetCorruptedError(
                message=f"Malformed CSV content: {e}",
                file_path=file_path or None,
                location=f"line {reader.line_num}",
            ) from e

        data_rows = rows[self.header_rows:]
        self._check_columns(data_rows, file_path)
        return data_rows

    def _check_columns(self, rows: Iterable[Row], file_path: str) -> None:
        """Enforce the minimum row width, or warn about short rows."""
        for index, row in enumerate(rows, start=1):
            if len(row) >= self.min_columns:
                continue

            if self.strict_columns:
                raise DatasetFormatError(
                    message=(
                        f"Expected at least {self.min_columns} columns, "
                        f"found {len(row)}"
                    ),
                    file_path=file_path or None,
                    location=f"data row {index}",
                    details={
                        "expected_columns": self.min_columns,
                        "actual_columns": len(row),
                    },
                )

            logger.warning(
                f"Data row {index} has {len(row)} columns "
                f"(expected {self.min_columns}); missing cells read as empty"
            )

    @staticmethod
    def _is_blank(row: Row) -> bool:
        return len(row) == 0 or (len(row) == 1 and row[0] == "")
