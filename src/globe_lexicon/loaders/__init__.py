"""Dataset loading and term table construction for the GloBE Lexicon."""

from .csv_loader import CSVRecordLoader
from .table_builder import build_source_entry, build_term_record, build_term_table
from .exceptions import (
    LoadError,
    DatasetNotFoundError,
    DatasetUnreadableError,
    DatasetCorruptedError,
    DatasetFormatError,
)

__all__ = [
    "CSVRecordLoader",
    "build_source_entry",
    "build_term_record",
    "build_term_table",
    "LoadError",
    "DatasetNotFoundError",
    "DatasetUnreadableError",
    "DatasetCorruptedError",
    "DatasetFormatError",
]
