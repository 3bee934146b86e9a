"""Term table construction from loaded rows."""

import logging
from typing import Dict, Iterable, List, Optional

from ..models.enums import SourceDescriptor
from ..models.glossary import Row, SourceEntry, TermRecord

logger = logging.getLogger(__name__)


def _cell(row: Row, index: int) -> Optional[str]:
    return row[index] if index < len(row) else None


def build_source_entry(row: Row, source: SourceDescriptor) -> SourceEntry:
    """Read the term, definition and citation cells of one source."""
    return SourceEntry(
        term=_cell(row, source.term_col),
        definition=_cell(row, source.definition_col),
        citation_raw=_cell(row, source.citation_col),
    )


def build_term_record(row: Row) -> Optional[TermRecord]:
    """
    Build the TermRecord of a data row.

    Returns:
        The record, or None when no source has a term in this row.
    """
    entries: Dict[SourceDescriptor, SourceEntry] = {
        source: build_source_entry(row, source) for source in SourceDescriptor
    }
    record = TermRecord(entries=entries)
    if not record.has_any_term:
        return None
    return record


def build_term_table(rows: Iterable[Row]) -> List[TermRecord]:
    """
    Build the in-memory term table, keeping input order.

    Rows without a term in any source are dropped.
    """
    table: List[TermRecord] = []
    dropped = 0

    for row in rows:
        record = build_term_record(row)
        if record is None:
            dropped += 1
            continue
        table.append(record)

    if dropped:
        logger.info(f"Dropped {dropped} rows without any term")

    return table
