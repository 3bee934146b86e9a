"""Lookup and selection state.

The state of one lookup session is an immutable SelectionState value.
Every transition takes a state and returns a new one, and every
transition keeps the active and comparison sources distinct.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from ..models.enums import SourceDescriptor
from ..models.glossary import TermRecord


@dataclass(frozen=True)
class SelectionState:
    """
    Current choices of a lookup session.

    Attributes:
        active_source: Source searched in and shown first.
        compare_source: Source shown in the comparison panel.
        search_text: Case-insensitive substring filter on active terms.
        selected_index: Index of the selected record in the term table.
    """
    active_source: SourceDescriptor = SourceDescriptor.MODELE_FR
    compare_source: SourceDescriptor = SourceDescriptor.MODELE_EN
    search_text: str = ""
    selected_index: Optional[int] = None

    def __post_init__(self):
        if self.active_source is self.compare_source:
            raise ValueError(
                f"Comparison source must differ from active source "
                f"'{self.active_source.key}'"
            )

    def selected_record(self, table: Sequence[TermRecord]) -> Optional[TermRecord]:
        """Resolve the selected record against a term table."""
        if self.selected_index is None:
            return None
        if not 0 <= self.selected_index < len(table):
            return None
        return table[self.selected_index]


def initial_state() -> SelectionState:
    return SelectionState()


def first_other_source(source: SourceDescriptor) -> SourceDescriptor:
    """First source in declaration order that is not `source`."""
    return next(s for s in SourceDescriptor if s is not source)


def select_active_source(state: SelectionState, source: SourceDescriptor) -> SelectionState:
    """
    Make `source` the active source.

    When it collides with the comparison source, the comparison source
    moves to the first other source in declaration order.
    """
    compare = state.compare_source
    if compare is source:
        compare = first_other_source(source)
    return replace(state, active_source=source, compare_source=compare)


def select_compare_source(state: SelectionState, source: SourceDescriptor) -> SelectionState:
    """
    Make `source` the comparison source.

    Raises:
        ValueError: If `source` is the active source.
    """
    if source is state.active_source:
        raise ValueError(
            f"Cannot compare '{source.key}' with itself; pick another source"
        )
    return replace(state, compare_source=source)


def set_search_text(state: SelectionState, text: str) -> SelectionState:
    return replace(state, search_text=text or "")


def select_record(state: SelectionState, index: int) -> SelectionState:
    if index < 0:
        raise ValueError(f"Record index must be non-negative, got {index}")
    return replace(state, selected_index=index)


def clear_selection(state: SelectionState) -> SelectionState:
    return replace(state, selected_index=None)


def filter_terms(
    table: Sequence[TermRecord],
    active_source: SourceDescriptor,
    search_text: str,
) -> List[TermRecord]:
    """
    Records whose active term contains `search_text`, case-insensitively.

    Records with no term cell for the active source are excluded; an
    empty search matches every other record. Table order is kept.
    """
    return [record for _, record in filter_indexed_terms(table, active_source, search_text)]


def filter_indexed_terms(
    table: Sequence[TermRecord],
    active_source: SourceDescriptor,
    search_text: str,
) -> List[Tuple[int, TermRecord]]:
    """Same as filter_terms, paired with each record's table index."""
    needle = (search_text or "").lower()
    results: List[Tuple[int, TermRecord]] = []
    for index, record in enumerate(table):
        term = record.term(active_source)
        if term is None:
            continue
        if needle in term.lower():
            results.append((index, record))
    return results


def equivalent_terms(
    record: TermRecord,
    active_source: SourceDescriptor,
) -> List[Tuple[SourceDescriptor, str]]:
    """Non-empty terms of every other source, in declaration order."""
    return [
        (source, record.term(source))
        for source in SourceDescriptor
        if source is not active_source and record.entry(source).has_term
    ]


def compare_options(active_source: SourceDescriptor) -> List[SourceDescriptor]:
    """Sources that may be picked for comparison."""
    return [s for s in SourceDescriptor if s is not active_source]
