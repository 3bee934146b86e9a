"""Term lookup and selection state for the GloBE Lexicon."""

from .selection import (
    SelectionState,
    clear_selection,
    compare_options,
    equivalent_terms,
    filter_indexed_terms,
    filter_terms,
    first_other_source,
    initial_state,
    select_active_source,
    select_compare_source,
    select_record,
    set_search_text,
)

__all__ = [
    "SelectionState",
    "clear_selection",
    "compare_options",
    "equivalent_terms",
    "filter_indexed_terms",
    "filter_terms",
    "first_other_source",
    "initial_state",
    "select_active_source",
    "select_compare_source",
    "select_record",
    "set_search_text",
]
