"""Unit tests for lookup filtering and selection state."""

import pytest

from globe_lexicon.lookup.selection import (
    SelectionState,
    clear_selection,
    compare_options,
    equivalent_terms,
    filter_indexed_terms,
    filter_terms,
    initial_state,
    select_active_source,
    select_compare_source,
    select_record,
    set_search_text,
)
from globe_lexicon.models.enums import SourceDescriptor
from globe_lexicon.models.glossary import SourceEntry, TermRecord

MFR = SourceDescriptor.MODELE_FR
MEN = SourceDescriptor.MODELE_EN
DFR = SourceDescriptor.DIRECTIVE_FR
DEN = SourceDescriptor.DIRECTIVE_EN
CGI = SourceDescriptor.CGI


def _make_record(**terms: str) -> TermRecord:
    """Helper to build a record from `source_key=term` pairs."""
    entries = {source: SourceEntry() for source in SourceDescriptor}
    for key, term in terms.items():
        source = SourceDescriptor.from_key(key)
        entries[source] = SourceEntry(term=term, definition=f"Def {term}", citation_raw="1")
    return TermRecord(entries=entries)


@pytest.fixture
def table():
    return [
        _make_record(modeleFR="Entité constitutive", modeleEN="Constituent Entity"),
        _make_record(modeleFR="Groupe", modeleEN="Group", cgi="Groupe"),
        _make_record(modeleEN="Excluded Entity"),
        _make_record(modeleFR="", directiveFR="Entité exclue"),
        _make_record(modeleFR="Impôt complémentaire", directiveEN="Top-up Tax"),
    ]


class TestFilterTerms:
    """Case-insensitive substring filtering."""

    def test_empty_search_returns_every_record_with_a_term_cell(self, table):
        assert filter_terms(table, MFR, "") == [table[0], table[1], table[3], table[4]]

    def test_empty_search_on_fully_populated_source(self):
        records = [_make_record(cgi=f"T{i}") for i in range(4)]
        assert filter_terms(records, CGI, "") == records

    def test_case_insensitive(self, table):
        assert filter_terms(table, MEN, "ENTITY") == [table[0], table[2]]
        assert filter_terms(table, MFR, "groupe") == [table[1]]

    def test_substring_anywhere(self, table):
        assert filter_terms(table, MFR, "compl") == [table[4]]

    def test_accents_are_not_folded(self, table):
        assert filter_terms(table, MFR, "impot") == []
        assert filter_terms(table, MFR, "IMPÔT") == [table[4]]

    def test_absent_terms_never_match(self, table):
        assert filter_terms(table, DEN, "") == [table[4]]

    def test_no_match(self, table):
        assert filter_terms(table, CGI, "xyz") == []

    def test_indexes_refer_to_table_positions(self, table):
        assert [i for i, _ in filter_indexed_terms(table, MEN, "entity")] == [0, 2]


class TestSourceSelection:
    """Active and comparison sources always differ."""

    def test_initial_state(self):
        state = initial_state()
        assert state.active_source is MFR
        assert state.compare_source is MEN
        assert state.search_text == ""
        assert state.selected_index is None

    def test_state_rejects_identical_sources(self):
        with pytest.raises(ValueError):
            SelectionState(active_source=CGI, compare_source=CGI)

    def test_switch_to_unrelated_source_keeps_comparison(self):
        state = select_active_source(initial_state(), CGI)
        assert state.active_source is CGI
        assert state.compare_source is MEN

    def test_switch_to_comparison_source_reassigns_it(self):
        state = select_active_source(initial_state(), MEN)
        assert state.active_source is MEN
        assert state.compare_source is MFR

    def test_reassignment_is_first_other_source(self):
        state = select_compare_source(initial_state(), DEN)
        state = select_active_source(state, DEN)
        assert state.compare_source is MFR

        state = select_compare_source(state, CGI)
        state = select_active_source(state, MFR)
        assert (state.active_source, state.compare_source) == (MFR, CGI)

    @pytest.mark.parametrize("active", list(SourceDescriptor))
    @pytest.mark.parametrize("compare", list(SourceDescriptor))
    def test_invariant_after_any_active_switch(self, active, compare):
        start = SelectionState(
            active_source=next(s for s in SourceDescriptor if s is not compare),
            compare_source=compare,
        )
        state = select_active_source(start, active)
        assert state.active_source is active
        assert state.active_source is not state.compare_source

    def test_compare_with_active_rejected(self):
        with pytest.raises(ValueError):
            select_compare_source(initial_state(), MFR)

    def test_compare_options_exclude_active(self):
        assert compare_options(DFR) == [MFR, MEN, DEN, CGI]

    def test_transitions_do_not_mutate(self):
        state = initial_state()
        select_active_source(state, MEN)
        assert state.active_source is MFR


class TestSearchAndRecordSelection:
    """Search text and record selection transitions."""

    def test_set_search_text(self):
        state = set_search_text(initial_state(), "Ent")
        assert state.search_text == "Ent"
        assert set_search_text(state, None).search_text == ""

    def test_select_and_clear(self, table):
        state = select_record(initial_state(), 1)
        assert state.selected_record(table) is table[1]
        assert clear_selection(state).selected_record(table) is None

    def test_selection_survives_source_switch(self, table):
        state = select_active_source(select_record(initial_state(), 1), CGI)
        assert state.selected_record(table) is table[1]

    def test_out_of_range_selection_resolves_to_none(self, table):
        state = select_record(initial_state(), 99)
        assert state.selected_record(table) is None

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            select_record(initial_state(), -1)


class TestEquivalentTerms:
    """Equivalent terms list every other source with a term."""

    def test_equivalents_in_declaration_order(self, table):
        assert equivalent_terms(table[1], MFR) == [(MEN, "Group"), (CGI, "Groupe")]

    def test_empty_terms_skipped(self, table):
        assert equivalent_terms(table[3], DFR) == []
