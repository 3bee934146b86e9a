"""View rendering for the side-by-side lexicon page."""

from typing import Dict, List, Optional, Sequence
from urllib.parse import urlencode
from jinja2 import Environment, FileSystemLoader, select_autoescape
import os

from ..lookup.selection import (
    SelectionState,
    compare_options,
    equivalent_terms,
    filter_indexed_terms,
)
from ..models.document import ListItem
from ..models.enums import SourceDescriptor
from ..models.glossary import TermRecord
from ..structuring.citation import format_citation
from ..structuring.definition import structure_definition
from .grouping import ListGroup, group_blocks


class LexiconViewRenderer:
    """
    Renders the lexicon lookup page and definition fragments.

    Uses Jinja2 templates with autoescaping, so definition text is always
    emitted as text and never as markup.
    """

    def __init__(self, template_dir: Optional[str] = None):
        """
        Initialize the view renderer.

        Args:
            template_dir: Directory containing Jinja2 templates.
                         If not provided, uses the bundled templates.
        """
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "templates")

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(['html', 'xml'])
        )

    def render_definition(self, raw: Optional[str]) -> str:
        """Render one raw definition as an HTML fragment."""
        template = self.env.get_template('definition.html')
        return template.render(blocks=self._prepare_blocks(raw))

    def render_page(
        self,
        state: SelectionState,
        table: Sequence[TermRecord],
        load_error: Optional[str] = None,
    ) -> str:
        """
        Render the full lookup page for a selection state.

        Args:
            state: Current selection.
            table: Loaded term table (may be empty).
            load_error: Load failure to report instead of the results.

        Returns:
            HTML string for the page.
        """
        results = []
        if load_error is None:
            results = self._prepare_results(state, table)

        record = state.selected_record(table)
        detail = None
        if record is not None:
            detail = {
                'equivalents': [
                    {'label': source.label, 'term': term}
                    for source, term in equivalent_terms(record, state.active_source)
                ],
                'primary': self._prepare_panel(record, state.active_source),
                'comparison': self._prepare_panel(record, state.compare_source),
                'compare_options': [
                    {'id': source.key, 'label': source.label}
                    for source in compare_options(state.active_source)
                ],
            }

        template = self.env.get_template('lexicon.html')
        return template.render(
            sources=[{'id': s.key, 'label': s.label} for s in SourceDescriptor],
            active_source=state.active_source.key,
            compare_source=state.compare_source.key,
            search_text=state.search_text,
            selected_index=state.selected_index,
            results=results,
            detail=detail,
            load_error=load_error,
        )

    def _prepare_blocks(self, raw: Optional[str]) -> List[Dict]:
        """Convert a raw definition to template-friendly blocks."""
        blocks = []
        for block in group_blocks(structure_definition(raw)):
            if isinstance(block, ListGroup):
                blocks.append({
                    'type': 'list',
                    'list_items': [self._prepare_item(item) for item in block.items],
                })
            else:
                blocks.append({'type': 'paragraph', 'text': block.text})
        return blocks

    @staticmethod
    def _prepare_item(item: ListItem) -> Dict:
        return {'text': item.text, 'level': item.level}

    def _prepare_panel(self, record: TermRecord, source: SourceDescriptor) -> Dict:
        """Convert one source entry to a definition panel."""
        entry = record.entry(source)
        return {
            'id': source.key,
            'label': source.label,
            'term': entry.term or '',
            'citation': format_citation(entry.citation_raw, source),
            'blocks': self._prepare_blocks(entry.definition),
        }

    def _prepare_results(
        self,
        state: SelectionState,
        table: Sequence[TermRecord],
    ) -> List[Dict]:
        """Convert matching records to result links."""
        return [
            {
                'index': index,
                'term': record.term(state.active_source),
                'href': '/?' + urlencode({
                    'source': state.active_source.key,
                    'compare': state.compare_source.key,
                    'q': state.search_text,
                    'index': index,
                }),
                'selected': index == state.selected_index,
            }
            for index, record in filter_indexed_terms(
                table, state.active_source, state.search_text
            )
        ]
