"""FastAPI application for the GloBE Lexicon.

This module exposes the lexicon over HTTP: a JSON API for sources,
term search and record details, plus the HTML lookup page.

Usage (from project root, after installing fastapi and uvicorn):

    GLOBE_LEXICON_DATASET=data/globeLexicon.csv \
        uvicorn globe_lexicon.api.app:app --reload

The dataset is loaded on first use. A failed load is reported on every
request (HTTP 503 on JSON routes, a "no data" page on /) and is not
retried.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse

from ..config.config_manager import ConfigurationManager
from ..config.models import ConfigurationError
from ..lookup.selection import (
    SelectionState,
    equivalent_terms,
    filter_indexed_terms,
    select_active_source,
    select_compare_source,
    select_record,
    set_search_text,
)
from ..models.enums import SourceDescriptor
from ..models.glossary import TermRecord
from ..pipeline import LexiconPipeline
from ..presentation.view_renderer import LexiconViewRenderer
from ..structuring.citation import format_citation
from ..structuring.definition import structure_definition
from ..structuring.serialization import DocumentSerializer


logger = logging.getLogger(__name__)

app = FastAPI(title="GloBE Lexicon API", version="0.1.0")

_pipeline: Optional[LexiconPipeline] = None
_renderer = LexiconViewRenderer()


def _build_pipeline() -> LexiconPipeline:
    """Create the pipeline from environment configuration."""
    manager = ConfigurationManager()
    manager.load_from_env()
    logger.info(f"Lexicon dataset: {manager.configuration.dataset_path or '<not configured>'}")
    return LexiconPipeline(config=manager.configuration)


def get_pipeline() -> LexiconPipeline:
    """Return the module pipeline, building it on first use.

    An invalid configuration is logged once and cached as a failed load.
    """
    global _pipeline
    if _pipeline is None:
        try:
            _pipeline = _build_pipeline()
        except ConfigurationError as e:
            logger.error(f"Invalid lexicon configuration: {e}")
            _pipeline = LexiconPipeline.failed(f"Invalid configuration: {e}")
    return _pipeline


def set_pipeline(pipeline: Optional[LexiconPipeline]) -> None:
    """Replace the module pipeline (None restores lazy creation)."""
    global _pipeline
    _pipeline = pipeline


def _require_table() -> list[TermRecord]:
    """Return the loaded table or raise 503 with the load failure."""
    result = get_pipeline().load()
    if not result.success:
        raise HTTPException(
            status_code=503,
            detail={"message": "No data loaded", "errors": result.errors},
        )
    return result.table


def _initial_state() -> SelectionState:
    """Selection state seeded from the configured default sources."""
    config = get_pipeline().config
    return SelectionState(
        active_source=config.active_source,
        compare_source=config.compare_source,
    )


def _parse_source(key: Optional[str], default: SourceDescriptor) -> SourceDescriptor:
    if key is None:
        return default
    try:
        return SourceDescriptor.from_key(key)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _panel(record: TermRecord, source: SourceDescriptor) -> dict[str, Any]:
    entry = record.entry(source)
    return {
        "source": source.key,
        "label": source.label,
        "term": entry.term,
        "citation": format_citation(entry.citation_raw, source),
        "definition": DocumentSerializer.to_dict(structure_definition(entry.definition)),
    }


@app.get("/api/sources")
async def list_sources() -> JSONResponse:
    """List the five sources in picker order."""
    return JSONResponse(
        status_code=200,
        content=[{"id": s.key, "label": s.label} for s in SourceDescriptor],
    )


@app.get("/api/terms")
async def search_terms(
    source: Optional[str] = Query(None, description="Source to search in"),
    q: str = Query("", description="Case-insensitive substring"),
) -> JSONResponse:
    """Search terms of one source."""
    active = _parse_source(source, _initial_state().active_source)
    table = _require_table()

    matches = filter_indexed_terms(table, active, q)
    return JSONResponse(
        status_code=200,
        content={
            "source": active.key,
            "query": q,
            "count": len(matches),
            "terms": [
                {"index": index, "term": record.term(active)}
                for index, record in matches
            ],
        },
    )


@app.get("/api/terms/{index}")
async def get_term(
    index: int,
    source: Optional[str] = Query(None),
    compare: Optional[str] = Query(None),
) -> JSONResponse:
    """Return one record with its equivalents and both definition panels.

    When `compare` is omitted or equals `source`, the comparison falls
    back to the first other source.
    """
    table = _require_table()
    if not 0 <= index < len(table):
        raise HTTPException(status_code=404, detail=f"No term at index {index}")

    state = _initial_state()
    state = select_active_source(state, _parse_source(source, state.active_source))
    compare_source = _parse_source(compare, state.compare_source)
    if compare_source is not state.active_source:
        state = select_compare_source(state, compare_source)

    record = table[index]
    return JSONResponse(
        status_code=200,
        content={
            "index": index,
            "source": state.active_source.key,
            "compare": state.compare_source.key,
            "equivalents": [
                {"source": s.key, "label": s.label, "term": term}
                for s, term in equivalent_terms(record, state.active_source)
            ],
            "primary": _panel(record, state.active_source),
            "comparison": _panel(record, state.compare_source),
        },
    )


@app.get("/", response_class=HTMLResponse)
async def lookup_page(
    source: Optional[str] = None,
    compare: Optional[str] = None,
    q: str = "",
    index: Optional[int] = None,
) -> HTMLResponse:
    """Render the lookup page for the given selection."""
    state = _initial_state()
    state = select_active_source(state, _parse_source(source, state.active_source))
    if compare is not None:
        compare_source = _parse_source(compare, state.compare_source)
        if compare_source is not state.active_source:
            state = select_compare_source(state, compare_source)
    state = set_search_text(state, q)

    result = get_pipeline().load()
    load_error = None if result.success else "; ".join(result.errors)
    table = result.table

    if index is not None and 0 <= index < len(table):
        state = select_record(state, index)

    html = _renderer.render_page(state, table, load_error=load_error)
    return HTMLResponse(status_code=200, content=html)
