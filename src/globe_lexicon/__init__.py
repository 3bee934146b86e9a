"""
GloBE Lexicon

A multilingual lookup tool for the GloBE legal glossary: Model rules
(FR/EN), GloBE Directive (FR/EN) and the French tax code side by side.
"""

__version__ = "0.1.0"

# Export main components
from .models.enums import NodeKind, SourceDescriptor, SourceFamily
from .models.document import BlockNode, ListItem, Paragraph, StructuredDocument
from .models.glossary import Row, SourceEntry, TermRecord
from .structuring import (
    DocumentSerializer,
    classify_line,
    format_citation,
    structure_definition,
)
from .loaders import (
    CSVRecordLoader,
    build_term_table,
    LoadError,
    DatasetNotFoundError,
    DatasetUnreadableError,
    DatasetCorruptedError,
    DatasetFormatError,
)
from .lookup import SelectionState, filter_terms
from .pipeline import LexiconPipeline, LoadResult
from .config import (
    ConfigurationManager,
    ConfigurationError,
    LexiconConfig,
    ValidationResult,
)

__all__ = [
    "NodeKind",
    "SourceDescriptor",
    "SourceFamily",
    "BlockNode",
    "ListItem",
    "Paragraph",
    "StructuredDocument",
    "Row",
    "SourceEntry",
    "TermRecord",
    "DocumentSerializer",
    "classify_line",
    "format_citation",
    "structure_definition",
    "CSVRecordLoader",
    "build_term_table",
    "LoadError",
    "DatasetNotFoundError",
    "DatasetUnreadableError",
    "DatasetCorruptedError",
    "DatasetFormatError",
    "SelectionState",
    "filter_terms",
    "LexiconPipeline",
    "LoadResult",
    "ConfigurationManager",
    "ConfigurationError",
    "LexiconConfig",
    "ValidationResult",
]
