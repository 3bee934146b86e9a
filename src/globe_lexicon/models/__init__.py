"""Data models and enums for the GloBE Lexicon."""

from .enums import NodeKind, SourceDescriptor, SourceFamily
from .document import BlockNode, ListItem, Paragraph, StructuredDocument
from .glossary import Row, SourceEntry, TermRecord

__all__ = [
    # Enums
    "NodeKind",
    "SourceDescriptor",
    "SourceFamily",
    # Document models
    "BlockNode",
    "ListItem",
    "Paragraph",
    "StructuredDocument",
    # Glossary models
    "Row",
    "SourceEntry",
    "TermRecord",
]
