"""Definition and citation structuring for the GloBE Lexicon."""

from .citation import CITATION_PREFIXES, format_citation, is_article_number
from .definition import LINE_RULES, LineRule, classify_line, structure_definition
from .serialization import DocumentSerializer

__all__ = [
    "CITATION_PREFIXES",
    "format_citation",
    "is_article_number",
    "LINE_RULES",
    "LineRule",
    "classify_line",
    "structure_definition",
    "DocumentSerializer",
]
