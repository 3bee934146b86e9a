"""Citation label formatting.

Raw citation cells are either a bare article number ("3.2.1", "1 bis")
or an already complete reference. Bare article numbers are expanded
with the citation prefix of the source's family; anything else is
returned untouched.
"""

from typing import Dict, Optional

from ..models.enums import SourceDescriptor, SourceFamily

CITATION_PREFIXES: Dict[SourceFamily, str] = {
    SourceFamily.MODELE: "Modèle de règles, art. ",
    SourceFamily.DIRECTIVE: "Dir. GloBE, art. ",
    SourceFamily.CGI: "CGI, art. ",
}

_ASCII_DIGITS = "0123456789"


def is_article_number(citation_raw: str) -> bool:
    """Check whether a raw citation starts with an ASCII decimal digit."""
    return bool(citation_raw) and citation_raw[0] in _ASCII_DIGITS


def format_citation(citation_raw: Optional[str], source: SourceDescriptor) -> str:
    """
    Build the human-readable citation label for a source entry.

    Args:
        citation_raw: Raw citation cell, possibly None or empty.
        source: Source the citation belongs to.

    Returns:
        "" for a missing citation, the family-prefixed label for an
        article number, the raw value otherwise.
    """
    if not citation_raw:
        return ""

    if is_article_number(citation_raw):
        return f"{CITATION_PREFIXES[source.family]}{citation_raw}"

    return citation_raw
