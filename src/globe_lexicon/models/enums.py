"""Enumerations for the GloBE Lexicon."""

from enum import Enum
from typing import Optional


class SourceFamily(Enum):
    """Legal text families; each family shares one citation style."""
    MODELE = "modele"
    DIRECTIVE = "directive"
    CGI = "cgi"


class SourceDescriptor(Enum):
    """
    The five parallel sources of the lexicon.

    Each member carries its display label, its family and the fixed
    column positions of its term and citation cells in the dataset.
    The definition cell always sits right after the term cell.
    Declaration order is significant: it is the order used for pickers
    and for any deterministic fallback choice between sources.
    """
    MODELE_FR = ("modeleFR", "Modèle (FR)", SourceFamily.MODELE, 1, 0)
    MODELE_EN = ("modeleEN", "Modèle (EN)", SourceFamily.MODELE, 3, 0)
    DIRECTIVE_FR = ("directiveFR", "Directive (FR)", SourceFamily.DIRECTIVE, 6, 5)
    DIRECTIVE_EN = ("directiveEN", "Directive (EN)", SourceFamily.DIRECTIVE, 8, 5)
    CGI = ("cgi", "CGI", SourceFamily.CGI, 11, 10)

    def __init__(
        self,
        key: str,
        label: str,
        family: SourceFamily,
        term_col: int,
        citation_col: int,
    ):
        self.key = key
        self.label = label
        self.family = family
        self.term_col = term_col
        self.citation_col = citation_col

    @property
    def definition_col(self) -> int:
        return self.term_col + 1

    @classmethod
    def from_key(cls, key: str) -> "SourceDescriptor":
        """
        Look up a source by its identifier (e.g. "directiveEN").

        Raises:
            ValueError: If no source uses that identifier.
        """
        source = cls.find(key)
        if source is None:
            valid = [s.key for s in cls]
            raise ValueError(f"Unknown source '{key}', expected one of {valid}")
        return source

    @classmethod
    def find(cls, key: str) -> Optional["SourceDescriptor"]:
        for source in cls:
            if source.key == key:
                return source
        return None


class NodeKind(Enum):
    """Kinds of block nodes produced by the definition structurer."""
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"
