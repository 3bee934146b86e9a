"""Glossary data models: per-source entries and term records."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

from .enums import SourceDescriptor

Row = List[str]


@dataclass(frozen=True)
class SourceEntry:
    """
    Term, definition and raw citation of one source for one record.

    Cells missing from a short row are None; cells present but blank
    keep their empty string.
    """
    term: Optional[str] = None
    definition: Optional[str] = None
    citation_raw: Optional[str] = None

    @property
    def has_term(self) -> bool:
        return bool(self.term)


@dataclass(frozen=True)
class TermRecord:
    """
    One glossary line: the entry of every source for the same concept.

    All five sources are always present in `entries`. Records whose
    terms are all empty never leave the table builder.
    """
    entries: Mapping[SourceDescriptor, SourceEntry]

    def __post_init__(self):
        missing = [s.key for s in SourceDescriptor if s not in self.entries]
        if missing:
            raise ValueError(f"TermRecord is missing entries for sources: {missing}")
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def entry(self, source: SourceDescriptor) -> SourceEntry:
        return self.entries[source]

    def term(self, source: SourceDescriptor) -> Optional[str]:
        return self.entries[source].term

    @property
    def has_any_term(self) -> bool:
        return any(entry.has_term for entry in self.entries.values())
