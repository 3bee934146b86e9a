"""Structured definition models for the GloBE Lexicon."""

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

from .enums import NodeKind


@dataclass(frozen=True)
class Paragraph:
    """A plain line of definition text, kept verbatim."""
    text: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.PARAGRAPH


@dataclass(frozen=True)
class ListItem:
    """
    A list entry extracted from a definition line.

    Level 1 is a lettered or numbered item ("a)", "2)"), level 2 a
    roman-numeral sub-item ("ii)"). The marker itself is not kept.
    """
    text: str
    level: int = 1

    def __post_init__(self):
        if self.level not in (1, 2):
            raise ValueError(f"List item level must be 1 or 2, got {self.level}")

    @property
    def kind(self) -> NodeKind:
        return NodeKind.LIST_ITEM


BlockNode = Union[Paragraph, ListItem]


@dataclass(frozen=True)
class StructuredDocument:
    """
    Ordered block nodes of one definition.

    Node order is the line order of the raw text. Runs of consecutive
    list items are grouped into lists by the presentation layer only.
    """
    nodes: Tuple[BlockNode, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable but always store an immutable tuple
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))

    def __iter__(self) -> Iterator[BlockNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def list_items(self) -> Tuple[ListItem, ...]:
        return tuple(n for n in self.nodes if isinstance(n, ListItem))
