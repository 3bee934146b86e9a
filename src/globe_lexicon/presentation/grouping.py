"""Grouping of consecutive list items into visual lists."""

from dataclasses import dataclass
from typing import List, Tuple, Union

from ..models.document import ListItem, Paragraph, StructuredDocument


@dataclass(frozen=True)
class ListGroup:
    """A maximal run of consecutive list items."""
    items: Tuple[ListItem, ...]


DisplayBlock = Union[Paragraph, ListGroup]


def group_blocks(document: StructuredDocument) -> List[DisplayBlock]:
    """
    Fold runs of consecutive ListItem nodes into ListGroup blocks.

    Paragraphs, empty ones included, end the current run. Every node
    of the document appears exactly once in the output, in order.
    """
    blocks: List[DisplayBlock] = []
    run: List[ListItem] = []

    for node in document:
        if isinstance(node, ListItem):
            run.append(node)
            continue
        if run:
            blocks.append(ListGroup(items=tuple(run)))
            run = []
        blocks.append(node)

    if run:
        blocks.append(ListGroup(items=tuple(run)))

    return blocks
