"""Presentation layer for the GloBE Lexicon."""

from .grouping import DisplayBlock, ListGroup, group_blocks
from .view_renderer import LexiconViewRenderer

__all__ = [
    "DisplayBlock",
    "ListGroup",
    "group_blocks",
    "LexiconViewRenderer",
]
