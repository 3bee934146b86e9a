"""Definition text structuring.

Raw definitions are loosely formatted text where each line is either a
plain paragraph or a list entry introduced by a marker:

    a) lettered item        -> level 1
    12) numbered item       -> level 1
    iv) roman-numeral item  -> level 2

Lines are classified one at a time with no memory of their neighbours,
by walking LINE_RULES in order and keeping the first rule that matches.
The lettered rule is listed before the roman-numeral rule, so single
letter markers such as "i)", "v)" or "x)" are level 1 items.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..models.document import BlockNode, ListItem, Paragraph, StructuredDocument


@dataclass(frozen=True)
class LineRule:
    """A list marker pattern and the nesting level it produces."""
    name: str
    pattern: "re.Pattern[str]"
    level: int

    def match(self, line: str) -> Optional[ListItem]:
        """Return the list item for `line`, or None if the marker is absent."""
        m = self.pattern.match(line)
        if m is None:
            return None
        return ListItem(text=line[m.end():], level=self.level)


# Each pattern consumes the marker and any whitespace after it.
LINE_RULES: Tuple[LineRule, ...] = (
    LineRule(name="lettered", pattern=re.compile(r"[a-z]\)\s*"), level=1),
    LineRule(name="numbered", pattern=re.compile(r"[0-9]+\)\s*"), level=1),
    LineRule(name="roman", pattern=re.compile(r"[ivx]+\)\s*"), level=2),
)


def classify_line(line: str) -> BlockNode:
    """Convert a single definition line into its block node."""
    for rule in LINE_RULES:
        item = rule.match(line)
        if item is not None:
            return item
    return Paragraph(text=line)


def structure_definition(raw: Optional[str]) -> StructuredDocument:
    """
    Structure a raw definition into an ordered sequence of block nodes.

    Every line yields exactly one node, empty lines included, and node
    order is line order.

    Args:
        raw: Definition text, possibly None or empty.

    Returns:
        StructuredDocument; empty when `raw` is None or "".
    """
    if not raw:
        return StructuredDocument()

    nodes: List[BlockNode] = [classify_line(line) for line in raw.split("\n")]
    return StructuredDocument(nodes=tuple(nodes))
