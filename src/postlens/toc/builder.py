"""Two-level table-of-contents extraction from markdown.

Scans ATX headings line by line and nests each ``###`` under the most
recent ``##``:

    ## Intro            → Intro
    ## Details          → Details
    ### Setup           →   └─ Setup

Other heading depths are ignored.  A ``###`` seen before any ``##`` has
no parent and is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from postlens.toc.headings import parse_heading
from postlens.types import HeadingNode

__all__ = ["build_toc"]

logger = logging.getLogger(__name__)


@dataclass
class _Section:
    """Mutable level-2 entry, frozen into a HeadingNode at end of input."""

    id: str
    text: str
    children: list[HeadingNode] = field(default_factory=list)

    def freeze(self) -> HeadingNode:
        return HeadingNode(id=self.id, text=self.text, level=2, children=tuple(self.children))


def build_toc(document: str) -> list[HeadingNode]:
    """Build a nested outline of level-2 and level-3 headings.

    Heading text keeps inline formatting verbatim (``**bold**``, links);
    only the marker, surrounding whitespace and a trailing ``{#id}``
    attribute are removed.  An explicit ``{#id}`` becomes the node id.
    Lines inside fenced code blocks are not special-cased.

    Args:
        document: Markdown source.

    Returns:
        Level-2 nodes in document order, each holding its level-3 children.
    """
    sections: list[_Section] = []
    parent: _Section | None = None
    orphans = 0

    for line in document.splitlines():
        heading = parse_heading(line)
        if heading is None or heading.level not in (2, 3):
            continue

        if heading.level == 2:
            parent = _Section(id=heading.id, text=heading.text)
            sections.append(parent)
        elif parent is not None:
            parent.children.append(HeadingNode(id=heading.id, text=heading.text, level=3))
        else:
            orphans += 1

    if orphans:
        logger.debug("Dropped %d level-3 heading(s) with no level-2 parent", orphans)

    return [section.freeze() for section in sections]
