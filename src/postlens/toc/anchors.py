"""Anchor helpers for renderers.

The outline links to ``#<id>`` targets; whatever renders the article
must put the same ids on its heading elements.  These helpers go through
the same heading parser as the outline builder, so both always agree.
"""

from __future__ import annotations

from postlens.toc.headings import parse_heading

__all__ = ["ANCHORED_LEVELS", "add_heading_anchors", "heading_ids"]

ANCHORED_LEVELS = frozenset({2, 3})


def add_heading_anchors(markdown: str) -> str:
    """Append ``{#id}`` attribute anchors to level-2 and level-3 headings.

    ``## Getting Started`` becomes ``## Getting Started {#getting-started}``.
    Headings that already end in an anchor keep it, so the transformation
    can be applied repeatedly.  Line endings are preserved.
    """
    out: list[str] = []
    for line in markdown.splitlines(keepends=True):
        body = line.splitlines()[0]
        ending = line[len(body) :]

        heading = parse_heading(body)
        if (
            heading is not None
            and heading.level in ANCHORED_LEVELS
            and not heading.explicit
            and heading.id
        ):
            body = f"{body.rstrip()} {{#{heading.id}}}"
        out.append(body + ending)
    return "".join(out)


def heading_ids(markdown: str) -> list[tuple[int, str, str]]:
    """List ``(level, text, id)`` for every ATX heading, h1 through h6."""
    ids: list[tuple[int, str, str]] = []
    for line in markdown.splitlines():
        heading = parse_heading(line)
        if heading is not None:
            ids.append((heading.level, heading.text, heading.id))
    return ids
