"""ATX heading recognition shared by the outline builder and anchor helpers.

Both sides of the anchor contract must agree on which lines are headings
and which id each one gets, so they parse through :func:`parse_heading`
on lines produced by ``str.splitlines``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from postlens.toc.slug import slugify

__all__ = ["Heading", "parse_heading"]

# "#"-"######", whitespace, text, optional trailing "{#id}" attribute.
_HEADING_RE = re.compile(r"^(#{1,6})\s+(\S.*?)(?:\s+\{#([^}\s]+)\})?\s*$")


@dataclass(frozen=True)
class Heading:
    """A heading line: marker depth, text, and the id it renders with.

    ``explicit`` is set when the line carried its own ``{#id}``.
    """

    level: int
    text: str
    id: str
    explicit: bool = False


def parse_heading(line: str) -> Heading | None:
    """Parse a single line (without its line ending) as an ATX heading."""
    match = _HEADING_RE.match(line)
    if match is None:
        return None

    text, custom_id = match.group(2), match.group(3)
    if custom_id:
        return Heading(level=len(match.group(1)), text=text, id=custom_id, explicit=True)
    return Heading(level=len(match.group(1)), text=text, id=slugify(text))
