"""Heading text → anchor identifier.

This is the one function a renderer must share with the outline builder:
an anchor only resolves if both sides slugify the heading identically.
"""

from __future__ import annotations

import re

__all__ = ["slugify"]

_SPECIAL_RE = re.compile(r"[^\w\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")


def slugify(text: str) -> str:
    """Convert heading text to a URL-fragment-safe slug.

    ``"Getting Started: Part 2!"`` → ``"getting-started-part-2"``.

    Total and idempotent: ``slugify(slugify(x)) == slugify(x)``.
    Slugs are not made unique; two identical headings share an id.
    """
    slug = _SPECIAL_RE.sub("", text.lower())
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")
