"""Data contracts for postlens.

Frozen dataclasses passed between the ranker, the outline builder and
their callers:
  Document → SimilarityResult | LinkSuggestion
  markdown → HeadingNode tree
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "Document",
    "HeadingNode",
    "LinkSuggestion",
    "SimilarityResult",
]


@dataclass(frozen=True)
class Document:
    """A post as seen by the ranker.

    ``id`` is opaque: it is only compared for equality and copied into
    results.
    """

    id: Any
    title: str
    body: str = ""
    excerpt: str | None = None
    slug: str | None = None

    @property
    def text(self) -> str:
        """Title and body joined for full-text scoring."""
        return f"{self.title} {self.body}"


@dataclass(frozen=True)
class SimilarityResult:
    """A related-post hit: candidate id + cosine score."""

    id: Any
    score: float
    title: str = ""
    slug: str | None = None
    excerpt: str | None = None


@dataclass(frozen=True)
class LinkSuggestion:
    """A link-target hit: candidate id + integer match score."""

    id: Any
    score: int
    title: str = ""
    slug: str | None = None


@dataclass(frozen=True)
class HeadingNode:
    """One entry of a table of contents.

    Level-2 nodes carry their level-3 sub-headings in ``children``;
    level-3 nodes always have an empty ``children``.
    """

    id: str
    text: str
    level: int
    children: tuple[HeadingNode, ...] = ()
