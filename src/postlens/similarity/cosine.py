"""Cosine similarity over term-frequency vectors.

Scores two texts by the angle between their token-count vectors:
1.0 for identical term distributions, 0.0 for no shared terms.
No embedder or model involved — fully deterministic.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import TYPE_CHECKING

from postlens.similarity.tokenize import tokenize

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = ["cosine_similarity", "similarity", "term_frequencies"]


def term_frequencies(tokens: Iterable[str]) -> Counter[str]:
    """Count occurrences of each token."""
    return Counter(tokens)


def cosine_similarity(tf_a: Mapping[str, int], tf_b: Mapping[str, int]) -> float:
    """Cosine of the angle between two term-frequency vectors.

    The union of both vocabularies is walked once in sorted order, so the
    three sums are accumulated in the same order whichever argument comes
    first.  That keeps ``cosine_similarity(a, b) == cosine_similarity(b, a)``
    bit for bit.

    Args:
        tf_a: Term counts for the first text.
        tf_b: Term counts for the second text.

    Returns:
        Score in ``[0.0, 1.0]``; ``0.0`` when either vector is empty.
    """
    if not tf_a or not tf_b:
        return 0.0

    dot = 0
    sq_a = 0
    sq_b = 0
    for term in sorted(tf_a.keys() | tf_b.keys()):
        f_a = tf_a.get(term, 0)
        f_b = tf_b.get(term, 0)
        dot += f_a * f_b
        sq_a += f_a * f_a
        sq_b += f_b * f_b

    # Unreachable after the emptiness check unless counts are zero.
    if sq_a == 0 or sq_b == 0:
        return 0.0

    # sqrt(sq_a * sq_b) == |a| * |b|; taking one root keeps A·A / |A|² at exactly 1.0
    return min(dot / math.sqrt(sq_a * sq_b), 1.0)


def similarity(text_a: str, text_b: str) -> float:
    """Cosine similarity between two raw texts.

    Both texts go through :func:`~postlens.similarity.tokenize.tokenize`
    first.  Empty or all-stop-word input scores ``0.0``.
    """
    return cosine_similarity(
        term_frequencies(tokenize(text_a)),
        term_frequencies(tokenize(text_b)),
    )
