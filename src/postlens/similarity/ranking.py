"""Ranking policies for related posts and internal-link suggestions.

Two small functions over the shared tokenizer:

- :func:`find_similar` — full-text cosine ranking ("related posts").
  Frequency-sensitive: repeated words weigh more.
- :func:`find_link_suggestions` — title-token overlap with the draft plus
  a bonus when the whole title occurs as a phrase ("link to X").
  Binary membership: each title token counts once per occurrence in the
  title, regardless of how often the draft repeats it.

Both sort stably, so equal scores keep candidate input order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from postlens.similarity.cosine import cosine_similarity, term_frequencies
from postlens.similarity.tokenize import tokenize
from postlens.types import LinkSuggestion, SimilarityResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from postlens.types import Document

__all__ = [
    "DEFAULT_LINK_LIMIT",
    "DEFAULT_SIMILAR_LIMIT",
    "MIN_SIMILARITY_SCORE",
    "PHRASE_MATCH_BONUS",
    "find_link_suggestions",
    "find_similar",
]

logger = logging.getLogger(__name__)

# Scores at or below this are unrelated noise.
MIN_SIMILARITY_SCORE = 0.05

# Added to a link score when the full title appears verbatim in the draft.
PHRASE_MATCH_BONUS = 2

DEFAULT_SIMILAR_LIMIT = 5
DEFAULT_LINK_LIMIT = 5


def find_similar(
    query: Document,
    candidates: Iterable[Document],
    limit: int = DEFAULT_SIMILAR_LIMIT,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> list[SimilarityResult]:
    """Rank candidates by cosine similarity to the query document.

    Title and body are scored together.  A candidate sharing the query's
    id is skipped; a query whose id is ``None`` excludes nothing.

    Args:
        query: The post to find relatives for.
        candidates: Posts to score, in a caller-defined order.
        limit: Maximum number of results.
        min_score: Results must score strictly above this.

    Returns:
        Results sorted by score descending, ties in input order.
    """
    if limit <= 0:
        return []

    query_tf = term_frequencies(tokenize(query.text))
    scored: list[SimilarityResult] = []
    seen = 0

    for doc in candidates:
        if query.id is not None and doc.id == query.id:
            continue
        seen += 1
        score = cosine_similarity(query_tf, term_frequencies(tokenize(doc.text)))
        if score > min_score:
            scored.append(
                SimilarityResult(
                    id=doc.id,
                    score=score,
                    title=doc.title,
                    slug=doc.slug,
                    excerpt=doc.excerpt,
                )
            )

    # list.sort is stable: equal scores keep input order
    scored.sort(key=lambda r: r.score, reverse=True)
    result = scored[:limit]

    logger.debug(
        "Similar documents for %r: %d/%d candidates above %.2f, returning %d",
        query.id,
        len(scored),
        seen,
        min_score,
        len(result),
    )
    return result


def find_link_suggestions(
    content: str,
    candidates: Iterable[Document],
    limit: int = DEFAULT_LINK_LIMIT,
    phrase_bonus: int = PHRASE_MATCH_BONUS,
    exclude_id: Any = None,
) -> list[LinkSuggestion]:
    """Suggest existing posts a draft should link to.

    A candidate's score is the number of its title tokens found in the
    draft, plus ``phrase_bonus`` when its lowercased title occurs as a
    substring of the lowercased draft.  Only titles are compared; bodies
    are ignored.  A candidate with an empty title never earns the phrase
    bonus, even though the empty string is a substring of every draft.

    Args:
        content: Draft text being written.
        candidates: Published posts (only ``id``, ``title`` and ``slug`` are used).
        limit: Maximum number of suggestions.
        phrase_bonus: Score added for a verbatim title match.
        exclude_id: Id of the post being edited, never suggested.

    Returns:
        Suggestions with a positive score, best first, ties in input order.
    """
    if limit <= 0 or not content:
        return []

    content_lower = content.lower()
    content_tokens = set(tokenize(content))
    scored: list[LinkSuggestion] = []

    for doc in candidates:
        if exclude_id is not None and doc.id == exclude_id:
            continue

        match_count = sum(1 for token in tokenize(doc.title) if token in content_tokens)
        title_lower = doc.title.lower()
        phrase = phrase_bonus if title_lower and title_lower in content_lower else 0
        score = match_count + phrase

        if score > 0:
            scored.append(
                LinkSuggestion(id=doc.id, score=score, title=doc.title, slug=doc.slug)
            )

    scored.sort(key=lambda s: s.score, reverse=True)
    result = scored[:limit]

    logger.debug(
        "Link suggestions: %d candidates matched, returning %d",
        len(scored),
        len(result),
    )
    return result
