"""Tokenizer shared by both ranking policies.

Turns free text into index terms: lowercase, punctuation replaced by
spaces, short words and stop words removed.  Pure and total — every
string, including ``""``, yields a (possibly empty) list.
"""

from __future__ import annotations

import re

__all__ = ["MIN_TOKEN_LENGTH", "STOP_WORDS", "tokenize"]

# Tokens must be strictly longer than this.
MIN_TOKEN_LENGTH = 2

# Anything that is not a word character or whitespace becomes a space, so
# "state-of-the-art" splits into words instead of fusing them.
_NON_WORD_RE = re.compile(r"[^\w\s]")

# Function words carrying no topical signal.  Immutable, built at import.
STOP_WORDS: frozenset[str] = frozenset(
    {
        # Articles and conjunctions
        "a",
        "an",
        "the",
        "and",
        "or",
        "but",
        "nor",
        "so",
        # Auxiliaries and modals
        "is",
        "are",
        "was",
        "were",
        "be",
        "been",
        "being",
        "have",
        "has",
        "had",
        "do",
        "does",
        "did",
        "will",
        "would",
        "could",
        "should",
        "may",
        "might",
        "must",
        "shall",
        "can",
        "need",
        "dare",
        "ought",
        "used",
        # Prepositions
        "to",
        "of",
        "in",
        "for",
        "on",
        "with",
        "at",
        "by",
        "from",
        "as",
        "into",
        "through",
        "during",
        "before",
        "after",
        "above",
        "below",
        "between",
        "under",
        "again",
        "further",
        # Adverbs
        "then",
        "once",
        "here",
        "there",
        "when",
        "where",
        "why",
        "how",
        # Quantifiers and determiners
        "all",
        "each",
        "few",
        "more",
        "most",
        "other",
        "some",
        "such",
        "no",
        "not",
        "only",
        "own",
        "same",
        "than",
        "too",
        "very",
        "just",
        "this",
        "that",
        "these",
        "those",
        # Pronouns
        "i",
        "you",
        "your",
        "my",
        "we",
        "our",
        "their",
        "it",
        "its",
        "he",
        "she",
        "they",
        "them",
    }
)


def tokenize(text: str) -> list[str]:
    """Split text into filtered, lowercase index terms.

    Order and repeats are preserved; the cosine scorer counts them,
    the link matcher turns them into a set.

    Args:
        text: Raw text or markdown.

    Returns:
        Tokens longer than two characters that are not stop words.
    """
    if not text:
        return []
    words = _NON_WORD_RE.sub(" ", text.lower()).split()
    return [w for w in words if len(w) > MIN_TOKEN_LENGTH and w not in STOP_WORDS]
