"""Lexical similarity — tokenizer, cosine scorer and ranking policies."""

from postlens.similarity.cosine import cosine_similarity, similarity, term_frequencies
from postlens.similarity.ranking import (
    MIN_SIMILARITY_SCORE,
    PHRASE_MATCH_BONUS,
    find_link_suggestions,
    find_similar,
)
from postlens.similarity.tokenize import STOP_WORDS, tokenize

__all__ = [
    "MIN_SIMILARITY_SCORE",
    "PHRASE_MATCH_BONUS",
    "STOP_WORDS",
    "cosine_similarity",
    "find_link_suggestions",
    "find_similar",
    "similarity",
    "term_frequencies",
    "tokenize",
]
