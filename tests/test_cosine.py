"""Tests for postlens.similarity.cosine — term-frequency cosine scoring."""

from __future__ import annotations

import math

import pytest

from postlens.similarity.cosine import cosine_similarity, similarity, term_frequencies

SAMPLES = [
    "Widgets are great tools for building things.",
    "Learn the basics of widgets and tools.",
    "Completely different subject matter here.",
    "widgets widgets widgets gadgets",
    "Gadgets, gizmos and widgets: a buyer's guide",
    "",
    "the a an",
]


class TestTermFrequencies:
    def test_counts_repeats(self) -> None:
        tf = term_frequencies(["zebra", "apple", "zebra"])
        assert tf == {"zebra": 2, "apple": 1}

    def test_empty(self) -> None:
        assert term_frequencies([]) == {}


class TestCosineSimilarity:
    def test_hand_computed_value(self) -> None:
        # dot = 2*1 + 1*1 = 3; |a| = sqrt(5); |b| = sqrt(2)
        a = {"widgets": 2, "tools": 1}
        b = {"widgets": 1, "tools": 1}
        assert cosine_similarity(a, b) == pytest.approx(3 / math.sqrt(10))

    def test_disjoint_vectors(self) -> None:
        assert cosine_similarity({"alpha": 3}, {"beta": 1}) == 0.0

    def test_empty_vector(self) -> None:
        assert cosine_similarity({}, {"alpha": 1}) == 0.0
        assert cosine_similarity({"alpha": 1}, {}) == 0.0

    def test_zero_counts_guarded(self) -> None:
        """Vectors holding only zero counts have no magnitude."""
        assert cosine_similarity({"alpha": 0}, {"alpha": 0}) == 0.0

    def test_scale_invariant(self) -> None:
        assert cosine_similarity({"a1": 1, "b1": 2}, {"a1": 3, "b1": 6}) == pytest.approx(1.0)


class TestSimilarity:
    def test_self_similarity_is_one(self) -> None:
        for text in SAMPLES[:5]:
            assert similarity(text, text) == 1.0

    def test_symmetric(self) -> None:
        for a in SAMPLES:
            for b in SAMPLES:
                assert similarity(a, b) == similarity(b, a)

    def test_bounded(self) -> None:
        for a in SAMPLES:
            for b in SAMPLES:
                assert 0.0 <= similarity(a, b) <= 1.0

    def test_zero_on_empty(self) -> None:
        assert similarity("", "anything at all") == 0.0
        assert similarity("anything at all", "") == 0.0

    def test_zero_on_stop_words_only(self) -> None:
        assert similarity("the a an", "is was were") == 0.0

    def test_zero_without_shared_terms(self) -> None:
        assert similarity("widgets gadgets", "completely unrelated") == 0.0

    def test_deterministic(self) -> None:
        first = similarity(SAMPLES[0], SAMPLES[1])
        for _ in range(20):
            assert similarity(SAMPLES[0], SAMPLES[1]) == first

    def test_frequency_sensitive(self) -> None:
        """Repeating a shared term moves the score."""
        once = similarity("widgets gadgets", "widgets")
        twice = similarity("widgets widgets gadgets", "widgets")
        assert twice > once

    def test_ignores_case_and_punctuation(self) -> None:
        assert similarity("Widgets, Tools!", "widgets tools") == 1.0
