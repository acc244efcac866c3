"""Tests for postlens.types module — data contracts."""

from __future__ import annotations

import dataclasses

import pytest

from postlens.types import Document, HeadingNode, LinkSuggestion, SimilarityResult


class TestDocument:
    def test_frozen(self):
        doc = Document(id="p1", title="Title")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.title = "changed"  # type: ignore[misc]

    def test_defaults(self):
        doc = Document(id="p1", title="Title")
        assert doc.body == ""
        assert doc.excerpt is None
        assert doc.slug is None

    def test_text_joins_title_and_body(self):
        doc = Document(id="p1", title="Widgets", body="are great")
        assert doc.text == "Widgets are great"

    def test_opaque_id(self):
        assert Document(id=("tuple", 1), title="t").id == ("tuple", 1)


class TestResults:
    def test_similarity_result_frozen(self):
        result = SimilarityResult(id="p1", score=0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.score = 1.0  # type: ignore[misc]

    def test_link_suggestion_defaults(self):
        s = LinkSuggestion(id="p1", score=3)
        assert s.title == ""
        assert s.slug is None


class TestHeadingNode:
    def test_frozen(self):
        node = HeadingNode(id="intro", text="Intro", level=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.text = "changed"  # type: ignore[misc]

    def test_children_default_empty(self):
        assert HeadingNode(id="intro", text="Intro", level=2).children == ()

    def test_equality(self):
        a = HeadingNode(id="a", text="A", level=2, children=(HeadingNode("b", "B", 3),))
        b = HeadingNode(id="a", text="A", level=2, children=(HeadingNode("b", "B", 3),))
        assert a == b
