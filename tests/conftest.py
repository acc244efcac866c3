"""Shared fixtures for postlens tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from postlens.types import Document

if TYPE_CHECKING:
    from pathlib import Path

WIDGETS_POST = """---
id: p1
title: Getting Started with Widgets
slug: getting-started-with-widgets
excerpt: A first look at widgets.
---
Widgets are great tools for building things.
"""

BASICS_POST = """---
id: p2
title: Widget Basics
---
# Widget Basics

Learn the basics of widgets and tools.
"""

UNRELATED_POST = """# Unrelated Topic

Completely different subject matter here.
"""


@pytest.fixture
def widgets_query() -> Document:
    return Document(
        id="p1",
        title="Getting Started with Widgets",
        body="Widgets are great tools for building things.",
    )


@pytest.fixture
def widgets_candidates() -> list[Document]:
    return [
        Document(id="p2", title="Widget Basics", body="Learn the basics of widgets and tools."),
        Document(
            id="p3", title="Unrelated Topic", body="Completely different subject matter here."
        ),
    ]


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """A directory holding three markdown posts (ids p1, p2, unrelated-topic)."""
    posts = tmp_path / "posts"
    posts.mkdir()
    (posts / "widgets.md").write_text(WIDGETS_POST, encoding="utf-8")
    (posts / "basics.md").write_text(BASICS_POST, encoding="utf-8")
    (posts / "Unrelated Topic.md").write_text(UNRELATED_POST, encoding="utf-8")
    (posts / "notes.txt").write_text("not a post", encoding="utf-8")
    return posts
