"""Tests for postlens.toc.render — Jinja2 outline rendering."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from postlens.exceptions import RenderError
from postlens.toc.builder import build_toc
from postlens.toc.render import OutlineRenderer

if TYPE_CHECKING:
    from pathlib import Path

DOC = "## Intro\n## Details\n### Setup\n"


@pytest.fixture
def renderer() -> OutlineRenderer:
    return OutlineRenderer()


class TestMarkdown:
    def test_nested_list(self, renderer: OutlineRenderer) -> None:
        out = renderer.render(build_toc(DOC), "md")
        assert out == "- [Intro](#intro)\n- [Details](#details)\n  - [Setup](#setup)\n"

    def test_default_format_is_markdown(self, renderer: OutlineRenderer) -> None:
        assert renderer.render(build_toc(DOC)) == renderer.render(build_toc(DOC), "md")

    def test_empty_outline(self, renderer: OutlineRenderer) -> None:
        assert renderer.render([], "md") == ""


class TestHtml:
    def test_nav_structure(self, renderer: OutlineRenderer) -> None:
        out = renderer.render(build_toc(DOC), "html")
        assert out.startswith('<nav class="toc">')
        assert '<a href="#intro">Intro</a>' in out
        assert '<li><a href="#setup">Setup</a></li>' in out
        assert out.count("<ul>") == 2

    def test_escapes_heading_text(self, renderer: OutlineRenderer) -> None:
        out = renderer.render(build_toc("## A <script> & B"), "html")
        assert "<script>" not in out
        assert "A &lt;script&gt; &amp; B" in out

    def test_custom_css_class(self) -> None:
        out = OutlineRenderer(css_class="outline").render(build_toc(DOC), "html")
        assert '<nav class="outline">' in out

    def test_empty_outline(self, renderer: OutlineRenderer) -> None:
        assert renderer.render([], "html") == ""


class TestJson:
    def test_structure(self, renderer: OutlineRenderer) -> None:
        data = json.loads(renderer.render(build_toc(DOC), "json"))
        assert data == [
            {"id": "intro", "text": "Intro", "level": 2, "children": []},
            {
                "id": "details",
                "text": "Details",
                "level": 2,
                "children": [{"id": "setup", "text": "Setup", "level": 3, "children": []}],
            },
        ]

    def test_empty_outline(self, renderer: OutlineRenderer) -> None:
        assert renderer.render([], "json") == "[]"


class TestErrors:
    def test_unknown_format(self, renderer: OutlineRenderer) -> None:
        with pytest.raises(RenderError, match="Unknown outline format"):
            renderer.render(build_toc(DOC), "rst")

    def test_supported_formats(self) -> None:
        assert OutlineRenderer.supported_formats() == ["html", "json", "md"]


class TestOverrides:
    def test_user_template_takes_precedence(self, tmp_path: Path) -> None:
        (tmp_path / "toc.md.j2").write_text(
            "{% for node in nodes %}* {{ node.text }}\n{% endfor %}", encoding="utf-8"
        )
        out = OutlineRenderer(template_dir=tmp_path).render(build_toc(DOC), "md")
        assert out == "* Intro\n* Details\n"

    def test_missing_override_dir_falls_back(self, tmp_path: Path) -> None:
        renderer = OutlineRenderer(template_dir=tmp_path / "missing")
        assert renderer.render(build_toc(DOC), "md").startswith("- [Intro]")
