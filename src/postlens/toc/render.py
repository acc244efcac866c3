"""Jinja2 rendering of table-of-contents trees.

Renders the output of :func:`~postlens.toc.builder.build_toc` as a nested
markdown list, an HTML ``<nav>`` block, or JSON.  Templates live in
``src/postlens/templates/``; an optional override directory is searched
first.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING

import jinja2

from postlens.exceptions import RenderError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from postlens.types import HeadingNode

__all__ = ["FORMAT_TEMPLATES", "OutlineRenderer"]

logger = logging.getLogger(__name__)

FORMAT_TEMPLATES: dict[str, str] = {
    "md": "toc.md.j2",
    "html": "toc.html.j2",
}


class OutlineRenderer:
    """Render outline trees through Jinja2 templates.

    Template search order:
      1. ``template_dir`` (user overrides, optional)
      2. ``src/postlens/templates/`` (built-in)

    HTML templates are autoescaped, so heading text such as
    ``<script>`` cannot inject markup.

    Args:
        template_dir: Directory whose templates take precedence over the
            built-in ones.
        css_class: Class attribute of the HTML ``<nav>`` element.
    """

    def __init__(self, template_dir: Path | None = None, css_class: str = "toc") -> None:
        from importlib.resources import files

        search_paths: list[str] = []
        if template_dir is not None and template_dir.is_dir():
            search_paths.append(str(template_dir))
            logger.info("User template overrides enabled: %s", template_dir)

        builtin_dir = Path(str(files("postlens") / "templates"))
        if not builtin_dir.is_dir():
            raise RenderError(
                "Built-in template directory not found — installation may be corrupted"
            )
        search_paths.append(str(builtin_dir))

        self._css_class = css_class
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(search_paths),
            autoescape=jinja2.select_autoescape(
                enabled_extensions=("html.j2",), default_for_string=False
            ),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, nodes: Sequence[HeadingNode], fmt: str = "md") -> str:
        """Render an outline in the given format.

        Args:
            nodes: Top-level heading nodes.
            fmt: ``"md"``, ``"html"`` or ``"json"``.

        Returns:
            Rendered outline; empty outlines render as an empty string
            (``"[]"`` for JSON).

        Raises:
            RenderError: If the format is unknown or the template fails.
        """
        data = [asdict(node) for node in nodes]

        if fmt == "json":
            return json.dumps(data, indent=2, ensure_ascii=False)

        if fmt not in FORMAT_TEMPLATES:
            supported = ", ".join(sorted([*FORMAT_TEMPLATES, "json"]))
            raise RenderError(f"Unknown outline format: {fmt!r}. Supported formats: {supported}")

        template_name = FORMAT_TEMPLATES[fmt]
        try:
            template = self._env.get_template(template_name)
        except jinja2.TemplateNotFound as e:
            raise RenderError(f"Template not found: {template_name}") from e

        try:
            return template.render(nodes=data, css_class=self._css_class)
        except jinja2.TemplateError as e:
            raise RenderError(f"Failed to render template {template_name}: {e}") from e

    @staticmethod
    def supported_formats() -> list[str]:
        """List all supported output formats."""
        return sorted([*FORMAT_TEMPLATES, "json"])
