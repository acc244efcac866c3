"""Markdown post loader.

Reads blog posts from markdown files into :class:`~postlens.types.Document`
records, taking ``id``, ``title``, ``slug`` and ``excerpt`` from YAML
front-matter when present.

Ranking itself never touches the filesystem; this module only feeds the
CLI and callers that keep posts as files.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import yaml

from postlens.exceptions import CorpusError
from postlens.toc.slug import slugify
from postlens.types import Document

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ["MAX_FILE_SIZE", "MARKDOWN_EXTENSIONS", "load_corpus", "load_document"]

logger = logging.getLogger(__name__)

MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10 MB

MARKDOWN_EXTENSIONS: frozenset[str] = frozenset({".md", ".markdown"})

# First markdown heading, any level, for title extraction
_HEADING_RE = re.compile(r"^#{1,6}\s+(.+)", re.MULTILINE)


def load_document(path: Path) -> Document:
    """Load one markdown post.

    Title priority: front-matter ``title`` > first heading > filename stem.
    Slug priority: front-matter ``slug`` > slugified filename stem.
    Id priority: front-matter ``id`` > slug.

    Raises:
        CorpusError: If the file is missing, too large, unreadable, or has
            malformed front-matter.
    """
    if not path.exists():
        raise CorpusError(f"Post file not found: {path}")

    if not path.is_file():
        raise CorpusError(f"Not a file: {path}")

    _check_file_size(path, MAX_FILE_SIZE)

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning("UTF-8 decode failed for %s, retrying with replacement", path.name)
        raw = path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        raise CorpusError(f"Cannot read post file {path.name}: {e}") from e

    # Strip BOM if present
    if raw.startswith("\ufeff"):
        raw = raw[1:]

    frontmatter, body = _split_frontmatter(raw)
    meta = _parse_frontmatter(frontmatter, path) if frontmatter is not None else {}
    body = body.strip()

    slug = meta.get("slug") or slugify(path.stem)
    doc = Document(
        id=meta.get("id") or slug,
        title=meta.get("title") or _first_heading(body) or path.stem,
        body=body,
        excerpt=meta.get("excerpt"),
        slug=slug,
    )
    logger.debug("Loaded post %s from %s (%d chars)", doc.id, path.name, len(body))
    return doc


def load_corpus(directory: Path) -> list[Document]:
    """Load every markdown post in a directory, sorted by file path.

    Raises:
        CorpusError: If the directory is missing, a post fails to load, or
            two posts share an id.
    """
    if not directory.is_dir():
        raise CorpusError(f"Corpus directory not found: {directory}")

    paths = sorted(
        p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in MARKDOWN_EXTENSIONS
    )

    documents: list[Document] = []
    seen: dict[str, Path] = {}
    for path in paths:
        doc = load_document(path)
        if doc.id in seen:
            raise CorpusError(
                f"Duplicate post id {doc.id!r} in {path.name} and {seen[doc.id].name}"
            )
        seen[doc.id] = path
        documents.append(doc)

    logger.info("Loaded %d post(s) from %s", len(documents), directory)
    return documents


# ── Module-level helpers ────────────────────────────────────────────


def _check_file_size(path: Path, max_size: int) -> None:
    """Validate file size.

    Raises:
        CorpusError: If the file exceeds the size limit.
    """
    file_size = path.stat().st_size
    if file_size > max_size:
        raise CorpusError(
            f"Post file {path.name} ({file_size} bytes) exceeds maximum size ({max_size} bytes)"
        )


def _split_frontmatter(text: str) -> tuple[str | None, str]:
    """Split YAML front-matter from markdown body.

    Front-matter must start with ``---`` on the first line and end with
    a second ``---`` on its own line.

    Returns:
        (frontmatter_text or None, body_text)
    """
    if not text.startswith("---"):
        return None, text

    end_idx = text.find("\n---", 3)
    if end_idx == -1:
        return None, text

    fm_text = text[3:end_idx].strip()
    body_start = end_idx + 4  # len("\n---")
    if body_start < len(text) and text[body_start] == "\n":
        body_start += 1

    return fm_text, text[body_start:]


def _parse_frontmatter(fm_text: str, path: Path) -> dict[str, str]:
    """Parse YAML front-matter text into a dict of string key-value pairs.

    Raises:
        CorpusError: If the YAML is invalid or not a mapping.
    """
    try:
        data = yaml.safe_load(fm_text)
    except yaml.YAMLError as e:
        raise CorpusError(f"Invalid front-matter in {path.name}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CorpusError(f"Front-matter in {path.name} must be a mapping")

    return {str(k): str(v) for k, v in data.items() if v is not None}


def _first_heading(content: str) -> str:
    match = _HEADING_RE.search(content)
    return match.group(1).strip() if match else ""
