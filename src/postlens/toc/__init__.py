"""Table of contents — slugs, outline extraction, anchors and rendering."""

from postlens.toc.anchors import add_heading_anchors, heading_ids
from postlens.toc.builder import build_toc
from postlens.toc.headings import Heading, parse_heading
from postlens.toc.render import OutlineRenderer
from postlens.toc.slug import slugify

__all__ = [
    "Heading",
    "OutlineRenderer",
    "add_heading_anchors",
    "build_toc",
    "heading_ids",
    "parse_heading",
    "slugify",
]
