"""postlens — content analysis for blog posts."""

__version__ = "0.1.0"
