"""Custom exception hierarchy for postlens.

The scoring and outline functions never raise on text input; these
errors belong to the layers that touch files and templates.
"""

__all__ = [
    "ConfigError",
    "CorpusError",
    "PostlensError",
    "RenderError",
]


class PostlensError(Exception):
    """Base exception for all postlens errors."""


class ConfigError(PostlensError):
    """Raised when configuration loading or validation fails."""


class CorpusError(PostlensError):
    """Raised when documents cannot be loaded from disk."""


class RenderError(PostlensError):
    """Raised when an outline cannot be rendered."""
