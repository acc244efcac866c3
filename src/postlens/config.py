"""Configuration system for postlens.

Reads ``postlens.toml`` into typed dataclasses with sensible defaults for
all values.  Only the CLI needs a config file; library callers pass
limits and thresholds as arguments.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, TypeVar

import tomli_w

from postlens.exceptions import ConfigError
from postlens.similarity.ranking import MIN_SIMILARITY_SCORE, PHRASE_MATCH_BONUS

if TYPE_CHECKING:
    from pathlib import Path

_T = TypeVar("_T")

__all__ = [
    "CONFIG_FILE",
    "LinkingConfig",
    "PostlensConfig",
    "RelatedConfig",
    "TocConfig",
    "default_config",
    "load_config",
    "save_config",
]

logger = logging.getLogger(__name__)

CONFIG_FILE = "postlens.toml"


@dataclass
class RelatedConfig:
    """[related] section."""

    limit: int = 4
    min_score: float = MIN_SIMILARITY_SCORE


@dataclass
class LinkingConfig:
    """[linking] section."""

    limit: int = 5
    phrase_bonus: int = PHRASE_MATCH_BONUS


@dataclass
class TocConfig:
    """[toc] section."""

    format: str = "md"
    css_class: str = "toc"
    template_dir: str = ""


@dataclass
class PostlensConfig:
    """Root configuration combining all sections."""

    related: RelatedConfig = field(default_factory=RelatedConfig)
    linking: LinkingConfig = field(default_factory=LinkingConfig)
    toc: TocConfig = field(default_factory=TocConfig)


_SECTIONS: dict[str, type] = {
    "related": RelatedConfig,
    "linking": LinkingConfig,
    "toc": TocConfig,
}

# TOML value types accepted for each annotated field type; bool is rejected separately.
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "int": (int,),
    "float": (int, float),
    "str": (str,),
}


def default_config() -> PostlensConfig:
    """Return a config with all default values."""
    return PostlensConfig()


def _config_to_dict(config: PostlensConfig) -> dict[str, object]:
    """Convert PostlensConfig to a nested dict suitable for TOML serialization."""
    return {name: dict(vars(getattr(config, name))) for name in _SECTIONS}


def save_config(config: PostlensConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as f:
            tomli_w.dump(_config_to_dict(config), f)
        logger.info("Saved config to %s", path)
    except OSError as e:
        logger.error("Failed to save config to %s: %s", path, e)
        raise ConfigError(f"Failed to save config to {path}: {e}") from e


def _load_section(cls: type[_T], name: str, data: object) -> _T:
    """Load a dataclass section from a dict, ignoring unknown keys.

    Raises:
        ConfigError: If the section is not a table or a known key has the
            wrong type.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config section [{name}] must be a table")

    filtered: dict[str, object] = {}
    for f in fields(cls):  # type: ignore[arg-type]
        if f.name not in data:
            continue
        value = data[f.name]
        # Annotations are strings under postponed evaluation: "int", "float", "str".
        expected = _FIELD_TYPES.get(str(f.type))
        if expected is not None and (isinstance(value, bool) or not isinstance(value, expected)):
            raise ConfigError(
                f"Config key [{name}].{f.name} must be {f.type}, got {type(value).__name__}"
            )
        filtered[f.name] = value
    return cls(**filtered)


def load_config(path: Path) -> PostlensConfig:
    """Load configuration from a TOML file.

    Missing sections or keys get default values.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = tomllib.loads(path.read_bytes().decode("utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    config = PostlensConfig()
    for name, cls in _SECTIONS.items():
        if name in data:
            setattr(config, name, _load_section(cls, name, data[name]))

    logger.info("Loaded config from %s", path)
    return config
