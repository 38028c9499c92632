"""Configuration for glyphrun.

Settings are read from a YAML file. Lookup order for ``Config.load()``:

1. An explicit path argument
2. The ``GLYPHRUN_CONFIG`` environment variable
3. ``~/.config/glyphrun/config.yaml``
4. Built-in defaults
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from glyphrun.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GLYPHRUN_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "glyphrun" / "config.yaml"

VALID_DIRECTIONS = ("ltr", "rtl", "auto")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Session and layout settings."""

    # Buffer direction: "ltr", "rtl", or "auto" (first strong character)
    direction: str = "ltr"

    # Vertical metrics used for hit-test rectangles and line spacing
    ascender: float = 800.0
    descender: float = -200.0
    line_height: float | None = None

    # Advance used when the catalog knows a glyph but not its width
    default_advance_width: float = 500.0

    initial_gap_size: int = 16

    # Glyph inserted for characters with no mapped glyph (None skips them)
    fallback_glyph: str | None = None

    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.direction = str(self.direction).lower()
        if self.direction not in VALID_DIRECTIONS:
            raise ConfigError(
                f"Invalid direction: {self.direction!r}",
                details={"allowed": ", ".join(VALID_DIRECTIONS)},
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level!r}")
        try:
            self.ascender = float(self.ascender)
            self.descender = float(self.descender)
            self.default_advance_width = float(self.default_advance_width)
            if self.line_height is not None:
                self.line_height = float(self.line_height)
            self.initial_gap_size = int(self.initial_gap_size)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e
        if self.initial_gap_size < 1:
            raise ConfigError("initial_gap_size must be at least 1")
        if self.ascender <= self.descender:
            raise ConfigError(
                "ascender must be above descender",
                details={"ascender": self.ascender, "descender": self.descender},
            )

    @property
    def effective_line_height(self) -> float:
        """Line height, defaulting to the ascender-to-descender span."""
        if self.line_height is not None:
            return self.line_height
        return self.ascender - self.descender

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key in known:
                kwargs[key] = value
            else:
                logger.warning("Ignoring unknown config key: %s", key)
        return cls(**kwargs)

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from YAML, falling back to defaults."""
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                path = Path(env_path)
            elif DEFAULT_CONFIG_PATH.exists():
                path = DEFAULT_CONFIG_PATH
            else:
                return cls()

        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        logger.debug("Loaded config from %s", path)
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
