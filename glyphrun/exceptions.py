"""Exception hierarchy for glyphrun.

The layout core never raises for ordinary lookups or edits; these exceptions
only surface at the I/O edge (configuration files and font sources).
"""

from __future__ import annotations

from typing import Any


class GlyphRunError(Exception):
    """Base exception for all glyphrun errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({extra})"


class ConfigError(GlyphRunError):
    """Raised when a configuration file cannot be read or holds bad values."""


class SourceLoadError(GlyphRunError):
    """Raised when a font source cannot be opened or parsed at all."""

    def __init__(
        self,
        path: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load font source {path}: {reason}", details)


class UnsupportedSourceError(SourceLoadError):
    """Raised when a path does not look like any supported font source."""

    def __init__(self, path: str) -> None:
        super().__init__(
            path,
            "unsupported source type",
            details={"supported": ".yaml, .yml, .ufo, .ttf, .otf, .ttc, .woff, .woff2"},
        )
