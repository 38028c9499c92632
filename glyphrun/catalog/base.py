"""Glyph catalog capability.

Shaping, kerning and layout only need three facts about a font: whether a
glyph exists, how wide it is, and which glyph a character maps to. Anything
that answers these questions can drive the engine.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GlyphCatalog(Protocol):
    """Read-only glyph lookup used by the shaping and layout components."""

    def has_glyph(self, name: str) -> bool:
        """Return True if a glyph with this name exists."""
        ...

    def advance_width(self, name: str) -> float | None:
        """Return the horizontal advance of ``name``, or None if unknown."""
        ...

    def base_glyph_for_codepoint(self, char: str) -> str | None:
        """Return the unsuffixed glyph name mapped to ``char``, or None."""
        ...
