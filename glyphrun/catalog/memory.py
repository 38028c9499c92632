"""In-memory glyph catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class GlyphRecord:
    """What the engine knows about a single glyph."""

    name: str
    advance_width: float | None = None
    codepoints: tuple[str, ...] = ()
    # Glyph-local kerning group assignments (public.kern1 / public.kern2)
    kern1: str | None = None
    kern2: str | None = None


@dataclass
class MappingCatalog:
    """Glyph catalog backed by a dict of GlyphRecords.

    The character map is built once; when two glyphs claim the same
    character the first one registered keeps it.
    """

    glyphs: dict[str, GlyphRecord] = field(default_factory=dict)
    _cmap: dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for record in self.glyphs.values():
            self._map_codepoints(record)

    @classmethod
    def from_records(cls, records: Iterable[GlyphRecord]) -> MappingCatalog:
        catalog = cls()
        for record in records:
            catalog.add(record)
        return catalog

    @classmethod
    def from_widths(
        cls,
        widths: dict[str, float],
        cmap: dict[str, str] | None = None,
    ) -> MappingCatalog:
        """Build a catalog from ``{glyph: width}`` and ``{char: glyph}``."""
        catalog = cls()
        for name, width in widths.items():
            catalog.add(GlyphRecord(name, width))
        for char, name in (cmap or {}).items():
            catalog.map_codepoint(char, name)
        return catalog

    def add(self, record: GlyphRecord) -> None:
        self.glyphs[record.name] = record
        self._map_codepoints(record)

    def map_codepoint(self, char: str, name: str) -> None:
        record = self.glyphs.get(name)
        if record is None:
            record = GlyphRecord(name)
            self.glyphs[name] = record
        if char not in record.codepoints:
            record.codepoints = record.codepoints + (char,)
        self._map_codepoints(record)

    def _map_codepoints(self, record: GlyphRecord) -> None:
        for char in record.codepoints:
            owner = self._cmap.setdefault(char, record.name)
            if owner != record.name:
                logger.debug(
                    "U+%04X already mapped to %s, ignoring %s",
                    ord(char),
                    owner,
                    record.name,
                )

    # GlyphCatalog

    def has_glyph(self, name: str) -> bool:
        return name in self.glyphs

    def advance_width(self, name: str) -> float | None:
        record = self.glyphs.get(name)
        if record is None:
            return None
        return record.advance_width

    def base_glyph_for_codepoint(self, char: str) -> str | None:
        return self._cmap.get(char)

    # Helpers

    def __contains__(self, name: object) -> bool:
        return name in self.glyphs

    def __iter__(self) -> Iterator[GlyphRecord]:
        return iter(self.glyphs.values())

    def __len__(self) -> int:
        return len(self.glyphs)

    def glyph_groups(self) -> dict[str, dict[str, str]]:
        """Return glyph-local group assignments as ``{glyph: {side: group}}``."""
        result: dict[str, dict[str, str]] = {}
        for record in self.glyphs.values():
            sides = {}
            if record.kern1:
                sides["kern1"] = record.kern1
            if record.kern2:
                sides["kern2"] = record.kern2
            if sides:
                result[record.name] = sides
        return result
