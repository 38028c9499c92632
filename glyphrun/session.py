"""Editing session: one buffer with its catalog, shaper, kerning and layout.

Every edit reshapes only the few sorts around the edit position. The layout
is recomputed from scratch whenever it is requested.
"""

from __future__ import annotations

import logging

from glyphrun.catalog.base import GlyphCatalog
from glyphrun.config import Config
from glyphrun.kerning.table import KerningTable
from glyphrun.layout.cursor import Affinity, Cursor, VisualMove, navigate
from glyphrun.layout.engine import Layout, LineMetrics, Point, compute_positions
from glyphrun.shaping.arabic import ArabicShaper
from glyphrun.shaping.bidi import detect_base_direction
from glyphrun.shaping.types import TextDirection
from glyphrun.sorts.buffer import SortBuffer
from glyphrun.sorts.data import LINE_BREAK_CHAR, Sort

logger = logging.getLogger(__name__)


class TextSession:
    """Interactive text run for previewing glyphs in sequence.

    Args:
        catalog: Glyph lookup used for shaping and advance widths.
        kerning: Kerning table, or None for no pair adjustments.
        direction: Buffer direction. None takes it from ``config.direction``;
            with ``"auto"`` it is detected from the first text typed into an
            empty buffer.
        config: Session settings, defaults when omitted.
    """

    def __init__(
        self,
        catalog: GlyphCatalog,
        kerning: KerningTable | None = None,
        direction: TextDirection | str | None = None,
        config: Config | None = None,
    ) -> None:
        self.config = config or Config()
        self.catalog = catalog
        self.kerning = kerning
        self.shaper = ArabicShaper(self.config.default_advance_width)
        self.buffer = SortBuffer(self.config.initial_gap_size)
        self.metrics = LineMetrics.from_config(self.config)
        self.affinity = Affinity.DOWNSTREAM

        if direction is None:
            direction = self.config.direction
        self.auto_direction = direction == "auto"
        self.direction = TextDirection.LTR if self.auto_direction else TextDirection.parse(direction)

    def __len__(self) -> int:
        return len(self.buffer)

    @property
    def cursor(self) -> Cursor:
        return Cursor(self.buffer.cursor, self.affinity)

    # Editing

    def insert_char(self, char: str) -> bool:
        """Shape and insert one character at the cursor.

        Returns False when the character could not be resolved to any glyph.
        """
        if char == LINE_BREAK_CHAR:
            self.insert_line_break()
            return True

        if self.auto_direction and not self.buffer:
            self.direction = detect_base_direction(char, self.direction)

        base_name = self.catalog.base_glyph_for_codepoint(char)
        if base_name is None:
            fallback = self.config.fallback_glyph
            if fallback and self.catalog.has_glyph(fallback):
                logger.debug("No glyph for U+%04X, inserting %s", ord(char), fallback)
                return self.insert_glyph(fallback)
            logger.debug("No glyph for U+%04X, skipped", ord(char))
            return False

        position = self.buffer.cursor
        self.buffer.insert(Sort.glyph(base_name, self._advance(base_name), codepoint=char))
        self._reshape_around(position)
        self.affinity = Affinity.UPSTREAM
        return True

    def insert_text(self, text: str) -> int:
        """Insert ``text`` character by character; returns how many were placed."""
        if self.auto_direction and not self.buffer:
            self.direction = detect_base_direction(text, self.direction)
        return sum(1 for char in text if self.insert_char(char))

    def insert_glyph(self, name: str) -> bool:
        """Insert a glyph by name, without a codepoint and without shaping it."""
        if not self.catalog.has_glyph(name):
            logger.debug("Unknown glyph %s, not inserted", name)
            return False
        position = self.buffer.cursor
        self.buffer.insert(Sort.glyph(name, self._advance(name)))
        self._reshape_around(position)
        self.affinity = Affinity.UPSTREAM
        return True

    def insert_line_break(self) -> None:
        position = self.buffer.cursor
        self.buffer.insert(Sort.line_break())
        self._reshape_around(position)
        self.affinity = Affinity.UPSTREAM

    def backspace(self) -> Sort | None:
        deleted = self.buffer.delete_before()
        if deleted is not None:
            self._reshape_around(self.buffer.cursor)
            self.affinity = Affinity.UPSTREAM
        return deleted

    def delete_forward(self) -> Sort | None:
        deleted = self.buffer.delete_after()
        if deleted is not None:
            self._reshape_around(self.buffer.cursor)
            self.affinity = Affinity.DOWNSTREAM
        return deleted

    def clear(self) -> None:
        self.buffer.clear()
        self.affinity = Affinity.DOWNSTREAM

    # Navigation and selection

    def move(self, move: VisualMove) -> Cursor:
        cursor = navigate(self.buffer, move, self.direction)
        self.affinity = cursor.affinity
        return cursor

    def set_cursor(self, index: int, affinity: Affinity = Affinity.DOWNSTREAM) -> Cursor:
        self.affinity = affinity
        return Cursor(self.buffer.set_cursor(index), affinity)

    def set_direction(self, direction: TextDirection | str) -> None:
        """Switch the buffer direction; ``"auto"`` re-detects it from the text."""
        if direction == "auto":
            self.auto_direction = True
            self.direction = detect_base_direction(self.text(), self.direction)
            return
        self.direction = TextDirection.parse(direction)
        self.auto_direction = False

    def activate(self, index: int) -> bool:
        """Make the sort at ``index`` the active one."""
        return self.buffer.set_active(index)

    def activate_at(self, point: Point | tuple[float, float]) -> int | None:
        """Activate the sort under ``point``; clears the active sort on a miss."""
        placement = self.layout().hit_test(point)
        if placement is None:
            self.buffer.clear_active()
            return None
        self.buffer.set_active(placement.index)
        return placement.index

    # Queries

    def layout(self, origin: Point | tuple[float, float] = (0.0, 0.0)) -> Layout:
        return compute_positions(
            self.buffer,
            self.kerning,
            self.direction,
            metrics=self.metrics,
            origin=origin,
            affinity=self.affinity,
        )

    def caret(self) -> Point:
        return self.layout().caret

    def glyph_names(self) -> list[str]:
        """Resolved glyph names in logical order, line breaks excluded."""
        return [sort.glyph_name for sort in self.buffer if sort.glyph_name is not None]

    def text(self) -> str:
        return "".join(self.buffer.codepoints())

    # Internals

    def _advance(self, name: str) -> float:
        advance = self.catalog.advance_width(name)
        if advance is None:
            return self.config.default_advance_width
        return advance

    def _reshape_around(self, position: int) -> None:
        context = self.buffer.context()
        window = self.shaper.reshape_window(context, position)
        for index in window:
            sort = self.buffer.get(index)
            if sort is None or sort.is_line_break or sort.kind.codepoint is None:
                continue
            shaped = self.shaper.shape_char_at(context, index, self.catalog)
            if shaped is None:
                continue
            if shaped.glyph_name != sort.glyph_name:
                logger.debug("Reshaped %d: %s -> %s", index, sort.glyph_name, shaped.glyph_name)
            self.buffer.replace(index, sort.reshaped(shaped))
