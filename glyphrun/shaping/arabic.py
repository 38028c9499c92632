"""Arabic contextual shaping.

Implements the Arabic joining algorithm for interactive editing: each
character's positional form depends only on its own joining type and on
the nearest non-transparent neighbour on either side. That locality is what
lets an edit at position ``p`` be repaired by reshaping a small window around
``p`` instead of the whole buffer.

Example:
    >>> shaper = ArabicShaper()
    >>> [g.form.value for g in shaper.shape("بسم", catalog)]
    ['initial', 'medial', 'final']
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from glyphrun.catalog.base import GlyphCatalog
from glyphrun.shaping.joining import JoiningType, is_arabic, joining_type
from glyphrun.shaping.types import PositionalForm, ShapedGlyph

logger = logging.getLogger(__name__)

DEFAULT_ADVANCE_WIDTH = 500.0

# (previous joins forward, next joins backward) -> form, for dual-joining letters
_DUAL_FORMS = {
    (False, False): PositionalForm.ISOLATED,
    (False, True): PositionalForm.INITIAL,
    (True, False): PositionalForm.FINAL,
    (True, True): PositionalForm.MEDIAL,
}


class ArabicShaper:
    """Positional-form shaper for Arabic text.

    ``text`` arguments are any sequence of single characters in logical
    order (a ``str`` or a list of characters). Placeholders such as ``"\\n"``
    for line breaks are non-joining and break cursive connection.
    """

    def __init__(self, default_advance_width: float = DEFAULT_ADVANCE_WIDTH) -> None:
        self.default_advance_width = default_advance_width

    def shape(self, text: Sequence[str], catalog: GlyphCatalog) -> list[ShapedGlyph]:
        """Shape every character; characters without a base glyph are omitted."""
        shaped = []
        for index in range(len(text)):
            glyph = self.shape_char_at(text, index, catalog)
            if glyph is not None:
                shaped.append(glyph)
        return shaped

    def shape_char_at(
        self,
        text: Sequence[str],
        index: int,
        catalog: GlyphCatalog,
    ) -> ShapedGlyph | None:
        """Shape the character at ``index`` in context, or None if unmapped."""
        if not 0 <= index < len(text):
            return None
        char = text[index]
        base_name = catalog.base_glyph_for_codepoint(char)
        if base_name is None:
            return None

        form = self.determine_form(text, index)
        glyph_name = self.resolve_glyph_name(base_name, form, catalog)
        advance = catalog.advance_width(glyph_name)
        if advance is None:
            advance = self.default_advance_width

        return ShapedGlyph(
            base_name=base_name,
            glyph_name=glyph_name,
            codepoint=char,
            form=form,
            advance_width=advance,
        )

    def determine_form(self, text: Sequence[str], index: int) -> PositionalForm:
        """Return the positional form of ``text[index]``."""
        char = text[index]
        if not is_arabic(char):
            return PositionalForm.ISOLATED

        jt = joining_type(char)
        if jt in (JoiningType.NON_JOINING, JoiningType.TRANSPARENT):
            return PositionalForm.ISOLATED

        # Tatweel is a spacing character and keeps its own shape; it still
        # joins its neighbours through joins_forward/joins_backward.
        if jt is JoiningType.JOIN_CAUSING:
            return PositionalForm.ISOLATED

        prev_joins = self._prev_joins_forward(text, index)
        if jt is JoiningType.RIGHT:
            return PositionalForm.FINAL if prev_joins else PositionalForm.ISOLATED

        next_joins = self._next_joins_backward(text, index)
        return _DUAL_FORMS[(prev_joins, next_joins)]

    def resolve_glyph_name(
        self,
        base_name: str,
        form: PositionalForm,
        catalog: GlyphCatalog,
    ) -> str:
        """Return ``base_name`` plus the form suffix, or ``base_name`` if absent."""
        if form is PositionalForm.ISOLATED:
            return base_name
        candidate = base_name + form.suffix
        if catalog.has_glyph(candidate):
            return candidate
        logger.debug("No %s form for %s, using base glyph", form.value, base_name)
        return base_name

    def reshape_window(self, text: Sequence[str], position: int) -> range:
        """Indices whose form may change after an edit at ``position``.

        Nominally ``[position - 1, position + 1]`` clamped to the text,
        widened across transparent runs so the nearest joining neighbour on
        each side is included.
        """
        length = len(text)
        if length == 0:
            return range(0)
        position = max(0, min(position, length - 1))

        start = max(position - 1, 0)
        while start > 0 and joining_type(text[start]).is_transparent:
            start -= 1

        end = min(position + 1, length - 1)
        while end < length - 1 and joining_type(text[end]).is_transparent:
            end += 1

        return range(start, end + 1)

    def reshape_range(
        self,
        text: Sequence[str],
        start: int,
        end: int,
        catalog: GlyphCatalog,
    ) -> dict[int, ShapedGlyph]:
        """Reshape ``text[start:end]`` plus affected neighbours.

        Returns a mapping of index to shaped glyph; unmapped characters are
        absent from the result.
        """
        if not text:
            return {}
        first = self.reshape_window(text, start)
        last = self.reshape_window(text, max(end - 1, start))
        result = {}
        for index in range(first.start, last.stop):
            glyph = self.shape_char_at(text, index, catalog)
            if glyph is not None:
                result[index] = glyph
        return result

    @staticmethod
    def _prev_joins_forward(text: Sequence[str], index: int) -> bool:
        i = index - 1
        while i >= 0:
            jt = joining_type(text[i])
            if not jt.is_transparent:
                return jt.joins_forward
            i -= 1
        return False

    @staticmethod
    def _next_joins_backward(text: Sequence[str], index: int) -> bool:
        i = index + 1
        while i < len(text):
            jt = joining_type(text[i])
            if not jt.is_transparent:
                return jt.joins_backward
            i += 1
        return False
