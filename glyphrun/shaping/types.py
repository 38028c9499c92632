"""Value types shared by the shaping, sort and layout modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TextDirection(Enum):
    """Flow direction of a whole buffer."""

    LTR = "ltr"
    RTL = "rtl"

    @property
    def is_rtl(self) -> bool:
        return self is TextDirection.RTL

    @property
    def short_name(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: str | TextDirection) -> TextDirection:
        if isinstance(value, TextDirection):
            return value
        return cls(value.lower())


class PositionalForm(Enum):
    """Contextual variant of a cursive-script character.

    Each form maps to a fixed glyph-name suffix following the usual
    OpenType naming convention; the isolated form uses the bare name.
    """

    ISOLATED = "isolated"
    INITIAL = "initial"
    MEDIAL = "medial"
    FINAL = "final"

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]


_SUFFIXES = {
    PositionalForm.ISOLATED: "",
    PositionalForm.INITIAL: ".init",
    PositionalForm.MEDIAL: ".medi",
    PositionalForm.FINAL: ".fina",
}


@dataclass(frozen=True)
class ShapedGlyph:
    """Result of shaping one character."""

    base_name: str
    glyph_name: str
    codepoint: str
    form: PositionalForm
    advance_width: float
