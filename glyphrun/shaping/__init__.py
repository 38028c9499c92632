"""Text shaping for glyphrun.

This subpackage provides:
- Arabic joining types and positional forms
- The ArabicShaper contextual shaping engine
- Per-buffer direction detection
"""

from glyphrun.shaping.arabic import ArabicShaper
from glyphrun.shaping.bidi import (
    char_direction,
    detect_base_direction,
    is_rtl_script,
)
from glyphrun.shaping.joining import (
    JoiningType,
    is_arabic,
    is_arabic_letter,
    joining_type,
)
from glyphrun.shaping.types import PositionalForm, ShapedGlyph, TextDirection

__all__ = [
    "ArabicShaper",
    "JoiningType",
    "PositionalForm",
    "ShapedGlyph",
    "TextDirection",
    "char_direction",
    "detect_base_direction",
    "is_arabic",
    "is_arabic_letter",
    "is_rtl_script",
    "joining_type",
]
