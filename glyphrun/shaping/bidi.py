"""Direction helpers.

Only a single direction per buffer is modelled; these helpers pick that
direction from the text, they do not reorder mixed-direction runs.
"""

from __future__ import annotations

import unicodedata

from glyphrun.shaping.types import TextDirection

_RTL_CLASSES = ("R", "AL", "RLE", "RLO")
_LTR_CLASSES = ("L", "LRE", "LRO")


def char_direction(char: str) -> TextDirection | None:
    """Strong direction of ``char``, or None for neutral/weak characters."""
    bidi_class = unicodedata.bidirectional(char)
    if bidi_class in _RTL_CLASSES:
        return TextDirection.RTL
    if bidi_class in _LTR_CLASSES:
        return TextDirection.LTR
    return None


def is_rtl_script(text: str) -> bool:
    """True if any character in ``text`` is strongly right-to-left."""
    return any(char_direction(char) is TextDirection.RTL for char in text)


def detect_base_direction(
    text: str,
    default: TextDirection = TextDirection.LTR,
) -> TextDirection:
    """Direction of the first strong character in ``text``."""
    for char in text:
        direction = char_direction(char)
        if direction is not None:
            return direction
    return default
