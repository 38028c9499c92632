"""Arabic joining types.

Values follow the Unicode ArabicShaping.txt data for the letters and marks
the editor supports. Every other codepoint is non-joining.
"""

from __future__ import annotations

from enum import Enum


class JoiningType(Enum):
    """How a character connects to its neighbours in cursive text."""

    DUAL = "D"
    RIGHT = "R"
    NON_JOINING = "U"
    JOIN_CAUSING = "C"
    TRANSPARENT = "T"

    @property
    def joins_forward(self) -> bool:
        """Can connect to the following character (to its left in RTL)."""
        return self in (JoiningType.DUAL, JoiningType.JOIN_CAUSING)

    @property
    def joins_backward(self) -> bool:
        """Can connect to the preceding character (to its right in RTL)."""
        return self in (JoiningType.DUAL, JoiningType.RIGHT, JoiningType.JOIN_CAUSING)

    @property
    def is_transparent(self) -> bool:
        return self is JoiningType.TRANSPARENT


_RIGHT_JOINING = (
    0x0622,  # ALEF WITH MADDA ABOVE
    0x0623,  # ALEF WITH HAMZA ABOVE
    0x0624,  # WAW WITH HAMZA ABOVE
    0x0625,  # ALEF WITH HAMZA BELOW
    0x0627,  # ALEF
    0x0629,  # TEH MARBUTA
    0x062F,  # DAL
    0x0630,  # THAL
    0x0631,  # REH
    0x0632,  # ZAIN
    0x0648,  # WAW
)

_DUAL_JOINING = (
    0x0626,  # YEH WITH HAMZA ABOVE
    0x0628,  # BEH
    0x062A,  # TEH
    0x062B,  # THEH
    0x062C,  # JEEM
    0x062D,  # HAH
    0x062E,  # KHAH
    0x0633,  # SEEN
    0x0634,  # SHEEN
    0x0635,  # SAD
    0x0636,  # DAD
    0x0637,  # TAH
    0x0638,  # ZAH
    0x0639,  # AIN
    0x063A,  # GHAIN
    0x0641,  # FEH
    0x0642,  # QAF
    0x0643,  # KAF
    0x0644,  # LAM
    0x0645,  # MEEM
    0x0646,  # NOON
    0x0647,  # HEH
    0x0649,  # ALEF MAKSURA
    0x064A,  # YEH
)

_TRANSPARENT = (
    *range(0x0610, 0x061B),  # Quranic annotation signs
    *range(0x064B, 0x0653),  # fathatan .. sukun
    0x0670,  # SUPERSCRIPT ALEF
    *range(0x06D6, 0x06EE),  # Quranic marks
)

_JOINING_TYPES: dict[int, JoiningType] = {
    **{cp: JoiningType.RIGHT for cp in _RIGHT_JOINING},
    **{cp: JoiningType.DUAL for cp in _DUAL_JOINING},
    **{cp: JoiningType.TRANSPARENT for cp in _TRANSPARENT},
    0x0621: JoiningType.NON_JOINING,  # HAMZA
    0x0640: JoiningType.JOIN_CAUSING,  # TATWEEL
}

_ARABIC_BLOCKS = (
    (0x0600, 0x06FF),  # Arabic
    (0x0750, 0x077F),  # Arabic Supplement
    (0x08A0, 0x08FF),  # Arabic Extended-A
)


def joining_type(char: str) -> JoiningType:
    """Return the joining type of ``char`` (NON_JOINING when unlisted)."""
    if len(char) != 1:
        return JoiningType.NON_JOINING
    return _JOINING_TYPES.get(ord(char), JoiningType.NON_JOINING)


def is_arabic(char: str) -> bool:
    """True if ``char`` lies in one of the Arabic blocks."""
    if len(char) != 1:
        return False
    cp = ord(char)
    return any(start <= cp <= end for start, end in _ARABIC_BLOCKS)


def is_arabic_letter(char: str) -> bool:
    """True for Arabic characters that are not transparent marks."""
    return is_arabic(char) and not joining_type(char).is_transparent
