"""Sorts and the gap buffer that holds them.

A "sort" is the virtual counterpart of a physical typesetting sort: one block
carrying a glyph (or a line break) that is lined up with others to form text.
"""

from glyphrun.sorts.buffer import ShapingContext, SortBuffer
from glyphrun.sorts.data import GlyphKind, LineBreak, Sort, SortKind

__all__ = ["GlyphKind", "LineBreak", "ShapingContext", "Sort", "SortBuffer", "SortKind"]
