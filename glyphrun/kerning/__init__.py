"""Kerning for glyphrun.

This subpackage provides:
- GroupIndex: kerning groups merged from project and glyph sources
- KerningTable: precedence-ordered pair lookup
"""

from glyphrun.kerning.groups import GroupIndex, KernSide, group_side
from glyphrun.kerning.table import KerningTable, KernMatch, KernRule

__all__ = [
    "GroupIndex",
    "KernMatch",
    "KernRule",
    "KernSide",
    "KerningTable",
    "group_side",
]
