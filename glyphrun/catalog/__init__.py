"""Glyph catalogs for glyphrun.

This subpackage provides:
- The GlyphCatalog protocol consumed by shaping, kerning and layout
- MappingCatalog, an in-memory implementation
"""

from glyphrun.catalog.base import GlyphCatalog
from glyphrun.catalog.memory import GlyphRecord, MappingCatalog

__all__ = ["GlyphCatalog", "GlyphRecord", "MappingCatalog"]
