"""glyphrun - interactive multi-glyph text layout.

Shapes Arabic text into positional forms, kerns glyph pairs through kerning
groups and lays runs out left-to-right or right-to-left, with caret
navigation that follows the visual direction.

Example:
    >>> from glyphrun import MappingCatalog, TextSession
    >>> catalog = MappingCatalog.from_widths({"a": 500, "b": 520}, cmap={"a": "a", "b": "b"})
    >>> session = TextSession(catalog)
    >>> session.insert_text("ab")
    2
    >>> session.caret()
    Point(x=1020.0, y=0.0)
"""

from glyphrun.catalog import GlyphCatalog, GlyphRecord, MappingCatalog
from glyphrun.config import Config
from glyphrun.diagnostics import LoadWarning
from glyphrun.exceptions import (
    ConfigError,
    GlyphRunError,
    SourceLoadError,
    UnsupportedSourceError,
)
from glyphrun.kerning import GroupIndex, KerningTable, KernMatch, KernRule
from glyphrun.layout import (
    Affinity,
    Cursor,
    Layout,
    LineMetrics,
    Placement,
    Point,
    Rect,
    VisualMove,
    compute_positions,
    navigate,
)
from glyphrun.session import TextSession
from glyphrun.shaping import (
    ArabicShaper,
    JoiningType,
    PositionalForm,
    ShapedGlyph,
    TextDirection,
    joining_type,
)
from glyphrun.sorts import Sort, SortBuffer

__version__ = "0.1.0"

__all__ = [
    # Session
    "TextSession",
    "Config",
    # Catalog
    "GlyphCatalog",
    "GlyphRecord",
    "MappingCatalog",
    # Shaping
    "ArabicShaper",
    "JoiningType",
    "PositionalForm",
    "ShapedGlyph",
    "TextDirection",
    "joining_type",
    # Buffer
    "Sort",
    "SortBuffer",
    # Kerning
    "GroupIndex",
    "KerningTable",
    "KernMatch",
    "KernRule",
    # Layout
    "Affinity",
    "Cursor",
    "Layout",
    "LineMetrics",
    "Placement",
    "Point",
    "Rect",
    "VisualMove",
    "compute_positions",
    "navigate",
    # Errors
    "GlyphRunError",
    "ConfigError",
    "SourceLoadError",
    "UnsupportedSourceError",
    "LoadWarning",
    # Version
    "__version__",
]
