"""Compiled fonts (TrueType/OpenType/WOFF), read with fontTools.ttLib.

Only the legacy ``kern`` table (format 0 subtables) is read for kerning.
Kerning stored in GPOS is reported as a warning and otherwise ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from glyphrun.catalog.memory import GlyphRecord, MappingCatalog
from glyphrun.diagnostics import LoadWarning, record_warning
from glyphrun.exceptions import SourceLoadError
from glyphrun.sources.base import FontSource, assemble, nest_pairs

logger = logging.getLogger(__name__)


def load_binary_source(path: Path, font_number: int = -1) -> FontSource:
    try:
        font = TTFont(path, fontNumber=font_number, lazy=True)
    except (TTLibError, OSError) as e:
        raise SourceLoadError(str(path), str(e)) from e

    label = path.name
    warnings: list[LoadWarning] = []

    with font:
        try:
            glyph_order = font.getGlyphOrder()
            cmap = font.getBestCmap() or {}
            metrics = font["hmtx"].metrics if "hmtx" in font else {}
        except (TTLibError, KeyError) as e:
            raise SourceLoadError(str(path), str(e)) from e

        if not metrics:
            record_warning(warnings, label, "no hmtx table, advance widths unknown", logger)

        catalog = MappingCatalog()
        for name in glyph_order:
            advance = metrics.get(name)
            catalog.add(GlyphRecord(name, float(advance[0]) if advance else None))
        for codepoint, name in sorted(cmap.items()):
            catalog.map_codepoint(chr(codepoint), name)

        pairs: dict[tuple[str, str], float] = {}
        if "kern" in font:
            for subtable in font["kern"].kernTables:
                if getattr(subtable, "format", None) != 0:
                    record_warning(
                        warnings,
                        label,
                        f"skipping kern subtable format {getattr(subtable, 'format', '?')}",
                        logger,
                    )
                    continue
                for pair, value in subtable.kernTable.items():
                    pairs.setdefault(pair, value)
        elif "GPOS" in font:
            record_warning(warnings, label, "GPOS kerning is not read", logger)

    logger.debug("Read %d glyphs and %d kern pairs from %s", len(catalog), len(pairs), path)
    return assemble(path, catalog, None, nest_pairs(pairs), warnings)
