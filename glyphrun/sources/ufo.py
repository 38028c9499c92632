"""UFO font sources, read with fontTools.ufoLib."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fontTools.ufoLib import UFOLibError, UFOReader
from fontTools.ufoLib.glifLib import GlifLibError

from glyphrun.catalog.memory import GlyphRecord, MappingCatalog
from glyphrun.diagnostics import LoadWarning, record_warning
from glyphrun.exceptions import SourceLoadError
from glyphrun.sources.base import FontSource, assemble, nest_pairs

logger = logging.getLogger(__name__)

KERN1_LIB_KEY = "public.kern1"
KERN2_LIB_KEY = "public.kern2"


class _GlyphInfo:
    """Attribute sink for ``GlyphSet.readGlyph``; outlines are not drawn."""

    def __init__(self) -> None:
        self.width: float | None = None
        self.unicodes: list[int] = []
        self.lib: dict[str, Any] = {}


def load_ufo_source(path: Path) -> FontSource:
    try:
        reader = UFOReader(path, validate=False)
    except (UFOLibError, OSError) as e:
        raise SourceLoadError(str(path), str(e)) from e

    label = path.name
    warnings: list[LoadWarning] = []
    catalog = MappingCatalog()

    with reader:
        try:
            glyph_set = reader.getGlyphSet(validateRead=False)
            groups = reader.readGroups()
            kerning = reader.readKerning()
        except (UFOLibError, GlifLibError, OSError) as e:
            raise SourceLoadError(str(path), str(e)) from e

        for name in glyph_set.keys():
            info = _GlyphInfo()
            try:
                glyph_set.readGlyph(name, info)
            except GlifLibError as e:
                record_warning(warnings, label, f"glyph {name}: {e}", logger)
                continue
            catalog.add(
                GlyphRecord(
                    name,
                    info.width,
                    tuple(chr(codepoint) for codepoint in info.unicodes),
                    kern1=_lib_group(info.lib, KERN1_LIB_KEY),
                    kern2=_lib_group(info.lib, KERN2_LIB_KEY),
                )
            )

    logger.debug("Read %d glyphs from %s", len(catalog), path)
    return assemble(path, catalog, groups, nest_pairs(kerning), warnings)


def _lib_group(lib: dict[str, Any], key: str) -> str | None:
    value = lib.get(key)
    return value if isinstance(value, str) and value else None
