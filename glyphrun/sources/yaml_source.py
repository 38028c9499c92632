"""YAML project files.

Layout of the file::

    glyphs:
      beh-ar:
        width: 520
        unicode: "0628"          # hex string, int, or a list of either
        kern1: beh.right         # optional glyph-local kerning groups
        kern2: beh.left
      beh-ar.init: {width: 300}
    groups:
      public.kern1.round: [o, c]
    kerning:
      T: {o: -60, public.kern2.round: -40}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from glyphrun.catalog.memory import GlyphRecord, MappingCatalog
from glyphrun.diagnostics import LoadWarning, record_warning
from glyphrun.exceptions import SourceLoadError
from glyphrun.sources.base import FontSource, assemble

logger = logging.getLogger(__name__)


def load_yaml_source(path: Path) -> FontSource:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SourceLoadError(str(path), str(e)) from e
    except yaml.YAMLError as e:
        raise SourceLoadError(str(path), f"invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SourceLoadError(str(path), "top level must be a mapping")

    label = path.name
    warnings: list[LoadWarning] = []
    catalog = MappingCatalog()

    glyphs = data.get("glyphs") or {}
    if not isinstance(glyphs, dict):
        record_warning(warnings, label, "'glyphs' must be a mapping", logger)
        glyphs = {}
    for name, entry in glyphs.items():
        record = _read_glyph(str(name), entry, warnings, label)
        if record is not None:
            catalog.add(record)

    groups = _section(data, "groups", warnings, label)
    kerning = _section(data, "kerning", warnings, label)

    logger.debug("Read %d glyphs from %s", len(catalog), path)
    return assemble(path, catalog, groups, kerning, warnings)


def _section(data: dict[str, Any], key: str, warnings: list[LoadWarning], label: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        record_warning(warnings, label, f"'{key}' must be a mapping", logger)
        return {}
    return value


def _read_glyph(
    name: str,
    entry: Any,
    warnings: list[LoadWarning],
    label: str,
) -> GlyphRecord | None:
    if entry is None:
        return GlyphRecord(name)
    if isinstance(entry, (int, float)) and not isinstance(entry, bool):
        return GlyphRecord(name, float(entry))
    if not isinstance(entry, dict):
        record_warning(warnings, label, f"glyph {name}: expected a mapping", logger)
        return None

    width = entry.get("width")
    if width is not None:
        if isinstance(width, bool) or not isinstance(width, (int, float)):
            record_warning(warnings, label, f"glyph {name}: width {width!r} is not a number", logger)
            width = None
        else:
            width = float(width)

    unicodes = entry.get("unicode", entry.get("unicodes"))
    if unicodes is None:
        unicodes = []
    elif not isinstance(unicodes, list):
        unicodes = [unicodes]
    codepoints = []
    for value in unicodes:
        char = _parse_codepoint(value)
        if char is None:
            record_warning(warnings, label, f"glyph {name}: bad unicode value {value!r}", logger)
            continue
        codepoints.append(char)

    return GlyphRecord(
        name,
        width,
        tuple(codepoints),
        kern1=entry.get("kern1"),
        kern2=entry.get("kern2"),
    )


def _parse_codepoint(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        codepoint = value
    elif isinstance(value, str):
        text = value.strip()
        if text.upper().startswith(("U+", "0X")):
            text = text[2:]
        try:
            codepoint = int(text, 16)
        except ValueError:
            return None
    else:
        return None
    if not 0 <= codepoint <= 0x10FFFF:
        return None
    return chr(codepoint)
