"""Font sources for glyphrun.

Thin adapters that read glyph names, codepoints, advance widths, kerning
groups and kerning pairs from existing files:
- YAML project files (PyYAML)
- UFO directories (fontTools.ufoLib)
- Compiled fonts (fontTools.ttLib)
"""

from __future__ import annotations

from pathlib import Path

from glyphrun.exceptions import SourceLoadError, UnsupportedSourceError
from glyphrun.sources.base import FontSource
from glyphrun.sources.binary import load_binary_source
from glyphrun.sources.ufo import load_ufo_source
from glyphrun.sources.yaml_source import load_yaml_source

YAML_SUFFIXES = (".yaml", ".yml")
BINARY_SUFFIXES = (".ttf", ".otf", ".woff", ".woff2", ".ttc")


def load_source(path: Path | str) -> FontSource:
    """Load a font source, choosing the adapter from the path."""
    path = Path(path)
    if not path.exists():
        raise SourceLoadError(str(path), "no such file or directory")

    suffix = path.suffix.lower()
    if path.is_dir():
        if suffix == ".ufo" or (path / "metainfo.plist").exists():
            return load_ufo_source(path)
        raise UnsupportedSourceError(str(path))
    if suffix in YAML_SUFFIXES:
        return load_yaml_source(path)
    if suffix in BINARY_SUFFIXES:
        return load_binary_source(path, font_number=0 if suffix == ".ttc" else -1)
    raise UnsupportedSourceError(str(path))


__all__ = [
    "FontSource",
    "load_binary_source",
    "load_source",
    "load_ufo_source",
    "load_yaml_source",
]
