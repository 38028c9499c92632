"""Common result type for font source adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from glyphrun.catalog.memory import MappingCatalog
from glyphrun.diagnostics import LoadWarning
from glyphrun.kerning.groups import GroupIndex
from glyphrun.kerning.table import KerningTable


@dataclass
class FontSource:
    """Glyph metadata, groups and kerning read from one font source."""

    path: Path
    catalog: MappingCatalog
    groups: dict[str, list[str]] = field(default_factory=dict)
    glyph_groups: dict[str, dict[str, str]] = field(default_factory=dict)
    kerning: KerningTable = field(default_factory=KerningTable)
    # Problems specific to the source format; group and pair problems live
    # on the kerning table.
    source_warnings: list[LoadWarning] = field(default_factory=list)

    @property
    def warnings(self) -> list[LoadWarning]:
        return [*self.source_warnings, *self.kerning.warnings]


def assemble(
    path: Path,
    catalog: MappingCatalog,
    groups: dict[str, Any] | None,
    kerning: dict[str, Any] | None,
    warnings: list[LoadWarning],
) -> FontSource:
    """Merge groups and build the kerning table for an already-read source."""
    label = path.name
    glyph_groups = catalog.glyph_groups()
    index = GroupIndex.build(groups, glyph_groups, source=label)
    table = KerningTable.from_mapping(kerning, index, source=label)
    return FontSource(
        path=path,
        catalog=catalog,
        groups=index.to_dict(),
        glyph_groups=glyph_groups,
        kerning=table,
        source_warnings=warnings,
    )


def nest_pairs(pairs: dict[tuple[str, str], Any]) -> dict[str, dict[str, Any]]:
    """Turn ``{(first, second): value}`` into ``{first: {second: value}}``."""
    nested: dict[str, dict[str, Any]] = {}
    for (first, second), value in pairs.items():
        nested.setdefault(first, {})[second] = value
    return nested
