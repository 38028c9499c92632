"""Group-aware kerning lookup.

Lookup precedence, highest first:

1. glyph + glyph
2. glyph + group
3. group + glyph
4. group + group
5. no adjustment (0)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any

from glyphrun.diagnostics import LoadWarning, record_warning
from glyphrun.kerning.groups import GroupIndex, KernSide, group_side

logger = logging.getLogger(__name__)


class KernRule(Enum):
    GLYPH_GLYPH = "glyph+glyph"
    GLYPH_GROUP = "glyph+group"
    GROUP_GLYPH = "group+glyph"
    GROUP_GROUP = "group+group"


@dataclass(frozen=True)
class KernMatch:
    """The entry that produced a kerning value."""

    value: float
    first: str
    second: str
    rule: KernRule


class KerningTable:
    """Read-only pairwise kerning with group fallback."""

    def __init__(
        self,
        pairs: dict[tuple[str, str], float] | None = None,
        groups: GroupIndex | None = None,
        warnings: list[LoadWarning] | None = None,
    ) -> None:
        self._pairs = pairs or {}
        self.groups = groups or GroupIndex()
        self._warnings = warnings or []

    @classmethod
    def from_mapping(
        cls,
        kerning: Mapping[str, Any] | None,
        groups: GroupIndex | None = None,
        source: str = "kerning",
    ) -> KerningTable:
        """Load nested ``{first: {second: value}}`` kerning data.

        Malformed entries are skipped and reported through ``warnings``.
        """
        groups = groups or GroupIndex()
        warnings: list[LoadWarning] = []
        pairs: dict[tuple[str, str], float] = {}

        for first, row in (kerning or {}).items():
            if not isinstance(first, str):
                record_warning(warnings, source, f"skipping non-string first key {first!r}", logger)
                continue
            if not isinstance(row, Mapping):
                record_warning(warnings, source, f"{first}: expected a mapping of second keys", logger)
                continue
            for second, value in row.items():
                if not isinstance(second, str):
                    record_warning(warnings, source, f"{first}: skipping non-string second key {second!r}", logger)
                    continue
                if isinstance(value, bool) or not isinstance(value, Real):
                    record_warning(warnings, source, f"{first} {second}: value {value!r} is not a number", logger)
                    continue
                _check_key(first, KernSide.FIRST, groups, warnings, source)
                _check_key(second, KernSide.SECOND, groups, warnings, source)
                pairs[(first, second)] = float(value)

        logger.debug("Loaded %d kerning pairs from %s", len(pairs), source)
        return cls(pairs, groups, warnings)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, str, float]],
        groups: GroupIndex | None = None,
    ) -> KerningTable:
        return cls({(first, second): float(value) for first, second, value in pairs}, groups)

    @property
    def warnings(self) -> list[LoadWarning]:
        """Everything reported while loading the groups and the pairs."""
        return [*self.groups.warnings, *self._warnings]

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self._pairs

    def pair_value(self, first: str, second: str) -> float | None:
        """Value stored for exactly this pair of keys."""
        return self._pairs.get((first, second))

    def resolve(
        self,
        left: str,
        left_groups: Iterable[str],
        right: str,
        right_groups: Iterable[str],
    ) -> KernMatch | None:
        """Find the highest-precedence entry for a glyph pair."""
        value = self._pairs.get((left, right))
        if value is not None:
            return KernMatch(value, left, right, KernRule.GLYPH_GLYPH)

        right_groups = tuple(right_groups)
        for group in right_groups:
            value = self._pairs.get((left, group))
            if value is not None:
                return KernMatch(value, left, group, KernRule.GLYPH_GROUP)

        left_groups = tuple(left_groups)
        for group in left_groups:
            value = self._pairs.get((group, right))
            if value is not None:
                return KernMatch(value, group, right, KernRule.GROUP_GLYPH)

        for first in left_groups:
            for second in right_groups:
                value = self._pairs.get((first, second))
                if value is not None:
                    return KernMatch(value, first, second, KernRule.GROUP_GROUP)

        return None

    def lookup(
        self,
        left: str,
        left_groups: Iterable[str],
        right: str,
        right_groups: Iterable[str],
    ) -> float:
        """Kerning between two glyphs given their groups; 0 when nothing matches."""
        match = self.resolve(left, left_groups, right, right_groups)
        return match.value if match is not None else 0.0

    def resolve_glyphs(self, left: str, right: str) -> KernMatch | None:
        """Like ``resolve`` with groups taken from this table's GroupIndex."""
        return self.resolve(
            left,
            self.groups.first_groups(left),
            right,
            self.groups.second_groups(right),
        )

    def kern(self, left: str, right: str) -> float:
        """Kerning between two glyph names, resolving groups via the index."""
        match = self.resolve_glyphs(left, right)
        return match.value if match is not None else 0.0


def _check_key(
    key: str,
    side: KernSide,
    groups: GroupIndex,
    warnings: list[LoadWarning],
    source: str,
) -> None:
    key_side = group_side(key)
    if key_side is None:
        return
    if key_side is not side:
        record_warning(warnings, source, f"{key} used on the wrong side of a pair", logger)
    elif key not in groups:
        record_warning(warnings, source, f"pair references unknown group {key}", logger)
