"""Kerning groups with a precomputed reverse index.

Groups come from two places: the project-level group table (``groups.plist``
in a UFO) and per-glyph assignments (the ``public.kern1`` / ``public.kern2``
keys of a glyph's lib). They are merged once, when the index is built.

A glyph may belong to at most one first-side group (``public.kern1.*``) and
one second-side group (``public.kern2.*``). When the two sources disagree,
the project-level group wins and the conflict is reported as a LoadWarning.
Groups without a side prefix are eligible on both sides.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from glyphrun.diagnostics import LoadWarning, record_warning

logger = logging.getLogger(__name__)

KERN1_PREFIX = "public.kern1."
KERN2_PREFIX = "public.kern2."


class KernSide(Enum):
    """Position of a glyph in a kerning pair."""

    FIRST = "kern1"
    SECOND = "kern2"

    @property
    def prefix(self) -> str:
        return KERN1_PREFIX if self is KernSide.FIRST else KERN2_PREFIX

    @classmethod
    def from_key(cls, key: str) -> KernSide | None:
        """Map a glyph-lib style key (``kern1``, ``public.kern2``, ...) to a side."""
        normalized = key.lower().removeprefix("public.")
        for side in cls:
            if side.value == normalized:
                return side
        return None


def group_side(group_id: str) -> KernSide | None:
    """Side a group is restricted to, or None for unprefixed groups."""
    if group_id.startswith(KERN1_PREFIX):
        return KernSide.FIRST
    if group_id.startswith(KERN2_PREFIX):
        return KernSide.SECOND
    return None


class GroupIndex:
    """Merged kerning groups with O(1) glyph-to-group lookup."""

    def __init__(
        self,
        members: dict[str, tuple[str, ...]] | None = None,
        reverse: dict[str, dict[KernSide, tuple[str, ...]]] | None = None,
        warnings: list[LoadWarning] | None = None,
    ) -> None:
        self._members = members or {}
        self._reverse = reverse or {}
        self.warnings = warnings or []

    @classmethod
    def build(
        cls,
        project_groups: Mapping[str, Any] | None = None,
        glyph_groups: Mapping[str, Mapping[str, Any]] | None = None,
        source: str = "groups",
    ) -> GroupIndex:
        """Merge project groups and glyph-local assignments.

        Args:
            project_groups: ``{group id: [glyph, ...]}``
            glyph_groups: ``{glyph: {"kern1": group, "kern2": group}}``
            source: Label used in warnings.
        """
        warnings: list[LoadWarning] = []
        members: dict[str, list[str]] = {}
        # glyph -> side -> owning group, for side-prefixed groups
        assigned: dict[str, dict[KernSide, str]] = {}
        # glyph -> unprefixed groups, eligible on both sides
        shared: dict[str, list[str]] = {}

        for group_id, glyphs in (project_groups or {}).items():
            if not isinstance(group_id, str) or not group_id:
                record_warning(warnings, source, f"skipping group with invalid id {group_id!r}", logger)
                continue
            if isinstance(glyphs, str) or not isinstance(glyphs, (list, tuple)):
                record_warning(warnings, source, f"group {group_id} members must be a list", logger)
                continue
            side = group_side(group_id)
            group_members = members.setdefault(group_id, [])
            for glyph in glyphs:
                if not isinstance(glyph, str):
                    record_warning(warnings, source, f"group {group_id} has non-string member {glyph!r}", logger)
                    continue
                if glyph in group_members:
                    continue
                if side is None:
                    group_members.append(glyph)
                    shared.setdefault(glyph, []).append(group_id)
                    continue
                owner = assigned.setdefault(glyph, {}).get(side)
                if owner is not None:
                    record_warning(
                        warnings,
                        source,
                        f"{glyph} is in both {owner} and {group_id}; keeping {owner}",
                        logger,
                    )
                    continue
                assigned[glyph][side] = group_id
                group_members.append(glyph)

        for glyph, sides in (glyph_groups or {}).items():
            if not isinstance(glyph, str) or not isinstance(sides, Mapping):
                record_warning(warnings, source, f"skipping malformed glyph group entry {glyph!r}", logger)
                continue
            for key, group_id in sides.items():
                side = KernSide.from_key(str(key))
                if side is None or not isinstance(group_id, str) or not group_id:
                    record_warning(
                        warnings,
                        source,
                        f"{glyph}: ignoring group assignment {key!r}: {group_id!r}",
                        logger,
                    )
                    continue
                if not group_id.startswith(side.prefix):
                    group_id = side.prefix + group_id
                owner = assigned.setdefault(glyph, {}).get(side)
                if owner is not None:
                    if owner != group_id:
                        record_warning(
                            warnings,
                            source,
                            f"{glyph}: glyph assigns {group_id} but project groups "
                            f"assign {owner}; project group wins",
                            logger,
                        )
                    continue
                assigned[glyph][side] = group_id
                members.setdefault(group_id, []).append(glyph)

        reverse: dict[str, dict[KernSide, tuple[str, ...]]] = {}
        for glyph in set(assigned) | set(shared):
            common = tuple(sorted(shared.get(glyph, ())))
            entry = {}
            for side in KernSide:
                owner = assigned.get(glyph, {}).get(side)
                entry[side] = ((owner,) if owner else ()) + common
            reverse[glyph] = entry

        logger.debug("Indexed %d groups covering %d glyphs", len(members), len(reverse))
        return cls(
            {group_id: tuple(glyphs) for group_id, glyphs in members.items()},
            reverse,
            warnings,
        )

    def groups_for(self, glyph: str, side: KernSide) -> tuple[str, ...]:
        """Groups ``glyph`` can be kerned through on ``side``."""
        entry = self._reverse.get(glyph)
        if entry is None:
            return ()
        return entry[side]

    def first_groups(self, glyph: str) -> tuple[str, ...]:
        return self.groups_for(glyph, KernSide.FIRST)

    def second_groups(self, glyph: str) -> tuple[str, ...]:
        return self.groups_for(glyph, KernSide.SECOND)

    def members(self, group_id: str) -> tuple[str, ...]:
        return self._members.get(group_id, ())

    def __contains__(self, group_id: object) -> bool:
        return group_id in self._members

    def __len__(self) -> int:
        return len(self._members)

    def to_dict(self) -> dict[str, list[str]]:
        return {group_id: list(glyphs) for group_id, glyphs in self._members.items()}
