"""Pen-position layout of a sort buffer.

Coordinates are in font units with y growing upwards: each line break moves
the baseline down by one line height, i.e. towards negative y.

Left-to-right, each glyph is placed at the pen and the pen then advances.
Right-to-left, the pen first moves left by the glyph's advance and the glyph
is placed there, so positions decrease with logical index. In both
directions the kerning of a pair shifts the second glyph of the pair (in
logical order) before it is placed; no kerning is applied across a line
break.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

from glyphrun.kerning.table import KerningTable
from glyphrun.layout.cursor import Affinity, Cursor
from glyphrun.shaping.types import TextDirection
from glyphrun.sorts.buffer import SortBuffer
from glyphrun.sorts.data import Sort

if TYPE_CHECKING:
    from glyphrun.config import Config

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    def contains(self, point: Point | tuple[float, float]) -> bool:
        """Half-open containment test; zero-width rects contain nothing."""
        px, py = point
        return self.x <= px < self.right and self.y <= py < self.top


@dataclass(frozen=True)
class LineMetrics:
    """Vertical metrics shared by every line of a layout."""

    ascender: float = 800.0
    descender: float = -200.0
    line_height: float | None = None

    @property
    def advance_y(self) -> float:
        if self.line_height is not None:
            return self.line_height
        return self.ascender - self.descender

    @classmethod
    def from_config(cls, config: Config) -> LineMetrics:
        return cls(config.ascender, config.descender, config.line_height)


@dataclass(frozen=True)
class Placement:
    """A sort positioned on a line.

    ``origin`` is the glyph origin on the baseline (the left edge of the
    rect). ``leading`` and ``trailing`` are the caret positions before and
    after the sort in logical order. For a line break, ``leading`` is the end
    of the line it terminates and ``trailing`` the start of the next line.
    """

    index: int
    sort: Sort
    rect: Rect
    origin: Point
    leading: Point
    trailing: Point
    line: int = 0


@dataclass
class Layout:
    """Result of one layout pass."""

    placements: list[Placement] = field(default_factory=list)
    pen: Point = Point(0.0, 0.0)
    caret: Point = Point(0.0, 0.0)
    direction: TextDirection = TextDirection.LTR
    origin: Point = Point(0.0, 0.0)

    def __len__(self) -> int:
        return len(self.placements)

    def __iter__(self) -> Iterator[Placement]:
        return iter(self.placements)

    @property
    def line_count(self) -> int:
        return 1 + sum(1 for placement in self.placements if placement.sort.is_line_break)

    @property
    def width(self) -> float:
        """Extent of the widest line."""
        extents: dict[int, tuple[float, float]] = {}
        for placement in self.placements:
            if placement.sort.is_line_break:
                continue
            low, high = extents.get(placement.line, (placement.rect.x, placement.rect.right))
            extents[placement.line] = (
                min(low, placement.rect.x),
                max(high, placement.rect.right),
            )
        if not extents:
            return 0.0
        return max(high - low for low, high in extents.values())

    def caret_for(self, cursor: Cursor | int) -> Point:
        """Caret coordinate for a logical cursor.

        Falls back to the other side when the preferred neighbour does not
        exist (buffer ends), and to the origin for an empty layout.
        """
        if isinstance(cursor, int):
            cursor = Cursor(cursor)
        index = max(0, min(cursor.index, len(self.placements)))
        upstream = self.placements[index - 1].trailing if index > 0 else None
        downstream = self.placements[index].leading if index < len(self.placements) else None
        if cursor.affinity is Affinity.UPSTREAM:
            preferred, other = upstream, downstream
        else:
            preferred, other = downstream, upstream
        if preferred is not None:
            return preferred
        if other is not None:
            return other
        return self.origin

    def hit_test(self, point: Point | tuple[float, float]) -> Placement | None:
        """First placement whose rect contains ``point``."""
        for placement in self.placements:
            if placement.rect.contains(point):
                return placement
        return None

    def placement(self, index: int) -> Placement | None:
        if 0 <= index < len(self.placements):
            return self.placements[index]
        return None


def compute_positions(
    buffer: SortBuffer,
    kerning: KerningTable | None,
    direction: TextDirection,
    metrics: LineMetrics | None = None,
    origin: Point | tuple[float, float] = (0.0, 0.0),
    affinity: Affinity = Affinity.DOWNSTREAM,
) -> Layout:
    """Lay out ``buffer`` in one pass over its sorts in logical order."""
    metrics = metrics or LineMetrics()
    origin = Point(*origin)
    rtl = direction.is_rtl
    height = metrics.ascender - metrics.descender

    x, baseline = origin
    line = 0
    prev_name: str | None = None
    placements: list[Placement] = []

    for index, sort in enumerate(buffer.iterate()):
        if sort.is_line_break:
            end_of_line = Point(x, baseline)
            x = origin.x
            baseline -= metrics.advance_y
            placements.append(
                Placement(
                    index=index,
                    sort=sort,
                    rect=Rect(end_of_line.x, end_of_line.y + metrics.descender, 0.0, height),
                    origin=end_of_line,
                    leading=end_of_line,
                    trailing=Point(x, baseline),
                    line=line,
                )
            )
            line += 1
            prev_name = None
            continue

        name = sort.glyph_name
        advance = sort.advance_width or 0.0
        kern = 0.0
        if kerning is not None and prev_name is not None:
            kern = kerning.kern(name, prev_name) if rtl else kerning.kern(prev_name, name)

        if rtl:
            x -= advance + kern
            glyph_x = x
            leading = Point(glyph_x + advance, baseline)
            trailing = Point(glyph_x, baseline)
        else:
            x += kern
            glyph_x = x
            x += advance
            leading = Point(glyph_x, baseline)
            trailing = Point(x, baseline)

        placements.append(
            Placement(
                index=index,
                sort=sort,
                rect=Rect(glyph_x, baseline + metrics.descender, advance, height),
                origin=Point(glyph_x, baseline),
                leading=leading,
                trailing=trailing,
                line=line,
            )
        )
        prev_name = name

    layout = Layout(
        placements=placements,
        pen=Point(x, baseline),
        direction=direction,
        origin=origin,
    )
    layout.caret = layout.caret_for(Cursor(buffer.cursor, affinity))
    logger.debug(
        "Laid out %d sorts %s, pen at (%.1f, %.1f)",
        len(placements),
        direction.short_name,
        x,
        baseline,
    )
    return layout
