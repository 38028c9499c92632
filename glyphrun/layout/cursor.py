"""Cursor affinity and visual arrow-key navigation.

The buffer cursor is a logical index in ``[0, len]``. Arrow keys express a
visual intent (left or right on screen); in right-to-left text visual left is
logical forward, so the mapping depends on the buffer direction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from glyphrun.shaping.types import TextDirection
from glyphrun.sorts.buffer import SortBuffer

logger = logging.getLogger(__name__)


class Affinity(Enum):
    """Which neighbour a caret at a logical index attaches to.

    UPSTREAM draws the caret at the trailing edge of the sort before the
    index, DOWNSTREAM at the leading edge of the sort after it.
    """

    UPSTREAM = "upstream"
    DOWNSTREAM = "downstream"


class VisualMove(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Cursor:
    index: int
    affinity: Affinity = Affinity.DOWNSTREAM


def logical_delta(move: VisualMove, direction: TextDirection) -> int:
    """Logical index change for a visual arrow-key move."""
    delta = -1 if move is VisualMove.LEFT else 1
    if direction.is_rtl:
        delta = -delta
    return delta


def navigate(buffer: SortBuffer, move: VisualMove, direction: TextDirection) -> Cursor:
    """Move the buffer cursor one step in the visual direction ``move``.

    The caret stays attached to the sort it just crossed: moving forward
    gives UPSTREAM, moving backward DOWNSTREAM. At a buffer boundary the
    cursor does not move and the affinity still reflects the intent.
    """
    delta = logical_delta(move, direction)
    before = buffer.cursor
    index = buffer.move_cursor(delta)
    affinity = Affinity.UPSTREAM if delta > 0 else Affinity.DOWNSTREAM
    logger.debug(
        "%s %s: cursor %d -> %d (%s)",
        direction.short_name,
        move.value,
        before,
        index,
        affinity.value,
    )
    return Cursor(index, affinity)
