"""Layout and caret navigation for glyphrun.

This subpackage provides:
- compute_positions: pen placement for LTR and RTL buffers
- Layout results with hit testing and caret coordinates
- Visual arrow-key navigation with cursor affinity
"""

from glyphrun.layout.cursor import (
    Affinity,
    Cursor,
    VisualMove,
    logical_delta,
    navigate,
)
from glyphrun.layout.engine import (
    Layout,
    LineMetrics,
    Placement,
    Point,
    Rect,
    compute_positions,
)

__all__ = [
    "Affinity",
    "Cursor",
    "Layout",
    "LineMetrics",
    "Placement",
    "Point",
    "Rect",
    "VisualMove",
    "compute_positions",
    "logical_delta",
    "navigate",
]
