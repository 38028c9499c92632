"""Unit tests for glyphrun.layout.

Covers LTR and RTL pen placement, kerning between neighbours, line breaks,
hit testing, caret coordinates with affinity and arrow-key navigation.
"""

import pytest

from glyphrun.kerning import KerningTable
from glyphrun.layout import (
    Affinity,
    Cursor,
    LineMetrics,
    Point,
    Rect,
    VisualMove,
    compute_positions,
    logical_delta,
    navigate,
)
from glyphrun.shaping import TextDirection
from glyphrun.sorts import Sort, SortBuffer

LTR = TextDirection.LTR
RTL = TextDirection.RTL


def make_buffer(*items: tuple[str, float] | None) -> SortBuffer:
    """Build a buffer from (name, advance) pairs; None is a line break."""
    sorts = [Sort.line_break() if item is None else Sort.glyph(*item) for item in items]
    return SortBuffer.from_sorts(sorts)


def xs(buffer: SortBuffer, direction: TextDirection, kerning: KerningTable | None = None) -> list[float]:
    return [p.origin.x for p in compute_positions(buffer, kerning, direction)]


class TestLeftToRight:
    """Left-to-right placement."""

    def test_glyphs_follow_each_other(self) -> None:
        """Each glyph starts where the previous one ended."""
        buffer = make_buffer(("a", 100), ("b", 150), ("c", 50))
        assert xs(buffer, LTR) == [0, 100, 250]

    def test_layout_iterates_placements(self) -> None:
        """Iterating a layout yields its placements in logical order."""
        layout = compute_positions(make_buffer(("a", 100), ("b", 150)), None, LTR)
        assert [placement.index for placement in layout] == [0, 1]
        assert list(layout) == layout.placements

    def test_pen_after_last_glyph(self) -> None:
        """The final pen sits after the last advance."""
        layout = compute_positions(make_buffer(("a", 100), ("b", 150)), None, LTR)
        assert layout.pen == Point(250, 0)
        assert layout.width == 250

    def test_kerning_moves_second_glyph(self, kerning_table: KerningTable) -> None:
        """A negative pair value pulls the second glyph closer."""
        buffer = make_buffer(("A", 600), ("V", 580))
        assert xs(buffer, LTR, kerning_table) == [0, 520]

    def test_origin_offset(self) -> None:
        """Placement starts at the given origin."""
        layout = compute_positions(make_buffer(("a", 100)), None, LTR, origin=(10, 20))
        assert layout.placements[0].origin == Point(10, 20)
        assert layout.pen == Point(110, 20)


class TestRightToLeft:
    """Right-to-left placement."""

    def test_two_glyphs_move_left(self) -> None:
        """With advances of 100 the first rect is at -100, the second at -200."""
        layout = compute_positions(make_buffer(("a", 100), ("b", 100)), None, RTL)
        assert [p.rect.x for p in layout] == [-100, -200]
        assert layout.pen == Point(-200, 0)

    def test_positions_decrease_with_index(self) -> None:
        """Logical order runs leftwards."""
        positions = xs(make_buffer(("a", 100), ("b", 120), ("c", 80), ("d", 60)), RTL)
        assert positions == sorted(positions, reverse=True)
        assert positions == [-100, -220, -300, -360]

    def test_kerning_pair_is_current_then_previous(self, kerning_table: KerningTable) -> None:
        """RTL kerning looks up (current, previous)."""
        # kern("A", "V") is -80; in RTL that pair applies when A follows V
        buffer = make_buffer(("V", 580), ("A", 600))
        assert xs(buffer, RTL, kerning_table) == [-580, -1100]
        assert xs(make_buffer(("A", 600), ("V", 580)), RTL, kerning_table) == [-600, -1180]

    def test_width(self) -> None:
        """Width is the extent of the run."""
        layout = compute_positions(make_buffer(("a", 100), ("b", 100)), None, RTL)
        assert layout.width == 200


class TestLineBreaks:
    """Multi-line layout."""

    def test_line_break_resets_x_and_drops_baseline(self) -> None:
        """After a break, x returns to the origin one line lower."""
        layout = compute_positions(make_buffer(("a", 100), None, ("b", 100)), None, LTR)
        b = layout.placements[2]
        assert b.origin == Point(0, -1000)
        assert b.line == 1
        assert layout.line_count == 2

    def test_custom_line_height(self) -> None:
        """The baseline moves by the configured line height."""
        metrics = LineMetrics(ascender=700, descender=-300, line_height=1200)
        layout = compute_positions(make_buffer(("a", 100), None, ("b", 100)), None, LTR, metrics)
        assert layout.placements[2].origin.y == -1200
        assert layout.placements[2].rect == Rect(0, -1500, 100, 1000)

    def test_rtl_line_break_resets_to_origin(self) -> None:
        """RTL lines all start from the origin and move left."""
        layout = compute_positions(make_buffer(("a", 100), None, ("b", 100)), None, RTL)
        assert layout.placements[2].origin == Point(-100, -1000)

    def test_no_kerning_across_lines(self, kerning_table: KerningTable) -> None:
        """The pair spanning a line break is not kerned."""
        buffer = make_buffer(("A", 600), None, ("V", 580))
        assert xs(buffer, LTR, kerning_table)[2] == 0

    def test_width_is_widest_line(self) -> None:
        """Width measures the longest line."""
        layout = compute_positions(make_buffer(("a", 100), None, ("b", 300), ("c", 50)), None, LTR)
        assert layout.width == 350


class TestHitTest:
    """Point-to-sort lookup."""

    def test_rect_spans_descender_to_ascender(self) -> None:
        """Rects cover the advance horizontally and the metrics vertically."""
        layout = compute_positions(make_buffer(("a", 100)), None, LTR)
        assert layout.placements[0].rect == Rect(0, -200, 100, 1000)

    def test_hit_and_miss(self) -> None:
        """Points inside a rect find it; points outside find nothing."""
        layout = compute_positions(make_buffer(("a", 100), ("b", 100)), None, LTR)
        assert layout.hit_test(Point(150, 0)).index == 1
        assert layout.hit_test((50, 799)).index == 0
        assert layout.hit_test((50, 900)) is None
        assert layout.hit_test((250, 0)) is None

    def test_first_overlapping_rect_wins(self, kerning_table: KerningTable) -> None:
        """Kerned glyphs can overlap; the earlier sort is returned."""
        layout = compute_positions(make_buffer(("A", 600), ("V", 580)), kerning_table, LTR)
        assert layout.hit_test((550, 0)).index == 0
        assert layout.hit_test((650, 0)).index == 1

    def test_rtl_hit(self) -> None:
        """Hit testing works on negative coordinates."""
        layout = compute_positions(make_buffer(("a", 100), ("b", 100)), None, RTL)
        assert layout.hit_test((-150, 0)).index == 1

    def test_line_breaks_are_not_hit(self) -> None:
        """Line breaks have zero width."""
        layout = compute_positions(make_buffer(("a", 100), None), None, LTR)
        assert layout.hit_test((100, 0)) is None


class TestCaret:
    """Caret coordinates and affinity."""

    def test_empty_buffer_caret_at_origin(self) -> None:
        """With nothing to attach to the caret sits at the origin."""
        layout = compute_positions(SortBuffer(), None, LTR, origin=(10, 20))
        assert layout.caret == Point(10, 20)

    def test_caret_follows_buffer_cursor(self) -> None:
        """Layout.caret is computed for the buffer's cursor."""
        buffer = make_buffer(("a", 100), ("b", 150))
        buffer.set_cursor(1)
        assert compute_positions(buffer, None, LTR).caret == Point(100, 0)

    def test_affinity_differs_where_kerning_separates_edges(self, kerning_table: KerningTable) -> None:
        """Upstream uses the previous glyph's trailing edge, downstream the next glyph's leading edge."""
        layout = compute_positions(make_buffer(("A", 600), ("V", 580)), kerning_table, LTR)
        assert layout.caret_for(Cursor(1, Affinity.UPSTREAM)) == Point(600, 0)
        assert layout.caret_for(Cursor(1, Affinity.DOWNSTREAM)) == Point(520, 0)

    def test_buffer_ends_use_available_side(self) -> None:
        """At either end the only existing neighbour is used."""
        layout = compute_positions(make_buffer(("a", 100), ("b", 100)), None, LTR)
        assert layout.caret_for(Cursor(0, Affinity.UPSTREAM)) == Point(0, 0)
        assert layout.caret_for(Cursor(2, Affinity.DOWNSTREAM)) == Point(200, 0)

    def test_rtl_caret(self) -> None:
        """RTL carets sit on the right edge before a sort and the left edge after it."""
        layout = compute_positions(make_buffer(("a", 100), ("b", 100)), None, RTL)
        assert layout.caret_for(0) == Point(0, 0)
        assert layout.caret_for(Cursor(1, Affinity.UPSTREAM)) == Point(-100, 0)
        assert layout.caret_for(2) == Point(-200, 0)

    def test_caret_around_line_break(self) -> None:
        """Before a break the caret ends the line, after it the caret starts the next."""
        layout = compute_positions(make_buffer(("a", 100), None, ("b", 100)), None, LTR)
        assert layout.caret_for(Cursor(1, Affinity.DOWNSTREAM)) == Point(100, 0)
        assert layout.caret_for(Cursor(2, Affinity.UPSTREAM)) == Point(0, -1000)
        assert layout.caret_for(Cursor(2, Affinity.DOWNSTREAM)) == Point(0, -1000)

    def test_trailing_line_break(self) -> None:
        """A buffer ending in a break puts the caret on the new line."""
        buffer = make_buffer(("a", 100), None)
        assert compute_positions(buffer, None, LTR).caret == Point(0, -1000)

    def test_out_of_range_cursor_is_clamped(self) -> None:
        """Cursor indices past the end clamp to the end."""
        layout = compute_positions(make_buffer(("a", 100)), None, LTR)
        assert layout.caret_for(99) == Point(100, 0)


class TestNavigation:
    """Visual arrow keys mapped to logical movement."""

    @pytest.mark.parametrize(
        "move,direction,expected",
        [
            (VisualMove.LEFT, LTR, -1),
            (VisualMove.RIGHT, LTR, 1),
            (VisualMove.LEFT, RTL, 1),
            (VisualMove.RIGHT, RTL, -1),
        ],
    )
    def test_logical_delta(self, move: VisualMove, direction: TextDirection, expected: int) -> None:
        """Visual left is logical backward in LTR and forward in RTL."""
        assert logical_delta(move, direction) == expected

    def test_rtl_left_increases_index(self, sized_buffer: SortBuffer) -> None:
        """In RTL, the left arrow moves to a higher logical index."""
        sized_buffer.set_cursor(2)
        cursor = navigate(sized_buffer, VisualMove.LEFT, RTL)
        assert cursor.index == 3
        assert sized_buffer.cursor == 3

    def test_ltr_left_decreases_index(self, sized_buffer: SortBuffer) -> None:
        """In LTR, the left arrow moves to a lower logical index."""
        sized_buffer.set_cursor(2)
        assert navigate(sized_buffer, VisualMove.LEFT, LTR).index == 1

    def test_affinity_follows_movement(self, sized_buffer: SortBuffer) -> None:
        """Forward moves are upstream, backward moves downstream."""
        sized_buffer.set_cursor(2)
        assert navigate(sized_buffer, VisualMove.RIGHT, LTR).affinity is Affinity.UPSTREAM
        assert navigate(sized_buffer, VisualMove.RIGHT, RTL).affinity is Affinity.DOWNSTREAM

    def test_navigation_is_clamped(self, sized_buffer: SortBuffer) -> None:
        """Moving past either end leaves the cursor at the boundary."""
        sized_buffer.set_cursor(0)
        assert navigate(sized_buffer, VisualMove.LEFT, LTR).index == 0
        sized_buffer.set_cursor(5)
        assert navigate(sized_buffer, VisualMove.LEFT, RTL).index == 5
