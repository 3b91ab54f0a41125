"""Unit tests for the boundary-walking state machine.

Tests cover:
- Trace kind tables
- Single boundaries (pixels, bars, corners, holes)
- Cell stamping
- Winding of outlines and holes
- Walks that never return
"""

import pytest

from contour_tracer.core.grid import BitGrid, TraceGrid
from contour_tracer.core.tracer import HOLE, OUTLINE, walk
from contour_tracer.domain import Cell, Orientation, PathKind, WindingDirection
from contour_tracer.exceptions import TracingError


class HorizontalLineGrid(TraceGrid):
    """Unbounded row of foreground cells that a walk can never leave."""

    @property
    def width(self) -> int:
        return 2

    @property
    def height(self) -> int:
        return 1

    def signed_value(self, x: int, y: int) -> int:
        return 1 if y == 0 else -1

    def add(self, x: int, y: int, delta: int) -> None:
        pass


class TestTraceKinds:
    """Tests for the constant trace kind tables."""

    def test_outline_table(self):
        assert OUTLINE.path_kind == PathKind.OUTLINE
        assert OUTLINE.inside == Cell.FOREGROUND
        assert OUTLINE.start == Orientation.EAST
        assert OUTLINE.terminal == Orientation.NORTH

    def test_hole_table(self):
        assert HOLE.path_kind == PathKind.HOLE
        assert HOLE.inside == Cell.BACKGROUND
        assert HOLE.start == Orientation.SOUTH
        assert HOLE.terminal == Orientation.WEST

    def test_mirrored_handedness(self):
        assert OUTLINE.side == -HOLE.side

    def test_deltas_are_distinct_powers_of_two(self):
        """Each heading leaves a distinguishable bit in the counter."""
        for kind in (OUTLINE, HOLE):
            magnitudes = sorted(abs(d) for d in kind.deltas.values())
            assert magnitudes == [1, 2, 4, 8]

    def test_delta_signs_preserve_cell_class(self):
        """Outline stamps keep foreground positive, hole stamps keep background negative."""
        assert all(d > 0 for d in OUTLINE.deltas.values())
        assert all(d < 0 for d in HOLE.deltas.values())


class TestOutlineWalk:
    """Tests for walking outlines."""

    def test_single_pixel(self):
        grid = BitGrid([[1]])
        path = walk(grid, (0, 0), OUTLINE)
        assert path.to_svg() == "M0 0H1V1H0"

    def test_single_pixel_closed(self):
        grid = BitGrid([[1]])
        path = walk(grid, (0, 0), OUTLINE, close=True)
        assert path.to_svg() == "M0 0H1V1H0Z"

    def test_single_pixel_stamps_every_heading(self):
        """A lone pixel is left with all four outline deltas: 1 + 1 + 2 + 4 + 8."""
        grid = BitGrid([[1]])
        walk(grid, (0, 0), OUTLINE)
        assert grid.signed_value(0, 0) == 16

    def test_straight_runs_collapse(self):
        """A bar emits one command per side, not one per cell."""
        grid = BitGrid([[1, 1, 1, 1, 1]])
        path = walk(grid, (0, 0), OUTLINE)
        assert path.to_svg() == "M0 0H5V1H0"

    def test_plus_shape(self):
        grid = BitGrid([[0, 1, 0], [1, 1, 1], [0, 1, 0]])
        path = walk(grid, (1, 0), OUTLINE, close=True)
        assert path.to_svg() == "M1 0H2V1H3V2H2V3H1V2H0V1H1Z"

    def test_l_shape(self):
        grid = BitGrid([[1, 1], [1, 0]])
        path = walk(grid, (0, 0), OUTLINE)
        assert path.to_svg() == "M0 0H2V1H1V2H0"

    def test_outline_is_clockwise(self):
        grid = BitGrid([[0, 1, 0], [1, 1, 1], [0, 1, 0]])
        path = walk(grid, (1, 0), OUTLINE)
        assert path.winding() == WindingDirection.CLOCKWISE

    def test_background_untouched(self):
        """An outline walk only stamps foreground cells."""
        grid = BitGrid([[1, 0], [0, 0]])
        walk(grid, (0, 0), OUTLINE)
        assert grid.signed_value(1, 0) == -1
        assert grid.signed_value(0, 1) == -1
        assert grid.signed_value(1, 1) == -1

    def test_explicit_orientation(self):
        """The default start heading can be passed explicitly."""
        grid = BitGrid([[1]])
        path = walk(grid, (0, 0), OUTLINE, orientation=Orientation.EAST)
        assert path.to_svg() == "M0 0H1V1H0"


class TestHoleWalk:
    """Tests for walking holes."""

    def test_single_cell_hole(self):
        grid = BitGrid([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
        walk(grid, (0, 0), OUTLINE)
        path = walk(grid, (1, 1), HOLE, close=True)
        assert path.to_svg() == "M1 1V2H2V1Z"
        assert path.kind == PathKind.HOLE

    def test_hole_is_counter_clockwise(self):
        grid = BitGrid([[1, 1, 1, 1], [1, 0, 0, 1], [1, 0, 0, 1], [1, 1, 1, 1]])
        walk(grid, (0, 0), OUTLINE)
        path = walk(grid, (1, 1), HOLE)
        assert path.to_svg() == "M1 1V3H3V1"
        assert path.winding() == WindingDirection.COUNTER_CLOCKWISE

    def test_hole_stamps_stay_negative(self):
        grid = BitGrid([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
        walk(grid, (0, 0), OUTLINE)
        walk(grid, (1, 1), HOLE)
        assert grid.signed_value(1, 1) == -16

    def test_hole_shares_edges_with_outline(self):
        """An outline and the hole it borders agree on shared coordinates."""
        grid = BitGrid([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
        outer = walk(grid, (0, 0), OUTLINE)
        hole = walk(grid, (1, 1), HOLE)
        assert outer.bounding_box() == (0, 0, 3, 3)
        assert hole.bounding_box() == (1, 1, 2, 2)


class TestWalkFailure:
    """A walk that never returns is a contract violation."""

    def test_walk_without_return_raises(self):
        with pytest.raises(TracingError, match="did not return"):
            walk(HorizontalLineGrid(), (0, 0), OUTLINE)
