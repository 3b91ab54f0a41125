"""Unit tests for the working rasters.

Tests cover:
- Bordered bit grid construction and counters
- In-place luminance buffer encoding
- Cell classification
- Input validation
"""

import numpy as np
import pytest

from contour_tracer.core.grid import (
    UNTOUCHED_BACKGROUND,
    UNTOUCHED_FOREGROUND,
    BitGrid,
    LuminanceGrid,
)
from contour_tracer.domain import Cell
from contour_tracer.exceptions import InvalidInputError


class TestBitGrid:
    """Tests for the bordered signed grid."""

    def test_dimensions(self):
        grid = BitGrid([[1, 0, 1], [0, 0, 0]])
        assert grid.width == 3
        assert grid.height == 2

    def test_initial_counters(self):
        """Foreground starts at +1, background at -1."""
        grid = BitGrid([[1, 0], [0, 1]])
        assert grid.signed_value(0, 0) == UNTOUCHED_FOREGROUND
        assert grid.signed_value(1, 0) == UNTOUCHED_BACKGROUND
        assert grid.signed_value(1, 1) == UNTOUCHED_FOREGROUND

    def test_border_reads_zero(self):
        """The one-cell border around the raster holds zeros."""
        grid = BitGrid([[1, 1], [1, 1]])
        assert grid.signed_value(-1, 0) == 0
        assert grid.signed_value(2, 1) == 0
        assert grid.signed_value(0, -1) == 0
        assert grid.signed_value(1, 2) == 0
        assert grid.signed_value(-1, -1) == 0

    def test_classify(self):
        grid = BitGrid([[1, 0]])
        assert grid.classify(0, 0) == Cell.FOREGROUND
        assert grid.classify(1, 0) == Cell.BACKGROUND
        assert grid.classify(2, 0) == Cell.OUTSIDE

    def test_add_accumulates(self):
        grid = BitGrid([[1, 0]])
        grid.add(0, 0, 2)
        grid.add(0, 0, 4)
        grid.add(1, 0, -8)
        assert grid.signed_value(0, 0) == 7
        assert grid.signed_value(1, 0) == -9

    def test_nonzero_values(self):
        """Any nonzero bool or int cell is foreground."""
        grid = BitGrid([[True, False, 2, np.int64(0)]])
        assert [grid.classify(x, 0) for x in range(4)] == [
            Cell.FOREGROUND,
            Cell.BACKGROUND,
            Cell.FOREGROUND,
            Cell.BACKGROUND,
        ]

    def test_numpy_input(self):
        bits = np.array([[0, 1], [1, 0]], dtype=np.uint8)
        grid = BitGrid(bits)
        assert grid.classify(1, 0) == Cell.FOREGROUND
        assert grid.classify(0, 0) == Cell.BACKGROUND

    def test_caller_matrix_untouched(self):
        """The grid is a working copy of the caller's matrix."""
        bits = [[1, 1], [1, 0]]
        numpy_bits = np.array(bits)
        BitGrid(bits).add(0, 0, 5)
        BitGrid(numpy_bits).add(0, 0, 5)
        assert bits == [[1, 1], [1, 0]]
        assert numpy_bits.tolist() == [[1, 1], [1, 0]]


class TestBitGridValidation:
    """Tests for rejecting malformed matrices."""

    def test_no_rows(self):
        with pytest.raises(InvalidInputError, match="no rows"):
            BitGrid([])

    def test_no_columns(self):
        with pytest.raises(InvalidInputError, match="no columns"):
            BitGrid([[], []])

    def test_ragged_rows(self):
        with pytest.raises(InvalidInputError, match="row 1 has 2 columns, expected 3"):
            BitGrid([[1, 0, 1], [1, 0]])

    def test_not_a_matrix(self):
        with pytest.raises(InvalidInputError, match="not a matrix"):
            BitGrid([1, 0, 1])

    def test_numpy_wrong_dimensions(self):
        with pytest.raises(InvalidInputError, match="2-D"):
            BitGrid(np.zeros(4))

    def test_numpy_empty(self):
        with pytest.raises(InvalidInputError, match="no columns"):
            BitGrid(np.zeros((3, 0)))

    def test_string_rows(self):
        """Rows of digit characters are not read as cells."""
        with pytest.raises(InvalidInputError, match="string"):
            BitGrid(["010", "010"])
        with pytest.raises(InvalidInputError, match="string"):
            BitGrid([b"010"])

    def test_string_matrix(self):
        with pytest.raises(InvalidInputError, match="not a matrix"):
            BitGrid("010\n010")

    def test_non_integer_cells(self):
        with pytest.raises(InvalidInputError, match="bool or int"):
            BitGrid([[0, "1", 0]])
        with pytest.raises(InvalidInputError, match="bool or int"):
            BitGrid([[0, 1.0]])
        with pytest.raises(InvalidInputError, match="bool or int"):
            BitGrid([[None, 1]])

    def test_numpy_non_integer_dtype(self):
        with pytest.raises(InvalidInputError, match="bool or int"):
            BitGrid(np.array([["0", "1"]]))
        with pytest.raises(InvalidInputError, match="bool or int"):
            BitGrid(np.array([[0.0, 1.0]]))

    def test_numpy_bool_and_int_dtypes(self):
        assert BitGrid(np.array([[True, False]])).classify(0, 0) == Cell.FOREGROUND
        assert BitGrid(np.array([[0, 3]], dtype=np.int32)).classify(1, 0) == (
            Cell.FOREGROUND
        )


class TestLuminanceGrid:
    """Tests for the in-place luminance buffer."""

    def test_buffer_rewritten_in_place(self):
        """Foreground pixels become 31, everything else 33."""
        buffer = np.array([[255, 0], [128, 255]], dtype=np.uint8)
        LuminanceGrid(buffer, 255)
        assert buffer.tolist() == [[31, 33], [33, 31]]

    def test_signed_values(self):
        buffer = np.array([[255, 0]], dtype=np.uint8)
        grid = LuminanceGrid(buffer, 255)
        assert grid.signed_value(0, 0) == UNTOUCHED_FOREGROUND
        assert grid.signed_value(1, 0) == UNTOUCHED_BACKGROUND

    def test_dimensions(self):
        buffer = np.zeros((2, 5), dtype=np.uint8)
        grid = LuminanceGrid(buffer, 255)
        assert grid.width == 5
        assert grid.height == 2

    def test_off_grid_clamps_to_neutral(self):
        """Reads beyond the image edge are neither foreground nor background."""
        buffer = np.full((2, 2), 255, dtype=np.uint8)
        grid = LuminanceGrid(buffer, 255)
        assert grid.signed_value(-1, 0) == 0
        assert grid.signed_value(2, 0) == 0
        assert grid.signed_value(0, 2) == 0
        assert grid.classify(0, -1) == Cell.OUTSIDE

    def test_add_matches_signed_counter(self):
        """Deltas move the counter exactly as in the bit grid."""
        buffer = np.array([[255, 0]], dtype=np.uint8)
        grid = LuminanceGrid(buffer, 255)
        grid.add(0, 0, 2)
        grid.add(1, 0, -8)
        assert grid.signed_value(0, 0) == 3
        assert grid.signed_value(1, 0) == -9
        assert buffer.tolist() == [[29, 41]]

    def test_add_wraps_to_eight_bits(self):
        buffer = np.array([[0]], dtype=np.uint8)
        grid = LuminanceGrid(buffer, 255)
        grid.add(0, 0, -240)
        assert buffer[0, 0] == (33 + 240) & 0xFF

    def test_custom_foreground_value(self):
        buffer = np.array([[1, 255]], dtype=np.uint8)
        grid = LuminanceGrid(buffer, 1)
        assert grid.classify(0, 0) == Cell.FOREGROUND
        assert grid.classify(1, 0) == Cell.BACKGROUND

    def test_invert(self):
        buffer = np.array([[0, 255]], dtype=np.uint8)
        grid = LuminanceGrid(buffer, 255, invert=True)
        assert grid.classify(0, 0) == Cell.FOREGROUND
        assert grid.classify(1, 0) == Cell.BACKGROUND


class TestLuminanceGridValidation:
    """Tests for rejecting malformed buffers."""

    def test_not_an_array(self):
        with pytest.raises(InvalidInputError, match="numpy array"):
            LuminanceGrid([[255]], 255)  # type: ignore[arg-type]

    def test_multi_channel(self):
        with pytest.raises(InvalidInputError, match="single-channel"):
            LuminanceGrid(np.zeros((2, 2, 3), dtype=np.uint8), 255)

    def test_wrong_dtype(self):
        with pytest.raises(InvalidInputError, match="uint8"):
            LuminanceGrid(np.zeros((2, 2), dtype=np.float32), 255)

    def test_empty(self):
        with pytest.raises(InvalidInputError, match="no pixels"):
            LuminanceGrid(np.zeros((0, 4), dtype=np.uint8), 255)

    def test_read_only(self):
        buffer = np.zeros((2, 2), dtype=np.uint8)
        buffer.flags.writeable = False
        with pytest.raises(InvalidInputError, match="read-only"):
            LuminanceGrid(buffer, 255)

    def test_foreground_out_of_range(self):
        with pytest.raises(InvalidInputError, match="outside 0-255"):
            LuminanceGrid(np.zeros((2, 2), dtype=np.uint8), 256)

    def test_foreground_not_an_integer(self):
        with pytest.raises(InvalidInputError, match="must be an integer"):
            LuminanceGrid(np.zeros((2, 2), dtype=np.uint8), 254.9)
        with pytest.raises(InvalidInputError, match="must be an integer"):
            LuminanceGrid(np.zeros((2, 2), dtype=np.uint8), "255")
        with pytest.raises(InvalidInputError, match="must be an integer"):
            LuminanceGrid(np.zeros((2, 2), dtype=np.uint8), True)

    def test_numpy_integer_foreground(self):
        buffer = np.array([[255, 0]], dtype=np.uint8)
        grid = LuminanceGrid(buffer, np.uint8(255))
        assert grid.classify(0, 0) == Cell.FOREGROUND

    def test_invalid_buffer_left_untouched(self):
        """Validation happens before any pixel is rewritten."""
        buffer = np.full((2, 2), 7, dtype=np.uint8)
        with pytest.raises(InvalidInputError):
            LuminanceGrid(buffer, -1)
        assert (buffer == 7).all()
