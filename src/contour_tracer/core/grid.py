"""Working rasters consumed by the scanner and the tracer.

A working raster stores one signed counter per cell: positive for
foreground, negative for background, zero outside the addressed region.
The tracer adds a per-orientation delta to every cell it visits, so a
counter is both a visited marker and a record of the headings a boundary
passed the cell with. The scanner reads these signatures back to keep
track of nesting.

Two storage shapes implement the same capability set:
- BitGrid: a signed integer array with an explicit one-cell border
- LuminanceGrid: a caller-owned 8-bit image buffer rewritten in place
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

import numpy as np

from contour_tracer.domain import Cell
from contour_tracer.exceptions import InvalidInputError

# Counters of cells no trace has visited yet
UNTOUCHED_FOREGROUND = 1
UNTOUCHED_BACKGROUND = -1


class TraceGrid(ABC):
    """Capability set shared by all working rasters.

    Coordinates are raster coordinates: 0 <= x < width, 0 <= y < height.
    Reads one cell beyond the raster edge are allowed and resolve to
    Cell.OUTSIDE with a zero counter.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        """Number of columns."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Number of rows."""

    @abstractmethod
    def signed_value(self, x: int, y: int) -> int:
        """Return the current counter of a cell (0 when off the raster)."""

    @abstractmethod
    def add(self, x: int, y: int, delta: int) -> None:
        """Accumulate a signed delta into the counter of a cell."""

    def classify(self, x: int, y: int) -> Cell:
        """Classify a cell by the sign of its counter."""
        value = self.signed_value(x, y)
        if value > 0:
            return Cell.FOREGROUND
        if value < 0:
            return Cell.BACKGROUND
        return Cell.OUTSIDE


class BitGrid(TraceGrid):
    """Working copy of a boolean matrix, surrounded by a border of zeros.

    The border makes every neighbor lookup of an in-raster cell a plain
    array read. The caller's matrix is never modified.

    Example:
        grid = BitGrid([[1, 0], [0, 1]])
        grid.signed_value(0, 0)  # 1
        grid.signed_value(-1, 0)  # 0, border
    """

    def __init__(self, bits: Any) -> None:
        """Build the bordered counter array.

        Args:
            bits: Rectangular matrix of bool or int cells (nonzero is
                foreground), or a 2-D bool or integer numpy array

        Raises:
            InvalidInputError: If the matrix is empty, not rectangular or
                holds cells that are not bool or int
        """
        mask = _as_mask(bits)
        height, width = mask.shape
        self._width = width
        self._height = height
        self._counters = np.zeros((height + 2, width + 2), dtype=np.int16)
        self._counters[1:-1, 1:-1] = np.where(
            mask, UNTOUCHED_FOREGROUND, UNTOUCHED_BACKGROUND
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def signed_value(self, x: int, y: int) -> int:
        return int(self._counters[y + 1, x + 1])

    def add(self, x: int, y: int, delta: int) -> None:
        self._counters[y + 1, x + 1] += delta


class LuminanceGrid(TraceGrid):
    """An 8-bit single-channel image buffer used as the working raster.

    On construction every pixel is rewritten in place: pixels equal to the
    foreground value become 31, all others 33. The counter of a pixel is
    `32 - pixel`, so foreground reads as +1 and background as -1, and
    deltas are subtracted from the raw byte with 8-bit wraparound.
    Neighbor reads beyond the image edge clamp to the neutral value 32.
    """

    NEUTRAL = 32

    def __init__(
        self,
        buffer: np.ndarray,
        foreground_value: int,
        invert: bool = False,
    ) -> None:
        """Rewrite the buffer into the tracing encoding.

        Args:
            buffer: 2-D numpy uint8 array, modified in place
            foreground_value: Luminance value classified as foreground
            invert: Classify pixels NOT equal to foreground_value as foreground

        Raises:
            InvalidInputError: If the buffer or the foreground value is invalid
        """
        _validate_buffer(buffer)
        if isinstance(foreground_value, (bool, np.bool_)) or not isinstance(
            foreground_value, (int, np.integer)
        ):
            raise InvalidInputError(
                "foreground value must be an integer, "
                f"got {type(foreground_value).__name__}"
            )
        if not 0 <= foreground_value <= 255:
            raise InvalidInputError(
                f"foreground value {foreground_value} is outside 0-255"
            )

        matches = buffer == int(foreground_value)
        if invert:
            matches = ~matches
        buffer[...] = np.where(
            matches,
            self.NEUTRAL - UNTOUCHED_FOREGROUND,
            self.NEUTRAL - UNTOUCHED_BACKGROUND,
        )

        self._pixels = buffer
        self._height, self._width = buffer.shape

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def signed_value(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            return 0
        return self.NEUTRAL - int(self._pixels[y, x])

    def add(self, x: int, y: int, delta: int) -> None:
        self._pixels[y, x] = (int(self._pixels[y, x]) - delta) & 0xFF


def _as_mask(bits: Any) -> np.ndarray:
    """Convert a boolean matrix to a validated 2-D numpy mask."""
    if isinstance(bits, np.ndarray):
        if bits.ndim != 2:
            raise InvalidInputError(
                f"expected a 2-D matrix, got {bits.ndim} dimension(s)"
            )
        if bits.shape[0] == 0:
            raise InvalidInputError("grid has no rows")
        if bits.shape[1] == 0:
            raise InvalidInputError("grid has no columns")
        if bits.dtype.kind not in "biu":
            raise InvalidInputError(
                f"grid cells must be bool or int, got {bits.dtype}"
            )
        return bits.astype(bool)

    if isinstance(bits, (str, bytes)):
        raise InvalidInputError("grid is not a matrix: got a string")

    try:
        rows = [_row_cells(row) for row in bits]
    except TypeError as e:
        raise InvalidInputError(f"grid is not a matrix: {e}") from e

    if not rows:
        raise InvalidInputError("grid has no rows")

    width = len(rows[0])
    if width == 0:
        raise InvalidInputError("grid has no columns")

    for index, row in enumerate(rows):
        if len(row) != width:
            raise InvalidInputError(
                f"row {index} has {len(row)} columns, expected {width}"
            )

    return np.array([_row_mask(row) for row in rows], dtype=bool)


def _row_cells(row: Any) -> list[Any]:
    if isinstance(row, (str, bytes)):
        raise InvalidInputError(
            f"grid row {row!r} is a string, not a sequence of cells"
        )
    return list(row)


def _row_mask(row: Iterable[Any]) -> list[bool]:
    cells: list[bool] = []
    for value in row:
        if not isinstance(value, (bool, int, np.bool_, np.integer)):
            raise InvalidInputError(
                f"grid cells must be bool or int, got {type(value).__name__}"
            )
        cells.append(bool(value))
    return cells


def _validate_buffer(buffer: Any) -> None:
    """Check that a buffer is a writable, non-empty 2-D uint8 array."""
    if not isinstance(buffer, np.ndarray):
        raise InvalidInputError(
            f"image buffer must be a numpy array, got {type(buffer).__name__}"
        )
    if buffer.ndim != 2:
        raise InvalidInputError(
            f"image buffer must be single-channel 2-D, got shape {buffer.shape}"
        )
    if buffer.dtype != np.uint8:
        raise InvalidInputError(f"image buffer must be uint8, got {buffer.dtype}")
    if buffer.shape[0] == 0 or buffer.shape[1] == 0:
        raise InvalidInputError("image buffer has no pixels")
    if not buffer.flags.writeable:
        raise InvalidInputError("image buffer is read-only")
