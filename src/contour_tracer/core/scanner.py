"""Raster scan that discovers every boundary exactly once.

The scanner walks the raster row by row, left to right, keeping two
crossing counters per row: how many outline boundaries (ol) and how many
hole boundaries (hl) the scan line has crossed so far. Outside any shape
ol == hl, inside a shape ol > hl. An untouched cell in either state is
the top-left cell of a boundary nobody has traced yet.

After the tracer has stamped a boundary, the magnitude of a cell's
counter tells whether the scan line enters or leaves the boundary at that
cell. These magnitudes are sums of the tracer's per-heading deltas and
are fixed constants, not something recomputed from geometry.
"""

import logging

from contour_tracer.core.grid import (
    UNTOUCHED_BACKGROUND,
    UNTOUCHED_FOREGROUND,
    TraceGrid,
)
from contour_tracer.core.tracer import HOLE, OUTLINE, walk
from contour_tracer.domain import Path
from contour_tracer.exceptions import TracingError

logger = logging.getLogger(__name__)

# Counter magnitudes where the scan line enters a boundary
ASCEND_SIGNATURES = frozenset({2, 4, 10, 12})

# Counter magnitudes where the scan line leaves a boundary
DESCEND_SIGNATURES = frozenset({5, 7, 13, 15})


def trace_all(grid: TraceGrid, close_paths: bool = False) -> list[Path]:
    """Trace every outline and hole of a working raster.

    The grid is consumed: its counters are stamped in place and it cannot
    be scanned a second time.

    Args:
        grid: Working raster
        close_paths: Terminate every path with the close command

    Returns:
        Paths in discovery order (row-major by start cell)

    Raises:
        TracingError: If the crossing counters fall out of sync
    """
    paths: list[Path] = []

    for y in range(grid.height):
        outline_level = 0
        hole_level = 0

        for x in range(grid.width):
            value = grid.signed_value(x, y)
            if outline_level == hole_level and value == UNTOUCHED_FOREGROUND:
                paths.append(walk(grid, (x, y), OUTLINE, close_paths))
            elif outline_level > hole_level and value == UNTOUCHED_BACKGROUND:
                paths.append(walk(grid, (x, y), HOLE, close_paths))

            value = grid.signed_value(x, y)
            signature = abs(value)
            if signature in ASCEND_SIGNATURES:
                if value > 0:
                    outline_level += 1
                else:
                    hole_level += 1
            elif signature in DESCEND_SIGNATURES:
                if value > 0:
                    outline_level -= 1
                else:
                    hole_level -= 1
                if outline_level < 0 or hole_level < 0:
                    raise TracingError(
                        f"scan levels fell below zero at ({x}, {y})"
                    )

    logger.debug(
        "Scanned %dx%d raster, found %d boundaries",
        grid.width,
        grid.height,
        len(paths),
    )
    return paths
