"""Boundary-walking state machine (Theo Pavlidis' contour follower).

The tracer walks one boundary of a working raster, cell by cell, looking
at most three neighbors ahead of its current heading. It emits a vertex
only when the heading changes, so straight runs collapse into a single
segment. Every visit stamps the current cell with a delta chosen by the
heading, which the scanner later reads to resolve nesting.

Outlines are walked over foreground cells keeping the boundary edge on the
left, holes over background cells keeping it on the right, which makes
outlines wind clockwise and holes counterclockwise. Both kinds share one
walk; they differ only in the constant tables of their TraceKind.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from contour_tracer.core.emitter import PathEmitter
from contour_tracer.core.grid import TraceGrid
from contour_tracer.domain import Cell, CommandType, Orientation, Path, PathKind
from contour_tracer.exceptions import TracingError

logger = logging.getLogger(__name__)

N = Orientation.NORTH
E = Orientation.EAST
S = Orientation.SOUTH
W = Orientation.WEST


@dataclass(frozen=True)
class TraceKind:
    """Constant tables describing how one kind of boundary is walked.

    Attributes:
        path_kind: Kind of the emitted paths
        inside: Cell class lying inside the boundary
        start: Heading on the start cell
        terminal: Heading the closing phase rotates to
        side: Eighth-turn towards the boundary edge, -1 (left) or +1
            (right). The inward neighbor is at heading + side, a sharp
            inward turn rotates by 2 * side and an outward turn by -2 * side.
        vertex_offsets: Offset from a cell to the corner emitted for each
            heading; shared edges of an outline and a hole yield the same
            coordinates.
        deltas: Signed delta stamped into a visited cell for each heading
    """

    path_kind: PathKind
    inside: Cell
    start: Orientation
    terminal: Orientation
    side: int
    vertex_offsets: Mapping[Orientation, tuple[int, int]]
    deltas: Mapping[Orientation, int]


OUTLINE = TraceKind(
    path_kind=PathKind.OUTLINE,
    inside=Cell.FOREGROUND,
    start=E,
    terminal=N,
    side=-1,
    vertex_offsets={N: (0, 1), E: (0, 0), S: (1, 0), W: (1, 1)},
    deltas={N: 1, E: 2, S: 4, W: 8},
)

HOLE = TraceKind(
    path_kind=PathKind.HOLE,
    inside=Cell.BACKGROUND,
    start=S,
    terminal=W,
    side=1,
    vertex_offsets={N: (1, 1), E: (0, 1), S: (0, 0), W: (1, 0)},
    deltas={N: -4, E: -8, S: -1, W: -2},
)


class _Cursor:
    """Position and heading of the walk, plus the path emitted so far."""

    def __init__(
        self,
        grid: TraceGrid,
        kind: TraceKind,
        x: int,
        y: int,
        heading: Orientation,
    ) -> None:
        self.grid = grid
        self.kind = kind
        self.x = x
        self.y = y
        self.heading = heading
        self.emitter = PathEmitter(kind.path_kind)

    def is_inside(self, direction: Orientation) -> bool:
        dx, dy = direction.offset
        return self.grid.classify(self.x + dx, self.y + dy) is self.kind.inside

    def stamp(self) -> None:
        self.grid.add(self.x, self.y, self.kind.deltas[self.heading])

    def step(self, direction: Orientation) -> None:
        dx, dy = direction.offset
        self.x += dx
        self.y += dy

    def turn(self, steps: int) -> None:
        self.heading = self.heading.rotate(steps)

    def emit_move(self) -> None:
        ox, oy = self.kind.vertex_offsets[self.heading]
        self.emitter.move(self.x + ox, self.y + oy)

    def emit_vertex(self) -> None:
        # The new heading is perpendicular to the segment being ended
        ox, oy = self.kind.vertex_offsets[self.heading]
        if self.heading.is_vertical:
            self.emitter.append(CommandType.HORIZONTAL, self.x + ox)
        else:
            self.emitter.append(CommandType.VERTICAL, self.y + oy)


def walk(
    grid: TraceGrid,
    start: tuple[int, int],
    kind: TraceKind,
    close: bool = False,
    orientation: Orientation | None = None,
) -> Path:
    """Walk one boundary and return its path.

    Each step inspects the inward, front and outward neighbors of the
    current heading and takes the first matching move:

    1. Sharp inward turn: inward and front neighbors are inside. Step
       diagonally onto the inward neighbor and turn towards it.
    2. Straight: front neighbor is inside. Step forward, emit nothing.
    3. Convex corner pair: the outward and outward-front neighbors are
       inside. Turn outward, emit, turn back, step diagonally onto the
       outward-front neighbor and emit again.
    4. Outward turn: nothing ahead is inside. Turn outward in place.

    The walk ends on the start cell once more than two vertices exist,
    then rotates to the kind's terminal heading to square off the path.

    Args:
        grid: Working raster, modified in place
        start: (x, y) of the start cell
        kind: OUTLINE or HOLE
        close: Append the close command to the path
        orientation: Initial heading (defaults to the kind's start heading)

    Returns:
        The traced path

    Raises:
        TracingError: If the walk does not return to its start cell
    """
    heading = kind.start if orientation is None else orientation
    cursor = _Cursor(grid, kind, start[0], start[1], heading)
    side = kind.side

    cursor.emit_move()

    max_steps = 8 * grid.width * grid.height + 8
    for _ in range(max_steps):
        inward = cursor.heading.rotate(side)
        outward_front = cursor.heading.rotate(-side)
        outward = cursor.heading.rotate(-2 * side)

        if cursor.is_inside(inward) and cursor.is_inside(cursor.heading):
            cursor.stamp()
            cursor.step(inward)
            cursor.turn(2 * side)
            cursor.emit_vertex()
        elif cursor.is_inside(cursor.heading):
            cursor.stamp()
            cursor.step(cursor.heading)
        elif cursor.is_inside(outward_front) and cursor.is_inside(outward):
            cursor.stamp()
            cursor.turn(-2 * side)
            cursor.stamp()
            cursor.emit_vertex()
            cursor.turn(2 * side)
            cursor.step(cursor.heading.rotate(-side))
            cursor.emit_vertex()
        else:
            cursor.stamp()
            cursor.turn(-2 * side)
            cursor.emit_vertex()

        if (cursor.x, cursor.y) == start and cursor.emitter.vertex_count > 2:
            break
    else:
        raise TracingError(
            f"{kind.path_kind.value} started at {start} did not return "
            f"within {max_steps} steps"
        )

    # Closing: square off the path at the terminal heading
    while True:
        cursor.stamp()
        if cursor.heading is kind.terminal:
            break
        cursor.turn(-2 * side)
        cursor.emit_vertex()

    path = cursor.emitter.finalize(close)
    logger.debug(
        "Traced %s at %s with %d vertices",
        kind.path_kind.value,
        start,
        len(path.vertices()),
    )
    return path
