"""Compass orientations and raster cell classes.

Orientations index the Moore neighborhood clockwise starting at north,
in raster coordinates (x grows to the east, y grows to the south):

          N
      NW  0  NE
       7     1
    W 6   o   2 E
       5     3
      SW  4  SE
          S

Rotating by +2 is a 90 degree clockwise turn, by -2 a counterclockwise one.
"""

from enum import Enum, IntEnum, auto


class Orientation(IntEnum):
    """Heading of the boundary-walking cursor."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7

    def rotate(self, steps: int) -> "Orientation":
        """Return the orientation `steps` eighth-turns clockwise from this one."""
        return Orientation((self + steps) % 8)

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) of the neighbor lying in this direction."""
        return MOORE_NEIGHBORHOOD[self]

    @property
    def is_vertical(self) -> bool:
        """True for north and south headings."""
        return self in (Orientation.NORTH, Orientation.SOUTH)


MOORE_NEIGHBORHOOD: tuple[tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


class Cell(Enum):
    """Classification of a raster cell as seen by the tracer.

    OUTSIDE marks positions beyond the addressed region. It counts as
    background when tracing outlines and is never entered by hole traces.
    """

    FOREGROUND = auto()
    BACKGROUND = auto()
    OUTSIDE = auto()
