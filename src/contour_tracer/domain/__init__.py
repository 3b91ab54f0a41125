"""Domain models for contour_tracer.

This module contains the value types shared by the tracing engine, the I/O
layer and the CLI:

- Orientation: Compass heading of the boundary-walking cursor
- Cell: Classification of one raster cell
- Command: One SVG path command (M, H, V or Z)
- Path: The commands describing one traced boundary
"""

from contour_tracer.domain.orientation import MOORE_NEIGHBORHOOD, Cell, Orientation
from contour_tracer.domain.path import (
    Command,
    CommandType,
    Path,
    PathKind,
    WindingDirection,
)

__all__: list[str] = [
    # Enums
    "Cell",
    "CommandType",
    "Orientation",
    "PathKind",
    "WindingDirection",
    # Tables
    "MOORE_NEIGHBORHOOD",
    # Core types
    "Command",
    "Path",
]
