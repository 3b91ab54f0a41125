"""Path types for traced boundaries.

This module defines the vector output of the tracer:
- CommandType: SVG path command letter
- Command: A single move, horizontal, vertical or close command
- Path: The command sequence describing one boundary
- PathKind: Whether a path is an outline or a hole
- WindingDirection: Enum for path winding direction
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class WindingDirection(Enum):
    """Path winding direction in raster coordinates (y grows downwards).

    - Outlines always wind clockwise
    - Holes always wind counter-clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class PathKind(Enum):
    """Kind of boundary a path describes."""

    OUTLINE = "outline"
    HOLE = "hole"


class CommandType(str, Enum):
    """SVG path command letters emitted by the tracer."""

    MOVE = "M"
    HORIZONTAL = "H"
    VERTICAL = "V"
    CLOSE = "Z"


@dataclass(frozen=True, slots=True)
class Command:
    """One SVG path command with absolute integer coordinates.

    Attributes:
        op: Command letter
        values: (x, y) for a move, (x,) for horizontal, (y,) for vertical,
            () for close
    """

    op: CommandType
    values: tuple[int, ...] = ()

    def __str__(self) -> str:
        if self.op is CommandType.MOVE:
            return f"M{self.values[0]} {self.values[1]}"
        if self.op is CommandType.CLOSE:
            return "Z"
        return f"{self.op.value}{self.values[0]}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with op and values fields
        """
        return {"op": self.op.value, "values": list(self.values)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Command":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with op and values fields

        Returns:
            Command instance
        """
        return cls(op=CommandType(data["op"]), values=tuple(data["values"]))


@dataclass
class Path:
    """The commands describing one traced boundary.

    A path starts with exactly one move command, continues with alternating
    horizontal and vertical commands and optionally ends with a close
    command. The segment from the last vertex back to the start is implied.

    Attributes:
        kind: Whether this path is an outline or a hole
        commands: Commands in emission order
    """

    kind: PathKind
    commands: list[Command] = field(default_factory=list)

    @property
    def is_hole(self) -> bool:
        return self.kind is PathKind.HOLE

    @property
    def closed(self) -> bool:
        """True if the path ends with a close command."""
        return bool(self.commands) and self.commands[-1].op is CommandType.CLOSE

    @property
    def start(self) -> tuple[int, int]:
        """Coordinates of the initial move command."""
        x, y = self.commands[0].values
        return (x, y)

    def vertices(self) -> list[tuple[int, int]]:
        """Reconstruct the polygon corners from the command sequence.

        Returns:
            List of (x, y) corners, starting with the move target
        """
        if not self.commands:
            return []

        x, y = self.start
        points = [(x, y)]
        for command in self.commands[1:]:
            if command.op is CommandType.HORIZONTAL:
                x = command.values[0]
            elif command.op is CommandType.VERTICAL:
                y = command.values[0]
            else:
                continue
            points.append((x, y))
        return points

    def signed_area(self) -> int:
        """Calculate the signed area using the shoelace formula.

        With y growing downwards, a positive area means clockwise winding.
        Every corner is an integer lattice point, so the area is an integer.

        Returns:
            Signed area enclosed by the path
        """
        points = self.vertices()
        n = len(points)
        if n < 3:
            return 0

        twice_area = 0
        for i in range(n):
            x1, y1 = points[i]
            x2, y2 = points[(i + 1) % n]
            twice_area += x1 * y2 - x2 * y1
        return twice_area // 2

    def winding(self) -> WindingDirection | None:
        """Winding direction of the path, None for a degenerate path."""
        area = self.signed_area()
        if area > 0:
            return WindingDirection.CLOCKWISE
        if area < 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return None

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Calculate the bounding box of the path.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        points = self.vertices()
        if not points:
            return (0, 0, 0, 0)

        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_svg(self) -> str:
        """Render the path as SVG path data."""
        return "".join(str(command) for command in self.commands)

    def __str__(self) -> str:
        return self.to_svg()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the path
        """
        return {
            "kind": self.kind.value,
            "commands": [c.to_dict() for c in self.commands],
            "d": self.to_svg(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            Path instance
        """
        return cls(
            kind=PathKind(data["kind"]),
            commands=[Command.from_dict(c) for c in data["commands"]],
        )
