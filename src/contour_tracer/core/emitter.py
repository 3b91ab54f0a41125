"""Incremental builder for the commands of one traced boundary."""

from contour_tracer.domain import Command, CommandType, Path, PathKind
from contour_tracer.exceptions import TracingError


class PathEmitter:
    """Accumulates the commands of one path in emission order.

    The first command is always a move. Every following command is a
    horizontal or vertical line; the tracer guarantees consecutive lines
    alternate in axis, the emitter never merges or reorders them.

    Example:
        emitter = PathEmitter(PathKind.OUTLINE)
        emitter.move(0, 0)
        emitter.append(CommandType.HORIZONTAL, 1)
        emitter.append(CommandType.VERTICAL, 1)
        emitter.append(CommandType.HORIZONTAL, 0)
        str(emitter.finalize(close=True))  # "M0 0H1V1H0Z"
    """

    def __init__(self, kind: PathKind) -> None:
        self._path = Path(kind=kind)
        self._finalized = False

    @property
    def vertex_count(self) -> int:
        """Number of vertices emitted so far, the move target included."""
        return len(self._path.commands)

    def move(self, x: int, y: int) -> None:
        """Emit the initial move command."""
        self._check_open()
        if self._path.commands:
            raise TracingError("path already has a move command")
        self._path.commands.append(Command(CommandType.MOVE, (x, y)))

    def append(self, op: CommandType, value: int) -> None:
        """Emit a horizontal or vertical line command."""
        self._check_open()
        if op not in (CommandType.HORIZONTAL, CommandType.VERTICAL):
            raise TracingError(f"cannot append {op.name} command to a path")
        if not self._path.commands:
            raise TracingError("path must start with a move command")
        self._path.commands.append(Command(op, (value,)))

    def finalize(self, close: bool = False) -> Path:
        """Finish the path, optionally appending the close command.

        Returns:
            The completed path; str(path) gives its SVG command string
        """
        self._check_open()
        if not self._path.commands:
            raise TracingError("cannot finalize an empty path")
        if close:
            self._path.commands.append(Command(CommandType.CLOSE))
        self._finalized = True
        return self._path

    def _check_open(self) -> None:
        if self._finalized:
            raise TracingError("path has already been finalized")
