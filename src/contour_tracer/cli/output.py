"""Rich console output helpers for the CLI.

Status messages go to stderr so that path data printed to stdout can be
piped.
"""

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Contour Tracer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_raster_info(path: str, source: str, width: int, height: int) -> None:
    """Print input raster information.

    Args:
        path: Path to the input file
        source: Source description (e.g. "image, RGB" or "bit matrix")
        width: Raster width in cells
        height: Raster height in cells
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    line.append(f" ({source})")
    console.print(line)
    console.print(f"  {width:,} × {height:,} cells")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    total_time_s: float,
    outlines: int,
    holes: int,
    commands: int,
    output_path: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Tracing time in seconds
        outlines: Number of outlines traced
        holes: Number of holes traced
        commands: Total number of path commands
        output_path: Written file, None when printed to stdout
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(
        f"  {outlines} outlines {SYM_DOT} {holes} holes {SYM_DOT} {commands} commands"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
