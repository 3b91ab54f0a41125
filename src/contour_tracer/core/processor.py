"""Public tracing entry points.

This module ties validation, the working rasters and the scanner together.

Key components:
- trace / trace_paths: Trace a boolean matrix (the caller's copy is untouched)
- trace_image / trace_image_paths: Trace an 8-bit buffer in place
- TraceProcessor: Settings-driven orchestrator with structured logging
  and statistics, used by the CLI
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from contour_tracer.config import TracerSettings
from contour_tracer.core.grid import BitGrid, LuminanceGrid, TraceGrid
from contour_tracer.core.scanner import trace_all
from contour_tracer.domain import Path
from contour_tracer.exceptions import ContourTracerError
from contour_tracer.utils import TraceLogger, TraceStats, get_logger


def trace_paths(bits: Any, close_paths: bool = False) -> list[Path]:
    """Trace a boolean matrix into paths.

    Args:
        bits: Rectangular matrix of bool or int cells, nonzero is foreground
        close_paths: Terminate every path with the close command

    Returns:
        Outline and hole paths in discovery order

    Raises:
        InvalidInputError: If the matrix is empty, not rectangular or holds
            cells that are not bool or int
    """
    return trace_all(BitGrid(bits), close_paths)


def trace(bits: Any, close_paths: bool = False) -> str:
    """Trace a boolean matrix into a string of SVG path commands.

    Example:
        >>> trace([[1, 1], [1, 1]])
        'M0 0H2V2H0'

    Args:
        bits: Rectangular matrix of bool or int cells, nonzero is foreground
        close_paths: Terminate every path with the close command

    Returns:
        Concatenated path data, empty when there is no foreground

    Raises:
        InvalidInputError: If the matrix is empty, not rectangular or holds
            cells that are not bool or int
    """
    return "".join(path.to_svg() for path in trace_paths(bits, close_paths))


def trace_image_paths(
    buffer: np.ndarray,
    foreground_value: int,
    close_paths: bool = False,
    invert: bool = False,
) -> list[Path]:
    """Trace an 8-bit single-channel buffer into paths.

    The buffer is rewritten in place; keep a copy if the original pixel
    values are still needed.

    Args:
        buffer: 2-D numpy uint8 array
        foreground_value: Luminance value classified as foreground
        close_paths: Terminate every path with the close command
        invert: Classify pixels not equal to foreground_value as foreground

    Returns:
        Outline and hole paths in discovery order

    Raises:
        InvalidInputError: If the buffer or foreground value is invalid
    """
    return trace_all(LuminanceGrid(buffer, foreground_value, invert), close_paths)


def trace_image(
    buffer: np.ndarray,
    foreground_value: int,
    close_paths: bool = False,
    invert: bool = False,
) -> str:
    """Trace an 8-bit single-channel buffer into SVG path commands.

    The buffer is rewritten in place; keep a copy if the original pixel
    values are still needed.

    Args:
        buffer: 2-D numpy uint8 array
        foreground_value: Luminance value classified as foreground
        close_paths: Terminate every path with the close command
        invert: Classify pixels not equal to foreground_value as foreground

    Returns:
        Concatenated path data, empty when there is no foreground
    """
    paths = trace_image_paths(buffer, foreground_value, close_paths, invert)
    return "".join(path.to_svg() for path in paths)


@dataclass
class TraceResult:
    """Paths of one tracing run with the raster size and statistics."""

    paths: list[Path]
    width: int
    height: int
    stats: TraceStats = field(default_factory=TraceStats)

    @property
    def path_data(self) -> str:
        """Concatenated SVG path data of all paths."""
        return "".join(path.to_svg() for path in self.paths)

    @property
    def outlines(self) -> list[Path]:
        return [p for p in self.paths if not p.is_hole]

    @property
    def holes(self) -> list[Path]:
        return [p for p in self.paths if p.is_hole]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "width": self.width,
            "height": self.height,
            "paths": [p.to_dict() for p in self.paths],
        }


class TraceProcessor:
    """Orchestrates a tracing run using application settings.

    Example:
        settings = TracerSettings()
        processor = TraceProcessor(settings)
        result = processor.process_image(pixels)
        print(result.path_data)
    """

    def __init__(self, config: TracerSettings) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Tracer settings; only the tracing section is used here
        """
        self.config = config
        self.logger = get_logger()

    def process_bits(self, bits: Any) -> TraceResult:
        """Trace a boolean matrix; the caller's matrix is left untouched."""
        return self._run("bits", lambda: BitGrid(bits))

    def process_image(self, pixels: np.ndarray) -> TraceResult:
        """Trace a luminance buffer; the buffer is rewritten in place."""
        tracing = self.config.tracing
        return self._run(
            "image",
            lambda: LuminanceGrid(pixels, tracing.foreground_value, tracing.invert),
        )

    def _run(self, source: str, make_grid: Callable[[], TraceGrid]) -> TraceResult:
        trace_logger = TraceLogger(self.logger)
        stats = trace_logger.stats
        stats.start_time = time.time()

        try:
            grid = make_grid()
            trace_logger.log_trace_start(source, grid.width, grid.height)
            paths = trace_all(grid, self.config.tracing.close_paths)
        except ContourTracerError as e:
            trace_logger.log_trace_error(e)
            raise

        for path in paths:
            trace_logger.log_path(path.is_hole, len(path.commands))

        stats.end_time = time.time()
        trace_logger.log_trace_complete(stats.duration_seconds * 1000)

        return TraceResult(
            paths=paths,
            width=grid.width,
            height=grid.height,
            stats=stats,
        )
