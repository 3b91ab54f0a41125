"""Logging utilities for Contour Tracer."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class TraceStats:
    """Statistics from a tracing run."""

    width: int = 0
    height: int = 0
    outline_count: int = 0
    hole_count: int = 0
    command_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def path_count(self) -> int:
        """Total number of traced boundaries."""
        return self.outline_count + self.hole_count

    @property
    def duration_seconds(self) -> float:
        """Calculate tracing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger(name: str = "contour_tracer") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


class TraceLogger:
    """Logger for tracking tracing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = TraceStats()

    def log_trace_start(self, source: str, width: int, height: int) -> None:
        """Log start of a tracing run."""
        self._stats.width = width
        self._stats.height = height
        self._logger.debug("Tracing raster", source=source, width=width, height=height)

    def log_path(self, is_hole: bool, command_count: int) -> None:
        """Record one traced boundary."""
        if is_hole:
            self._stats.hole_count += 1
        else:
            self._stats.outline_count += 1
        self._stats.command_count += command_count

    def log_trace_complete(self, duration_ms: float) -> None:
        """Log successful tracing run."""
        self._logger.info(
            "Raster traced",
            width=self._stats.width,
            height=self._stats.height,
            outlines=self._stats.outline_count,
            holes=self._stats.hole_count,
            commands=self._stats.command_count,
            duration_ms=round(duration_ms, 2),
        )

    def log_trace_error(self, error: Exception) -> None:
        """Log a tracing failure."""
        self._logger.error(
            "Tracing failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> TraceStats:
        """Get current tracing statistics."""
        return self._stats
