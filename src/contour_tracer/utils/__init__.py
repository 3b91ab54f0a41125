"""Utility functions for contour_tracer.

This module provides utility functions including:

- Logging setup and configuration
- Per-run tracing statistics
"""

from contour_tracer.utils.logging import (
    TraceLogger,
    TraceStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "TraceLogger",
    "TraceStats",
    "configure_logging",
    "get_logger",
]
