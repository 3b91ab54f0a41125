"""Core tracing algorithms for contour_tracer.

This module contains:

- Working rasters (bordered bit grid, in-place luminance buffer)
- The boundary-walking state machine
- The raster scan resolving outline/hole nesting
- The path emitter
- Public entry points

The raster passed to a scan is owned by that scan for its whole duration
and is consumed by it.

Key functions:
- trace: Boolean matrix to SVG path data
- trace_image: Luminance buffer to SVG path data
- trace_all: Scan a working raster into paths
- walk: Trace a single boundary

Key classes:
- BitGrid, LuminanceGrid: Working rasters
- PathEmitter: Builds the commands of one path
- TraceProcessor: Settings-driven orchestrator
"""

from contour_tracer.core.emitter import PathEmitter
from contour_tracer.core.grid import BitGrid, LuminanceGrid, TraceGrid
from contour_tracer.core.processor import (
    TraceProcessor,
    TraceResult,
    trace,
    trace_image,
    trace_image_paths,
    trace_paths,
)
from contour_tracer.core.scanner import (
    ASCEND_SIGNATURES,
    DESCEND_SIGNATURES,
    trace_all,
)
from contour_tracer.core.tracer import HOLE, OUTLINE, TraceKind, walk

__all__ = [
    "ASCEND_SIGNATURES",
    "DESCEND_SIGNATURES",
    "HOLE",
    "OUTLINE",
    # Working rasters
    "BitGrid",
    "LuminanceGrid",
    "TraceGrid",
    # Tracing
    "PathEmitter",
    "TraceKind",
    "TraceProcessor",
    "TraceResult",
    "trace",
    "trace_all",
    "trace_image",
    "trace_image_paths",
    "trace_paths",
    "walk",
]
