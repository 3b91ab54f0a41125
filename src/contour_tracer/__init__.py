"""Contour Tracer - Trace binary rasters into SVG path outlines.

Contour Tracer scans a binary raster (a boolean grid or a luminance image)
and emits one closed, axis-aligned polygon per connected foreground region
(outline, clockwise) and one per enclosed background region (hole,
counterclockwise), as a string of SVG path commands.

Example:
    >>> from contour_tracer import trace
    >>> trace([[1, 0, 0], [0, 1, 0], [0, 0, 1]], close_paths=True)
    'M0 0H1V1H0ZM1 1H2V2H1ZM2 2H3V3H2Z'
"""

from contour_tracer.core.processor import (
    trace,
    trace_image,
    trace_image_paths,
    trace_paths,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "trace",
    "trace_image",
    "trace_image_paths",
    "trace_paths",
]
