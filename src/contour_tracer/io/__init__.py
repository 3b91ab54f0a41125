"""Raster and vector I/O layer for contour_tracer.

This module handles loading rasters from disk and writing traced paths.
It keeps file formats out of the tracing core.

Key responsibilities:
- Load images as 8-bit luminance buffers (Pillow)
- Parse text bit matrices
- Render traced paths as SVG documents or JSON

Key classes:
- ImageReader: Load images into numpy luminance buffers
- SvgWriter: Render and save SVG documents
"""

from contour_tracer.io.reader import ImageReader, load_bits
from contour_tracer.io.writer import SvgWriter, write_json

__all__ = [
    "ImageReader",
    "SvgWriter",
    "load_bits",
    "write_json",
]
