"""Raster readers.

This module provides the ImageReader class for loading image files as
8-bit luminance buffers, and load_bits for text bit matrices.
"""

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from contour_tracer.exceptions import ImageLoadError


class ImageReader:
    """Loads image files as single-channel 8-bit luminance buffers.

    Any format Pillow can decode is accepted; color images are converted
    to luminance ("L" mode).

    Example:
        with ImageReader(Path("shape.png")) as reader:
            pixels = reader.pixels
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._pixels: np.ndarray | None = None
        self._source_mode: str | None = None

    def load(self) -> None:
        """Load and decode the image file.

        Raises:
            FileNotFoundError: If image file does not exist
            ImageLoadError: If the file cannot be decoded
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        try:
            with Image.open(self._image_path) as image:
                self._source_mode = image.mode
                self._pixels = np.array(image.convert("L"), dtype=np.uint8)
        except (UnidentifiedImageError, OSError) as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

    @property
    def pixels(self) -> np.ndarray:
        """Return the luminance buffer (height x width, uint8).

        The buffer is owned by the caller once returned; tracing it
        rewrites its pixels.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._pixels is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._pixels

    @property
    def width(self) -> int:
        """Return image width in pixels."""
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        """Return image height in pixels."""
        return self.pixels.shape[0]

    @property
    def mode(self) -> str:
        """Return the Pillow mode of the source image (e.g. "RGB", "1").

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._source_mode is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._source_mode

    def close(self) -> None:
        """Release the decoded buffer."""
        self._pixels = None
        self._source_mode = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def load_bits(path: Path) -> list[list[int]]:
    """Load a text bit matrix.

    Every non-blank line is one row; its `0` and `1` characters are the
    cells, whitespace between them is ignored.

    Args:
        path: Path to the text file

    Returns:
        Rows of 0/1 integers (not validated for rectangularity here)

    Raises:
        FileNotFoundError: If the file does not exist
        ImageLoadError: If a line contains anything other than 0, 1 or whitespace
    """
    if not path.exists():
        raise FileNotFoundError(f"Bit matrix file not found: {path}")

    rows: list[list[int]] = []
    for line_number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
        cells = "".join(line.split())
        if not cells:
            continue
        if set(cells) - {"0", "1"}:
            raise ImageLoadError(
                str(path), f"line {line_number} contains characters other than 0 and 1"
            )
        rows.append([int(c) for c in cells])
    return rows
