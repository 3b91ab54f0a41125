"""Writers for traced paths.

This module provides the SvgWriter class for rendering traced paths as a
standalone SVG document, and write_json for a machine-readable dump.
"""

import json
from pathlib import Path
from typing import Any
from xml.etree import ElementTree as ET

from contour_tracer.config import OutputConfig
from contour_tracer.domain import Path as TracedPath
from contour_tracer.exceptions import OutputWriteError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SvgWriter:
    """Renders traced paths into an SVG document.

    All paths go into a single <path> element: outlines wind clockwise and
    holes counterclockwise, so holes stay empty under either fill rule.

    Example:
        writer = SvgWriter(OutputConfig(fill="navy"))
        writer.write(paths, width=64, height=64, output_path=Path("shape.svg"))
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            config: Output settings (fill, fill rule, scale)
        """
        self.config = config or OutputConfig()

    def render(self, paths: list[TracedPath], width: int, height: int) -> str:
        """Render paths as an SVG document string.

        Args:
            paths: Traced paths
            width: Raster width in cells
            height: Raster height in cells

        Returns:
            SVG document text
        """
        root = self.build(paths, width, height)
        return ET.tostring(root, encoding="unicode") + "\n"

    def build(self, paths: list[TracedPath], width: int, height: int) -> ET.Element:
        """Build the SVG element tree.

        The viewBox spans the raster in cells; width and height are the
        rendered size after scaling.
        """
        scale = self.config.scale

        root = ET.Element("svg")
        root.set("xmlns", SVG_NAMESPACE)
        root.set("width", _format_number(width * scale))
        root.set("height", _format_number(height * scale))
        root.set("viewBox", f"0 0 {width} {height}")

        path = ET.SubElement(root, "path")
        path.set("fill", self.config.fill)
        path.set("fill-rule", self.config.fill_rule.value)
        path.set("d", "".join(p.to_svg() for p in paths))

        ET.indent(root)
        return root

    def write(
        self,
        paths: list[TracedPath],
        width: int,
        height: int,
        output_path: Path,
    ) -> None:
        """Render paths and save the SVG document.

        Raises:
            OutputWriteError: If the file cannot be written
        """
        _write_text(output_path, self.render(paths, width, height))

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for an input raster.

        Converts: shape.png -> shape.svg

        Args:
            input_path: Input raster path

        Returns:
            Path next to the input with an .svg suffix
        """
        return input_path.with_suffix(".svg")


def write_json(data: dict[str, Any], output_path: Path) -> None:
    """Write a JSON document.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    _write_text(output_path, json.dumps(data, indent=2) + "\n")


def _write_text(output_path: Path, text: str) -> None:
    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_path), str(e)) from e


def _format_number(value: float) -> str:
    """Format a dimension without a trailing .0 for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
