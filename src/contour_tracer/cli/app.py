"""CLI application entry point for contour_tracer.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from contour_tracer import __version__
from contour_tracer.cli.output import (
    console,
    print_error,
    print_header,
    print_raster_info,
    print_step,
    print_success,
)
from contour_tracer.config import (
    FillRule,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    TracerSettings,
    TracingConfig,
)
from contour_tracer.core import TraceProcessor, TraceResult
from contour_tracer.exceptions import (
    ContourTracerError,
    ImageLoadError,
    InvalidInputError,
    OutputWriteError,
)
from contour_tracer.io import ImageReader, SvgWriter, load_bits, write_json
from contour_tracer.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="contour-tracer",
    help="Trace binary rasters into SVG paths of outlines and holes.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Contour Tracer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def trace(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Path to input image (or text bit matrix with --bits)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: stdout, or {name}.svg for --format svg)",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-F",
            help="Output format (path|svg|json)",
        ),
    ] = "path",
    close_paths: Annotated[
        bool,
        typer.Option(
            "--close",
            "-c",
            help="Terminate every path with the Z command",
        ),
    ] = False,
    foreground: Annotated[
        int,
        typer.Option(
            "--foreground",
            "-f",
            help="Luminance value classified as foreground (0-255)",
            min=0,
            max=255,
        ),
    ] = 255,
    invert: Annotated[
        bool,
        typer.Option(
            "--invert",
            help="Treat pixels NOT matching --foreground as foreground",
        ),
    ] = False,
    bits: Annotated[
        bool,
        typer.Option(
            "--bits",
            help="Read the input as a text matrix of 0/1 characters",
        ),
    ] = False,
    fill: Annotated[
        str,
        typer.Option(
            "--fill",
            help="SVG fill color",
        ),
    ] = "black",
    fill_rule: Annotated[
        str,
        typer.Option(
            "--fill-rule",
            help="SVG fill rule (nonzero|evenodd)",
        ),
    ] = "nonzero",
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            "-s",
            help="SVG size of one raster cell",
            min=0.01,
            max=1000.0,
        ),
    ] = 1.0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Trace a binary raster into SVG path commands.

    Every 4-connected foreground region becomes a clockwise outline and
    every enclosed background region a counterclockwise hole.

    Example:
        contour-tracer logo.png --format svg

    This will create logo.svg with the traced outlines of all white pixels.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_path.exists():
        print_error(
            f"Input file not found: {input_path}",
            details=f"The file '{input_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_path.is_file():
        print_error(
            f"Input path is not a file: {input_path}",
            details="Please provide a path to an image or a bit matrix file.",
        )
        raise typer.Exit(code=1)

    # Validate enum arguments
    try:
        format_pref = OutputFormat(output_format.lower())
    except ValueError:
        print_error(
            f"Invalid format: {output_format}",
            details="Valid values: path, svg, json",
        )
        raise typer.Exit(code=1)

    try:
        fill_rule_pref = FillRule(fill_rule.lower())
    except ValueError:
        print_error(
            f"Invalid fill rule: {fill_rule}",
            details="Valid values: nonzero, evenodd",
        )
        raise typer.Exit(code=1)

    settings = TracerSettings(
        tracing=TracingConfig(
            close_paths=close_paths,
            foreground_value=foreground,
            invert=invert,
        ),
        output=OutputConfig(
            format=format_pref,
            fill=fill,
            fill_rule=fill_rule_pref,
            scale=scale,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        processor = TraceProcessor(settings)

        if not quiet:
            print_step("Loading raster")

        if bits:
            matrix = load_bits(input_path)
            if not quiet:
                width = len(matrix[0]) if matrix else 0
                print_raster_info(str(input_path), "bit matrix", width, len(matrix))
                print_step("Tracing")
            result = processor.process_bits(matrix)
        else:
            with ImageReader(input_path) as reader:
                pixels = reader.pixels
                if not quiet:
                    print_raster_info(
                        str(input_path),
                        f"image, {reader.mode}",
                        reader.width,
                        reader.height,
                    )
            if not quiet:
                print_step("Tracing")
            result = processor.process_image(pixels)

        written = _emit_result(result, settings, input_path, output)

        if not quiet:
            print_success(
                total_time_s=result.stats.duration_seconds,
                outlines=result.stats.outline_count,
                holes=result.stats.hole_count,
                commands=result.stats.command_count,
                output_path=str(written) if written else None,
            )

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ImageLoadError as e:
        print_error(f"Could not load input: {e.reason}")
        raise typer.Exit(code=1)
    except InvalidInputError as e:
        print_error(f"Input cannot be traced: {e.reason}")
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except ContourTracerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _emit_result(
    result: TraceResult,
    settings: TracerSettings,
    input_path: Path,
    output: Path | None,
) -> Path | None:
    """Print or write the traced result in the configured format.

    Args:
        result: Tracing result
        settings: Application settings
        input_path: Input raster path (used for the default SVG path)
        output: Explicit output path, if any

    Returns:
        Path of the written file, None when printed to stdout
    """
    output_format = settings.output.format

    if output_format is OutputFormat.SVG:
        writer = SvgWriter(settings.output)
        if output is None:
            output = SvgWriter.get_output_path(input_path)
        writer.write(result.paths, result.width, result.height, output)
        return output

    if output_format is OutputFormat.JSON:
        if output is None:
            typer.echo(json.dumps(result.to_dict(), indent=2))
            return None
        write_json(result.to_dict(), output)
        return output

    if output is None:
        typer.echo(result.path_data)
        return None
    try:
        output.write_text(result.path_data + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output), str(e)) from e
    return output


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
