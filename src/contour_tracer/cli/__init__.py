"""Command-line interface for contour_tracer.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Trace images or text bit matrices
- Path data, SVG or JSON output
- Verbose/quiet output modes
- Detailed error reporting
"""

from contour_tracer.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
