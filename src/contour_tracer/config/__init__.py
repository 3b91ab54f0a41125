"""Configuration management for contour_tracer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TracingConfig: Raster classification and path closing
- OutputConfig: Output format and SVG rendering settings
- LoggingConfig: Logging settings
- TracerSettings: Main application settings
"""

from contour_tracer.config.settings import (
    FillRule,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    TracerSettings,
    TracingConfig,
    get_default_settings,
)

__all__ = [
    "FillRule",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "TracerSettings",
    "TracingConfig",
    "get_default_settings",
]
