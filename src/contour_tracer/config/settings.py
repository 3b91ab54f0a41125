"""Configuration settings for Contour Tracer."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Format of the traced output."""

    PATH = "path"
    SVG = "svg"
    JSON = "json"


class FillRule(str, Enum):
    """SVG fill rule used when rendering traced paths."""

    EVENODD = "evenodd"
    NONZERO = "nonzero"


class TracingConfig(BaseModel):
    """Configuration for raster classification and tracing."""

    close_paths: bool = Field(
        default=False,
        description="Terminate every path with the SVG close command (Z)",
    )
    foreground_value: int = Field(
        default=255,
        ge=0,
        le=255,
        description="Luminance value classified as foreground in image inputs",
    )
    invert: bool = Field(
        default=False,
        description="Classify every pixel not matching foreground_value as foreground",
    )


class OutputConfig(BaseModel):
    """Configuration for rendering traced paths."""

    format: OutputFormat = Field(
        default=OutputFormat.PATH,
        description="Output format",
    )
    fill: str = Field(
        default="black",
        description="SVG fill color",
    )
    fill_rule: FillRule = Field(
        default=FillRule.NONZERO,
        description="SVG fill rule (holes are wound opposite to outlines, so both work)",
    )
    scale: float = Field(
        default=1.0,
        gt=0.0,
        le=1000.0,
        description="Pixel size of one raster cell in the SVG document",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class TracerSettings(BaseModel):
    """Main application settings."""

    tracing: TracingConfig = Field(default_factory=TracingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TracerSettings:
    """Get default application settings."""
    return TracerSettings()
