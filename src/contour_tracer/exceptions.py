"""Exception hierarchy for Contour Tracer."""


class ContourTracerError(Exception):
    """Base exception for all Contour Tracer errors."""

    pass


class InvalidInputError(ContourTracerError):
    """Input raster is malformed and cannot be traced."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid input: {reason}")


class TracingError(ContourTracerError):
    """Internal contract violation while tracing a well-formed raster.

    Raised when a boundary walk never returns to its start cell, when the
    scan levels fall out of sync, or when the path emitter is misused.
    These indicate a bug, not bad input.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class IOLayerError(ContourTracerError):
    """Errors related to reading inputs or writing outputs."""

    pass


class ImageLoadError(IOLayerError):
    """Error loading an input image or bit matrix."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class OutputWriteError(IOLayerError):
    """Error writing traced output."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write output '{path}': {reason}")
