"""Exception hierarchy for Shapecodec.

The pure codec never raises for malformed input; these exceptions are used by
the file I/O layer and the CLI.
"""


class ShapeCodecError(Exception):
    """Base exception for all Shapecodec errors."""

    pass


class DrawingError(ShapeCodecError):
    """Errors related to drawing loading or saving."""

    pass


class DrawingLoadError(DrawingError):
    """Error loading a drawing file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load drawing '{path}': {reason}")


class DrawingSaveError(DrawingError):
    """Error saving a drawing file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save drawing '{path}': {reason}")


class GeometryError(ShapeCodecError):
    """Errors in geometric data."""

    pass


class EmptyDrawingError(GeometryError):
    """Drawing contained no supported entities."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Drawing '{path}' contained no supported entities")
