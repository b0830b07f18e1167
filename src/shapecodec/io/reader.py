"""Drawing reader for loading interchange documents.

This module provides the DrawingReader class for loading drawing files
and extracting shapes into domain models.
"""

from pathlib import Path

from shapecodec.codec import parse_shapes, tokenize
from shapecodec.config import CodecConfig
from shapecodec.domain import ParsedShape, PathEntity
from shapecodec.io.converter import shapes_to_paths


class DrawingReader:
    """Loads interchange documents and extracts shapes.

    Example:
        reader = DrawingReader(Path("outline.dxf"))
        reader.load()
        for shape in reader.read_shapes():
            print(shape.kind)
    """

    def __init__(self, drawing_path: Path, config: CodecConfig | None = None) -> None:
        """Initialize the drawing reader.

        Args:
            drawing_path: Path to the drawing file
            config: Codec settings used for import
        """
        self._drawing_path = drawing_path
        self._config = config or CodecConfig()
        self._text: str | None = None

    def load(self) -> None:
        """Load the drawing file.

        Undecodable bytes are replaced rather than rejected, since files from
        foreign tools are often not clean UTF-8.

        Raises:
            FileNotFoundError: If drawing file does not exist
            OSError: If drawing file cannot be read
        """
        if not self._drawing_path.exists():
            raise FileNotFoundError(f"Drawing file not found: {self._drawing_path}")

        self._text = self._drawing_path.read_text(encoding="utf-8", errors="replace")

    @property
    def text(self) -> str:
        """Return the raw document text.

        Raises:
            RuntimeError: If drawing has not been loaded yet
        """
        if self._text is None:
            raise RuntimeError("Drawing not loaded. Call load() first.")
        return self._text

    @property
    def token_count(self) -> int:
        """Return the number of group-code tokens in the document."""
        return len(tokenize(self.text))

    def read_shapes(self) -> list[ParsedShape]:
        """Parse the document into centered, categorized shapes.

        Raises:
            RuntimeError: If drawing has not been loaded yet
        """
        return parse_shapes(self.text, self._config)

    def read_paths(self) -> list[PathEntity]:
        """Parse the document and lift each shape into a path.

        Raises:
            RuntimeError: If drawing has not been loaded yet
        """
        return shapes_to_paths(self.read_shapes())

    def close(self) -> None:
        """Release the loaded document text."""
        self._text = None

    def __enter__(self) -> "DrawingReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
