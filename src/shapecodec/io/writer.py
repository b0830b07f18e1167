"""Drawing writer for saving interchange documents."""

from collections.abc import Sequence
from pathlib import Path

from shapecodec.codec import is_exportable, serialize_paths
from shapecodec.config import CodecConfig
from shapecodec.domain import PathEntity
from shapecodec.exceptions import DrawingSaveError


class DrawingWriter:
    """Writes paths to an interchange document.

    Example:
        writer = DrawingWriter(Path("scene.dxf"))
        writer.write(paths)
    """

    def __init__(self, output_path: Path, config: CodecConfig | None = None) -> None:
        """Initialize the drawing writer.

        Args:
            output_path: Path where the drawing will be saved
            config: Codec settings used for export
        """
        self._output_path = output_path
        self._config = config or CodecConfig()

    def write(self, paths: Sequence[PathEntity]) -> int:
        """Serialize and save paths.

        Args:
            paths: Paths to export, in order

        Returns:
            Number of paths written (paths with fewer than two points are skipped)

        Raises:
            DrawingSaveError: If the file cannot be written
        """
        text = serialize_paths(paths, self._config)
        try:
            self._output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise DrawingSaveError(str(self._output_path), str(e)) from e
        return sum(1 for path in paths if is_exportable(path))

    @staticmethod
    def get_normalized_path(input_path: Path) -> Path:
        """Generate output path for a recentered copy of a drawing.

        Converts: outline.dxf -> outline-normalized.dxf

        Args:
            input_path: Original drawing path

        Returns:
            Path with -normalized suffix before extension
        """
        return input_path.parent / f"{input_path.stem}-normalized{input_path.suffix}"
