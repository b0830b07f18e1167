"""Unit tests for the drawing I/O layer.

Tests for DrawingReader, DrawingWriter, and shape-to-path conversion.
"""

from dataclasses import replace
from pathlib import Path

import pytest

from shapecodec.codec import parse_shapes
from shapecodec.config import CodecConfig
from shapecodec.domain import ParsedShape, PathKind, Point
from shapecodec.exceptions import DrawingSaveError
from shapecodec.io import DrawingReader, DrawingWriter, shape_to_path, shapes_to_paths

DRAWING = "\n".join([
    "0", "SECTION", "2", "ENTITIES",
    "0", "LINE", "8", "REFERENCE", "10", "0", "20", "0", "11", "10", "21", "10",
    "0", "CIRCLE", "8", "0", "10", "5", "20", "5", "40", "1",
    "0", "ENDSEC", "0", "EOF",
])


@pytest.fixture
def drawing_file(tmp_path: Path) -> Path:
    path = tmp_path / "outline.dxf"
    path.write_text(DRAWING, encoding="utf-8")
    return path


class TestShapeConversion:
    """Tests for lifting imported shapes into paths."""

    def test_shape_to_path(self):
        shape = ParsedShape(
            points=(Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)),
            closed=True,
            kind=PathKind.REFERENCE,
        )
        path = shape_to_path(shape, 0)

        assert path.meta.name == "Reference 1"
        assert path.meta.kind == PathKind.REFERENCE
        assert path.meta.closed is True
        assert path.points == list(shape.points)
        assert path.sampled is None

    def test_names_follow_import_order(self):
        shapes = [
            ParsedShape((Point(0.0, 0.0), Point(1.0, 1.0)), False, PathKind.DESIGN),
            ParsedShape((Point(0.0, 0.0), Point(1.0, 1.0)), False, PathKind.REFERENCE),
            ParsedShape((Point(0.0, 0.0), Point(1.0, 1.0)), False, PathKind.DESIGN),
        ]
        names = [path.meta.name for path in shapes_to_paths(shapes)]

        assert names == ["Imported 1", "Reference 2", "Imported 3"]

    def test_identifiers_are_unique(self):
        shape = ParsedShape((Point(0.0, 0.0), Point(1.0, 1.0)), False, PathKind.DESIGN)
        paths = shapes_to_paths([shape, shape])

        node_ids = {node.id for path in paths for node in path.nodes}
        assert paths[0].meta.id != paths[1].meta.id
        assert len(node_ids) == 4


class TestDrawingReader:
    """Tests for DrawingReader class."""

    def test_text_before_load(self):
        reader = DrawingReader(Path("drawing.dxf"))
        with pytest.raises(RuntimeError, match="Drawing not loaded"):
            _ = reader.text

    def test_read_shapes_before_load(self):
        reader = DrawingReader(Path("drawing.dxf"))
        with pytest.raises(RuntimeError, match="Drawing not loaded"):
            reader.read_shapes()

    def test_load_nonexistent_file(self, tmp_path: Path):
        reader = DrawingReader(tmp_path / "missing.dxf")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_read_shapes(self, drawing_file: Path):
        reader = DrawingReader(drawing_file)
        reader.load()
        shapes = reader.read_shapes()

        assert shapes == parse_shapes(DRAWING)
        assert [s.kind for s in shapes] == [PathKind.REFERENCE, PathKind.DESIGN]
        assert reader.token_count == 15

    def test_read_paths(self, drawing_file: Path):
        with DrawingReader(drawing_file) as reader:
            paths = reader.read_paths()

        assert [p.meta.name for p in paths] == ["Reference 1", "Imported 2"]
        assert paths[1].meta.closed is True

    def test_context_manager_releases_text(self, drawing_file: Path):
        with DrawingReader(drawing_file) as reader:
            assert reader.text == DRAWING

        with pytest.raises(RuntimeError):
            _ = reader.text

    def test_workspace_config(self, drawing_file: Path):
        with DrawingReader(drawing_file, CodecConfig(workspace_size=20.0)) as reader:
            line = reader.read_shapes()[0]

        assert line.points == (Point(5.0, 5.0), Point(15.0, 15.0))

    def test_undecodable_bytes_replaced(self, tmp_path: Path):
        path = tmp_path / "latin1.dxf"
        path.write_bytes(DRAWING.replace("REFERENCE", "R\xe9F").encode("latin-1"))

        with DrawingReader(path) as reader:
            shapes = reader.read_shapes()

        assert len(shapes) == 2
        assert shapes[0].kind == PathKind.DESIGN


class TestDrawingWriter:
    """Tests for DrawingWriter class."""

    def test_write(self, drawing_file: Path, tmp_path: Path):
        with DrawingReader(drawing_file) as reader:
            paths = reader.read_paths()

        output = tmp_path / "out.dxf"
        written = DrawingWriter(output).write(paths)

        assert written == 2
        assert output.read_text(encoding="utf-8").endswith("EOF")
        assert len(parse_shapes(output.read_text(encoding="utf-8"))) == 2

    def test_written_count_matches_document(self, drawing_file: Path, tmp_path: Path):
        """Paths too short to export are left out of the count."""
        with DrawingReader(drawing_file) as reader:
            paths = reader.read_paths()
        paths.append(replace(paths[0], nodes=paths[0].nodes[:1]))
        paths.append(replace(paths[0], nodes=[]))

        output = tmp_path / "out.dxf"
        written = DrawingWriter(output).write(paths)

        assert written == 2
        assert written == len(parse_shapes(output.read_text(encoding="utf-8")))

    def test_write_to_missing_directory(self, tmp_path: Path):
        writer = DrawingWriter(tmp_path / "missing" / "out.dxf")
        with pytest.raises(DrawingSaveError, match="Failed to save drawing"):
            writer.write([])

    def test_get_normalized_path(self):
        test_cases = [
            (Path("outline.dxf"), Path("outline-normalized.dxf")),
            (Path("/path/to/Part-A.DXF"), Path("/path/to/Part-A-normalized.DXF")),
        ]
        for input_path, expected in test_cases:
            assert DrawingWriter.get_normalized_path(input_path) == expected
