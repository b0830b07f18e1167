"""Integration tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from shapecodec import __version__, parse_shapes
from shapecodec.cli.app import app
from shapecodec.codec import scan_entities, tokenize
from shapecodec.core import classify_shape

runner = CliRunner()

DRAWING = "\n".join([
    "0", "SECTION", "2", "HEADER", "0", "ENDSEC",
    "0", "SECTION", "2", "ENTITIES",
    "0", "CIRCLE", "8", "REFERENCE", "10", "100", "20", "100", "40", "10",
    "0", "LWPOLYLINE", "8", "0", "70", "1",
    "10", "90", "20", "95", "10", "110", "20", "95", "10", "110", "20", "105",
    "0", "ENDSEC", "0", "EOF",
])


@pytest.fixture
def drawing_file(tmp_path: Path) -> Path:
    path = tmp_path / "part.dxf"
    path.write_text(DRAWING, encoding="utf-8")
    return path


class TestVersion:
    """Tests for the --version flag."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestInspect:
    """Tests for the inspect command."""

    def test_table(self, drawing_file: Path):
        result = runner.invoke(app, ["inspect", str(drawing_file)])

        assert result.exit_code == 0
        assert "Reference 1" in result.output
        assert "Imported 2" in result.output
        assert "circle" in result.output

    def test_json(self, drawing_file: Path):
        result = runner.invoke(app, ["inspect", str(drawing_file), "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert [item["path"]["meta"]["name"] for item in payload] == ["Reference 1", "Imported 2"]
        assert payload[0]["summary"]["kind"] == "circle"
        assert payload[0]["summary"]["diameter"] == pytest.approx(20.0)
        assert payload[1]["summary"]["kind"] == "complex"
        assert payload[1]["summary"]["longest"] == pytest.approx(20.0)

    def test_each_path_classified_once(self, drawing_file: Path):
        """Summaries used for logging are reused for the output."""
        with patch("shapecodec.cli.app.classify_shape", wraps=classify_shape) as classify:
            result = runner.invoke(app, ["inspect", str(drawing_file), "--json"])

        assert result.exit_code == 0
        assert classify.call_count == 2

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["inspect", str(tmp_path / "missing.dxf"), "--quiet"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_directory_rejected(self, tmp_path: Path):
        result = runner.invoke(app, ["inspect", str(tmp_path), "--quiet"])

        assert result.exit_code == 1
        assert "not a file" in result.output

    def test_no_supported_entities(self, tmp_path: Path):
        path = tmp_path / "empty.dxf"
        path.write_text("0\nSECTION\n2\nENTITIES\n0\nTEXT\n1\nhi\n0\nENDSEC\n0\nEOF", encoding="utf-8")

        result = runner.invoke(app, ["inspect", str(path), "--quiet"])

        assert result.exit_code == 1
        assert "no supported entities" in result.output

    def test_log_file(self, drawing_file: Path, tmp_path: Path):
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app, ["inspect", str(drawing_file), "--quiet", "--log-file", str(log_file)]
        )

        assert result.exit_code == 0
        assert "Drawing imported" in log_file.read_text(encoding="utf-8")


class TestNormalize:
    """Tests for the normalize command."""

    def test_default_output_path(self, drawing_file: Path):
        result = runner.invoke(app, ["normalize", str(drawing_file)])

        output = drawing_file.parent / "part-normalized.dxf"
        assert result.exit_code == 0
        assert output.exists()
        assert "2 paths written" in result.output

    def test_output_is_centered(self, drawing_file: Path, tmp_path: Path):
        output = tmp_path / "centered.dxf"
        result = runner.invoke(app, ["normalize", str(drawing_file), "-o", str(output), "--quiet"])

        assert result.exit_code == 0
        text = output.read_text(encoding="utf-8")
        assert "REFERENCE" in text.split("\n")
        assert "OXIDED" in text.split("\n")

        shapes = parse_shapes(text)
        points = [p for shape in shapes for p in shape.points]
        assert (min(p.x for p in points) + max(p.x for p in points)) / 2 == pytest.approx(25.0)
        assert (min(p.y for p in points) + max(p.y for p in points)) / 2 == pytest.approx(25.0)

    def test_custom_workspace(self, drawing_file: Path, tmp_path: Path):
        output = tmp_path / "wide.dxf"
        result = runner.invoke(
            app,
            ["normalize", str(drawing_file), "-o", str(output), "--workspace-size", "200", "-q"],
        )

        assert result.exit_code == 0
        entities = scan_entities(tokenize(output.read_text(encoding="utf-8")))
        points = [p for entity in entities for p in entity.points]
        assert len(entities) == 2
        assert (min(p.x for p in points) + max(p.x for p in points)) / 2 == pytest.approx(100.0)

    def test_unwritable_output(self, drawing_file: Path, tmp_path: Path):
        output = tmp_path / "missing" / "out.dxf"
        result = runner.invoke(app, ["normalize", str(drawing_file), "-o", str(output), "-q"])

        assert result.exit_code == 1
        assert "Could not save drawing" in result.output
