"""CLI application entry point for shapecodec.

This module provides the main CLI interface using Typer.
"""

import json
import time
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from shapecodec import __version__
from shapecodec.cli.output import (
    console,
    print_drawing_info,
    print_error,
    print_header,
    print_shapes_table,
    print_step,
    print_success,
)
from shapecodec.config import CodecConfig, LoggingConfig, ShapeCodecSettings
from shapecodec.core import classify_shape
from shapecodec.domain import PathEntity, ShapeSummary
from shapecodec.exceptions import (
    DrawingLoadError,
    DrawingSaveError,
    EmptyDrawingError,
    ShapeCodecError,
)
from shapecodec.io import DrawingReader, DrawingWriter, shapes_to_paths
from shapecodec.utils import ImportLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="shapecodec",
    help="Import, export and classify vector paths in DXF-style interchange files.",
    add_completion=False,
    no_args_is_help=True,
)

WorkspaceSizeOption = Annotated[
    float,
    typer.Option(
        "--workspace-size",
        help="Side length of the logical workspace imported drawings are centered on",
        min=0.001,
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapecodec[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Import, export and classify vector paths in DXF-style interchange files."""


def _build_settings(
    workspace_size: float, log_file: Path | None, log_level: str, quiet: bool
) -> ShapeCodecSettings:
    return ShapeCodecSettings(
        codec=CodecConfig(workspace_size=workspace_size),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )


def _load_paths(
    drawing: Path, settings: ShapeCodecSettings, import_logger: ImportLogger
) -> tuple[list[tuple[PathEntity, ShapeSummary | None]], int]:
    """Import a drawing, lift its shapes into paths and classify them.

    Returns:
        Tuple of (paths paired with their shape summaries, token count)

    Raises:
        DrawingLoadError: If the file cannot be read
        EmptyDrawingError: If no supported entity was found
    """
    import_logger.log_document_start(str(drawing))
    start_time = time.time()

    try:
        reader = DrawingReader(drawing, settings.codec)
        reader.load()
        shapes = reader.read_shapes()
        token_count = reader.token_count
        reader.close()
    except OSError as e:
        raise DrawingLoadError(str(drawing), str(e)) from e

    if not shapes:
        raise EmptyDrawingError(str(drawing))

    rows = [(path, classify_shape(path, settings.analyzer)) for path in shapes_to_paths(shapes)]
    for index, (shape, (_, summary)) in enumerate(zip(shapes, rows, strict=True)):
        import_logger.log_shape(index, shape, summary)

    import_logger.log_document_complete(str(drawing), (time.time() - start_time) * 1000)
    return rows, token_count


def _check_input(drawing: Path) -> None:
    if not drawing.exists():
        print_error(
            f"Input file not found: {drawing}",
            details=f"The file '{drawing}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not drawing.is_file():
        print_error(
            f"Input path is not a file: {drawing}",
            details="Please provide a path to a DXF drawing.",
        )
        raise typer.Exit(code=1)


def _run_guarded(
    drawing: Path, import_logger: ImportLogger, action: Callable[[], None]
) -> None:
    """Run a command body, turning package errors into exit code 1."""
    try:
        action()
    except EmptyDrawingError as e:
        import_logger.log_error(str(drawing), e)
        print_error("Drawing contained no supported entities")
        raise typer.Exit(code=1)
    except DrawingLoadError as e:
        import_logger.log_error(str(drawing), e)
        print_error(f"Could not load drawing: {e.reason}")
        raise typer.Exit(code=1)
    except DrawingSaveError as e:
        import_logger.log_error(str(drawing), e)
        print_error(f"Could not save drawing: {e.reason}")
        raise typer.Exit(code=1)
    except ShapeCodecError as e:
        import_logger.log_error(str(drawing), e)
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        import_logger.log_error(str(drawing), e)
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def inspect(
    drawing: Annotated[
        Path,
        typer.Argument(
            help="Path to input DXF drawing",
            show_default=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print imported paths and their shape summaries as JSON",
        ),
    ] = False,
    workspace_size: WorkspaceSizeOption = 50.0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Import a drawing and classify every shape in it.

    Example:
        shapecodec inspect outline.dxf
    """
    _check_input(drawing)
    settings = _build_settings(workspace_size, log_file, log_level, quiet or as_json)
    import_logger = ImportLogger(
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet or as_json,
        )
    )

    def action() -> None:
        rows, token_count = _load_paths(drawing, settings, import_logger)

        if as_json:
            payload = [
                {
                    "path": path.to_dict(),
                    "summary": summary.to_dict() if summary is not None else None,
                }
                for path, summary in rows
            ]
            typer.echo(json.dumps(payload, indent=2))
            return

        if not quiet:
            print_header(__version__)
            print_step("Loading drawing")
            print_drawing_info(str(drawing), token_count, len(rows))
            print_step("Shapes")
        print_shapes_table(rows)

    _run_guarded(drawing, import_logger, action)


@app.command()
def normalize(
    drawing: Annotated[
        Path,
        typer.Argument(
            help="Path to input DXF drawing",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-normalized.{ext})",
        ),
    ] = None,
    workspace_size: WorkspaceSizeOption = 50.0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Re-export a drawing centered on the workspace with canonical layers.

    Example:
        shapecodec normalize outline.dxf -o centered.dxf
    """
    _check_input(drawing)
    settings = _build_settings(workspace_size, log_file, log_level, quiet)
    import_logger = ImportLogger(
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    )
    output_path = output if output is not None else DrawingWriter.get_normalized_path(drawing)

    def action() -> None:
        if not quiet:
            print_header(__version__)
            print_step("Loading drawing")

        rows, token_count = _load_paths(drawing, settings, import_logger)
        paths = [path for path, _ in rows]

        if not quiet:
            print_drawing_info(str(drawing), token_count, len(paths))
            print_step("Writing")

        written = DrawingWriter(output_path, settings.codec).write(paths)
        import_logger.log_export_complete(str(output_path), written)

        if not quiet:
            print_success(str(output_path), written)

    _run_guarded(drawing, import_logger, action)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
