"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shapecodec.core import format_dimension
from shapecodec.domain import (
    CircleSummary,
    OvalSummary,
    PathEntity,
    ShapeSummary,
)

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Shapecodec[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_drawing_info(drawing_path: str, token_count: int, shape_count: int) -> None:
    """Print drawing information.

    Args:
        drawing_path: Path to the drawing file
        token_count: Number of group-code tokens read
        shape_count: Number of shapes imported
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(drawing_path)
    console.print(line)
    console.print(f"  {token_count:,} tokens {SYM_DOT} {shape_count:,} shapes")


def describe_summary(summary: ShapeSummary | None) -> tuple[str, str]:
    """Shape label and display dimensions for a summary."""
    if summary is None:
        return ("-", "-")
    if isinstance(summary, CircleSummary):
        return (summary.kind.value, f"⌀ {format_dimension(summary.diameter)}")
    if isinstance(summary, OvalSummary):
        return (
            summary.kind.value,
            f"{format_dimension(summary.horizontal)} × {format_dimension(summary.vertical)}",
        )
    return (
        summary.kind.value,
        f"{format_dimension(summary.longest)} × {format_dimension(summary.shortest)}",
    )


def print_shapes_table(rows: list[tuple[PathEntity, ShapeSummary | None]]) -> None:
    """Print one row per imported path with its classification.

    Args:
        rows: Paths paired with their shape summaries
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Closed")
    table.add_column("Points", justify="right")
    table.add_column("Shape")
    table.add_column("Size", justify="right")

    for path, summary in rows:
        shape_label, size = describe_summary(summary)
        table.add_row(
            path.meta.name,
            path.meta.kind.value,
            "yes" if path.meta.closed else "no",
            str(len(path.nodes)),
            shape_label,
            size,
        )

    console.print(table)


def print_success(output_path: str, paths_written: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        paths_written: Number of paths written
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)
    console.print(f"  {paths_written} paths written")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
