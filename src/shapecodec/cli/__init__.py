"""Command-line interface for shapecodec.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Shape inspection table or JSON dump
- Recentered re-export of drawings
- Quiet output mode and file logging
"""

from shapecodec.cli.app import cli, main

__all__ = ["cli", "main"]
