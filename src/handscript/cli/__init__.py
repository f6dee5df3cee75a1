"""Command-line interface for handscript.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Coverage report of the supported character set
- Progress bar for glyph tracing
- Dry-run mode reporting contours per glyph
- Verbose/quiet output modes
"""

from handscript.cli.app import cli, main

__all__ = ["cli", "main"]
