"""Command-line interface for sculptor.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Replaying straight drag strokes over generated contours
- Radius and hover cursor previews in model and display space
- Quiet output mode and detailed log files
"""

from sculptor.cli.app import cli, main

__all__ = ["cli", "main"]
