"""Command-line interface for bitmapsdf.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Preserve-RGB and resample conversion modes
- Verbose per-channel report
- Quiet mode for scripting
- Detailed error reporting
"""

from bitmapsdf.cli.app import cli, main

__all__ = ["cli", "main"]
