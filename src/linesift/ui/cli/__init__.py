"""Command line interface for linesift."""

from linesift.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
