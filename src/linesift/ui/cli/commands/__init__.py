"""Command execution package for CLI."""

from linesift.ui.cli.commands.filter import FilterCommand

__all__ = ["FilterCommand"]
