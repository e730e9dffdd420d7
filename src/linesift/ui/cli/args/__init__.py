"""Command line argument handling package."""

from linesift.ui.cli.args.parser import ArgumentParser
from linesift.ui.cli.args.options import FilterArgs

__all__ = ["ArgumentParser", "FilterArgs"]
