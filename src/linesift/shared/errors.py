"""
Summary: Error hierarchy for failures that abort a linesift run.
Why: Let the CLI surface every fatal condition through a single except clause.
"""

from __future__ import annotations

from pathlib import Path


class LinesiftError(Exception):
    """Base class for errors that stop a run and are reported to the user."""


class InvalidArgumentError(LinesiftError):
    """Raised when the command line contains an unknown or incomplete option."""


class ConfigError(LinesiftError):
    """Raised when the configuration file cannot be parsed or holds bad values."""


class FileAccessError(LinesiftError):
    """Raised when an input file cannot be read or an output file cannot be written."""

    path: Path

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["ConfigError", "FileAccessError", "InvalidArgumentError", "LinesiftError"]
