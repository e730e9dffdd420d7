"""Display management for CLI interface."""

from linesift.ui.cli.display.errors import ErrorDisplay
from linesift.ui.cli.display.statistics import StatisticsDisplay

__all__ = ["ErrorDisplay", "StatisticsDisplay"]
