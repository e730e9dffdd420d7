"""Statistics display functionality for CLI."""

from typing import final

from rich.console import Console

from linesift.features.classification import FloatLine, IntegerLine, LineKind
from linesift.features.statistics import (
    NumericStatistics,
    StatisticsMode,
    StatisticsReport,
    StringStatistics,
)


@final
class StatisticsDisplay:
    """Handles statistics display in CLI."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(soft_wrap=True)

    def show(self, report: StatisticsReport | None, mode: StatisticsMode) -> None:
        """Render ``report`` at the detail level selected by ``mode``.

        Args:
            report: Figures computed for the run; nothing is printed when None.
            mode: Requested statistics mode.
        """
        if report is None or mode is StatisticsMode.NONE:
            return
        if mode is StatisticsMode.FULL:
            self.show_full(report)
        else:
            self.show_short(report)

    def show_short(self, report: StatisticsReport) -> None:
        """Print the three category counts, zeros included."""

        self._print("[bold]Short Statistics:[/bold]")
        self._print(f"{LineKind.INTEGER.label}: {report.integer_count}")
        self._print(f"{LineKind.FLOAT.label}: {report.float_count}")
        self._print(f"{LineKind.STRING.label}: {report.string_count}")

    def show_full(self, report: StatisticsReport) -> None:
        """Print detailed figures for every non-empty category."""

        self._print("[bold]Full Statistics:[/bold]")
        if report.integers is not None:
            self._show_numeric(LineKind.INTEGER, report.integers)
        if report.floats is not None:
            self._show_numeric(LineKind.FLOAT, report.floats)
        if report.strings is not None:
            self._show_strings(report.strings)

    def _show_numeric(self, kind: LineKind, stats: NumericStatistics) -> None:
        self._print(f"[bold]{kind.label}:[/bold]")
        self._print(f"  Count: {stats.count}")
        self._print(f"  Min: {_format_value(stats.minimum)}")
        self._print(f"  Max: {_format_value(stats.maximum)}")
        self._print(f"  Sum: {FloatLine(stats.total).render()}")
        self._print(f"  Average: {FloatLine(stats.average).render()}")

    def _show_strings(self, stats: StringStatistics) -> None:
        self._print(f"[bold]{LineKind.STRING.label}:[/bold]")
        self._print(f"  Count: {stats.count}")
        self._print(f"  Shortest length: {stats.shortest}")
        self._print(f"  Longest length: {stats.longest}")

    def _print(self, text: str) -> None:
        self.console.print(text, highlight=False)


def _format_value(value: int | float) -> str:
    """Render an extreme the same way it is written to the output files."""

    if isinstance(value, int):
        return IntegerLine(value).render()
    return FloatLine(value).render()
