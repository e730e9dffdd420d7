"""Application service for sorting input lines into output files.

This layer centralizes orchestration of the read, classify and write steps so
that the CLI only deals with arguments and presentation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from linesift.features.classification import ClassifiedLines, collect_lines
from linesift.features.output import OutputSettings, write_classified_lines
from linesift.features.statistics import (
    StatisticsMode,
    StatisticsReport,
    build_statistics_report,
)
from linesift.platform.logging import logger


@dataclass(frozen=True)
class FilterRequest:
    """Input parameters for one filtering run.

    Attributes:
        inputs: Input files, read in this order.
        output_dir: Directory receiving the output files.
        prefix: Prefix prepended to output file names.
        append: Append to existing output files instead of replacing them.
        statistics: Statistics mode requested for the run.
        encoding: Text encoding for inputs and outputs.
    """

    inputs: tuple[Path, ...] = ()
    output_dir: Path = Path(".")
    prefix: str = ""
    append: bool = False
    statistics: StatisticsMode = StatisticsMode.NONE
    encoding: str = "utf-8"

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            directory=self.output_dir,
            prefix=self.prefix,
            append=self.append,
            encoding=self.encoding,
        )


@dataclass(slots=True)
class FilterResult:
    """Outcome of a completed run."""

    lines: ClassifiedLines
    written: list[Path] = field(default_factory=list)
    report: StatisticsReport | None = None


@final
class ContentFilterService:
    """Run read → classify → write for a ``FilterRequest``."""

    def __init__(
        self,
        *,
        reader: Callable[..., ClassifiedLines] | None = None,
        writer: Callable[[ClassifiedLines, OutputSettings], list[Path]] | None = None,
    ) -> None:
        """Create a service with overridable reader and writer.

        Tests can inject doubles; production code uses the feature use cases.
        """
        self._reader: Callable[..., ClassifiedLines] = reader or collect_lines
        self._writer: Callable[[ClassifiedLines, OutputSettings], list[Path]] = (
            writer or write_classified_lines
        )

    def run(self, request: FilterRequest) -> FilterResult:
        """Execute a run.

        Args:
            request: Run parameters.

        Returns:
            FilterResult: Collected lines, written paths and, unless statistics
            are disabled, the statistics report.

        Raises:
            FileAccessError: If an input cannot be read or an output cannot be written.
        """
        logger.debug(
            "Filtering %d input file(s) into %s (prefix=%r, append=%s)",
            len(request.inputs),
            request.output_dir,
            request.prefix,
            request.append,
        )
        lines = self._reader(request.inputs, encoding=request.encoding)
        written = self._writer(lines, request.output_settings)

        report = None
        if request.statistics is not StatisticsMode.NONE:
            report = build_statistics_report(lines)

        return FilterResult(lines=lines, written=written, report=report)


__all__ = ["ContentFilterService", "FilterRequest", "FilterResult"]
