"""src/linesift/ui/cli/commands/filter.py
What: Execute a filtering run from parsed CLI arguments.
Why: Keep orchestration wiring and presentation out of the command processor.
"""

from collections.abc import Sequence
from pathlib import Path

from linesift.application.services import ContentFilterService, FilterRequest, FilterResult
from linesift.platform.logging import logger
from linesift.ui.cli.args.options import FilterArgs
from linesift.ui.cli.display.statistics import StatisticsDisplay


def summarize_outputs(paths: Sequence[Path]) -> str:
    """Return a short human description of written outputs."""

    if not paths:
        return "no output files written"
    return ", ".join(str(path) for path in paths)


class FilterCommand:
    """Command for sorting input lines into output files."""

    args: FilterArgs
    app: ContentFilterService
    request: FilterRequest
    statistics_display: StatisticsDisplay

    def __init__(
        self,
        args: FilterArgs,
        *,
        app: ContentFilterService | None = None,
        statistics_display: StatisticsDisplay | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            app: Service override for tests.
            statistics_display: Display override for tests.
        """
        self.args = args
        self.app = app or ContentFilterService()
        self.request = FilterRequest(
            inputs=tuple(args.inputs),
            output_dir=args.output_dir,
            prefix=args.prefix,
            append=args.append,
            statistics=args.statistics,
            encoding=args.encoding,
        )
        self.statistics_display = statistics_display or StatisticsDisplay()

    def execute(self) -> FilterResult:
        """Execute the filtering command.

        Returns:
            FilterResult: Outcome of the run.
        """
        result = self.app.run(self.request)
        logger.info("Output: %s", summarize_outputs(result.written))
        self.statistics_display.show(result.report, self.args.statistics)
        return result
