"""Error display for CLI."""

from typing import final

from rich.console import Console


@final
class ErrorDisplay:
    """Prints fatal errors as a single ``Error: <message>`` line on stderr."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True, soft_wrap=True)

    def show_error(self, error: BaseException) -> None:
        """Render ``error`` without markup so paths and brackets print verbatim."""

        self.console.print(f"Error: {error}", markup=False, highlight=False)
