"""Command line interface for linesift."""

import sys
from typing import final

from linesift.platform.logging import logger
from linesift.shared.errors import LinesiftError
from linesift.ui.cli.args import ArgumentParser
from linesift.ui.cli.commands import FilterCommand
from linesift.ui.cli.display.errors import ErrorDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            _ = FilterCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except LinesiftError as e:
            logger.debug("Run aborted", exc_info=True)
            ErrorDisplay().show_error(e)
            sys.exit(1)
        except Exception as e:
            logger.debug("Unexpected failure", exc_info=True)
            ErrorDisplay().show_error(e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing, so this return is only
        reached when the run completes.
    """
    CommandProcessor.process_command()
    return 0
