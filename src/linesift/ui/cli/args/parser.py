"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Final, final

from linesift.config import Config
from linesift.features.statistics import StatisticsMode
from linesift.platform.logging import logger, setup_logger
from linesift.shared.errors import InvalidArgumentError
from linesift.ui.cli.args.options import FilterArgs

# Options that take the following token as their value, whatever it looks like.
_VALUE_OPTIONS: Final[dict[str, str]] = {"-o": "output_dir", "-p": "prefix"}
_FLAG_OPTIONS: Final[frozenset[str]] = frozenset({"-a", "-s", "-f"})


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Every short option is explicit; there is no implicit ``-h`` so that any
        other dash-prefixed token is reported as an unknown option.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="linesift",
            description=(
                "Sort the lines of text files into integers.txt, floats.txt "
                "and strings.txt, optionally printing statistics."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
            exit_on_error=False,
        )
        _ = parser.add_argument(
            "inputs",
            nargs="*",
            type=str,
            help="Input text files, read in the given order",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "-o",
            dest="output_dir",
            type=str,
            default=None,
            help="Directory for the output files (defaults to the current directory)",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "-p",
            dest="prefix",
            type=str,
            default=None,
            help="Prefix for the output file names",
            metavar="PREFIX",
        )
        _ = parser.add_argument(
            "-a",
            dest="append",
            action="store_true",
            help="Append to existing output files instead of replacing them",
        )
        _ = parser.add_argument(
            "-s",
            dest="short_stats",
            action="store_true",
            help="Print the number of lines in each category",
        )
        _ = parser.add_argument(
            "-f",
            dest="full_stats",
            action="store_true",
            help="Print counts, extremes, sums and averages (wins over -s)",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> FilterArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            FilterArgs: Processed command line arguments.

        Raises:
            InvalidArgumentError: On an unknown option or an option missing its value.
            ConfigError: If the configuration file is invalid.
        """
        raw_args = list(sys.argv[1:] if args_list is None else args_list)
        parser = ArgumentParser.create_parser()

        option_values, remaining = ArgumentParser._split_option_values(raw_args)
        try:
            parsed_args, extras = parser.parse_known_intermixed_args(
                remaining, namespace=option_values
            )
        except argparse.ArgumentError as e:
            raise InvalidArgumentError(f"Invalid option usage: {e}") from e
        if extras:
            raise InvalidArgumentError(f"Unknown option: {extras[0]}")

        configuration = Config.load()
        _ = setup_logger(
            log_file=configuration.log_file,
            console_level=configuration.console_level,
        )

        if parsed_args.output_dir is not None:
            output_dir = Path(parsed_args.output_dir)
        else:
            output_dir = configuration.output_dir or Path(".")

        prefix: str = (
            parsed_args.prefix if parsed_args.prefix is not None else configuration.prefix
        )

        statistics = StatisticsMode.from_flags(
            short=parsed_args.short_stats,
            full=parsed_args.full_stats,
        )
        if parsed_args.short_stats and parsed_args.full_stats:
            logger.debug("Both -s and -f given; printing full statistics")

        return FilterArgs(
            inputs=[Path(value) for value in parsed_args.inputs],
            output_dir=output_dir,
            prefix=prefix,
            append=parsed_args.append,
            statistics=statistics,
            encoding=configuration.encoding,
        )

    @staticmethod
    def _split_option_values(
        raw_args: Sequence[str],
    ) -> tuple[argparse.Namespace, list[str]]:
        """Take ``-o``/``-p`` values out of the token list and vet every other option.

        Only the exact tokens ``-o``, ``-p``, ``-a``, ``-s`` and ``-f`` are options.
        The token after ``-o`` or ``-p`` is always its value, even when it starts
        with a dash. Any other dash-prefixed token (``-as``, ``-ofoo``, ``--``,
        ``-5``, ``-``) is rejected before argparse can read it as a cluster,
        an attached value or an end-of-options marker.

        Returns:
            tuple: Namespace holding the option values seen (last one wins) and
            the tokens left for argparse, which are flags and input files only.
        """
        values = argparse.Namespace()
        remaining: list[str] = []
        tokens = iter(raw_args)
        for token in tokens:
            if token in _VALUE_OPTIONS:
                value = next(tokens, None)
                if value is None:
                    raise InvalidArgumentError(f"Invalid option usage: {token} requires a value")
                setattr(values, _VALUE_OPTIONS[token], value)
            elif token.startswith("-") and token not in _FLAG_OPTIONS:
                raise InvalidArgumentError(f"Unknown option: {token}")
            else:
                remaining.append(token)
        return values, remaining


__all__ = ["ArgumentParser"]
