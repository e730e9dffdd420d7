"""
Summary: Write each non-empty line category to its own prefixed output file.
Why: Keep output naming and append/overwrite semantics in one place.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from linesift.features.classification.domain.models import LINE_KINDS, ClassifiedLines, LineKind
from linesift.shared.errors import FileAccessError
from linesift.shared.processing_events import ProcessingEvent, log_processing

OUTPUT_SUFFIX = ".txt"


@dataclass(slots=True, frozen=True)
class OutputSettings:
    """Where and how output files are written.

    Attributes:
        directory: Existing directory that receives the output files.
        prefix: Text prepended to every output file name.
        append: Append to existing files instead of replacing them.
        encoding: Text encoding of the written files.
    """

    directory: Path = Path(".")
    prefix: str = ""
    append: bool = False
    encoding: str = "utf-8"


def output_path(settings: OutputSettings, kind: LineKind) -> Path:
    """Return ``<directory>/<prefix><category>.txt`` for ``kind``."""

    return settings.directory / f"{settings.prefix}{kind.value}{OUTPUT_SUFFIX}"


def write_category(path: Path, rendered: Sequence[str], settings: OutputSettings) -> None:
    """Write ``rendered`` lines to ``path``, one per line.

    Raises:
        FileAccessError: If the file cannot be opened or written.
    """
    mode = "a" if settings.append else "w"
    try:
        with open(path, mode, encoding=settings.encoding) as handle:
            for text in rendered:
                _ = handle.write(text)
                _ = handle.write("\n")
    except (OSError, UnicodeEncodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        log_processing(
            logging.DEBUG,
            ProcessingEvent.OUTPUT_ERROR,
            "Failed to write %s",
            path,
            path=path,
            error_message=reason,
        )
        raise FileAccessError(f"Cannot write output file {path}: {reason}", path) from e


def write_classified_lines(lines: ClassifiedLines, settings: OutputSettings) -> list[Path]:
    """Write integers, floats and strings to their output files in that order.

    Empty categories are skipped without creating or touching their file.

    Args:
        lines: Classified lines collected during the run.
        settings: Output directory, prefix and write mode.

    Returns:
        list[Path]: Paths of the files that were written.

    Raises:
        FileAccessError: On the first file that cannot be written.
    """
    written: list[Path] = []
    for kind in LINE_KINDS:
        path = output_path(settings, kind)
        rendered = lines.rendered(kind)
        if not rendered:
            log_processing(
                logging.DEBUG,
                ProcessingEvent.OUTPUT_SKIP_EMPTY,
                "No %s to write",
                kind.value,
                path=path,
            )
            continue

        write_category(path, rendered, settings)
        log_processing(
            logging.INFO,
            ProcessingEvent.OUTPUT_WRITE,
            "Wrote %d %s to %s",
            len(rendered),
            kind.value,
            path,
            path=path,
            lines=len(rendered),
            append=settings.append,
        )
        written.append(path)
    return written


__all__ = ["OUTPUT_SUFFIX", "OutputSettings", "output_path", "write_category", "write_classified_lines"]
