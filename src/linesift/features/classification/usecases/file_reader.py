"""src/linesift/features/classification/usecases/file_reader.py
What: Read input files line by line and collect classified lines in order.
Why: Keep file access and error translation out of the pure classifier.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from linesift.features.classification.domain.models import ClassifiedLines
from linesift.shared.errors import FileAccessError
from linesift.shared.processing_events import ProcessingEvent, log_processing

from .classifier import classify_line


def read_file(path: Path, lines: ClassifiedLines, *, encoding: str = "utf-8") -> int:
    """Classify every non-blank line of ``path`` into ``lines``.

    Args:
        path: Input file to read.
        lines: Accumulator receiving the classified lines.
        encoding: Text encoding of the input file.

    Returns:
        int: Number of non-blank lines collected from the file.

    Raises:
        FileAccessError: If the file cannot be opened, read or decoded.
    """
    collected = 0
    try:
        with open(path, "r", encoding=encoding) as handle:
            for raw_line in handle:
                text = raw_line.strip()
                if not text:
                    continue
                lines.add(classify_line(text))
                collected += 1
    except UnicodeDecodeError as e:
        raise FileAccessError(
            f"Cannot decode input file {path} as {encoding}: {e.reason}", path
        ) from e
    except OSError as e:
        raise FileAccessError(
            f"Cannot read input file {path}: {e.strerror or e}", path
        ) from e
    return collected


def collect_lines(
    paths: Sequence[Path],
    *,
    encoding: str = "utf-8",
    lines: ClassifiedLines | None = None,
) -> ClassifiedLines:
    """Read ``paths`` in order and return the classified lines.

    The first unreadable file aborts the whole run; nothing after it is read.
    """
    result = lines if lines is not None else ClassifiedLines()
    total_files = len(paths)

    for sequence, path in enumerate(paths, start=1):
        log_processing(
            logging.DEBUG,
            ProcessingEvent.FILE_START,
            "Reading %s",
            path,
            sequence=sequence,
            total_files=total_files,
            path=path,
        )
        before = (len(result.integers), len(result.floats), len(result.strings))
        try:
            collected = read_file(path, result, encoding=encoding)
        except FileAccessError as e:
            log_processing(
                logging.DEBUG,
                ProcessingEvent.FILE_ERROR,
                "Failed to read %s",
                path,
                sequence=sequence,
                total_files=total_files,
                path=path,
                error_message=str(e),
            )
            raise

        log_processing(
            logging.INFO,
            ProcessingEvent.FILE_COMPLETE,
            "Read %d lines from %s",
            collected,
            path,
            sequence=sequence,
            total_files=total_files,
            path=path,
            lines=collected,
            integers=len(result.integers) - before[0],
            floats=len(result.floats) - before[1],
            strings=len(result.strings) - before[2],
        )

    return result


__all__ = ["collect_lines", "read_file"]
