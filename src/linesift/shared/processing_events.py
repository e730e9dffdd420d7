"""Structured event identifiers attached to processing log records."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from linesift.platform.logging import logger


class ProcessingEvent(StrEnum):
    """Event names understood by ``EventRichHandler``."""

    FILE_START = "classification.file.start"
    FILE_COMPLETE = "classification.file.complete"
    FILE_ERROR = "classification.file.error"
    OUTPUT_WRITE = "output.file.write"
    OUTPUT_SKIP_EMPTY = "output.file.skip.empty"
    OUTPUT_ERROR = "output.file.error"


def log_processing(
    level: int,
    event: ProcessingEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` tagged with ``event`` and structured context fields."""

    extra: dict[str, Any] = {"processing_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["ProcessingEvent", "log_processing"]
