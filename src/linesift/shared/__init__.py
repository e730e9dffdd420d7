"""Cross-cutting types shared by every linesift layer."""

from .errors import ConfigError, FileAccessError, InvalidArgumentError, LinesiftError
from .processing_events import ProcessingEvent, log_processing

__all__ = [
    "ConfigError",
    "FileAccessError",
    "InvalidArgumentError",
    "LinesiftError",
    "ProcessingEvent",
    "log_processing",
]
