"""Rich console handler that understands linesift processing events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that renders structured processing events compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "classification.file.start": ("📄", "blue"),
        "classification.file.complete": ("✅", "green"),
        "classification.file.error": ("⛔", "red"),
        "output.file.write": ("💾", "magenta"),
        "output.file.skip.empty": ("↪️", "yellow"),
        "output.file.error": ("⛔", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "classification.file.start": "Reading ",
        "classification.file.complete": "Read ",
        "classification.file.error": "Failed to read ",
        "output.file.write": "Wrote ",
        "output.file.skip.empty": "Skipped empty ",
        "output.file.error": "Failed to write ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path keeping only its trailing segments.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Path with coloured separators and a leading ellipsis when truncated.
        """
        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        else:
            display_string = anchor + separator.join(body_parts)

        text = Text()
        for char in display_string or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_processing_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured processing events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        path = getattr(record, "path", None)
        if path:
            _ = body.append_text(self._format_path(str(path)))

        metrics: list[str] = []
        for key in ("integers", "floats", "strings", "lines"):
            value = getattr(record, key, None)
            if isinstance(value, int):
                metrics.append(f"{key}={value}")
        if getattr(record, "append", False):
            metrics.append("append")
        error_message = getattr(record, "error_message", None)
        if error_message:
            metrics.append(str(error_message))
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for processing events."""

        processing_text = self._render_processing_message(record)
        if processing_text is not None:
            return processing_text

        return super().render_message(record, message)


__all__ = ["EventRichHandler"]
