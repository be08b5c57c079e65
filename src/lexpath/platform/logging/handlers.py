"""Rich console handler with path-aware rendering.

Where: platform/logging/handlers.py
What: Render manifest events and path values with coloured separators.
Why: Long build-output paths stay readable when shown relative to their base.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Custom Rich handler that displays path values with highlighted separators."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "manifest.save": ("💾", "green"),
        "manifest.load": ("📄", "cyan"),
        "manifest.missing": ("ℹ️", "yellow"),
        "manifest.error": ("❌", "red"),
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
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and compact rendering.

        Args:
            path: Absolute or relative path text.
            base: Optional base path used to relativize ``path`` when it lies below it.

        Returns:
            Text: Styled path, truncated to its last names with an ellipsis.
        """
        from lexpath.features.path.domain.parser import PARENT
        from lexpath.features.path.domain.path_string import PathString

        display = PathString(path)
        if base:
            relative = PathString(base).relativize(display)
            names = relative.segments
            if relative.root is None and names and names[0] != PARENT:
                display = relative

        root = display.root
        names = display.segments
        separator = display.separator

        truncated = len(names) > self._PATH_SEGMENT_LIMIT
        if truncated:
            names = names[-self._PATH_SEGMENT_LIMIT :]

        display_string = root.raw_path if root is not None else ""
        if truncated:
            display_string += "…"
            if names:
                display_string += separator
        display_string += separator.join(names)

        if not display_string:
            display_string = "."
        return self._style_path_string(display_string)

    @staticmethod
    def _style_path_string(path_string: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char in {"/", "\\", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured manifest events with dedicated styling."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = {
            "manifest.save": "Saved manifest ",
            "manifest.load": "Loaded manifest ",
            "manifest.missing": "No manifest at ",
            "manifest.error": "Unreadable manifest ",
        }.get(event, "")
        _ = body.append(prefix)

        manifest_path = getattr(record, "manifest_path", None)
        if manifest_path:
            _ = body.append_text(
                self._format_path(str(manifest_path), base=getattr(record, "base_path", None))
            )

        details: list[str] = []
        entries = getattr(record, "entries", None)
        if isinstance(entries, int):
            details.append(f"entries={entries}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
