"""Rich logging handler for artist credit parse events.

Where: platform/logging/handlers.py
What: Render structured parse events with icons and colours on the console.
Why: Keep console formatting out of the parse use cases.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CreditsRichHandler(RichHandler):
    """Rich handler that styles ``credit_event`` log records."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "credits.parse.success": ("✅", "green"),
        "credits.parse.error": ("❌", "red"),
        "credits.parse.trailing": ("↪️", "yellow"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact console settings.

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

    def _render_credit_event(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render a structured parse event, or ``None`` for plain records."""

        event = getattr(record, "credit_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(message, style=Style(color=color))
        details: list[str] = []
        offset = getattr(record, "offset", None)
        if event == "credits.parse.success":
            artist_count = getattr(record, "artist_count", None)
            token_count = getattr(record, "token_count", None)
            if isinstance(artist_count, int):
                details.append(f"artists={artist_count}")
            if isinstance(token_count, int):
                details.append(f"tokens={token_count}")
        elif isinstance(offset, int):
            details.append(f"offset={offset}")
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for parse events."""

        event_text = self._render_credit_event(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["CreditsRichHandler"]
