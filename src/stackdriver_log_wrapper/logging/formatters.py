"""
Console rendering for diagnostics events.
"""

from __future__ import annotations

from datetime import datetime, timezone

from structlog.typing import EventDict

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "timestamp": "\033[90m",
    "logger": "\033[35m",
    "key": "\033[34m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


class ConsoleFormatter:
    """Renders an event dict as one aligned, human-readable line.

    Layout: ``timestamp | LEVEL | logger | message key=value ...``
    """

    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[1;31m",
    }

    EXCLUDED_KEYS = {"level", "message", "event", "logger", "timestamp", "_name"}
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    TIMESTAMP_WIDTH = 19
    LEVEL_WIDTH = 8
    LOGGER_WIDTH = 32
    SEPARATOR = " | "

    @classmethod
    def configure(
        cls,
        *,
        timestamp_format: str | None = None,
        level_width: int | None = None,
        logger_width: int | None = None,
        separator: str | None = None,
    ) -> None:
        """Configure column widths and separator."""
        if timestamp_format:
            cls.TIMESTAMP_FORMAT = timestamp_format
            cls.TIMESTAMP_WIDTH = len(datetime.now().strftime(timestamp_format))
        if level_width:
            cls.LEVEL_WIDTH = level_width
        if logger_width:
            cls.LOGGER_WIDTH = logger_width
        if separator is not None:
            cls.SEPARATOR = separator

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            text = text[-width:] if width <= 3 else "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    @classmethod
    def _format_timestamp(cls, raw_timestamp: str | None) -> str:
        if raw_timestamp:
            try:
                dt = datetime.fromisoformat(raw_timestamp.replace("Z", "+00:00"))
                if dt.tzinfo is None:
                    dt = dt.replace(tzinfo=timezone.utc)
                return dt.astimezone().strftime(cls.TIMESTAMP_FORMAT)
            except (ValueError, TypeError):
                pass
        return datetime.now().strftime(cls.TIMESTAMP_FORMAT)

    @staticmethod
    def _maybe_color(text: str, color: str, use_color: bool) -> str:
        return colorize(text, color) if use_color else text

    @classmethod
    def format(cls, event_dict: EventDict, *, use_color: bool = True) -> str:
        """Format an event dict into an aligned string."""
        level_upper = str(event_dict.get("level", "info")).upper()
        message = str(event_dict.get("message", event_dict.get("event", "")))
        logger_name = str(event_dict.get("logger", "root"))

        extras = [
            f"{cls._maybe_color(k, 'key', use_color)}={cls._maybe_color(str(v), 'dim', use_color)}"
            for k, v in event_dict.items()
            if k not in cls.EXCLUDED_KEYS
        ]
        if extras:
            message = f"{message} " + " ".join(extras)

        level_text = cls._fit_right(level_upper, cls.LEVEL_WIDTH)
        level_color = cls._LEVEL_COLORS.get(level_upper)
        if use_color and level_color:
            level_text = f"{level_color}{level_text}{cls._RESET}"

        return cls.SEPARATOR.join(
            [
                cls._maybe_color(
                    cls._fit_right(cls._format_timestamp(event_dict.get("timestamp")), cls.TIMESTAMP_WIDTH),
                    "timestamp",
                    use_color,
                ),
                level_text,
                cls._maybe_color(cls._fit_right(logger_name, cls.LOGGER_WIDTH), "logger", use_color),
                message,
            ]
        )
