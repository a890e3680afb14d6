"""
Core diagnostics logging configuration.

Loggers returned by ``get_logger`` run through this module's own processor
chain instead of the global structlog configuration, so importing the
package never changes how the host application logs. Until
``configure_logging`` installs sinks, events are dropped.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .formatters import ConsoleFormatter
from .sinks import BaseSink, FileSink, LogFormat, StdioSink

# =============================================================================
# Global State
# =============================================================================

_sinks: list[BaseSink] = []
_min_level: int = logging.INFO

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


# =============================================================================
# Structlog Processors
# =============================================================================


def filter_by_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drop events below the configured level, or all events when no sink is installed."""
    if not _sinks or _METHOD_LEVELS.get(method_name, logging.INFO) < _min_level:
        raise structlog.DropEvent
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Move the bound ``_name`` into the ``logger`` key."""
    event_dict["logger"] = event_dict.pop("_name", "root")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' to 'message'."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def multi_sink_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render the event to every configured sink. Returns empty to suppress default output."""
    for sink in _sinks:
        try:
            sink.emit(event_dict)
        except Exception:
            pass  # A broken diagnostics sink must not fail the caller's write
    return ""


_PROCESSORS = [
    filter_by_level,
    structlog.processors.add_log_level,
    add_timestamp,
    add_logger_name,
    rename_event_key,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    multi_sink_renderer,
]


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger bound to this package's sinks."""
    return structlog.wrap_logger(
        structlog.PrintLogger(file=_NOP_FILE),
        processors=_PROCESSORS,
        wrapper_class=structlog.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=False,
        _name=name or "root",
    )


# =============================================================================
# Configuration Logic
# =============================================================================


def _initialize_sinks(sinks: str, fmt: str, file_path: str) -> None:
    for sink in _sinks:
        sink.close()
    _sinks.clear()

    log_format: LogFormat = "json" if fmt.lower() == "json" else "console"

    for name in (s.strip().lower() for s in sinks.split(",")):
        if name == "stdio":
            _sinks.append(StdioSink(fmt=log_format))
        elif name == "file":
            _sinks.append(FileSink(file_path))


def configure_logging(
    *,
    level: str = "INFO",
    sinks: str = "stdio",
    fmt: str = "console",
    file_path: str = "logs/stackdriver_log_wrapper.log",
) -> None:
    """
    Configure diagnostics logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        sinks: Comma-separated sink names (stdio, file); empty disables output
        fmt: Output format for stdio sink (console, json)
        file_path: Path for file sink
    """
    global _min_level

    _initialize_sinks(sinks, fmt, file_path)
    _min_level = getattr(logging, level.upper(), logging.INFO)


def configure_logging_from_settings(logging_settings: Any = None) -> None:
    """Configure diagnostics logging from ``LoggingSettings`` (defaults to the global settings)."""
    if logging_settings is None:
        from stackdriver_log_wrapper.config import settings

        logging_settings = settings.logging

    ConsoleFormatter.configure(
        timestamp_format=logging_settings.console_timestamp_format,
        level_width=logging_settings.console_level_width,
        logger_width=logging_settings.console_logger_width,
        separator=logging_settings.console_separator,
    )
    configure_logging(
        level=logging_settings.level.value,
        sinks=logging_settings.sinks,
        fmt=logging_settings.format.value,
        file_path=logging_settings.file_path,
    )


def shutdown_logging() -> None:
    """Close and remove all sinks."""
    for sink in _sinks:
        sink.close()
    _sinks.clear()
