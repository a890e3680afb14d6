"""
Diagnostics logging for stackdriver_log_wrapper.

Structured lifecycle logging with pluggable sinks:
- stdio: console or JSON lines (stderr)
- file: JSON lines with size rotation

Library: structlog + orjson.
"""

from .core import configure_logging, configure_logging_from_settings, get_logger, shutdown_logging

__all__ = ["configure_logging", "configure_logging_from_settings", "get_logger", "shutdown_logging"]
