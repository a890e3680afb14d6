"""
stackdriver_log_wrapper: severity-named convenience logging on top of
Google Cloud Logging.

A ``Logger`` fixes a log name, a monitored resource and default labels;
``info``, ``error``, ``warning`` and friends all funnel into ``Logger.log``,
which returns the pending write.
"""

from .backends import GCloudBackend, InMemoryBackend, LogBackend, get_backend
from .exceptions import ConfigurationError, LoggerClosedError, LogWrapperError, UnsupportedBackendError
from .logger import Logger
from .logging import configure_logging, get_logger
from .severity import Severity
from .types import EntryMetadata, LogEntry, LoggerConfig, MonitoredResource, WriteOptions

__version__ = "1.0.0"

__all__ = [
    "Logger",
    "Severity",
    "LoggerConfig",
    "WriteOptions",
    "LogEntry",
    "EntryMetadata",
    "MonitoredResource",
    "LogBackend",
    "GCloudBackend",
    "InMemoryBackend",
    "get_backend",
    "configure_logging",
    "get_logger",
    "LogWrapperError",
    "ConfigurationError",
    "UnsupportedBackendError",
    "LoggerClosedError",
]
