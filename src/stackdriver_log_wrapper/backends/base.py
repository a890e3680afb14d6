"""
Log backend abstraction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any

from stackdriver_log_wrapper.types import EntryMetadata, LogEntry, Message, WriteOptions


class LogBackend(ABC):
    """A named log stream that builds and persists entries.

    ``write`` must not block on delivery: it returns a ``Future`` that
    resolves with the backend's result or holds the backend's exception.
    """

    @property
    @abstractmethod
    def log_name(self) -> str:
        ...

    @abstractmethod
    def entry(self, metadata: EntryMetadata, message: Message) -> LogEntry:
        """Build an entry from metadata and a message."""
        ...

    @abstractmethod
    def write(self, entry: LogEntry, options: WriteOptions) -> "Future[Any]":
        """Submit an entry for delivery."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the backend's resources."""
        ...
