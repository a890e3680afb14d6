"""In-memory log backend."""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Optional

from stackdriver_log_wrapper.severity import severity_name
from stackdriver_log_wrapper.types import EntryMetadata, LogEntry, Message, WriteOptions, snapshot_message

from .base import LogBackend


@dataclass(frozen=True)
class WrittenRecord:
    entry: LogEntry
    options: WriteOptions


class InMemoryBackend(LogBackend):
    """Keeps written entries in a list.

    Suitable for tests and local development where nothing should leave
    the process. Pass ``fail_with`` to make every write fail with that
    exception instead.
    """

    def __init__(self, log_name: str = "memory", *, fail_with: Optional[BaseException] = None) -> None:
        self._log_name = log_name
        self._fail_with = fail_with
        self.records: list[WrittenRecord] = []
        self.closed = False

    @property
    def log_name(self) -> str:
        return self._log_name

    @property
    def entries(self) -> list[LogEntry]:
        return [record.entry for record in self.records]

    def entry(self, metadata: EntryMetadata, message: Message) -> LogEntry:
        return LogEntry(
            log_name=self._log_name,
            resource=metadata.resource,
            severity=severity_name(metadata.severity),
            message=snapshot_message(message),
        )

    def write(self, entry: LogEntry, options: WriteOptions) -> "Future[Any]":
        future: "Future[Any]" = Future()
        if self._fail_with is not None:
            future.set_exception(self._fail_with)
        else:
            self.records.append(WrittenRecord(entry=entry, options=options))
            future.set_result(None)
        return future

    def clear(self) -> None:
        self.records.clear()

    def close(self) -> None:
        self.closed = True
