"""
Sinks for diagnostics events.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Literal

import orjson
from structlog.typing import EventDict

from .formatters import ConsoleFormatter

LogFormat = Literal["console", "json"]


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


class BaseSink(ABC):
    """Destination for rendered diagnostics events."""

    @abstractmethod
    def emit(self, event_dict: EventDict) -> None:
        """Emit a log event to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StdioSink(BaseSink):
    """Stream sink with configurable format.

    Args:
        fmt: "console" (aligned, colored on a tty) or "json"
        stream: Output stream, resolved at emit time (default: stderr)
    """

    def __init__(self, fmt: LogFormat = "console", stream: Any = None):
        self._fmt = fmt
        self._stream = stream

    @property
    def stream(self) -> Any:
        return self._stream or sys.stderr

    def emit(self, event_dict: EventDict) -> None:
        stream = self.stream
        if self._fmt == "json":
            output = orjson_dumps(event_dict, default=str)
        else:
            use_color = bool(getattr(stream, "isatty", lambda: False)())
            output = ConsoleFormatter.format(event_dict, use_color=use_color)

        stream.write(output + "\n")
        stream.flush()

    def close(self) -> None:
        pass


class FileSink(BaseSink):
    """JSON-lines file sink with size-based rotation."""

    def __init__(self, path: str | Path, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        self._file = open(self._path, "a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, event_dict: EventDict) -> None:
        self._file.write(orjson_dumps(event_dict, default=str) + "\n")
        self._file.flush()
        self._maybe_rotate()

    def _backup_path(self, index: int) -> Path:
        return self._path.with_name(f"{self._path.name}.{index}")

    def _maybe_rotate(self) -> None:
        if self._path.stat().st_size <= self._max_bytes:
            return
        self._file.close()
        oldest = self._backup_path(self._backup_count)
        if oldest.exists():
            oldest.unlink()
        for i in range(self._backup_count - 1, 0, -1):
            src = self._backup_path(i)
            if src.exists():
                src.rename(self._backup_path(i + 1))
        self._path.rename(self._backup_path(1))
        self._file = open(self._path, "a", encoding="utf-8")

    def close(self) -> None:
        self._file.close()
