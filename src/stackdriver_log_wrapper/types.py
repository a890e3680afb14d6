"""
Core data types for the log wrapper.

Pydantic models describe caller-supplied configuration (validated at the
boundary); frozen dataclasses describe the records handed to a backend.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .severity import Severity

Message = Union[str, Mapping[str, Any]]


def snapshot_message(message: Message) -> Message:
    """Deep-copy mapping messages so later changes by the caller do not reach the entry."""
    if isinstance(message, Mapping):
        return copy.deepcopy(dict(message))
    return message


@dataclass(frozen=True)
class MonitoredResource:
    """Resource descriptor attached to every entry.

    See https://cloud.google.com/logging/docs/reference/v2/rest/v2/MonitoredResource
    """

    type: str
    labels: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EntryMetadata:
    """Metadata a backend combines with a message to build an entry."""

    resource: MonitoredResource
    severity: Union[Severity, str]


@dataclass(frozen=True)
class LogEntry:
    """A backend-ready log entry.

    Built by ``LogBackend.entry`` and passed back opaquely to
    ``LogBackend.write``.
    """

    log_name: str
    resource: MonitoredResource
    severity: str
    message: Message


class WriteOptions(BaseModel):
    """Per-call delivery options.

    ``labels`` are merged over the logger's global labels; the remaining
    fields are forwarded to Cloud Logging as entry attributes when set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    labels: Dict[str, str] = Field(default_factory=dict)
    insert_id: Optional[str] = None
    trace: Optional[str] = None
    span_id: Optional[str] = None
    trace_sampled: Optional[bool] = None
    timestamp: Optional[datetime] = None
    http_request: Optional[Dict[str, Any]] = None
    source_location: Optional[Dict[str, Any]] = None

    @classmethod
    def coerce(cls, options: Optional[Union["WriteOptions", Mapping[str, Any]]]) -> "WriteOptions":
        """Accept ``None``, a mapping or an instance and return an instance."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    def with_labels(self, labels: Mapping[str, str]) -> "WriteOptions":
        """Return a copy carrying ``labels`` instead of the current ones."""
        return self.model_copy(update={"labels": dict(labels)})

    def delivery_fields(self) -> Dict[str, Any]:
        """Fields other than labels that were explicitly set."""
        return self.model_dump(exclude={"labels"}, exclude_none=True)


class LoggerConfig(BaseModel):
    """Single options object for building a ``Logger``.

    Missing optional fields fall back to their defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    resource_type: str
    resource_labels: Dict[str, str] = Field(default_factory=dict)
    global_labels: Dict[str, str] = Field(default_factory=dict)
    project_id: Optional[str] = None
    echo: bool = False


__all__ = [
    "Message",
    "snapshot_message",
    "MonitoredResource",
    "EntryMetadata",
    "LogEntry",
    "WriteOptions",
    "LoggerConfig",
]
