"""
Log wrapper for Google Cloud Logging (formerly Stackdriver).

Example:
    from stackdriver_log_wrapper import Logger, Severity

    my_logger = Logger(
        "MyLogName",
        "cloud_function",
        {"function_name": "myCloudFunction"},
        {"some_label": "label_value"},
    )
    my_logger.info("Hello World")
    # Or log an info message like this...
    my_logger.log("Hello World", Severity.INFO)
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any, Optional, TextIO, Union

from .backends import GCloudBackend, LogBackend, get_backend
from .exceptions import LoggerClosedError
from .logging import get_logger
from .logging.sinks import orjson_dumps
from .severity import Severity, severity_name
from .types import EntryMetadata, LogEntry, LoggerConfig, Message, MonitoredResource, WriteOptions

logger = get_logger("stackdriver_log_wrapper.logger")

OptionsLike = Union[WriteOptions, Mapping[str, Any], None]


class Logger:
    """A log stream with a fixed resource and default labels.

    Every call goes through ``log``, which merges the per-call labels over
    the global labels, builds an entry and hands it to the backend. The
    backend's pending write is returned so the caller can wait on it,
    inspect it or ignore it.

    Args:
        name: The log name.
        resource_type: Monitored resource type, e.g. ``cloud_function``.
            See https://cloud.google.com/logging/docs/reference/v2/rest/v2/MonitoredResource
        resource_labels: Monitored resource labels.
        global_labels: Labels attached to every entry unless overridden per call.
        project_id: GCP project; ``None`` selects the ambient default.
        echo: Also print ``"<SEVERITY> <message>"`` to stdout before each write.
        backend: Log backend; a ``GCloudBackend`` for ``name`` when omitted.
        echo_stream: Stream for echo output; stdout when omitted.
    """

    def __init__(
        self,
        name: str,
        resource_type: str,
        resource_labels: Optional[Mapping[str, str]] = None,
        global_labels: Optional[Mapping[str, str]] = None,
        *,
        project_id: Optional[str] = None,
        echo: bool = False,
        backend: Optional[LogBackend] = None,
        echo_stream: Optional[TextIO] = None,
    ) -> None:
        self._name = name
        self._resource_type = resource_type
        self._resource_labels = dict(resource_labels or {})
        self._global_labels = dict(global_labels or {})
        self._project_id = project_id
        self._echo = echo
        self._echo_stream = echo_stream
        self._backend = backend if backend is not None else GCloudBackend(name, project_id=project_id)
        self._closed = False

        logger.debug(
            "logger_created",
            name=name,
            resource_type=resource_type,
            backend=type(self._backend).__name__,
        )

    @classmethod
    def from_config(
        cls,
        config: Union[LoggerConfig, Mapping[str, Any]],
        *,
        backend: Optional[LogBackend] = None,
    ) -> "Logger":
        """Build a logger from a single options object; missing fields take defaults."""
        if not isinstance(config, LoggerConfig):
            config = LoggerConfig.model_validate(dict(config))
        return cls(
            config.name,
            config.resource_type,
            config.resource_labels,
            config.global_labels,
            project_id=config.project_id,
            echo=config.echo,
            backend=backend,
        )

    @classmethod
    def from_settings(
        cls,
        name: str,
        resource_type: str,
        resource_labels: Optional[Mapping[str, str]] = None,
        global_labels: Optional[Mapping[str, str]] = None,
    ) -> "Logger":
        """Build a logger whose backend, project and echo flag come from ``settings.wrapper``."""
        from .config import settings

        wrapper_settings = settings.wrapper
        return cls(
            name,
            resource_type,
            resource_labels,
            global_labels,
            project_id=wrapper_settings.project_id,
            echo=wrapper_settings.echo,
            backend=get_backend(log_name=name),
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def resource_type(self) -> str:
        return self._resource_type

    @property
    def resource_labels(self) -> dict[str, str]:
        return dict(self._resource_labels)

    @property
    def global_labels(self) -> dict[str, str]:
        return dict(self._global_labels)

    @property
    def project_id(self) -> Optional[str]:
        return self._project_id

    @property
    def echo(self) -> bool:
        return self._echo

    @property
    def backend(self) -> LogBackend:
        return self._backend

    @property
    def closed(self) -> bool:
        return self._closed

    def make_entry(self, message: Message, severity: Union[Severity, str]) -> LogEntry:
        """Create an entry using this logger's resource type and labels.

        See https://cloud.google.com/logging/docs/reference/v2/rest/v2/LogEntry
        """
        metadata = EntryMetadata(
            resource=MonitoredResource(type=self._resource_type, labels=dict(self._resource_labels)),
            severity=severity,
        )
        return self._backend.entry(metadata, message)

    def log(self, message: Message, severity: Union[Severity, str], options: OptionsLike = None) -> "Future[Any]":
        """Emit a message to Cloud Logging.

        Args:
            message: Text or a mapping (sent as a JSON payload).
            severity: A ``Severity``; other strings are forwarded as-is.
            options: ``WriteOptions`` or an equivalent mapping. Its labels
                take precedence over the global labels.

        Returns:
            The pending write. ``result()`` re-raises any backend failure.

        Raises:
            LoggerClosedError: the logger was closed.
            pydantic.ValidationError: ``options`` has unknown or invalid fields.
        """
        if self._closed:
            raise LoggerClosedError(name=self._name)

        write_options = WriteOptions.coerce(options)
        write_options = write_options.with_labels({**self._global_labels, **write_options.labels})

        if self._echo:
            self._write_echo(message, severity)

        entry = self.make_entry(message, severity)
        return self._backend.write(entry, write_options)

    async def alog(self, message: Message, severity: Union[Severity, str], options: OptionsLike = None) -> Any:
        """Like ``log``, but awaits the write and returns its result."""
        return await asyncio.wrap_future(self.log(message, severity, options))

    def _write_echo(self, message: Message, severity: Union[Severity, str]) -> None:
        stream = self._echo_stream or sys.stdout
        if isinstance(message, Mapping):
            text = orjson_dumps(dict(message), default=str)
        else:
            text = str(message).replace("\r", "\\r").replace("\n", "\\n")
        stream.write(f"{severity_name(severity)} {text}\n")
        stream.flush()

    def default(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.DEFAULT, options)

    def alert(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.ALERT, options)

    def critical(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.CRITICAL, options)

    def debug(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.DEBUG, options)

    def emergency(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.EMERGENCY, options)

    def error(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.ERROR, options)

    def info(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.INFO, options)

    def notice(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.NOTICE, options)

    def warning(self, message: Message, options: OptionsLike = None) -> "Future[Any]":
        return self.log(message, Severity.WARNING, options)

    def close(self) -> None:
        """Close the backend. Further writes raise ``LoggerClosedError``."""
        if self._closed:
            return
        self._closed = True
        self._backend.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, resource_type={self._resource_type!r})"
