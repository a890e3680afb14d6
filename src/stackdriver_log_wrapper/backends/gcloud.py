"""Google Cloud Logging backend.

Wraps ``google.cloud.logging`` so that every write runs on a worker
thread and the caller receives a ``Future`` for it. Authentication,
transport and retries stay with the client library.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Optional

from google.cloud import logging as gcloud_logging
from google.cloud.logging import Resource

from stackdriver_log_wrapper.exceptions import LoggerClosedError
from stackdriver_log_wrapper.logging import get_logger
from stackdriver_log_wrapper.severity import severity_name
from stackdriver_log_wrapper.types import EntryMetadata, LogEntry, Message, WriteOptions, snapshot_message

from .base import LogBackend

logger = get_logger("stackdriver_log_wrapper.backends.gcloud")


class GCloudBackend(LogBackend):
    """Cloud Logging log stream.

    Args:
        log_name: Name of the Cloud Logging log to write to
        project_id: GCP project; ``None`` selects the ambient default
        client: Pre-built ``google.cloud.logging.Client``; owned by the caller
        max_workers: Upper bound on writes in flight at once
    """

    def __init__(
        self,
        log_name: str,
        *,
        project_id: Optional[str] = None,
        client: Optional[gcloud_logging.Client] = None,
        max_workers: int = 4,
    ) -> None:
        self._log_name = log_name
        self._project_id = project_id
        self._client = client
        self._owns_client = client is None
        self._cloud_logger: Optional[gcloud_logging.Logger] = None
        self._init_lock = threading.Lock()
        self._closed = False
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=f"gcloud-log-{log_name}")

    @property
    def log_name(self) -> str:
        return self._log_name

    @property
    def project_id(self) -> Optional[str]:
        return self._project_id

    def _ensure_logger(self) -> gcloud_logging.Logger:
        """Lazy initialization of the Cloud Logging client and log handle."""
        with self._init_lock:
            if self._cloud_logger is None:
                if self._client is None:
                    self._client = gcloud_logging.Client(project=self._project_id)
                    logger.info(
                        "gcloud_client_initialized",
                        project=self._client.project,
                        log_name=self._log_name,
                    )
                self._cloud_logger = self._client.logger(self._log_name)
            return self._cloud_logger

    def entry(self, metadata: EntryMetadata, message: Message) -> LogEntry:
        return LogEntry(
            log_name=self._log_name,
            resource=metadata.resource,
            severity=severity_name(metadata.severity),
            message=snapshot_message(message),
        )

    def write(self, entry: LogEntry, options: WriteOptions) -> "Future[Any]":
        try:
            return self._executor.submit(self._write_sync, entry, options)
        except RuntimeError as exc:
            if self._closed:
                raise LoggerClosedError(name=self._log_name) from exc
            raise

    def _write_sync(self, entry: LogEntry, options: WriteOptions) -> Any:
        cloud_logger = self._ensure_logger()
        message = dict(entry.message) if isinstance(entry.message, Mapping) else entry.message
        return cloud_logger.log(
            message,
            severity=entry.severity,
            resource=Resource(type=entry.resource.type, labels=dict(entry.resource.labels)),
            labels=dict(options.labels),
            **options.delivery_fields(),
        )

    def close(self) -> None:
        """Wait for in-flight writes, then release the client if this backend created it."""
        self._closed = True
        self._executor.shutdown(wait=True)
        if self._owns_client and self._client is not None:
            self._client.close()
        logger.debug("backend_closed", log_name=self._log_name)
