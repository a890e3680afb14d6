"""
Log backends.

Strategy + Factory: the backend is chosen by name, from the argument or
from ``settings.wrapper.backend``:
- gcloud: Google Cloud Logging (production)
- memory: in-process list (tests, local development)
"""

from __future__ import annotations

from typing import Callable

from stackdriver_log_wrapper.config import BackendKind, settings
from stackdriver_log_wrapper.exceptions import UnsupportedBackendError

from .base import LogBackend
from .gcloud import GCloudBackend
from .memory import InMemoryBackend, WrittenRecord


def create_gcloud_backend(log_name: str, project_id: str | None, max_workers: int) -> LogBackend:
    return GCloudBackend(log_name, project_id=project_id, max_workers=max_workers)


def create_memory_backend(log_name: str, project_id: str | None, max_workers: int) -> LogBackend:
    return InMemoryBackend(log_name)


_BACKEND_FACTORIES: dict[BackendKind, Callable[[str, str | None, int], LogBackend]] = {
    BackendKind.GCLOUD: create_gcloud_backend,
    BackendKind.MEMORY: create_memory_backend,
}


def get_backend(
    backend: str | BackendKind | None = None,
    *,
    log_name: str,
    project_id: str | None = None,
    max_workers: int | None = None,
) -> LogBackend:
    """
    Create a backend bound to ``log_name``.

    Args:
        backend: gcloud or memory; defaults to settings.wrapper.backend
        log_name: Log stream name
        project_id: GCP project; defaults to settings.wrapper.project_id
        max_workers: Write concurrency; defaults to settings.wrapper.max_workers

    Raises:
        UnsupportedBackendError: unknown backend name
    """
    wrapper_settings = settings.wrapper
    backend_value = backend if backend is not None else wrapper_settings.backend
    if isinstance(backend_value, BackendKind):
        kind = backend_value
    else:
        try:
            kind = BackendKind(str(backend_value).lower())
        except ValueError:
            raise UnsupportedBackendError(
                backend=str(backend_value),
                supported=[b.value for b in BackendKind],
            ) from None

    factory = _BACKEND_FACTORIES[kind]
    return factory(
        log_name,
        project_id if project_id is not None else wrapper_settings.project_id,
        max_workers if max_workers is not None else wrapper_settings.max_workers,
    )


__all__ = [
    "LogBackend",
    "InMemoryBackend",
    "WrittenRecord",
    "GCloudBackend",
    "get_backend",
    "create_gcloud_backend",
    "create_memory_backend",
]
