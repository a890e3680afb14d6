from unittest.mock import PropertyMock, patch

import pytest

from stackdriver_log_wrapper import Logger
from stackdriver_log_wrapper.backends import GCloudBackend, InMemoryBackend, get_backend
from stackdriver_log_wrapper.config import BackendKind, Settings, WrapperSettings
from stackdriver_log_wrapper.exceptions import UnsupportedBackendError


def test_memory_backend():
    backend = get_backend("memory", log_name="factory-log")

    assert isinstance(backend, InMemoryBackend)
    assert backend.log_name == "factory-log"


def test_backend_name_is_case_insensitive():
    assert isinstance(get_backend("MEMORY", log_name="factory-log"), InMemoryBackend)


def test_gcloud_backend():
    backend = get_backend(BackendKind.GCLOUD, log_name="factory-log", project_id="my-project", max_workers=2)

    assert isinstance(backend, GCloudBackend)
    assert backend.project_id == "my-project"
    backend.close()


def test_unsupported_backend():
    with pytest.raises(UnsupportedBackendError) as exc_info:
        get_backend("kafka", log_name="factory-log")

    assert exc_info.value.code == "UNSUPPORTED_BACKEND"
    assert exc_info.value.details["supported"] == ["gcloud", "memory"]


def test_defaults_from_settings():
    wrapper = WrapperSettings(backend=BackendKind.MEMORY)
    with patch.object(Settings, "wrapper", new_callable=PropertyMock, return_value=wrapper):
        backend = get_backend(log_name="factory-log")

    assert isinstance(backend, InMemoryBackend)


def test_logger_from_settings():
    wrapper = WrapperSettings(backend=BackendKind.MEMORY, project_id="env-project", echo=True)
    with patch.object(Settings, "wrapper", new_callable=PropertyMock, return_value=wrapper):
        logger = Logger.from_settings("env-log", "global", global_labels={"env": "dev"})

    assert isinstance(logger.backend, InMemoryBackend)
    assert logger.backend.log_name == "env-log"
    assert logger.project_id == "env-project"
    assert logger.echo is True
    assert logger.global_labels == {"env": "dev"}
