import pytest

from stackdriver_log_wrapper.backends import InMemoryBackend
from stackdriver_log_wrapper.logging import shutdown_logging


@pytest.fixture(autouse=True)
def reset_diagnostics_logging():
    """Leave diagnostics logging unconfigured for every test."""
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture
def memory_backend() -> InMemoryBackend:
    return InMemoryBackend("test-log")
