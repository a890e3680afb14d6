"""
Exception hierarchy for stackdriver_log_wrapper.

Only configuration and lifecycle errors live here. Failures reported by the
logging backend (auth, network, quota, malformed entry) are never wrapped:
they reach the caller unmodified through the pending write.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LogWrapperError(Exception):
    """Root of all errors raised by this package.

    Carries a stable ``code`` and a ``details`` mapping so callers can
    branch on the failure without parsing the message.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Configuration errors
# ================================


class ConfigurationError(LogWrapperError):
    """Invalid or unsupported configuration."""

    pass


class UnsupportedBackendError(ConfigurationError):
    """Raised when a backend name has no registered factory."""

    def __init__(self, *, backend: str, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported log backend: {backend}. Supported: {supported}",
            code="UNSUPPORTED_BACKEND",
            details={"backend": backend, "supported": supported},
        )


# ================================
# Lifecycle errors
# ================================


class LoggerClosedError(LogWrapperError):
    """Raised when writing through a logger whose backend was closed."""

    def __init__(self, *, name: str) -> None:
        super().__init__(
            f"Logger '{name}' is closed",
            code="LOGGER_CLOSED",
            details={"name": name},
        )


__all__ = [
    "LogWrapperError",
    "ConfigurationError",
    "UnsupportedBackendError",
    "LoggerClosedError",
]
