"""
Configuration Module.

Nested settings: each concern loads from its own environment variable prefix.

Multi-Environment Support:
    Set `SDLW_ENV` to one of: development, testing, staging, production
    The system will load .env files in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from stackdriver_log_wrapper.config import settings

    settings.wrapper.backend  # BackendKind.GCLOUD
    settings.wrapper.project_id
    settings.logging.level
"""

from functools import cached_property
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LogFormat, LoggingSettings, LogLevel
from .wrapper import BackendKind, WrapperSettings


def _get_env_files() -> tuple[str, ...]:
    """Determine which .env files to load based on SDLW_ENV."""
    env = os.getenv("SDLW_ENV", "development")
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def wrapper(self) -> WrapperSettings:
        return WrapperSettings()

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "BackendKind",
    "WrapperSettings",
    "LoggingSettings",
    "LogLevel",
    "LogFormat",
]
