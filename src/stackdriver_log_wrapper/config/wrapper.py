"""
Backend Configuration.
"""

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendKind(str, Enum):
    GCLOUD = "gcloud"
    MEMORY = "memory"


class WrapperSettings(BaseSettings):
    """Defaults applied when a Logger is built from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="SDLW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    backend: BackendKind = Field(default=BackendKind.GCLOUD, description="Log backend (gcloud, memory)")
    project_id: Optional[str] = Field(
        default=None,
        description="GCP project id; unset selects the ambient default project",
    )
    echo: bool = Field(default=False, description="Echo each entry to stdout before writing")
    max_workers: int = Field(default=4, ge=1, description="Concurrent writes per gcloud backend")
