"""Mini README: Centralised configuration for the Profit Dashboard service.

Structure:
    * DashboardSettings - pydantic-settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (``PROFITDASH_*``
    or a local ``.env`` file). The override login pair is read from
    ``AUTH_USERNAME``/``AUTH_PASSWORD`` so existing deployments keep working.
    Settings are validated once per process and cached.
"""

from __future__ import annotations

import secrets
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_FILE_NAME = "sales.json"


class DashboardSettings(BaseSettings):
    """Runtime configuration for the Profit Dashboard."""

    model_config = SettingsConfigDict(
        env_prefix="PROFITDASH_",
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted transaction document.",
        validate_default=True,
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    auth_username: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("AUTH_USERNAME", "PROFITDASH_AUTH_USERNAME"),
        description="Override login name; only honoured together with auth_password.",
    )
    auth_password: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("AUTH_PASSWORD", "PROFITDASH_AUTH_PASSWORD"),
        description="Override login password; only honoured together with auth_username.",
    )
    session_secret: str = Field(
        default_factory=lambda: secrets.token_urlsafe(32),
        description=(
            "Key used to sign session tokens. Defaults to a per-process random"
            " value, which invalidates sessions on restart."
        ),
    )
    session_ttl_minutes: int = Field(
        720,
        description="Lifetime of a session token issued at login.",
        ge=1,
    )
    require_session: bool = Field(
        True,
        description=(
            "Require a session token on write requests. When disabled the"
            " submitter name is taken from the request body."
        ),
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def data_file(self) -> Path:
        """Location of the JSON document holding all transactions."""

        return self.data_directory / DATA_FILE_NAME


@lru_cache()
def get_settings() -> DashboardSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DashboardSettings()
