"""Configuration loader for the vimeokit API client (Pydantic edition)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER = logging.getLogger(__name__)
DEFAULT_BASE_URL = "https://api.vimeo.com"
DEFAULT_API_VERSION = "3.4"


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded safely."""


class ClientConfig(BaseSettings):
    """Strongly typed client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        validate_default=True,
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias=AliasChoices("VIMEO_ENVIRONMENT", "APP_ENV"),
    )
    base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias="VIMEO_BASE_URL")
    access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("VIMEO_ACCESS_TOKEN", "VIMEO_TOKEN"),
    )
    user_agent: str = Field(default="vimeokit/0.1", validation_alias="VIMEO_USER_AGENT")
    api_version: str = Field(default=DEFAULT_API_VERSION, validation_alias="VIMEO_API_VERSION")

    # Transport behaviour
    timeout_seconds: float = Field(30.0, gt=0, validation_alias="VIMEO_TIMEOUT")
    retry_attempts: int = Field(1, ge=1, le=10, validation_alias="VIMEO_RETRY_ATTEMPTS")
    retry_backoff_seconds: float = Field(1.0, ge=0, validation_alias="VIMEO_RETRY_BACKOFF")

    log_path: Path | None = Field(default=None, validation_alias="VIMEO_LOG_PATH")

    @field_validator("base_url", mode="after")
    @classmethod
    def _normalise_base_url(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return stripped

    @field_validator("log_path", mode="after")
    @classmethod
    def _expand_path(cls, value: Path | None) -> Path | None:
        if value is None:
            return None
        expanded = value.expanduser()
        return expanded if expanded.is_absolute() else (Path.cwd() / expanded).resolve()

    @property
    def token(self) -> str | None:
        """Return the plaintext access token stripped of whitespace."""
        if self.access_token is None:
            return None
        stripped = self.access_token.get_secret_value().strip()
        return stripped or None

    @property
    def accept_header(self) -> str:
        return f"application/vnd.vimeo.*+json;version={self.api_version}"


def load_config(env_path: Path | None = None) -> ClientConfig:
    """Load configuration from .env/environment with validation."""
    load_kwargs: dict[str, str] = {}
    if env_path is not None:
        load_dotenv(env_path, override=False)
        load_kwargs["_env_file"] = str(env_path)
    else:
        load_dotenv(override=False)
    try:
        config = ClientConfig(**load_kwargs)
    except ValidationError as exc:
        raise ConfigError("Invalid configuration") from exc

    if config.log_path is not None:
        config.log_path.parent.mkdir(parents=True, exist_ok=True)

    LOGGER.info(
        "ClientConfig loaded",
        extra={
            "event": "config.loaded",
            "environment": config.environment,
            "base_url": config.base_url,
            "authenticated": config.token is not None,
        },
    )
    return config
