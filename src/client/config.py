"""Client configuration with environment variable loading.

Pydantic-based configuration for the chat client: where the assistant
endpoint lives, how long to wait for it, and how the typing reveal is paced.
"""

import os
from typing import Literal

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_UPSTREAM_URL = "http://13.232.251.152"
DEFAULT_GREETING = "Hi there! 👋 I'm an AI assistant. How can I help you today?"


class ClientConfig(BaseModel):
    """Configuration for the chat client.

    In development, requests go straight to the fixed upstream host. In
    production, ``API_BASE_URL`` must be set and is prepended instead.

    Attributes:
        app_env: ``development`` or ``production``.
        api_base_url: Base URL used in production.
        upstream_url: Assistant host used in development.
        request_timeout: Seconds to wait for one exchange.
        greeting: Seed assistant message of every new session.
        reveal_initial_delay: Seconds before the first revealed character.
        reveal_min_char_delay: Lower bound of the per-character pause.
        reveal_max_char_delay: Upper bound of the per-character pause.
        error_toast_duration: Seconds an error notification stays visible.
    """

    model_config = ConfigDict(validate_default=True)

    app_env: Literal["development", "production"] = Field(
        default_factory=lambda: os.getenv("APP_ENV", "development").lower(),
        description="Runtime environment",
    )
    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", ""),
        description="Assistant API base URL for production",
    )
    upstream_url: str = Field(
        default_factory=lambda: os.getenv("API_UPSTREAM_URL", DEFAULT_UPSTREAM_URL),
        description="Assistant host used during development",
    )
    request_timeout: float = Field(
        default_factory=lambda: os.getenv("API_REQUEST_TIMEOUT", "30"),
        gt=0.0,
        description="Seconds to wait for the assistant endpoint",
    )
    greeting: str = Field(
        default_factory=lambda: os.getenv("GREETING_MESSAGE", DEFAULT_GREETING),
        description="Seed assistant message",
    )
    reveal_initial_delay: float = Field(
        default_factory=lambda: os.getenv("REVEAL_INITIAL_DELAY", "0.5"),
        ge=0.0,
    )
    reveal_min_char_delay: float = Field(
        default_factory=lambda: os.getenv("REVEAL_MIN_CHAR_DELAY", "0.015"),
        ge=0.0,
    )
    reveal_max_char_delay: float = Field(
        default_factory=lambda: os.getenv("REVEAL_MAX_CHAR_DELAY", "0.040"),
        ge=0.0,
    )
    error_toast_duration: float = Field(
        default_factory=lambda: os.getenv("ERROR_TOAST_DURATION", "3"),
        gt=0.0,
    )

    @field_validator("api_base_url", "upstream_url")
    @classmethod
    def validate_url(cls, v: str, info: ValidationInfo) -> str:
        """Reject URLs httpx cannot use as a base URL.

        An empty ``api_base_url`` is allowed here; production requires it
        in ``validate_settings``.
        """
        value = v.strip()
        if not value and info.field_name == "api_base_url":
            return value
        if not value or any(c.isspace() for c in value):
            raise ValueError(f"{info.field_name} is not a valid URL: {v!r}")
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"{info.field_name} is not a valid URL: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"{info.field_name} must be an http(s) URL with a host: {v!r}")
        if url.port is not None and not 0 < url.port <= 65535:
            raise ValueError(f"{info.field_name} has an invalid port: {url.port}")
        return value

    @model_validator(mode="after")
    def validate_settings(self) -> "ClientConfig":
        """Check cross-field constraints."""
        if self.reveal_min_char_delay > self.reveal_max_char_delay:
            raise ValueError("reveal_min_char_delay must not exceed reveal_max_char_delay")
        if self.app_env == "production" and not self.api_base_url.strip():
            raise ValueError("API base URL required in production. Set API_BASE_URL in .env")
        return self

    @property
    def base_url(self) -> str:
        """Base URL that ``/api/chat/send`` is appended to."""
        if self.app_env == "production":
            return self.api_base_url.strip().rstrip("/")
        return self.upstream_url.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If the environment holds invalid settings.
    """
    return ClientConfig()
