"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import httpx

from .common import Format
from .core.errors import CdgValidationError

DEFAULT_BASE_URL = "https://api.congress.gov/v3/"
DEFAULT_API_KEY_ENV = "CDG_API_KEY"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class CdgClientConfig:
    """Runtime configuration for the congress.gov client."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "cdg-api-client/0.1.0"
    format: Format = Format.JSON

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as exc:
            raise ValueError(f"base_url is not a valid URL: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("base_url must be an absolute http(s) URL")
        if not isinstance(self.format, Format):
            raise ValueError("format must be a Format")
        self.transport.validate()


def api_key_from_env(name: str = DEFAULT_API_KEY_ENV) -> str:
    """Read the API key from the environment."""

    value = os.environ.get(name, "").strip()
    if not value:
        raise CdgValidationError(f"environment variable {name} is not set")
    return value


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_API_KEY_ENV",
    "TransportConfig",
    "CdgClientConfig",
    "api_key_from_env",
]
