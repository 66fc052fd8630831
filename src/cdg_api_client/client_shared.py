"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .auth import ApiKeyAuth
from .config import CdgClientConfig, api_key_from_env
from .core.errors import CdgValidationError


def validate_client_config(config: CdgClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise CdgValidationError(str(exc)) from exc


def resolve_auth(api_key: str | ApiKeyAuth | None) -> ApiKeyAuth:
    """Accept an explicit key, a prepared credential, or fall back to the environment."""

    if isinstance(api_key, ApiKeyAuth):
        return api_key
    token = api_key_from_env() if api_key is None else api_key
    try:
        return ApiKeyAuth(token)
    except ValueError as exc:
        raise CdgValidationError(str(exc)) from exc


__all__ = [
    "validate_client_config",
    "resolve_auth",
]
