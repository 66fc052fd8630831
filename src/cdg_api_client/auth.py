"""Credentials for the congress.gov API."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

API_KEY_PARAM = "api_key"


@dataclass(slots=True, frozen=True)
class ApiKeyAuth:
    """API key passed as the ``api_key`` query parameter."""

    token: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token.strip():
            raise ValueError("api key must be a non-empty string")

    def apply(self, url: httpx.URL) -> httpx.URL:
        # Appended after every endpoint parameter.
        pairs = list(url.params.multi_items())
        pairs.append((API_KEY_PARAM, self.token))
        return url.copy_with(params=httpx.QueryParams(pairs))


__all__ = [
    "API_KEY_PARAM",
    "ApiKeyAuth",
]
