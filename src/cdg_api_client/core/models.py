"""Core request/response models and client capability protocols."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

import httpx


@dataclass(slots=True, frozen=True)
class RawResponse:
    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


class UrlResolver(Protocol):
    def rest_endpoint(self, endpoint: str) -> httpx.URL: ...
    def set_auth(self, url: httpx.URL) -> httpx.URL: ...


class RestClient(UrlResolver, Protocol):
    def rest(self, request: httpx.Request) -> RawResponse: ...


class AsyncRestClient(UrlResolver, Protocol):
    async def rest(self, request: httpx.Request) -> RawResponse: ...


__all__ = [
    "RawResponse",
    "UrlResolver",
    "RestClient",
    "AsyncRestClient",
]
