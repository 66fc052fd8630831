"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..common import Format
from ..config import CdgClientConfig
from .endpoint import GET
from .errors import CdgRequestBuildError, CdgUrlError
from .models import RawResponse

_ACCEPT = {
    Format.JSON: "application/json",
    Format.XML: "application/xml",
}


def build_default_headers(config: CdgClientConfig) -> Mapping[str, str]:
    return {
        "Accept": _ACCEPT[config.format],
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: CdgClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def normalize_base_url(base_url: str) -> httpx.URL:
    return httpx.URL(base_url.rstrip("/") + "/")


def join_endpoint_url(base_url: httpx.URL, endpoint: str) -> httpx.URL:
    """Join ``endpoint`` onto ``base_url``; the result must stay on the same host."""

    try:
        url = base_url.join(endpoint.lstrip("/"))
    except httpx.InvalidURL as exc:
        raise CdgUrlError(f"failed to parse url: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise CdgUrlError(f"failed to parse url: {endpoint!r} is not an absolute http(s) URL")
    if url.host != base_url.host:
        raise CdgUrlError(f"failed to parse url: {endpoint!r} leaves the base URL host")
    return url


def build_http_request(method: str, url: httpx.URL) -> httpx.Request:
    if method.upper() != GET:
        raise CdgRequestBuildError(f"unsupported HTTP method: {method}")
    try:
        return httpx.Request(GET, url)
    except (httpx.InvalidURL, ValueError) as exc:
        raise CdgRequestBuildError(f"failed to build request: {exc}") from exc


def apply_default_headers(request: httpx.Request, headers: Mapping[str, str]) -> None:
    for key, value in headers.items():
        request.headers.setdefault(key, value)


def to_raw_response(response: httpx.Response) -> RawResponse:
    return RawResponse(
        status_code=response.status_code,
        content=response.content,
        headers=dict(response.headers),
    )


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "normalize_base_url",
    "join_endpoint_url",
    "build_http_request",
    "apply_default_headers",
    "to_raw_response",
]
