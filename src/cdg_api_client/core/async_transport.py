"""Async HTTP transport over a reusable httpx connection pool."""

from __future__ import annotations

import logging

import httpx

from ..config import CdgClientConfig
from .errors import CdgTransportError
from .models import RawResponse
from .transport_shared import (
    apply_default_headers,
    build_default_headers,
    build_default_timeout,
    to_raw_response,
)

logger = logging.getLogger("cdg_api_client")


class AsyncTransport:
    """Asynchronous transport for the congress.gov API."""

    def __init__(
        self,
        config: CdgClientConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._headers = build_default_headers(config)
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=self._headers,
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def send(self, request: httpx.Request) -> RawResponse:
        if self._closed:
            raise CdgTransportError("transport is already closed")

        endpoint = request.url.path
        apply_default_headers(request, self._headers)
        logger.debug("request start method=%s endpoint=%s", request.method, endpoint)
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                endpoint,
                exc.__class__.__name__,
            )
            raise CdgTransportError("network/transport error", source=exc) from exc

        logger.debug(
            "response received endpoint=%s http_status=%s bytes=%s",
            endpoint,
            response.status_code,
            len(response.content),
        )
        return to_raw_response(response)


__all__ = [
    "AsyncTransport",
]
