"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from .auth import ApiKeyAuth
from .client_shared import resolve_auth, validate_client_config
from .common import Format
from .config import CdgClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import CdgClientClosedError
from .core.models import RawResponse
from .core.query import SupportsEndpoint, async_query, async_query_raw
from .core.transport_shared import join_endpoint_url, normalize_base_url


class AsyncCdgClient:
    """Public async congress.gov API client.

    Safe to share across concurrent tasks: nothing is mutated after
    construction except the closed flag.
    """

    def __init__(
        self,
        api_key: str | ApiKeyAuth | None = None,
        *,
        config: CdgClientConfig | None = None,
        transport: AsyncTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or CdgClientConfig()
        validate_client_config(self._config)

        self._auth = resolve_auth(api_key)
        self._base_url = normalize_base_url(self._config.base_url)
        self._transport = transport or AsyncTransport(self._config, client=http_client)
        self._closed = False

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def format(self) -> Format:
        return self._config.format

    def rest_endpoint(self, endpoint: str) -> httpx.URL:
        return join_endpoint_url(self._base_url, endpoint)

    def set_auth(self, url: httpx.URL) -> httpx.URL:
        return self._auth.apply(url)

    async def rest(self, request: httpx.Request) -> RawResponse:
        self._ensure_open()
        return await self._transport.send(request)

    async def query(self, endpoint: SupportsEndpoint, result_type: Any = Any) -> Any:
        self._ensure_open()
        return await async_query(endpoint, self, result_type)

    async def query_raw(self, endpoint: SupportsEndpoint) -> bytes:
        self._ensure_open()
        return await async_query_raw(endpoint, self)

    def _ensure_open(self) -> None:
        if self._closed:
            raise CdgClientClosedError("AsyncCdgClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncCdgClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False

    def __repr__(self) -> str:
        return f"AsyncCdgClient(base_url={str(self._base_url)!r})"


__all__ = [
    "AsyncCdgClient",
]
