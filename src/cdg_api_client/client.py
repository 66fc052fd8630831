"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from .auth import ApiKeyAuth
from .client_shared import resolve_auth, validate_client_config
from .common import Format
from .config import CdgClientConfig
from .core.errors import CdgClientClosedError
from .core.models import RawResponse
from .core.query import SupportsEndpoint, query, query_raw
from .core.transport import SyncTransport
from .core.transport_shared import join_endpoint_url, normalize_base_url


class CdgClient:
    """Public congress.gov API client.

    Holds the base URL, the API key and one pooled ``httpx.Client``. A single
    instance is meant to be reused for every call an application makes.
    """

    def __init__(
        self,
        api_key: str | ApiKeyAuth | None = None,
        *,
        config: CdgClientConfig | None = None,
        transport: SyncTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or CdgClientConfig()
        validate_client_config(self._config)

        self._auth = resolve_auth(api_key)
        self._base_url = normalize_base_url(self._config.base_url)
        self._transport = transport or SyncTransport(self._config, client=http_client)
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

    def rest(self, request: httpx.Request) -> RawResponse:
        self._ensure_open()
        return self._transport.send(request)

    def query(self, endpoint: SupportsEndpoint, result_type: Any = Any) -> Any:
        self._ensure_open()
        return query(endpoint, self, result_type)

    def query_raw(self, endpoint: SupportsEndpoint) -> bytes:
        self._ensure_open()
        return query_raw(endpoint, self)

    def _ensure_open(self) -> None:
        if self._closed:
            raise CdgClientClosedError("CdgClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "CdgClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False

    def __repr__(self) -> str:
        return f"CdgClient(base_url={str(self._base_url)!r})"


__all__ = [
    "CdgClient",
]
