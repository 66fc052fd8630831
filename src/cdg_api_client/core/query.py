"""Generic request pipeline: endpoint descriptor + client -> typed result.

Every endpoint call goes through the same steps:

1. resolve the endpoint path against the client's base URL,
2. append the descriptor's query parameters in order,
3. let the client attach the credential,
4. build a body-less request,
5. dispatch it (transport failures propagate as-is, no retry),
6. parse the body as JSON (a parse failure is an HTTP error with the received status),
7. reject non-success statuses,
8. deserialize into the requested result type.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar

import httpx

from .errors import CdgApiError
from .models import AsyncRestClient, RestClient, UrlResolver
from .params import QueryParams
from .response_parsing import decode_response, ensure_success_status
from .transport_shared import build_http_request

logger = logging.getLogger("cdg_api_client")

T = TypeVar("T")


class SupportsEndpoint(Protocol):
    def method(self) -> str: ...
    def path(self) -> str: ...
    def url_base(self) -> Any: ...
    def parameters(self) -> QueryParams: ...


def prepare_request(endpoint: SupportsEndpoint, client: UrlResolver) -> httpx.Request:
    url = endpoint.url_base().endpoint_for(client, endpoint.path())
    url = endpoint.parameters().add_to_url(url)
    url = client.set_auth(url)
    return build_http_request(endpoint.method(), url)


def query(endpoint: SupportsEndpoint, client: RestClient, result_type: Any = Any) -> Any:
    """Run ``endpoint`` against ``client`` and deserialize into ``result_type``."""

    path = endpoint.path()
    try:
        request = prepare_request(endpoint, client)
        response = client.rest(request)
        result = decode_response(response, result_type)
    except CdgApiError as exc:
        _log_failure(path, exc)
        raise
    logger.info("query success endpoint=%s http_status=%s", path, response.status_code)
    return result


async def async_query(endpoint: SupportsEndpoint, client: AsyncRestClient, result_type: Any = Any) -> Any:
    """Async counterpart of :func:`query`."""

    path = endpoint.path()
    try:
        request = prepare_request(endpoint, client)
        response = await client.rest(request)
        result = decode_response(response, result_type)
    except CdgApiError as exc:
        _log_failure(path, exc)
        raise
    logger.info("query success endpoint=%s http_status=%s", path, response.status_code)
    return result


def query_raw(endpoint: SupportsEndpoint, client: RestClient) -> bytes:
    """Return the undecoded body, e.g. for ``Format.XML`` responses."""

    path = endpoint.path()
    try:
        response = client.rest(prepare_request(endpoint, client))
        ensure_success_status(response)
    except CdgApiError as exc:
        _log_failure(path, exc)
        raise
    logger.info("raw query success endpoint=%s http_status=%s", path, response.status_code)
    return response.content


async def async_query_raw(endpoint: SupportsEndpoint, client: AsyncRestClient) -> bytes:
    path = endpoint.path()
    try:
        response = await client.rest(prepare_request(endpoint, client))
        ensure_success_status(response)
    except CdgApiError as exc:
        _log_failure(path, exc)
        raise
    logger.info("raw query success endpoint=%s http_status=%s", path, response.status_code)
    return response.content


def _log_failure(path: str, exc: CdgApiError) -> None:
    logger.error(
        "query failed endpoint=%s error=%s http_status=%s",
        path,
        exc.__class__.__name__,
        exc.http_status,
    )


__all__ = [
    "SupportsEndpoint",
    "prepare_request",
    "query",
    "async_query",
    "query_raw",
    "async_query_raw",
]
