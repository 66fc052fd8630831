from __future__ import annotations

import json

import httpx
import pytest

from cdg_api_client.core.async_transport import AsyncTransport
from cdg_api_client.core.errors import CdgTransportError
from tests.shared.transport import SequencedHandler, build_config, json_response


def _transport(handler) -> AsyncTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AsyncTransport(build_config(), client=client)


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [200, 404, 500])
async def test_send_returns_raw_response_for_any_status(status):
    handler = SequencedHandler([json_response(status, {"status": status})])
    transport = _transport(handler)
    raw = await transport.send(httpx.Request("GET", "https://api.congress.gov/v3/bill"))

    assert raw.status_code == status
    assert json.loads(raw.content) == {"status": status}
    assert handler.calls == 1


@pytest.mark.asyncio
async def test_send_applies_default_headers_without_overriding():
    handler = SequencedHandler([json_response(200, {}), json_response(200, {})])
    transport = _transport(handler)
    await transport.send(httpx.Request("GET", "https://api.congress.gov/v3/bill"))
    await transport.send(
        httpx.Request("GET", "https://api.congress.gov/v3/bill", headers={"Accept": "text/plain"})
    )

    assert handler.requests[0].headers["Accept"] == "application/json"
    assert handler.requests[0].headers["Accept-Encoding"] == "gzip"
    assert handler.requests[1].headers["Accept"] == "text/plain"


@pytest.mark.asyncio
async def test_network_failure_is_transport_error():
    handler = SequencedHandler([httpx.ReadTimeout("timed out")])
    transport = _transport(handler)
    with pytest.raises(CdgTransportError) as exc_info:
        await transport.send(httpx.Request("GET", "https://api.congress.gov/v3/bill"))
    assert isinstance(exc_info.value.source, httpx.ReadTimeout)
    assert handler.calls == 1


@pytest.mark.asyncio
async def test_closed_transport_rejects_send():
    handler = SequencedHandler([])
    transport = _transport(handler)
    await transport.close()
    await transport.close()
    with pytest.raises(CdgTransportError):
        await transport.send(httpx.Request("GET", "https://api.congress.gov/v3/bill"))
    assert handler.calls == 0


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    transport = AsyncTransport(build_config())
    await transport.close()
    assert transport._client.is_closed
