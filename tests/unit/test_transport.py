from __future__ import annotations

import httpx
import pytest

from cdg_api_client.common import Format
from cdg_api_client.config import TransportConfig
from cdg_api_client.core.errors import CdgRequestBuildError, CdgTransportError, CdgUrlError
from cdg_api_client.core.transport import SyncTransport
from cdg_api_client.core.transport_shared import (
    build_default_headers,
    build_default_timeout,
    build_http_request,
    join_endpoint_url,
    normalize_base_url,
)
from tests.shared.transport import SequencedHandler, build_config, json_response

BASE = normalize_base_url("https://api.congress.gov/v3")


def _transport(handler) -> SyncTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SyncTransport(build_config(), client=client)


def test_default_headers_follow_format_preference():
    assert build_default_headers(build_config())["Accept"] == "application/json"
    headers = build_default_headers(build_config(format=Format.XML, user_agent="tests/1.0"))
    assert headers["Accept"] == "application/xml"
    assert headers["User-Agent"] == "tests/1.0"


def test_default_timeout_uses_transport_config():
    config = build_config(transport=TransportConfig(timeout_connect_seconds=1.5, timeout_read_seconds=9.0))
    timeout = build_default_timeout(config)
    assert timeout.connect == 1.5
    assert timeout.read == 9.0


@pytest.mark.parametrize(
    ("endpoint", "expected"),
    [
        ("bill", "https://api.congress.gov/v3/bill"),
        ("/bill/117", "https://api.congress.gov/v3/bill/117"),
        ("congress/current", "https://api.congress.gov/v3/congress/current"),
    ],
)
def test_join_endpoint_url(endpoint, expected):
    assert str(join_endpoint_url(BASE, endpoint)) == expected


@pytest.mark.parametrize(
    "endpoint",
    ["https://example.com/v3/bill", "mailto:clerk@house.gov", "bill/\x00"],
    ids=["other-host", "other-scheme", "control-char"],
)
def test_join_endpoint_url_rejects(endpoint):
    with pytest.raises(CdgUrlError):
        join_endpoint_url(BASE, endpoint)


@pytest.mark.parametrize("method", ["POST", "DELETE", "PUT"])
def test_build_http_request_only_supports_get(method):
    with pytest.raises(CdgRequestBuildError):
        build_http_request(method, httpx.URL("https://api.congress.gov/v3/bill"))


def test_build_http_request_has_no_body():
    request = build_http_request("get", httpx.URL("https://api.congress.gov/v3/bill?format=json"))
    assert request.method == "GET"
    assert request.content == b""


def test_send_returns_raw_response():
    handler = SequencedHandler([json_response(404, {"error": "Unknown resource"})])
    raw = _transport(handler).send(httpx.Request("GET", "https://api.congress.gov/v3/bill/1"))
    assert raw.status_code == 404
    assert b"Unknown resource" in raw.content
    assert raw.headers["content-type"] == "application/json"


def test_network_failure_is_transport_error():
    handler = SequencedHandler([httpx.ConnectError("connection refused")])
    with pytest.raises(CdgTransportError) as exc_info:
        _transport(handler).send(httpx.Request("GET", "https://api.congress.gov/v3/bill"))
    assert isinstance(exc_info.value.source, httpx.ConnectError)


def test_closed_transport_rejects_send():
    handler = SequencedHandler([])
    transport = _transport(handler)
    transport.close()
    with pytest.raises(CdgTransportError):
        transport.send(httpx.Request("GET", "https://api.congress.gov/v3/bill"))
    assert handler.calls == 0


def test_injected_client_is_left_open():
    client = httpx.Client(transport=httpx.MockTransport(SequencedHandler([])))
    transport = SyncTransport(build_config(), client=client)
    transport.close()
    assert client.is_closed is False
    client.close()
