from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx
import pytest
from pydantic import BaseModel

from cdg_api_client.api import bill
from cdg_api_client.common import BillType, Sort
from cdg_api_client.core.endpoint import Endpoint
from cdg_api_client.core.errors import (
    CdgDataTypeError,
    CdgHttpError,
    CdgRequestBuildError,
    CdgTransportError,
    CdgUrlError,
)
from cdg_api_client.core.models import RawResponse
from cdg_api_client.core.query import prepare_request, query, query_raw
from tests.shared.client_fakes import FakeRestClient
from tests.shared.payloads import make_bill_payload, make_error_payload
from tests.shared.transport import API_KEY


class Bill(BaseModel):
    congress: int
    type: BillType
    number: str
    title: str


class BillEnvelope(BaseModel):
    bill: Bill


@dataclass
class BillSummary:
    congress: int
    number: str


@dataclass
class BillSummaryEnvelope:
    bill: BillSummary


@dataclass(frozen=True, kw_only=True)
class _OffHostEndpoint(Endpoint):
    template = "https://elsewhere.example/v3/bill"


@dataclass(frozen=True, kw_only=True)
class _NonHttpEndpoint(Endpoint):
    template = "mailto:clerk@house.gov"


@dataclass(frozen=True, kw_only=True)
class _PostEndpoint(Endpoint):
    template = "bill"

    def method(self) -> str:
        return "POST"


def _ok(payload: Any, status: int = 200) -> RawResponse:
    return RawResponse(status_code=status, content=json.dumps(payload).encode())


DETAIL = bill.BillDetail(congress=117, bill_type=BillType.HR, bill_number=3076)


def test_prepare_request_builds_full_url():
    client = FakeRestClient([])
    endpoint = bill.BillsByType(congress=117, bill_type="hr", limit=2, sort=Sort.DESC)
    request = prepare_request(endpoint, client)

    assert request.method == "GET"
    assert request.url.host == "api.congress.gov"
    assert request.url.path == "/v3/bill/117/hr"
    assert request.url.params.multi_items() == [
        ("format", "json"),
        ("limit", "2"),
        ("sort", "desc"),
        ("api_key", API_KEY),
    ]
    assert request.content == b""


def test_query_returns_pydantic_model():
    client = FakeRestClient([_ok(make_bill_payload())])
    result = query(DETAIL, client, BillEnvelope)

    assert isinstance(result, BillEnvelope)
    assert result.bill.type is BillType.HR
    assert result.bill.number == "3076"
    assert client.requests[0].url.path == "/v3/bill/117/hr/3076"


def test_query_returns_dataclass():
    client = FakeRestClient([_ok(make_bill_payload())])
    result = query(DETAIL, client, BillSummaryEnvelope)
    assert result == BillSummaryEnvelope(bill=BillSummary(congress=117, number="3076"))


def test_query_defaults_to_untyped_payload():
    payload = make_bill_payload()
    client = FakeRestClient([_ok(payload)])
    assert query(DETAIL, client) == payload


def test_query_error_status_with_json_body_is_http_error():
    client = FakeRestClient([_ok(make_error_payload(), status=404)])
    with pytest.raises(CdgHttpError) as exc_info:
        query(DETAIL, client, BillEnvelope)
    assert exc_info.value.http_status == 404


def test_query_success_status_with_non_json_body_is_http_error():
    client = FakeRestClient([RawResponse(status_code=200, content=b"<bill/>")])
    with pytest.raises(CdgHttpError) as exc_info:
        query(DETAIL, client, BillEnvelope)
    assert exc_info.value.http_status == 200


def test_query_shape_mismatch_is_data_type_error():
    payload = make_bill_payload()
    del payload["bill"]["title"]
    client = FakeRestClient([_ok(payload)])
    with pytest.raises(CdgDataTypeError) as exc_info:
        query(DETAIL, client, BillEnvelope)
    assert exc_info.value.http_status == 200


def test_transport_error_propagates_unchanged():
    failure = CdgTransportError("network/transport error", source=httpx.ConnectError("refused"))
    client = FakeRestClient([failure])
    with pytest.raises(CdgTransportError) as exc_info:
        query(DETAIL, client, BillEnvelope)
    assert exc_info.value is failure
    assert len(client.requests) == 1


@pytest.mark.parametrize("endpoint", [_OffHostEndpoint(), _NonHttpEndpoint()], ids=["off-host", "non-http"])
def test_unjoinable_path_is_url_error_before_dispatch(endpoint):
    client = FakeRestClient([])
    with pytest.raises(CdgUrlError):
        query(endpoint, client)
    assert client.requests == []


def test_non_get_method_is_request_build_error_before_dispatch():
    client = FakeRestClient([])
    with pytest.raises(CdgRequestBuildError):
        query(_PostEndpoint(), client)
    assert client.requests == []


def test_query_raw_returns_body_bytes():
    client = FakeRestClient([RawResponse(status_code=200, content=b"<api-root><bill/></api-root>")])
    assert query_raw(bill.BillList(format="xml"), client) == b"<api-root><bill/></api-root>"
    assert ("format", "xml") in client.requests[0].url.params.multi_items()


def test_query_raw_rejects_error_status():
    client = FakeRestClient([RawResponse(status_code=503, content=b"unavailable")])
    with pytest.raises(CdgHttpError) as exc_info:
        query_raw(bill.BillList(), client)
    assert exc_info.value.http_status == 503


def test_failure_is_logged_without_api_key(caplog):
    caplog.set_level("DEBUG", logger="cdg_api_client")
    client = FakeRestClient([_ok(make_error_payload(), status=404)])
    with pytest.raises(CdgHttpError):
        query(DETAIL, client)
    assert "CdgHttpError" in caplog.text
    assert "bill/117/hr/3076" in caplog.text
    assert API_KEY not in caplog.text
