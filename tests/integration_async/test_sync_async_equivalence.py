from __future__ import annotations

import httpx
import pytest

from cdg_api_client.api import bill, committee, member
from cdg_api_client.common import BillType, StateCode
from cdg_api_client.core.errors import CdgApiError
from tests.shared.transport import SequencedHandler, build_async_client, build_client, json_response

ENDPOINTS = [
    bill.BillDetail(congress=117, bill_type=BillType.HR, bill_number=3076),
    bill.BillsByType(congress=118, bill_type="sres", limit=5, sort="asc"),
    committee.CommitteeBills(chamber="senate", committee_code="ssju00", offset=20),
    member.MembersByState(state_code=StateCode.CA, current_member=True),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("endpoint", ENDPOINTS, ids=lambda endpoint: type(endpoint).__name__)
async def test_sync_and_async_send_identical_requests(fixture_loader, endpoint):
    payload = fixture_loader("bill_detail.json")
    sync_handler = SequencedHandler([json_response(200, payload)])
    async_handler = SequencedHandler([json_response(200, payload)])

    with build_client(sync_handler) as client:
        sync_result = client.query(endpoint)
    async with build_async_client(async_handler) as client:
        async_result = await client.query(endpoint)

    assert sync_result == async_result == payload
    sync_request = sync_handler.requests[0]
    async_request = async_handler.requests[0]
    assert sync_request.url == async_request.url
    assert sync_request.method == async_request.method == "GET"
    assert sync_request.headers["Accept"] == async_request.headers["Accept"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "make_step",
    [
        lambda: json_response(404, {"error": "Unknown resource"}),
        lambda: httpx.Response(200, content=b"not json"),
        lambda: httpx.ConnectTimeout("timed out"),
    ],
    ids=["status-404", "non-json", "network"],
)
async def test_sync_and_async_raise_same_error(make_step):
    endpoint = ENDPOINTS[0]
    sync_handler = SequencedHandler([make_step()])
    async_handler = SequencedHandler([make_step()])

    with build_client(sync_handler) as client:
        with pytest.raises(CdgApiError) as sync_exc:
            client.query(endpoint)
    async with build_async_client(async_handler) as client:
        with pytest.raises(CdgApiError) as async_exc:
            await client.query(endpoint)

    assert type(sync_exc.value) is type(async_exc.value)
    assert sync_exc.value.http_status == async_exc.value.http_status
