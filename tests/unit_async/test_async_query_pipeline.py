from __future__ import annotations

import json

import pytest

from cdg_api_client.api import treaty
from cdg_api_client.core.errors import CdgDataTypeError, CdgHttpError
from cdg_api_client.core.models import RawResponse
from cdg_api_client.core.query import async_query, async_query_raw
from tests.shared.client_fakes import FakeAsyncRestClient
from tests.shared.transport import API_KEY

ENDPOINT = treaty.PartitionedTreatyDetail(congress=114, treaty_number=13, treaty_suffix="A")


@pytest.mark.asyncio
async def test_async_query_decodes_payload():
    payload = {"treaty": {"congress": 114, "number": 13, "suffix": "A"}}
    client = FakeAsyncRestClient([RawResponse(status_code=200, content=json.dumps(payload).encode())])

    result = await async_query(ENDPOINT, client, dict[str, dict[str, object]])

    assert result == payload
    request = client.requests[0]
    assert request.url.path == "/v3/treaty/114/13/A"
    assert request.url.params.multi_items() == [("format", "json"), ("api_key", API_KEY)]


@pytest.mark.asyncio
async def test_async_query_shape_mismatch():
    client = FakeAsyncRestClient([RawResponse(status_code=200, content=b"[1, 2]")])
    with pytest.raises(CdgDataTypeError):
        await async_query(ENDPOINT, client, dict[str, int])


@pytest.mark.asyncio
async def test_async_query_raw_status_rules():
    client = FakeAsyncRestClient(
        [
            RawResponse(status_code=200, content=b"<treaty/>"),
            RawResponse(status_code=404, content=b"<error/>"),
        ]
    )
    assert await async_query_raw(ENDPOINT, client) == b"<treaty/>"
    with pytest.raises(CdgHttpError) as exc_info:
        await async_query_raw(ENDPOINT, client)
    assert exc_info.value.http_status == 404
