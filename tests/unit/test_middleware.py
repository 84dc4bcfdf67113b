from __future__ import annotations

import httpx
import pytest

from http_call.application.dtos.http_response import HttpResponse
from http_call.domain.errors import HTTPError, StreamUnavailable
from tests.unit._fakes_transport import ChunkStream, mock_client, server_client

pytestmark = pytest.mark.anyio


async def test_request_middleware_sees_resolved_descriptor_and_can_mutate():
    seen = []

    def add_auth(request):
        seen.append((request.method, request.url))
        request.headers["authorization"] = "Bearer t"

    client, transport = mock_client(lambda request: httpx.Response(200, text="ok"), request_middleware=add_auth)
    await client.get("https://example.com/me")
    assert seen == [("GET", "https://example.com/me")]
    assert transport.requests[0].headers["authorization"] == "Bearer t"


async def test_async_request_middleware_can_replace_descriptor():
    async def reroute(request):
        request.path = "/users/9"
        return request

    assert await server_client().get("https://example.com/users/1", requestMiddleware=reroute) == {"id": 9}


async def test_response_middleware_runs_before_status_evaluation():
    def forgive_404(response):
        if response.status_code == 404:
            response.status_code = 200
            response.body = {"fallback": True}

    client = server_client(response_middleware=forgive_404)
    assert await client.get("https://example.com/missing") == {"fallback": True}


async def test_async_response_middleware_can_reject_success():
    async def fail_everything(response):
        response.status_code = 503
        return response

    with pytest.raises(HTTPError) as excinfo:
        await server_client().get("https://example.com/users/1", response_middleware=fail_everything)
    assert excinfo.value.status_code == 503
    assert excinfo.value.body == {"id": 1}


async def test_call_middleware_overrides_instance_middleware():
    calls = []
    client = server_client(response_middleware=lambda r: calls.append("instance"))
    await client.get("https://example.com/users/1", response_middleware=lambda r: calls.append("call"))
    assert calls == ["call"]


async def test_stream_without_live_handle_raises_typed_error():
    body = ChunkStream([b"x"])
    client, _ = mock_client(lambda request: httpx.Response(200, stream=body))

    def drop_stream(response):
        return HttpResponse(response.status_code, response.headers, response.url, body="x")

    with pytest.raises(StreamUnavailable) as excinfo:
        await client.stream("https://example.com/big", response_middleware=drop_stream)
    assert excinfo.value.url == "https://example.com/big"
    assert body.closed
