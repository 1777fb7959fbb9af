from __future__ import annotations

import json

import httpx
import pytest

from intercom_client import NetworkError
from intercom_client.transport import Transport, TransportResponse, bearer


def test_bearer() -> None:
    assert bearer("abc") == {"Authorization": "Bearer abc"}
    assert bearer("  ") == {}
    assert bearer(None) == {}


@pytest.mark.asyncio
async def test_json_response_and_request_body() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": "c_1"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        t = Transport(client=client)
        res = await t.perform_json_request(
            url="https://api.intercom.io/contacts",
            method="POST",
            headers={"Authorization": "Bearer tok", "Content-Type": "application/json"},
            body={"email": "a@b.com"},
        )

    assert res == TransportResponse(status=201, json={"id": "c_1"})
    assert seen == {
        "method": "POST",
        "url": "https://api.intercom.io/contacts",
        "auth": "Bearer tok",
        "body": {"email": "a@b.com"},
    }


@pytest.mark.asyncio
async def test_non_json_response_keeps_raw_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="unauthorized")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        res = await Transport(client=client).perform_json_request(
            url="https://api.intercom.io/me", method="GET", headers={}
        )

    assert res == TransportResponse(status=401, raw="unauthorized")


@pytest.mark.asyncio
async def test_get_sends_no_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.content == b""
        return httpx.Response(200, json={"type": "admin"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        res = await Transport(client=client).perform_json_request(
            url="https://api.intercom.io/me", method="GET", headers={}
        )

    assert res.json == {"type": "admin"}


@pytest.mark.asyncio
async def test_request_errors_become_network_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(NetworkError, match="connection refused"):
            await Transport(client=client).perform_json_request(
                url="https://api.intercom.io/me", method="GET", headers={}
            )


@pytest.mark.asyncio
async def test_json_null_body_is_parsed_not_raw() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, content=b"null", headers={"Content-Type": "application/json"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        res = await Transport(client=client).perform_json_request(
            url="https://api.intercom.io/me", method="GET", headers={}
        )

    assert res.json is None
    assert res.raw is None
    assert res != TransportResponse(status=500)
