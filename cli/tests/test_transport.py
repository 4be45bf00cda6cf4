from __future__ import annotations

import asyncio

import httpx
import pytest

from coc_client import ApiError, AuthError, ClashClient, DecodeError, NetworkError
from coc_client.config_types import ClientConfig
from coc_client.transport import Transport


def _client_with(handler) -> ClashClient:
    cfg = ClientConfig(base_url="https://coc.example.test/v1", token="secret")
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ClashClient(uri=cfg.base_url, token=cfg.token, transport=Transport(cfg, client=http))


def test_request_sends_headers_and_query() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.raw_path.decode()
        seen["auth"] = request.headers["Authorization"]
        seen["accept"] = request.headers["Accept"]
        return httpx.Response(200, json={"items": []})

    client = _client_with(handler)
    data = asyncio.run(client.clans().with_name("abc").with_limit(2).fetch())

    assert data == {"items": []}
    assert seen["method"] == "GET"
    assert seen["path"] == "/v1/clans?name=abc&limit=2"
    assert seen["auth"] == "Bearer secret"
    assert seen["accept"] == "application/json"


def test_tag_reaches_server_percent_encoded() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.raw_path.decode()
        return httpx.Response(200, json={"tag": "#ABC123"})

    asyncio.run(_client_with(handler).clan_by_tag("#ABC123"))
    assert seen["path"] == "/v1/clans/%23ABC123"


def test_not_found_raises_api_error_with_reason() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"reason": "notFound", "message": "Clan not found"})

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(_client_with(handler).clan_by_tag("#NOPE"))

    assert excinfo.value.status_code == 404
    assert str(excinfo.value) == "Clan not found"
    assert '"notFound"' in excinfo.value.details


@pytest.mark.parametrize("status", [401, 403])
def test_auth_statuses_raise_auth_error(status) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json={"reason": "accessDenied"})

    with pytest.raises(AuthError):
        asyncio.run(_client_with(handler).leagues())


def test_plain_text_error_body_is_kept_as_details() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="maintenance")

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(_client_with(handler).leagues())

    assert excinfo.value.status_code == 503
    assert excinfo.value.details == "maintenance"


def test_malformed_json_raises_decode_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    with pytest.raises(DecodeError):
        asyncio.run(_client_with(handler).leagues())


def test_network_failure_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError):
        asyncio.run(_client_with(handler).leagues())


def test_expect_json_false_returns_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="plain body")

    cfg = ClientConfig(base_url="https://coc.example.test/v1", token="secret")
    transport = Transport(cfg, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    client = ClashClient(uri=cfg.base_url, token="secret", request_defaults={"expect_json": False}, transport=transport)

    assert asyncio.run(client.leagues()) == "plain body"
