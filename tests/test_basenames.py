"""Tests for the basenames endpoint."""

import httpx

from app.config import Settings, get_settings
from app.main import app


def names_handler(request: httpx.Request) -> httpx.Response:
    assert request.url.host == "names.test"
    address = request.url.path.lstrip("/")
    if address == "0xabc":
        return httpx.Response(200, json={"address": address, "identity": "alice.base.eth", "platform": "basenames"})
    if address == "0xdef":
        return httpx.Response(404, json={"error": "Not Found"})
    return httpx.Response(500, json={"error": "upstream down"})


def test_results_in_input_order_with_error_marker(client, upstream):
    upstream.handler = names_handler

    response = client.get("/v1/basenames", params={"addresses": "abc,0xdef,0x123"})

    assert response.status_code == 200
    assert response.json() == {
        "results": [
            {"address": "0xabc", "basename": "alice.base.eth"},
            {"address": "0xdef", "basename": None},
            {"address": "0x123", "basename": None, "error": "Failed to fetch basename"},
        ]
    }


def test_transport_error_is_per_address(client, upstream):
    def handler(request):
        if request.url.path == "/0xbad":
            raise httpx.ConnectError("unreachable", request=request)
        return names_handler(request)

    upstream.handler = handler

    results = client.get("/v1/basenames", params={"addresses": "0xbad,0xabc"}).json()["results"]

    assert results[0]["error"] == "Failed to fetch basename"
    assert results[1]["basename"] == "alice.base.eth"


def test_api_key_header_sent_when_configured(client, upstream):
    app.dependency_overrides[get_settings] = lambda: Settings(
        basename_resolver_url="https://names.test/{address}", basename_api_key="secret"
    )
    upstream.handler = names_handler

    client.get("/v1/basenames", params={"addresses": "0xabc"})

    assert upstream.requests[0].headers["X-API-KEY"] == "secret"


def test_missing_addresses_is_400(client):
    assert client.get("/v1/basenames").status_code == 400


def test_unconfigured_resolver_is_500(client):
    app.dependency_overrides[get_settings] = lambda: Settings(basename_resolver_url=None)

    assert client.get("/v1/basenames", params={"addresses": "0xabc"}).status_code == 500
