"""Tests for the token balances endpoint."""

import json

import httpx

from app.config import Settings, get_settings
from app.main import app

METADATA = {
    "0xT2": {"name": "Two", "symbol": "TWO", "logo": None, "decimals": 18},
    "0xT5": {"name": "Five", "symbol": "FIV", "logo": "https://logo.test/5.png", "decimals": 6},
}


def token_handler(balances: dict[str, list[dict]], metadata: dict[str, dict], failing_owners=()):
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if body["method"] == "alchemy_getTokenBalances":
            owner = body["params"][0]
            if owner in failing_owners:
                return httpx.Response(503)
            return httpx.Response(
                200, json={"jsonrpc": "2.0", "id": 1, "result": {"address": owner, "tokenBalances": balances.get(owner, [])}}
            )
        if body["method"] == "alchemy_getTokenMetadata":
            contract = body["params"][0]
            if contract not in metadata:
                return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "bad"}})
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": metadata[contract]})
        raise AssertionError(f"unexpected method {body['method']}")

    return handler


def test_merges_owners_drops_zero_and_sorts(client, upstream):
    balances = {
        "0xA": [
            {"contractAddress": "0xT1", "tokenBalance": "0x0"},
            {"contractAddress": "0xT2", "tokenBalance": "0x10"},
            {"contractAddress": "0xT3", "tokenBalance": "0x" + "0" * 64},
        ],
        "0xB": [
            {"contractAddress": "0xt2", "tokenBalance": "0x05"},
            {"contractAddress": "0xT4", "tokenBalance": "0x100"},
        ],
    }
    upstream.handler = token_handler(balances, METADATA)

    response = client.get("/v1/tokens", params={"addresses": "0xA,0xB"})

    assert response.status_code == 200
    tokens = response.json()["tokens"]
    assert [t["contractAddress"] for t in tokens] == ["0xT4", "0xT2"]

    t4, t2 = tokens
    assert t4["error"] == "Failed to fetch token metadata"
    assert t4["addresses"] == ["0xB"]
    assert "name" not in t4

    assert t2["tokenBalance"] == "0x10"
    assert t2["name"] == "Two"
    assert t2["decimals"] == 18
    assert t2["address"] == "0xA"
    assert t2["addresses"] == ["0xA", "0xB"]
    assert "error" not in t2

    # one metadata call per distinct non-zero contract
    assert len(upstream.rpc_calls("alchemy_getTokenMetadata")) == 2


def test_returns_at_most_five_by_big_integer_balance(client, upstream):
    huge = "0x" + "f" * 40
    balances = {
        "0xA": [{"contractAddress": f"0xC{i}", "tokenBalance": hex(i * 1000)} for i in range(1, 8)]
        + [{"contractAddress": "0xBIG", "tokenBalance": huge}]
    }
    upstream.handler = token_handler(balances, {})

    tokens = client.get("/v1/tokens", params={"addresses": "0xA"}).json()["tokens"]

    assert len(tokens) == 5
    assert tokens[0]["contractAddress"] == "0xBIG"
    assert [t["contractAddress"] for t in tokens[1:]] == ["0xC7", "0xC6", "0xC5", "0xC4"]
    assert all(int(t["tokenBalance"], 16) != 0 for t in tokens)


def test_failed_address_is_skipped(client, upstream):
    balances = {"0xA": [{"contractAddress": "0xT5", "tokenBalance": "0x01"}]}
    upstream.handler = token_handler(balances, METADATA, failing_owners=("0xB",))

    tokens = client.get("/v1/tokens", params={"addresses": "0xA,0xB"}).json()["tokens"]

    assert len(tokens) == 1
    assert tokens[0]["symbol"] == "FIV"
    assert tokens[0]["logo"] == "https://logo.test/5.png"


def test_no_balances(client, upstream):
    upstream.handler = token_handler({}, {})

    response = client.get("/v1/tokens", params={"addresses": "0xA"})

    assert response.status_code == 200
    assert response.json() == {"tokens": []}


def test_missing_addresses_is_400(client):
    assert client.get("/v1/tokens").status_code == 400


def test_missing_api_key_is_500(client):
    app.dependency_overrides[get_settings] = lambda: Settings()

    assert client.get("/v1/tokens", params={"addresses": "0xA"}).status_code == 500
