"""Shared fixtures: settings override and a mocked upstream HTTP transport."""

from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_http_client
from app.config import Settings, get_settings
from app.main import app

ALCHEMY_KEY = "test-alchemy-key"
ALCHEMY_BASE = f"https://base-mainnet.g.alchemy.com/v2/{ALCHEMY_KEY}"


class Upstream:
    """Callable MockTransport handler that records requests and delegates to ``handler``."""

    def __init__(self) -> None:
        self.handler = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def rpc_calls(self, method: str) -> list[dict]:
        calls = []
        for request in self.requests:
            if request.method == "POST":
                body = json.loads(request.content)
                if body["method"] == method:
                    calls.append(body)
        return calls


@pytest.fixture
def settings() -> Settings:
    return Settings(
        neynar_api_key="test-neynar-key",
        alchemy_api_key=ALCHEMY_KEY,
        alchemy_network="base-mainnet",
        basename_resolver_url="https://names.test/{address}",
    )


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def client(settings, upstream):
    transport = httpx.MockTransport(upstream)

    async def _http_client():
        async with httpx.AsyncClient(transport=transport) as http_client:
            yield http_client

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = _http_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_nft(contract: str, token_id: str, **extra) -> dict:
    return {"contract": {"address": contract}, "tokenId": token_id, "tokenType": "ERC721", **extra}


def nft_owner_handler(owned: dict[str, list[dict]], failing: tuple[str, ...] = ()):
    """Build a getNFTs handler serving ``owned[owner]`` and failing for ``failing`` owners."""

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == f"/v2/{ALCHEMY_KEY}/getNFTs/"
        owner = request.url.params["owner"]
        if owner in failing:
            return httpx.Response(500, json={"error": "boom"})
        return httpx.Response(200, json={"ownedNfts": owned.get(owner, []), "totalCount": len(owned.get(owner, []))})

    return handler
