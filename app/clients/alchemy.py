"""
Alchemy client: NFT REST API and token JSON-RPC methods.
"""
import logging
import httpx
from typing import List, Dict, Any
from app.config import Settings

# Set up logging
logger = logging.getLogger(__name__)


class AlchemyRPCError(Exception):
    """JSON-RPC call answered with an error object or no result."""


def alchemy_url(settings: Settings) -> str:
    """Base URL for the configured network, key included."""
    return f"https://{settings.alchemy_network}.g.alchemy.com/v2/{settings.alchemy_api_key}"


async def get_nfts_for_owner(client: httpx.AsyncClient, settings: Settings, owner: str) -> List[Dict[str, Any]]:
    """Fetch the raw owned-NFT records for one address."""
    r = await client.get(f"{alchemy_url(settings)}/getNFTs/", params={"owner": owner})
    r.raise_for_status()
    return r.json().get("ownedNfts") or []


async def rpc_call(client: httpx.AsyncClient, settings: Settings, method: str, params: List[Any]) -> Any:
    """Execute a JSON-RPC method against the Alchemy endpoint"""
    r = await client.post(
        alchemy_url(settings),
        json={"id": 1, "jsonrpc": "2.0", "method": method, "params": params},
        headers={"Content-Type": "application/json"},
    )
    r.raise_for_status()
    payload = r.json()
    if payload.get("error"):
        raise AlchemyRPCError(f"{method} failed: {payload['error']}")
    if payload.get("result") is None:
        raise AlchemyRPCError(f"{method} returned no result")
    return payload["result"]


async def get_token_balances(client: httpx.AsyncClient, settings: Settings, address: str) -> List[Dict[str, Any]]:
    result = await rpc_call(client, settings, "alchemy_getTokenBalances", [address])
    return result.get("tokenBalances") or []


async def get_token_metadata(client: httpx.AsyncClient, settings: Settings, contract_address: str) -> Dict[str, Any]:
    return await rpc_call(client, settings, "alchemy_getTokenMetadata", [contract_address])
