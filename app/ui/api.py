"""HTTP helpers the Streamlit panels use to call the Base Profile API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from app.config import API_BASE_URL
from app.models.basename_models import BasenameResult
from app.models.farcaster_models import FarcasterUser, SearchResponse
from app.models.nft_models import NFT
from app.models.token_models import TokenBalance

REQUEST_TIMEOUT = 60.0

logger = logging.getLogger(__name__)


class PanelFetchError(RuntimeError):
    """API call failed; message is suitable for inline display."""


@dataclass
class NFTListing:
    nfts: List[NFT] = field(default_factory=list)
    most_expensive: Optional[NFT] = None
    total: int = 0


@dataclass
class Comparison:
    user1_nfts: List[NFT]
    user2_nfts: List[NFT]
    common_nfts: List[NFT]
    user1_total: int
    user2_total: int
    common_total: int


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    if not isinstance(body, dict):
        return default
    message = body.get("error") or body.get("detail")
    # Neynar relays its own error object
    if isinstance(message, dict):
        message = message.get("message")
    return str(message) if message else default


def _get(path: str, params: Dict[str, Any], default_error: str, base_url: Optional[str] = None) -> Dict[str, Any]:
    url = f"{(base_url or API_BASE_URL).rstrip('/')}{path}"
    try:
        response = httpx.get(url, params=params, timeout=REQUEST_TIMEOUT)
    except httpx.HTTPError as exc:
        raise PanelFetchError(default_error) from exc
    if response.is_error:
        raise PanelFetchError(_error_message(response, default_error))
    return response.json()


def search_users(query: str, base_url: Optional[str] = None) -> List[FarcasterUser]:
    data = _get("/neynar/search", {"q": query}, "Failed to fetch user data", base_url)
    return SearchResponse(**data).result.users


def fetch_basenames(addresses: List[str], base_url: Optional[str] = None) -> List[BasenameResult]:
    data = _get("/basenames", {"addresses": ",".join(addresses)}, "Failed to fetch basenames", base_url)
    return [BasenameResult(**item) for item in data.get("results", [])]


def fetch_tokens(addresses: List[str], base_url: Optional[str] = None) -> List[TokenBalance]:
    data = _get("/tokens", {"addresses": ",".join(addresses)}, "Failed to fetch token balances", base_url)
    return [TokenBalance(**item) for item in data.get("tokens", [])]


def _parse_nfts(items: Optional[List[Dict[str, Any]]]) -> List[NFT]:
    """Build NFT models, dropping (and logging) entries without contract or token id."""

    nfts = []
    for item in items or []:
        try:
            nfts.append(NFT(**item))
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping unreadable NFT in API response: %s", exc)
    return nfts


def fetch_nfts(addresses: List[str], limit: int, base_url: Optional[str] = None) -> NFTListing:
    data = _get("/nft", {"addresses": ",".join(addresses), "limit": limit}, "Failed to fetch NFTs", base_url)
    most_expensive = _parse_nfts([data["mostExpensiveNft"]] if data.get("mostExpensiveNft") else [])
    return NFTListing(
        nfts=_parse_nfts(data.get("nfts")),
        most_expensive=most_expensive[0] if most_expensive else None,
        total=data.get("total", 0),
    )


def compare_users(addresses1: List[str], addresses2: List[str], base_url: Optional[str] = None) -> Comparison:
    data = _get(
        "/compare",
        {"addresses1": ",".join(addresses1), "addresses2": ",".join(addresses2)},
        "Failed to compare profiles",
        base_url,
    )
    return Comparison(
        user1_nfts=_parse_nfts(data.get("user1NFTs")),
        user2_nfts=_parse_nfts(data.get("user2NFTs")),
        common_nfts=_parse_nfts(data.get("commonNFTs")),
        user1_total=data.get("user1Total", 0),
        user2_total=data.get("user2Total", 0),
        common_total=data.get("commonTotal", 0),
    )


__all__ = [
    "Comparison",
    "NFTListing",
    "PanelFetchError",
    "compare_users",
    "fetch_basenames",
    "fetch_nfts",
    "fetch_tokens",
    "search_users",
]
