"""
NFT listing API endpoints.
"""
import asyncio
import logging
import httpx
from fastapi import APIRouter, HTTPException, Query, Depends
from app.api.deps import get_http_client
from app.clients.alchemy import get_nfts_for_owner
from app.config import Settings, get_settings
from app.models.nft_models import NFT, NFTListResponse
from app.utils.helpers import parse_address_list, estimated_value, truncate
from typing import Dict, Any, List, Optional

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


async def fetch_owner_nfts(client: httpx.AsyncClient, settings: Settings, address: str) -> List[NFT]:
    """
    Fetch NFTs owned by one address and tag each with its owner

    Args:
        client: Shared async HTTP client
        settings: Settings carrying the Alchemy key and network
        address: Owner address

    Returns:
        List of NFTs; empty if the upstream call failed
    """
    try:
        raw_nfts = await get_nfts_for_owner(client, settings, address)
        nfts = []
        for raw in raw_nfts:
            try:
                nfts.append(NFT(**{**raw, "address": address}))
            except (TypeError, ValueError) as e:
                # Only records without a contract address or token id fail here
                logger.warning(f"Skipping NFT record without contract or token id for {address}: {str(e)}")
        return nfts
    except Exception as e:
        logger.error(f"Error fetching NFTs for {address}: {str(e)}")
        return []


async def fetch_scored_nfts(client: httpx.AsyncClient, settings: Settings, addresses: List[str]) -> List[NFT]:
    """
    Fetch NFTs for every address concurrently, attach the mock
    estimated value and sort highest first (stable on ties).
    """
    per_address = await asyncio.gather(
        *(fetch_owner_nfts(client, settings, address) for address in addresses)
    )
    all_nfts = [nft for nfts in per_address for nft in nfts]

    for nft in all_nfts:
        nft.estimatedValue = estimated_value(nft.contract.address, nft.tokenId)

    return sorted(all_nfts, key=lambda n: n.estimatedValue or 0, reverse=True)


def dump_nfts(nfts: List[NFT]) -> List[Dict[str, Any]]:
    return [nft.model_dump(exclude_none=True) for nft in nfts]


@router.get(
    "/nft",
    summary="List NFTs owned by a set of addresses",
    description=(
        "Fetch owned NFTs for each address on Base, score each one with a mock \n"
        "estimated value (a deterministic placeholder, not a price), and return \n"
        "them sorted highest first."
    ),
    responses={
        200: {"description": "Successfully retrieved NFTs", "model": NFTListResponse},
        400: {"description": "Missing or empty addresses parameter"},
        500: {"description": "Alchemy API key not configured or unexpected error"}
    }
)
async def list_nfts(
    addresses: Optional[str] = Query(None, description="Comma-separated owner addresses"),
    limit: int = Query(10, description="Maximum number of NFTs to return"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Dict[str, Any]:
    """
    List NFTs for one identity's addresses

    - `total` counts every NFT found, `nfts` is truncated to `limit`
    - `mostExpensiveNft` is the top mock-scored NFT across all addresses
    - A failing address contributes nothing; the request still succeeds
    """
    if not addresses:
        raise HTTPException(status_code=400, detail="Missing addresses parameter")

    address_list = parse_address_list(addresses)
    if not address_list:
        raise HTTPException(status_code=400, detail="No valid addresses provided")

    if not settings.alchemy_api_key:
        raise HTTPException(status_code=500, detail="Alchemy API key not configured")

    try:
        logger.info(f"Fetching NFTs for {len(address_list)} address(es), limit={limit}")
        scored = await fetch_scored_nfts(client, settings, address_list)

        if not scored:
            return {
                "nfts": [],
                "mostExpensiveNft": None,
                "total": 0,
                "message": "No NFTs found for these addresses"
            }

        logger.info(f"Found {len(scored)} NFTs")
        return {
            "nfts": dump_nfts(truncate(scored, limit)),
            "mostExpensiveNft": scored[0].model_dump(exclude_none=True),
            "total": len(scored)
        }
    except Exception as e:
        logger.error(f"Error fetching NFTs: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch NFTs")
