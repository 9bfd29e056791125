"""
NFT collection comparison API endpoint.
"""
import asyncio
import logging
import httpx
from fastapi import APIRouter, HTTPException, Query, Depends
from app.api.deps import get_http_client
from app.api.endpoints.nfts import fetch_scored_nfts, dump_nfts
from app.config import Settings, get_settings
from app.models.nft_models import NFT, ComparisonResponse
from app.utils.helpers import parse_address_list, truncate
from typing import Dict, Any, List, Optional

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


def find_common_nfts(nfts1: List[NFT], nfts2: List[NFT]) -> List[NFT]:
    """Entries of nfts2 whose (lower-cased contract, tokenId) also appears in nfts1."""
    keys1 = {nft.key for nft in nfts1}
    return [nft for nft in nfts2 if nft.key in keys1]


@router.get(
    "/compare",
    summary="Compare NFT collections of two identities",
    description="Fetch NFTs for two sets of addresses and report the tokens both sets own.",
    response_model=ComparisonResponse,
    responses={
        200: {"description": "Successfully compared collections", "model": ComparisonResponse},
        400: {"description": "Missing addresses1 or addresses2 parameter"},
        500: {"description": "Alchemy API key not configured or unexpected error"}
    }
)
async def compare_nfts(
    addresses1: Optional[str] = Query(None, description="Comma-separated addresses of the first identity"),
    addresses2: Optional[str] = Query(None, description="Comma-separated addresses of the second identity"),
    limit: int = Query(50, description="Maximum number of NFTs returned per list"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Dict[str, Any]:
    """
    Compare two NFT collections

    - Tokens match on lower-cased contract address and token id
    - All three lists are truncated to `limit`; totals are not
    """
    list1 = parse_address_list(addresses1)
    list2 = parse_address_list(addresses2)
    if not list1 or not list2:
        raise HTTPException(status_code=400, detail="Missing addresses1 or addresses2 parameter")

    if not settings.alchemy_api_key:
        raise HTTPException(status_code=500, detail="Alchemy API key not configured")

    try:
        logger.info(f"Comparing {len(list1)} address(es) against {len(list2)} address(es)")
        user1_nfts, user2_nfts = await asyncio.gather(
            fetch_scored_nfts(client, settings, list1),
            fetch_scored_nfts(client, settings, list2),
        )
        common_nfts = find_common_nfts(user1_nfts, user2_nfts)
        logger.info(f"Found {len(common_nfts)} NFTs in common")

        return {
            "user1NFTs": dump_nfts(truncate(user1_nfts, limit)),
            "user2NFTs": dump_nfts(truncate(user2_nfts, limit)),
            "commonNFTs": dump_nfts(truncate(common_nfts, limit)),
            "user1Total": len(user1_nfts),
            "user2Total": len(user2_nfts),
            "commonTotal": len(common_nfts)
        }
    except Exception as e:
        logger.error(f"Error comparing NFTs: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to compare NFTs")
