"""
Token-related API endpoints.
"""
import asyncio
import logging
import httpx
from fastapi import APIRouter, HTTPException, Query, Depends
from app.api.deps import get_http_client
from app.clients.alchemy import get_token_balances, get_token_metadata
from app.config import Settings, get_settings
from app.models.token_models import TokenBalance, TokenMetadata, TokenBalancesResponse
from app.utils.helpers import parse_address_list, parse_balance
from typing import Dict, Any, List, Optional

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()

TOP_TOKENS = 5


async def fetch_nonzero_balances(client: httpx.AsyncClient, settings: Settings, address: str) -> List[Dict[str, Any]]:
    """Non-zero balance records for one address, each tagged with that address."""
    try:
        balances = await get_token_balances(client, settings, address)
        return [
            {**token, "address": address}
            for token in balances
            if token.get("contractAddress") and parse_balance(token.get("tokenBalance")) != 0
        ]
    except Exception as e:
        logger.error(f"Error fetching token balances for {address}: {str(e)}")
        return []


async def merge_token_metadata(
    client: httpx.AsyncClient, settings: Settings, contract_address: str, records: List[Dict[str, Any]]
) -> TokenBalance:
    """
    Merge metadata onto the first balance record for a contract

    Args:
        client: Shared async HTTP client
        settings: Settings carrying the Alchemy key and network
        contract_address: Token contract address
        records: Balance records for this contract across all addresses

    Returns:
        TokenBalance carrying metadata, or an error marker if the lookup failed
    """
    owners = [r["address"] for r in records]
    try:
        metadata = TokenMetadata(**await get_token_metadata(client, settings, contract_address))
        return TokenBalance(
            **{
                **records[0],
                "name": metadata.name,
                "symbol": metadata.symbol,
                "logo": metadata.logo,
                "decimals": metadata.decimals,
                "addresses": owners,
            }
        )
    except Exception as e:
        logger.error(f"Error fetching token metadata for {contract_address}: {str(e)}")
        return TokenBalance(
            contractAddress=contract_address,
            tokenBalance=records[0]["tokenBalance"],
            error="Failed to fetch token metadata",
            addresses=owners,
        )


@router.get(
    "/tokens",
    summary="Top token holdings for a set of addresses",
    description="Aggregate fungible token balances on Base across addresses and return the top 5 by raw balance.",
    responses={
        200: {"description": "Successfully retrieved token balances", "model": TokenBalancesResponse},
        400: {"description": "Missing or empty addresses parameter"},
        500: {"description": "Alchemy API key not configured or unexpected error"}
    }
)
async def get_top_tokens(
    addresses: Optional[str] = Query(None, description="Comma-separated owner addresses"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Dict[str, Any]:
    """
    Get top token holdings

    - Zero balances are dropped
    - Holdings of the same contract across addresses are merged, keeping every owner
    - Sorted by raw balance as an integer, so decimals are not taken into account
    """
    if not addresses:
        raise HTTPException(status_code=400, detail="Missing addresses parameter")

    address_list = parse_address_list(addresses)
    if not address_list:
        raise HTTPException(status_code=400, detail="No valid addresses provided")

    if not settings.alchemy_api_key:
        raise HTTPException(status_code=500, detail="Alchemy API key not configured")

    try:
        per_address = await asyncio.gather(
            *(fetch_nonzero_balances(client, settings, address) for address in address_list)
        )

        # Group by contract, first-seen order
        tokens_by_contract: Dict[str, List[Dict[str, Any]]] = {}
        for records in per_address:
            for record in records:
                tokens_by_contract.setdefault(record["contractAddress"].lower(), []).append(record)

        logger.info(f"Found {len(tokens_by_contract)} distinct tokens across {len(address_list)} address(es)")

        enriched = await asyncio.gather(
            *(
                merge_token_metadata(client, settings, records[0]["contractAddress"], records)
                for records in tokens_by_contract.values()
            )
        )

        top = sorted(enriched, key=lambda t: parse_balance(t.tokenBalance), reverse=True)[:TOP_TOKENS]
        return {"tokens": [t.model_dump(exclude_none=True) for t in top]}
    except Exception as e:
        logger.error(f"Error fetching token balances: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch token balances")
