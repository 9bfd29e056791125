"""
Basename lookup API endpoint.
"""
import asyncio
import logging
import httpx
from fastapi import APIRouter, HTTPException, Query, Depends
from app.api.deps import get_http_client
from app.clients.basenames import resolve_basename
from app.config import Settings, get_settings
from app.models.basename_models import BasenameResult, BasenamesResponse
from app.utils.helpers import parse_address_list, normalize_address
from typing import Dict, Any, Optional

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


async def lookup_basename(client: httpx.AsyncClient, settings: Settings, address: str) -> BasenameResult:
    formatted = normalize_address(address)
    try:
        basename = await resolve_basename(client, settings, formatted)
        return BasenameResult(address=formatted, basename=basename)
    except Exception as e:
        logger.error(f"Error fetching basename for {address}: {str(e)}")
        return BasenameResult(address=formatted, basename=None, error="Failed to fetch basename")


@router.get(
    "/basenames",
    summary="Resolve basenames for addresses",
    description="Look up the Base name registered to each address.",
    responses={
        200: {"description": "One result per address, in input order", "model": BasenamesResponse},
        400: {"description": "Missing addresses parameter"},
        500: {"description": "Name resolver not configured or unexpected error"}
    }
)
async def get_basenames(
    addresses: Optional[str] = Query(None, description="Comma-separated addresses"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Dict[str, Any]:
    """
    Resolve basenames

    - `basename` is null both when no name is registered and when the lookup failed;
      only failed lookups carry `error`
    """
    address_list = parse_address_list(addresses)
    if not address_list:
        raise HTTPException(status_code=400, detail="Missing addresses parameter")

    if not settings.basename_resolver_url:
        raise HTTPException(status_code=500, detail="Name resolver not configured")

    try:
        results = await asyncio.gather(
            *(lookup_basename(client, settings, address) for address in address_list)
        )
        logger.info(f"Resolved {sum(1 for r in results if r.basename)} of {len(results)} basenames")
        # basename stays even when null, error only when set
        return {"results": [r.model_dump(exclude={"error"} if r.error is None else None) for r in results]}
    except Exception as e:
        logger.error(f"Error fetching basenames: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch basenames")
