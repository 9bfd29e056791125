"""
Farcaster user search API endpoint (Neynar pass-through).
"""
import logging
import httpx
from fastapi import APIRouter, HTTPException, Query, Depends
from fastapi.responses import JSONResponse
from app.api.deps import get_http_client
from app.clients.neynar import search_users
from app.config import Settings, get_settings
from app.models.farcaster_models import SearchResponse
from typing import Optional

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


@router.get(
    "/neynar/search",
    summary="Search Farcaster users",
    description="Forward a username query to Neynar user search and relay its response.",
    responses={
        200: {"description": "Neynar search response", "model": SearchResponse},
        400: {"description": "Missing search query"},
        500: {"description": "Neynar API key not configured or upstream unreachable"}
    }
)
async def search_farcaster_users(
    q: Optional[str] = Query(None, description="Username search query"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Search Farcaster users by username

    - Upstream error statuses are relayed with the upstream body under `error`
    """
    if not q:
        raise HTTPException(status_code=400, detail="Missing search query")

    if not settings.neynar_api_key:
        raise HTTPException(status_code=500, detail="API key not configured")

    try:
        r = await search_users(client, settings, q)
    except Exception as e:
        logger.error(f"Error fetching from Neynar API: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch user data")

    try:
        body = r.json()
    except ValueError:
        body = r.text

    if r.is_error:
        logger.warning(f"Neynar search returned {r.status_code}")
        return JSONResponse({"error": body}, status_code=r.status_code)

    return body
