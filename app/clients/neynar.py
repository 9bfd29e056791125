"""
Neynar client for Farcaster user search.
"""
import logging
import httpx
from app.config import Settings

# Set up logging
logger = logging.getLogger(__name__)


async def search_users(client: httpx.AsyncClient, settings: Settings, query: str) -> httpx.Response:
    """
    Search Farcaster users by username

    Args:
        client: Shared async HTTP client
        settings: Settings carrying the Neynar API key
        query: Free-text username query

    Returns:
        The raw upstream response; status handling is left to the caller
    """
    logger.info(f"Searching Neynar users for '{query}'")
    return await client.get(
        f"{settings.neynar_base_url}/user/search",
        params={"q": query},
        headers={"accept": "application/json", "x-api-key": settings.neynar_api_key},
    )
