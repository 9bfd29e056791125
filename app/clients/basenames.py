"""
Basename (ENS-style name on Base) resolution client.
"""
import logging
import httpx
from typing import Optional
from app.config import Settings

# Set up logging
logger = logging.getLogger(__name__)


async def resolve_basename(client: httpx.AsyncClient, settings: Settings, address: str) -> Optional[str]:
    """
    Resolve the primary basename for an address

    Args:
        client: Shared async HTTP client
        settings: Settings carrying the resolver URL template
        address: 0x-prefixed address

    Returns:
        The name, or None when the address has no registered name.
        Transport and non-404 HTTP errors propagate.
    """
    headers = {"accept": "application/json"}
    if settings.basename_api_key:
        headers["X-API-KEY"] = settings.basename_api_key

    r = await client.get(settings.basename_resolver_url.format(address=address), headers=headers)
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json().get("identity") or None
