"""
Shared FastAPI dependencies for endpoint handlers.
"""
import httpx
from fastapi import Depends
from app.config import Settings, get_settings


async def get_http_client(settings: Settings = Depends(get_settings)):
    """Yield one async HTTP client per request, shared by its upstream calls."""
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        yield client
