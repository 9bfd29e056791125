"""
API router that includes all endpoint routers.
"""
from fastapi import APIRouter
from app.api.endpoints import (
    search,
    basenames,
    nfts,
    compare,
    tokens
)

# Create main router
router = APIRouter()

# Include all endpoint routers
router.include_router(search.router, tags=["Farcaster Users"])
router.include_router(basenames.router, tags=["Basenames"])
router.include_router(nfts.router, tags=["NFTs"])
router.include_router(compare.router, tags=["NFTs"])
router.include_router(tokens.router, tags=["Tokens"])
