# /app/config.py
"""
Configuration settings for the application.
Loads environment variables and provides them throughout the app.
"""
import logging
import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv(override=True)

logger = logging.getLogger(__name__)


def _float_env(name: str, default: float) -> float:
    """Read a float from the environment, keeping the default when unset or malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}; using {default}")
        return default


# API Keys
NEYNAR_API_KEY = os.getenv("NEYNAR_API_KEY")
ALCHEMY_API_KEY = os.getenv("ALCHEMY_API_KEY")
BASENAME_API_KEY = os.getenv("BASENAME_API_KEY")

# Upstream settings
NEYNAR_BASE_URL = os.getenv("NEYNAR_BASE_URL", "https://api.neynar.com/v2/farcaster")
ALCHEMY_NETWORK = os.getenv("ALCHEMY_NETWORK", "base-mainnet")  # Base mainnet only
BASENAME_RESOLVER_URL = os.getenv("BASENAME_RESOLVER_URL", "https://api.web3.bio/ns/basenames/{address}")
HTTP_TIMEOUT = _float_env("HTTP_TIMEOUT", 10.0)

# Streamlit front end -> API
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/v1")


class Settings(BaseModel):
    """Process configuration handed to request handlers."""
    neynar_api_key: Optional[str] = Field(None, description="Neynar API key for user search")
    alchemy_api_key: Optional[str] = Field(None, description="Alchemy API key for NFT and token data")
    alchemy_network: str = Field("base-mainnet", description="Alchemy network slug")
    neynar_base_url: str = Field("https://api.neynar.com/v2/farcaster", description="Neynar REST base URL")
    basename_resolver_url: Optional[str] = Field(None, description="Resolver URL template with an {address} placeholder")
    basename_api_key: Optional[str] = Field(None, description="Optional API key for the name resolver")
    http_timeout: float = Field(10.0, description="Upstream request timeout in seconds")


def get_settings() -> Settings:
    """FastAPI dependency returning settings built from the environment."""
    return Settings(
        neynar_api_key=NEYNAR_API_KEY,
        alchemy_api_key=ALCHEMY_API_KEY,
        alchemy_network=ALCHEMY_NETWORK,
        neynar_base_url=NEYNAR_BASE_URL,
        basename_resolver_url=BASENAME_RESOLVER_URL,
        basename_api_key=BASENAME_API_KEY,
        http_timeout=HTTP_TIMEOUT,
    )
