"""
Pydantic models for token-related endpoints.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class TokenMetadata(BaseModel):
    """Result of alchemy_getTokenMetadata."""
    name: Optional[str] = None
    symbol: Optional[str] = None
    logo: Optional[str] = None
    decimals: Optional[int] = None

    class Config:
        extra = "allow"


class TokenBalance(BaseModel):
    """Model for a fungible token holding merged across addresses."""
    contractAddress: str = Field(..., description="Token contract address")
    tokenBalance: str = Field(..., description="Raw balance as a hex string")
    name: Optional[str] = Field(None, description="Token name")
    symbol: Optional[str] = Field(None, description="Token $symbol")
    logo: Optional[str] = Field(None, description="Token logo URL")
    decimals: Optional[int] = Field(None, description="Token decimals")
    error: Optional[str] = Field(None, description="Set when metadata could not be fetched")
    address: Optional[str] = Field(None, description="First address found holding the token")
    addresses: List[str] = Field(default_factory=list, description="All addresses holding the token")

    class Config:
        extra = "allow"


class TokenBalancesResponse(BaseModel):
    """Response model for the token balances endpoint."""
    tokens: List[TokenBalance] = Field(..., description="Top holdings by raw balance")
