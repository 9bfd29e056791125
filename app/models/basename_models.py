"""
Pydantic models for the basenames endpoint.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class BasenameResult(BaseModel):
    """Name lookup result for one address."""
    address: str = Field(..., description="0x-prefixed address that was looked up")
    basename: Optional[str] = Field(None, description="Resolved name, null when none is registered")
    error: Optional[str] = Field(None, description="Set when the lookup itself failed")


class BasenamesResponse(BaseModel):
    results: List[BasenameResult]
