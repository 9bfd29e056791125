# /app/models/farcaster_models.py
"""
Pydantic models for Farcaster identities returned by the user search.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class VerifiedAccount(BaseModel):
    """Verified external platform handle."""
    platform: str
    username: str


class PrimaryAddresses(BaseModel):
    eth_address: Optional[str] = None
    sol_address: Optional[str] = None


class VerifiedAddresses(BaseModel):
    """Addresses verified by the user, with one primary per chain family."""
    eth_addresses: List[str] = Field(default_factory=list)
    sol_addresses: List[str] = Field(default_factory=list)
    primary: PrimaryAddresses = Field(default_factory=PrimaryAddresses)


class MentionedProfile(BaseModel):
    fid: Optional[int] = None
    username: Optional[str] = None
    display_name: Optional[str] = None
    pfp_url: Optional[str] = None
    custody_address: Optional[str] = None


class Bio(BaseModel):
    text: Optional[str] = None
    mentioned_profiles: List[MentionedProfile] = Field(default_factory=list)


class Location(BaseModel):
    description: Optional[str] = None
    placeId: Optional[str] = None


class Profile(BaseModel):
    bio: Optional[Bio] = None
    location: Optional[Location] = None


class FarcasterUser(BaseModel):
    """Model for a Farcaster identity as returned by Neynar."""
    fid: int = Field(..., description="Farcaster user ID")
    username: str = Field(..., description="Farcaster username")
    display_name: str = Field("", description="Display name")
    custody_address: str = Field(..., description="Custody address for the FID")
    pfp_url: Optional[str] = Field(None, description="Profile picture URL")
    verified_addresses: Optional[VerifiedAddresses] = None
    follower_count: Optional[int] = None
    following_count: Optional[int] = None
    verified_accounts: List[VerifiedAccount] = Field(default_factory=list)
    power_badge: Optional[bool] = None
    profile: Optional[Profile] = None

    class Config:
        extra = "allow"  # Neynar returns many more fields than we render

    @property
    def listed_addresses(self) -> List[str]:
        """Verified ETH addresses, or the custody address when none are verified."""
        if self.verified_addresses and self.verified_addresses.eth_addresses:
            return list(self.verified_addresses.eth_addresses)
        return [self.custody_address]

    @property
    def holding_addresses(self) -> List[str]:
        """Every address that may hold assets: verified ones plus custody."""
        addresses = []
        if self.verified_addresses:
            addresses.extend(self.verified_addresses.eth_addresses)
        if self.custody_address not in addresses:
            addresses.append(self.custody_address)
        return addresses

    @property
    def primary_address(self) -> str:
        if self.verified_addresses and self.verified_addresses.primary.eth_address:
            return self.verified_addresses.primary.eth_address
        return self.custody_address

    @property
    def twitter_account(self) -> Optional[VerifiedAccount]:
        return next((a for a in self.verified_accounts if a.platform == "x"), None)

    @property
    def bio_text(self) -> Optional[str]:
        if self.profile and self.profile.bio:
            return self.profile.bio.text
        return None


class SearchResult(BaseModel):
    users: List[FarcasterUser] = Field(default_factory=list)
    next: Optional[dict] = None


class SearchResponse(BaseModel):
    """Response model for the Neynar user search."""
    result: SearchResult = Field(default_factory=SearchResult)
