"""
Pydantic models for NFT listing and comparison endpoints.
"""
from pydantic import BaseModel, Field, root_validator
from typing import List, Dict, Any, Optional, Tuple


def _text(value: Any) -> str:
    """Display text for a loosely typed metadata value."""
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def _lookup(container: Any, field: str) -> Any:
    return container.get(field) if isinstance(container, dict) else None


class NFTContract(BaseModel):
    address: str = Field(..., description="NFT contract address")
    name: Optional[Any] = None
    symbol: Optional[Any] = None

    class Config:
        extra = "allow"


class NFT(BaseModel):
    """
    Model for an owned NFT as returned by Alchemy getNFTs, plus derived fields.
    Only the contract address and token id are validated; metadata is kept as sent.
    """
    contract: NFTContract
    tokenId: str = Field(..., description="Token ID as returned upstream (hex or decimal string)")
    tokenType: Optional[Any] = Field(None, description="ERC721 / ERC1155")
    title: Optional[Any] = None
    description: Optional[Any] = None
    timeLastUpdated: Optional[Any] = None
    rawMetadata: Optional[Any] = None
    media: Optional[Any] = None
    metadata: Optional[Any] = None
    floorPrice: Optional[Any] = None
    estimatedValue: Optional[float] = Field(None, description="Mock placeholder score, not a real valuation")
    address: Optional[str] = Field(None, description="Address that owns this NFT")

    class Config:
        extra = "allow"  # Keep any extra upstream fields

    @root_validator(pre=True)
    def flatten_token_id(cls, values):
        # getNFTs v2 nests the id as {"id": {"tokenId", "tokenMetadata": {"tokenType"}}}
        values = dict(values)
        token = values.get("id")
        if "tokenId" not in values and isinstance(token, dict):
            values["tokenId"] = token.get("tokenId")
            values.setdefault("tokenType", _lookup(token.get("tokenMetadata"), "tokenType"))
        if isinstance(values.get("tokenId"), int):
            values["tokenId"] = str(values["tokenId"])
        return values

    @property
    def key(self) -> str:
        """Case-insensitive identity of the on-chain token."""
        return f"{self.contract.address.lower()}-{self.tokenId}"

    @property
    def image_url(self) -> str:
        media = self.media[0] if isinstance(self.media, list) and self.media else None
        for candidate in (
            _lookup(media, "gateway"),
            _lookup(self.rawMetadata, "image"),
            _lookup(self.metadata, "image"),
        ):
            if _text(candidate):
                return _text(candidate)
        return ""

    @property
    def display_name(self) -> str:
        for candidate in (self.title, _lookup(self.rawMetadata, "name"), _lookup(self.metadata, "name")):
            if _text(candidate):
                return _text(candidate)
        return f"{_text(self.contract.name) or 'NFT'} #{self.tokenId}"

    @property
    def display_description(self) -> str:
        for candidate in (
            self.description,
            _lookup(self.rawMetadata, "description"),
            _lookup(self.metadata, "description"),
        ):
            if _text(candidate):
                return _text(candidate)
        return ""

    @property
    def collection_name(self) -> str:
        return _text(self.contract.name)

    @property
    def attributes(self) -> List[Tuple[str, str]]:
        """(trait, value) pairs from rawMetadata, whether sent as a list or a mapping."""
        raw = _lookup(self.rawMetadata, "attributes")
        if isinstance(raw, dict):
            return [(_text(k), _text(v)) for k, v in raw.items()]
        if not isinstance(raw, list):
            return []
        pairs = []
        for attr in raw:
            if isinstance(attr, dict):
                pairs.append((_text(attr.get("trait_type")), _text(attr.get("value"))))
        return pairs


class NFTListResponse(BaseModel):
    """Response model for the NFT listing endpoint."""
    nfts: List[Dict[str, Any]] = Field(..., description="Scored NFTs, truncated to limit")
    mostExpensiveNft: Optional[Dict[str, Any]] = Field(None, description="Highest mock score across all NFTs")
    total: int = Field(..., description="Count before truncation")
    message: Optional[str] = None


class ComparisonResponse(BaseModel):
    """Response model for the NFT comparison endpoint."""
    user1NFTs: List[Dict[str, Any]]
    user2NFTs: List[Dict[str, Any]]
    commonNFTs: List[Dict[str, Any]]
    user1Total: int
    user2Total: int
    commonTotal: int
