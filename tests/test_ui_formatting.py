"""Tests for dashboard display helpers and identity address selection."""

from app.models.farcaster_models import FarcasterUser
from app.models.nft_models import NFT
from app.ui.formatting import (
    explorer_links,
    format_mock_value,
    format_token_balance,
    format_units,
    paginate,
    short_address,
)


def test_format_units():
    assert format_units(1500000000000000000, 18) == "1.5"
    assert format_units(42, 0) == "42"
    assert format_units(5, 2) == "0.05"


def test_format_token_balance_truncates_to_six_decimals():
    assert format_token_balance(hex(1234567891), 9) == "1.234567"
    assert format_token_balance("0x" + "0" * 63 + "1", 18) == "0.000000"


def test_format_token_balance_unknown_without_decimals():
    assert format_token_balance("0x10", None) == "Unknown"
    assert format_token_balance(None, 18) == "Unknown"
    assert format_token_balance("nothex", 18) == "Unknown"


def test_short_address_and_links():
    address = "0x1234567890abcdef1234567890abcdef12345678"
    assert short_address(address) == "0x1234...5678"
    assert explorer_links(address)[0] == ("View on Basescan", f"https://basescan.org/address/{address}")


def test_mock_value_label():
    assert format_mock_value(12.3) == "~12.30 ETH (mock estimate)"
    assert format_mock_value(None) == ""


def test_paginate_clamps_page():
    items = list(range(13))
    assert paginate(items, 0, 6) == ([0, 1, 2, 3, 4, 5], 0, 3)
    assert paginate(items, 9, 6) == ([12], 2, 3)
    assert paginate([], 0, 6) == ([], 0, 1)


def _user(**overrides):
    data = {"fid": 1, "username": "alice", "display_name": "Alice", "custody_address": "0xcustody"}
    data.update(overrides)
    return FarcasterUser(**data)


def test_holding_addresses_include_custody_once():
    user = _user(verified_addresses={"eth_addresses": ["0xa", "0xcustody"], "sol_addresses": [], "primary": {}})
    assert user.holding_addresses == ["0xa", "0xcustody"]
    assert user.listed_addresses == ["0xa", "0xcustody"]


def test_listed_addresses_fall_back_to_custody():
    user = _user()
    assert user.listed_addresses == ["0xcustody"]
    assert user.holding_addresses == ["0xcustody"]
    assert user.primary_address == "0xcustody"


def test_empty_verified_list_falls_back_to_custody():
    user = _user(verified_addresses={"eth_addresses": [], "sol_addresses": [], "primary": {}})
    assert user.listed_addresses == ["0xcustody"]
    assert user.holding_addresses == ["0xcustody"]


def test_primary_and_twitter():
    user = _user(
        verified_addresses={"eth_addresses": ["0xa"], "primary": {"eth_address": "0xa"}},
        verified_accounts=[{"platform": "github", "username": "al"}, {"platform": "x", "username": "alice_x"}],
        profile={"bio": {"text": "gm"}},
    )
    assert user.primary_address == "0xa"
    assert user.twitter_account.username == "alice_x"
    assert user.bio_text == "gm"


def test_nft_display_fallbacks():
    bare = NFT(contract={"address": "0xAA", "name": "Punks"}, tokenId="7")
    assert bare.display_name == "Punks #7"
    assert bare.image_url == ""

    rich = NFT(
        contract={"address": "0xAA"},
        tokenId="7",
        rawMetadata={"name": "Raw", "image": "ipfs://raw", "description": "raw desc"},
        metadata={"image": "ipfs://meta"},
    )
    assert rich.display_name == "Raw"
    assert rich.image_url == "ipfs://raw"
    assert rich.display_description == "raw desc"


def test_nft_display_with_odd_metadata_types():
    nft = NFT(
        contract={"address": "0xAA", "name": 99},
        tokenId=5,
        title={"en": "nested"},
        rawMetadata={"name": 123, "attributes": [{"trait_type": 5, "value": 1}, "junk", {"value": "v"}]},
        metadata="not a mapping",
        media={"gateway": "ipfs://x"},
    )
    assert nft.tokenId == "5"
    assert nft.display_name == "123"
    assert nft.image_url == ""
    assert nft.display_description == ""
    assert nft.collection_name == "99"
    assert nft.attributes == [("5", "1"), ("", "v")]


def test_nft_attributes_from_mapping():
    nft = NFT(contract={"address": "0xAA"}, tokenId="1", rawMetadata={"attributes": {"k": "v"}})
    assert nft.attributes == [("k", "v")]
    assert nft.display_name == "NFT #1"
