"""
Utility functions for the API.
"""
import logging
import string
from typing import List, Optional

# Set up logging
logger = logging.getLogger(__name__)

_HEX_DIGITS = set(string.hexdigits)
_DEC_DIGITS = set(string.digits)


def parse_address_list(raw_addresses):
    """
    Split a comma-separated query value into addresses

    Args:
        raw_addresses: Raw query string value, e.g. "0xabc,0xdef"

    Returns:
        List of stripped, non-empty addresses in input order
    """
    if not raw_addresses:
        return []
    return [a.strip() for a in raw_addresses.split(",") if a.strip()]


def normalize_address(address: str) -> str:
    """Return the address with a 0x prefix."""
    address = address.strip()
    return address if address.startswith("0x") else f"0x{address}"


def nft_key(contract_address: str, token_id: str) -> str:
    """Identity of an on-chain token, case-insensitive on the contract."""
    return f"{contract_address.lower()}-{token_id}"


def _parse_int_prefix(text, base):
    """
    Parse the longest valid integer prefix of text, like JavaScript parseInt

    Args:
        text: String to parse
        base: 16 or 10

    Returns:
        Parsed integer, or None if no digits could be read
    """
    text = (text or "").strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = _DEC_DIGITS
    if base == 16:
        digits = _HEX_DIGITS
        if text[:2].lower() == "0x":
            text = text[2:]

    end = 0
    while end < len(text) and text[end] in digits:
        end += 1
    if end == 0:
        return None
    return sign * int(text[:end], base)


def parse_token_id(token_id: str) -> int:
    """Token id as hex, falling back to decimal, falling back to 0."""
    return _parse_int_prefix(token_id, 16) or _parse_int_prefix(token_id, 10) or 0


def estimated_value(contract_address: str, token_id: str) -> float:
    """
    Mock "estimated value" for an NFT.

    Deterministic placeholder derived from the contract address and token id,
    in the range (-100, 100). NOT a price and must not be presented as one.
    """
    contract_hash = sum(ord(c) for c in contract_address)
    product = contract_hash * parse_token_id(token_id)
    # truncating remainder so negative ids keep their sign
    remainder = abs(product) % 10000
    if product < 0:
        remainder = -remainder
    return remainder / 100


def parse_balance(raw_balance: Optional[str]) -> int:
    """Raw hex balance as an integer; null or malformed balances count as zero."""
    if not raw_balance:
        return 0
    try:
        return int(raw_balance, 16)
    except ValueError:
        logger.warning(f"Unparseable token balance: {raw_balance}")
        return 0


def truncate(items: List, limit: int) -> List:
    return items[:max(limit, 0)]
