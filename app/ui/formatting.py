"""Display formatting helpers for the dashboard panels."""

from __future__ import annotations

from typing import List, Optional, Tuple

from app.utils.helpers import parse_balance

DISPLAY_DECIMALS = 6
BASESCAN_URL = "https://basescan.org/address/{address}"
ETHERSCAN_URL = "https://etherscan.io/address/{address}"
TWITTER_URL = "https://twitter.com/{username}"


def format_units(value: int, decimals: int) -> str:
    """Render an integer amount of base units as a decimal string, trailing zeros removed."""

    negative = value < 0
    digits = str(abs(value)).rjust(decimals + 1, "0")
    integer = digits[: len(digits) - decimals] if decimals else digits
    fraction = digits[len(digits) - decimals :].rstrip("0") if decimals else ""
    text = f"{integer}.{fraction}" if fraction else integer
    return f"-{text}" if negative else text


def format_token_balance(raw_balance: Optional[str], decimals: Optional[int]) -> str:
    """Human balance truncated to six fractional digits; "Unknown" without decimals."""

    if not raw_balance or decimals is None:
        return "Unknown"
    try:
        int(raw_balance, 16)
    except ValueError:
        return "Unknown"
    formatted = format_units(parse_balance(raw_balance), decimals)
    integer, _, fraction = formatted.partition(".")
    if len(fraction) > DISPLAY_DECIMALS:
        return f"{integer}.{fraction[:DISPLAY_DECIMALS]}"
    return formatted


def short_address(address: str) -> str:
    if len(address) <= 10:
        return address
    return f"{address[:6]}...{address[-4:]}"


def explorer_links(address: str) -> List[Tuple[str, str]]:
    return [
        ("View on Basescan", BASESCAN_URL.format(address=address)),
        ("View on Etherscan", ETHERSCAN_URL.format(address=address)),
    ]


def format_mock_value(value: Optional[float]) -> str:
    """Label for the placeholder NFT score; never shown as a real price."""

    if value is None:
        return ""
    return f"~{value:.2f} ETH (mock estimate)"


def initial(text: Optional[str]) -> str:
    return (text or "?")[:1].upper()


def paginate(items: list, page: int, page_size: int) -> Tuple[list, int, int]:
    """Slice one page out of ``items``.

    Returns:
        The page items, the clamped page index and the page count.
    """

    pages = max(1, -(-len(items) // page_size))
    page = min(max(page, 0), pages - 1)
    start = page * page_size
    return items[start : start + page_size], page, pages
