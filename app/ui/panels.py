"""Streamlit renderers for the profile and comparison panels.

Each panel binds to one identity (or two, for the comparison), loads its data
through ``load_panel`` and renders the Loading / Failed / Ready states. A
failure is shown inline and never leaves its panel.
"""

from __future__ import annotations

from typing import Callable, List, Optional

import streamlit as st

import app.ui.api as ui_api
from app.models.farcaster_models import FarcasterUser
from app.models.nft_models import NFT
from app.ui.formatting import (
    TWITTER_URL,
    explorer_links,
    format_mock_value,
    format_token_balance,
    initial,
    paginate,
    short_address,
)
from app.ui.state import Failed, Loading, PanelState, Ready, load_panel

GALLERY_LIMIT = 12
GALLERY_PAGE_SIZE = 6
GRID_COLUMNS = 3


def _load(name: str, deps, fetch: Callable, spinner: str) -> PanelState:
    with st.spinner(spinner):
        return load_panel(st.session_state, name, deps, fetch)


def _show_failure(state: PanelState) -> bool:
    if isinstance(state, Failed):
        st.error(f"Error: {state.message}")
        return True
    if isinstance(state, Loading):
        st.caption("Loading...")
        return True
    return False


def _avatar(url: Optional[str], fallback_text: str, width: int = 64) -> None:
    if url:
        st.image(url, width=width)
    else:
        st.markdown(f"### {initial(fallback_text)}")


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def render_search(slot: str, on_select: Callable[[FarcasterUser], None]) -> None:
    """Username search box with a selectable result list."""

    with st.form(key=f"search_form_{slot}"):
        query = st.text_input("Search by Farcaster username...", key=f"search_query_{slot}")
        submitted = st.form_submit_button("Search")

    if submitted and query.strip():
        with st.spinner("Searching..."):
            try:
                st.session_state["search_results"][slot] = ui_api.search_users(query.strip())
                st.session_state["search_errors"][slot] = None
            except Exception as exc:
                st.session_state["search_results"][slot] = []
                st.session_state["search_errors"][slot] = str(exc) or "An unknown error occurred"

    error = st.session_state["search_errors"].get(slot)
    if error:
        st.error(error)

    for user in st.session_state["search_results"].get(slot) or []:
        cols = st.columns([1, 4, 1])
        with cols[0]:
            _avatar(user.pfp_url, user.display_name or user.username, width=40)
        with cols[1]:
            st.markdown(f"**{user.display_name}**  \n@{user.username} · FID {user.fid}")
        with cols[2]:
            if st.button("Select", key=f"select_{slot}_{user.fid}"):
                on_select(user)
                st.session_state["search_results"][slot] = []
                st.rerun()


# ---------------------------------------------------------------------------
# Profile card
# ---------------------------------------------------------------------------

def render_profile(user: FarcasterUser, on_reset: Callable[[], None]) -> None:
    cols = st.columns([1, 4, 1])
    with cols[0]:
        _avatar(user.pfp_url, user.display_name or user.username)
    with cols[1]:
        st.subheader(user.display_name)
        st.caption(f"@{user.username}")
        st.markdown(
            f"**{user.following_count or 0}** Following · "
            f"**{user.follower_count or 0}** Followers · "
            f"**{user.fid}** FID"
        )
    with cols[2]:
        if st.button("Change User", key="change_user"):
            on_reset()
            st.rerun()

    if user.bio_text:
        st.write(user.bio_text)

    twitter = user.twitter_account
    if twitter:
        st.markdown(f"[@{twitter.username}]({TWITTER_URL.format(username=twitter.username)})")
    for account in user.verified_accounts:
        if account.platform != "x":
            st.caption(f"{account.platform}: @{account.username}")

    st.markdown("##### Ethereum Addresses")
    primary = user.primary_address
    for address in user.listed_addresses:
        label = f"`{address}`" + (" **Primary**" if address == primary else "")
        links = " · ".join(f"[{text}]({url})" for text, url in explorer_links(address))
        st.markdown(f"{label}  \n{links}")

    if user.power_badge:
        st.success("⚡ Power User")


# ---------------------------------------------------------------------------
# Holdings panels
# ---------------------------------------------------------------------------

def render_token_balances(user: FarcasterUser) -> None:
    addresses = user.holding_addresses
    state = _load("tokens", (user.fid,), lambda: ui_api.fetch_tokens(addresses), "Loading token balances...")
    if _show_failure(state):
        return

    tokens = state.data
    if not tokens:
        st.caption("No token balances found for this user.")
        return

    for token in tokens:
        cols = st.columns([1, 5])
        with cols[0]:
            _avatar(token.logo, token.symbol or "?", width=40)
        with cols[1]:
            symbol = token.symbol or ""
            st.markdown(f"**{token.name or 'Unknown Token'}** {symbol}")
            st.write(f"{format_token_balance(token.tokenBalance, token.decimals)} {symbol}")
            if len(token.addresses) > 1:
                st.caption(f"Found in {len(token.addresses)} addresses")


def render_basenames(user: FarcasterUser) -> None:
    addresses = user.listed_addresses
    state = _load("basenames", (user.fid,), lambda: ui_api.fetch_basenames(addresses), "Loading basenames...")
    if _show_failure(state):
        return

    named = [item for item in state.data if item.basename is not None]
    if not named:
        st.caption("No basenames found for this user.")
        return
    for item in named:
        st.markdown(f"**{item.basename}**  \nAddress: `{item.address}`")


def render_nft_card(nft: NFT, show_owner: bool = True) -> None:
    if nft.image_url:
        st.image(nft.image_url, use_container_width=True)
    st.markdown(f"**{nft.display_name}**")
    if nft.display_description:
        st.write(nft.display_description)
    details = []
    if nft.collection_name:
        details.append(f"Collection: {nft.collection_name}")
    details.append(f"Token ID: {nft.tokenId}")
    if show_owner and nft.address:
        details.append(f"Owned by: {short_address(nft.address)}")
    st.caption(" · ".join(details))
    if nft.estimatedValue is not None:
        st.markdown(format_mock_value(nft.estimatedValue))


def render_expensive_nft(user: FarcasterUser) -> None:
    addresses = user.holding_addresses
    state = _load(
        "expensive_nft", (user.fid,), lambda: ui_api.fetch_nfts(addresses, limit=1), "Loading NFT data..."
    )
    if _show_failure(state):
        return

    nft = state.data.most_expensive
    if nft is None:
        st.caption("No NFTs found for this user.")
        return
    render_nft_card(nft)


def render_nft_detail(nft: NFT, back_label: str, selection_key: str) -> None:
    if st.button(f"← {back_label}", key=f"back_{selection_key}"):
        st.session_state["selected_nft"][selection_key] = None
        st.rerun()

    render_nft_card(nft)
    attributes = nft.attributes
    if attributes:
        st.markdown("##### Attributes")
        cols = st.columns(GRID_COLUMNS)
        for index, (trait, value) in enumerate(attributes):
            with cols[index % GRID_COLUMNS]:
                st.caption(trait)
                st.write(value)


def render_nft_grid(nfts: List[NFT], selection_key: str) -> None:
    cols = st.columns(GRID_COLUMNS)
    for index, nft in enumerate(nfts):
        with cols[index % GRID_COLUMNS]:
            if nft.image_url:
                st.image(nft.image_url, use_container_width=True)
            st.caption(f"{nft.display_name}  \n{nft.collection_name or 'Unknown Collection'}")
            if st.button("Details", key=f"nft_{selection_key}_{index}"):
                st.session_state["selected_nft"][selection_key] = nft
                st.rerun()


def render_nft_gallery(user: FarcasterUser) -> None:
    addresses = user.holding_addresses
    state = _load(
        "nft_gallery", (user.fid,), lambda: ui_api.fetch_nfts(addresses, limit=GALLERY_LIMIT), "Loading NFTs..."
    )
    if _show_failure(state):
        return

    listing = state.data
    if not listing.nfts:
        st.caption("No NFTs found for this user.")
        return

    selected = st.session_state["selected_nft"].get("gallery")
    if selected is not None:
        render_nft_detail(selected, "Back to gallery", "gallery")
        return

    st.markdown(f"NFT Collection ({listing.total} total)")
    page_items, page, pages = paginate(listing.nfts, st.session_state["gallery_page"], GALLERY_PAGE_SIZE)
    render_nft_grid(page_items, "gallery")
    if pages > 1:
        prev_col, label_col, next_col = st.columns([1, 2, 1])
        with prev_col:
            if st.button("Previous", disabled=page == 0, key="gallery_prev"):
                st.session_state["gallery_page"] = page - 1
                st.rerun()
        with label_col:
            st.caption(f"Page {page + 1} of {pages}")
        with next_col:
            if st.button("Next", disabled=page >= pages - 1, key="gallery_next"):
                st.session_state["gallery_page"] = page + 1
                st.rerun()


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def render_comparison(user1: FarcasterUser, user2: FarcasterUser) -> None:
    addresses1 = user1.holding_addresses
    addresses2 = user2.holding_addresses
    state = _load(
        "comparison",
        (user1.fid, user2.fid),
        lambda: ui_api.compare_users(addresses1, addresses2),
        "Comparing NFT collections...",
    )
    if _show_failure(state):
        return

    comparison = state.data
    left, middle, right = st.columns([1, 3, 1])
    with left:
        _avatar(user1.pfp_url, user1.display_name)
    with middle:
        st.subheader(f"{comparison.common_total} NFTs in common")
        st.caption(
            f"{user1.display_name} owns {comparison.user1_total} NFTs • "
            f"{user2.display_name} owns {comparison.user2_total} NFTs"
        )
    with right:
        _avatar(user2.pfp_url, user2.display_name)

    if not comparison.common_nfts:
        st.caption("These users don't have any NFTs in common.")
        return

    st.markdown("##### Common NFTs")
    selected = st.session_state["selected_nft"].get("comparison")
    if selected is not None:
        render_nft_detail(selected, "Back to common NFTs", "comparison")
    else:
        render_nft_grid(comparison.common_nfts, "comparison")
