"""Streamlit front end for the Base Profile API.

Run:
    uvicorn app.main:app --port 8000
    streamlit run app/ui/dashboard.py

The dashboard calls the FastAPI endpoints at API_BASE_URL. It has two pages:
- Base Profile: search a Farcaster user, then view tokens, basenames and NFTs
- Compare Profiles: pick two users and compare their NFT collections
"""

from __future__ import annotations

import streamlit as st

from app.models.farcaster_models import FarcasterUser
from app.ui.panels import (
    render_basenames,
    render_comparison,
    render_expensive_nft,
    render_nft_gallery,
    render_profile,
    render_search,
    render_token_balances,
)
from app.ui.state import ensure_session_defaults, reset_panels


def _select_profile_user(user: FarcasterUser) -> None:
    reset_panels(st.session_state)
    st.session_state["selected_user"] = user
    st.session_state["selected_nft"] = {}
    st.session_state["gallery_page"] = 0


def _reset_profile_user() -> None:
    reset_panels(st.session_state)
    st.session_state["selected_user"] = None
    st.session_state["selected_nft"] = {}
    st.session_state["gallery_page"] = 0


def _reset_comparison() -> None:
    reset_panels(st.session_state)
    st.session_state["compare_user1"] = None
    st.session_state["compare_user2"] = None
    st.session_state["comparing"] = False
    st.session_state["selected_nft"] = {}


def profile_page() -> None:
    st.title("Base Profile")
    user = st.session_state["selected_user"]

    with st.container(border=True):
        if user is None:
            st.markdown("#### Search Farcaster User")
            render_search("profile", _select_profile_user)
            return
        st.markdown("#### Farcaster User Profile")
        render_profile(user, _reset_profile_user)

    with st.container(border=True):
        st.markdown("#### Base Mainnet - Top 5 Token Holdings")
        render_token_balances(user)

    with st.container(border=True):
        st.markdown("#### Basenames Owned")
        render_basenames(user)

    with st.container(border=True):
        st.markdown("#### Most Valuable NFT (mock estimate)")
        render_expensive_nft(user)

    with st.container(border=True):
        st.markdown("#### NFT Gallery")
        render_nft_gallery(user)


def _compare_slot(title: str, state_key: str) -> None:
    def _select(user: FarcasterUser) -> None:
        st.session_state[state_key] = user

    with st.container(border=True):
        st.markdown(f"#### {title}")
        user = st.session_state[state_key]
        if user is None:
            render_search(state_key, _select)
            return
        st.markdown(f"**{user.display_name}**  \n@{user.username}")
        if st.button("Change user", key=f"change_{state_key}"):
            st.session_state[state_key] = None
            st.rerun()


def compare_page() -> None:
    st.title("Compare Farcaster Profiles")
    user1 = st.session_state["compare_user1"]
    user2 = st.session_state["compare_user2"]

    if st.session_state["comparing"] and user1 and user2:
        with st.container(border=True):
            st.markdown("#### NFT Collection Comparison")
            render_comparison(user1, user2)
        if st.button("Compare Different Profiles"):
            _reset_comparison()
            st.rerun()
        return

    left, right = st.columns(2)
    with left:
        _compare_slot("First Profile", "compare_user1")
    with right:
        _compare_slot("Second Profile", "compare_user2")

    if st.button("Compare NFT Collections", disabled=not (user1 and user2)):
        st.session_state["comparing"] = True
        st.rerun()


def main() -> None:
    st.set_page_config(page_title="Base Profile", layout="wide")
    ensure_session_defaults(st.session_state)

    page = st.sidebar.radio("Page", ["Base Profile", "Compare Profiles"])
    if page == "Base Profile":
        profile_page()
    else:
        compare_page()


if __name__ == "__main__":
    main()
