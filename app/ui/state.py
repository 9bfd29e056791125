"""Panel state for the Streamlit dashboard.

Every data panel is in exactly one of three states: ``Loading``, ``Failed``
or ``Ready``. A panel's state is cached in the session under its name and is
bound to the identities it was fetched for; when those change the panel goes
back to ``Loading`` and fetches again. There is no retry state.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Union

logger = logging.getLogger(__name__)

PANEL_PREFIX = "panel:"


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Ready:
    data: Any


PanelState = Union[Loading, Failed, Ready]


def current_state(store: MutableMapping, name: str, deps: Hashable) -> PanelState:
    """Return the cached state for ``name`` if it was loaded for ``deps``, else ``Loading``."""

    cached = store.get(PANEL_PREFIX + name)
    if cached is None or cached[0] != deps:
        return Loading()
    return cached[1]


def load_panel(store: MutableMapping, name: str, deps: Hashable, fetch: Callable[[], Any]) -> PanelState:
    """Resolve a panel to ``Ready`` or ``Failed``, fetching only when ``deps`` changed.

    Args:
        store: Session mapping (``st.session_state`` in the app, a dict in tests).
        name: Panel name, unique per page.
        deps: Identity key the data belongs to, e.g. a tuple of fids.
        fetch: Zero-argument callable returning the panel data.

    Returns:
        The settled panel state.
    """

    state = current_state(store, name, deps)
    if not isinstance(state, Loading):
        return state

    store[PANEL_PREFIX + name] = (deps, Loading())
    try:
        state = Ready(fetch())
    except Exception as exc:
        logger.error(f"Panel {name} failed to load: {exc}")
        state = Failed(str(exc) or "An unknown error occurred")
    store[PANEL_PREFIX + name] = (deps, state)
    return state


def reset_panels(store: MutableMapping) -> None:
    """Drop every cached panel state, e.g. when the user changes identity."""

    for key in [k for k in store.keys() if str(k).startswith(PANEL_PREFIX)]:
        del store[key]


def ensure_session_defaults(store: MutableMapping) -> None:
    """Populate the session with the dashboard defaults."""

    defaults: dict[str, Any] = {
        "selected_user": None,
        "compare_user1": None,
        "compare_user2": None,
        "comparing": False,
        "search_results": {},
        "search_errors": {},
        "selected_nft": {},
        "gallery_page": 0,
    }
    for key, value in defaults.items():
        store.setdefault(key, value)


__all__ = [
    "Failed",
    "Loading",
    "PanelState",
    "Ready",
    "current_state",
    "ensure_session_defaults",
    "load_panel",
    "reset_panels",
]
