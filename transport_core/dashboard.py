# MIT License
"""Streamlit session accessors shared by ``app.py`` and every page.

The service lives in ``st.cache_resource`` so the process builds exactly
one :class:`ScenarioService` (and one set of preloaded results); each
browser session gets its own :class:`ScenarioStore` in
``st.session_state["store"]`` seeded from that snapshot.
"""
from __future__ import annotations

import streamlit as st

from .params import ServiceSettings
from .service import ScenarioService
from .store import ScenarioStore


@st.cache_resource
def get_service() -> ScenarioService:
    return ScenarioService(settings=ServiceSettings.from_env())


def get_store() -> ScenarioStore:
    """Return the session's store, seeded with the preloaded scenarios."""
    store = st.session_state.get("store")
    if store is None:
        store = ScenarioStore(get_service().get_preloaded_scenarios())
        st.session_state["store"] = store
    return store


def reset_store() -> ScenarioStore:
    """Put the preloaded snapshot back into the session's store."""
    store = get_store()
    store.load(get_service().get_preloaded_scenarios())
    return store
