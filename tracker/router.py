import streamlit as st

from tracker.tabs.happiness_tab import render_happiness_tab
from tracker.tabs.media_tab import render_media_tab


TAB_OPTIONS = [
    "Happiness",
    "Media",
]


def render_router(ctx):
    active = st.session_state.get("ui.active_tab") or TAB_OPTIONS[0]
    active = st.segmented_control(
        "Workspace",
        TAB_OPTIONS,
        key="ui.active_tab",
        default=active,
    )

    if active == "Media":
        return _render_media(ctx)

    return _render_happiness(ctx)


@st.fragment
def _render_happiness(ctx):
    render_happiness_tab(ctx)


@st.fragment
def _render_media(ctx):
    render_media_tab(ctx)
