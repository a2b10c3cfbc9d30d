"""
Worklog Dashboard - Sidebar Component

Renders the Options panel: developer and graph type selectors, plus the
data source status.
"""

from typing import List, Tuple

import streamlit as st

from lib.aggregator import ALL_DEVELOPERS
from lib.models import Developer
from lib.view_selector import GRAPH_TYPE_LABELS, GraphType


def _format_developer(option: str) -> str:
    return "All Developers" if option == ALL_DEVELOPERS else option


def _format_graph_type(option: str) -> str:
    return GRAPH_TYPE_LABELS[GraphType(option)]


def _render_source_status() -> None:
    """Show where the worklog came from and whether it loaded."""
    error = st.session_state.get('worklog_error')
    if error:
        st.error("Worklog unavailable")
    else:
        last_update = st.session_state.get('last_update')
        if last_update:
            st.success(f"Loaded {last_update.strftime('%H:%M:%S')}")
    st.caption(st.session_state.get('data_url', ''))


def render_sidebar(roster: List[Developer]) -> Tuple[str, str]:
    """
    Render the sidebar selectors.

    Args:
        roster: Loaded developers, one option each

    Returns:
        (selected developer, graph type) as stored in session state
    """
    with st.sidebar:
        st.title("Options")

        developer = st.selectbox(
            "Developer:",
            [ALL_DEVELOPERS] + list(dict.fromkeys(dev.name for dev in roster)),
            format_func=_format_developer,
            key="selected_developer"
        )

        graph_type = st.selectbox(
            "Graph Type:",
            [g.value for g in GraphType],
            format_func=_format_graph_type,
            key="graph_type"
        )

        st.divider()

        st.subheader("Status")
        _render_source_status()

    return developer, graph_type
