"""Session state initialization and management for the dashboard.

All state the dashboard needs lives in st.session_state and is only
changed through the helpers in this module.
"""

import streamlit as st
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from lib.aggregator import ALL_DEVELOPERS
from lib.config import DashboardConfig, config as default_config
from lib.models import Developer
from lib.view_selector import GraphType


class DashboardStatus(str, Enum):
    """Coarse dashboard states, driven only by the worklog fetch."""
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"


def initialize_session_state(config: Optional[DashboardConfig] = None) -> None:
    """Initialize all session state variables used by the dashboard.

    Existing values are left alone so reruns keep the user's selections.

    Args:
        config: Configuration to seed settings from (default: module config)
    """
    config = config or default_config

    defaults: Dict[str, Any] = {
        # Worklog
        'roster': [],
        'worklog_loading': True,
        'worklog_error': None,
        'last_update': None,

        # Selections
        'selected_developer': ALL_DEVELOPERS,
        'graph_type': GraphType.ALL.value,

        # Settings
        'data_url': config.data_url,
        'request_timeout': config.request_timeout,
        'default_color': config.default_color,
        'dashboard_title': config.title,
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def update_worklog_state(
    roster: Optional[List[Developer]] = None,
    error: Optional[str] = None
) -> None:
    """Record the outcome of the worklog fetch and clear the loading flag.

    Args:
        roster: Developers returned by a successful fetch
        error: Error message if the fetch failed
    """
    if roster is not None:
        st.session_state.roster = roster

    if error is not None:
        st.session_state.worklog_error = error

    st.session_state.worklog_loading = False
    st.session_state.last_update = datetime.now()


def get_status() -> DashboardStatus:
    """Derive the dashboard status from session state."""
    if get_state('worklog_loading', True):
        return DashboardStatus.LOADING
    if not get_state('roster', []):
        return DashboardStatus.EMPTY
    return DashboardStatus.READY


def get_state(key: str, default: Any = None) -> Any:
    """Safely get a value from session state with a default.

    Args:
        key: Session state key
        default: Default value if key doesn't exist

    Returns:
        Value from session state or default
    """
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """Set a value in session state.

    Args:
        key: Session state key
        value: Value to set
    """
    st.session_state[key] = value
