"""Dashboard page - weekly developer activity.

Loads the worklog once per session, then draws:
- Summary bar chart: totals of the seven tracked metrics for the team or
  the selected developer, with a per-developer totals table for the team
- Developer line chart: day-by-day metrics for the selected developer
- Developer bar chart: the same daily breakdown as grouped bars

Which charts appear is decided by lib.view_selector.visible_charts from the
developer and graph type selected in the sidebar.
"""

import streamlit as st

from components import activity
from components.sidebar import render_sidebar
from lib.aggregator import ALL_DEVELOPERS, build_summary_rows, find_developer
from lib.session_state import DashboardStatus, get_state
from lib.view_selector import ChartKind, visible_charts
from lib.worklog_loader import load_worklog

NO_DATA_MESSAGE = "No data available"


def render() -> None:
    """Render the complete Dashboard page.

    Layout structure:
    1. Header
    2. Loading spinner during the first run, or the no-data message if the
       fetch failed or returned no developers
    3. Sidebar selectors
    4. Visible charts, stacked
    """
    st.title(get_state('dashboard_title', "Weekly Developer Activity"))

    with st.spinner("Loading..."):
        status = load_worklog()

    if status != DashboardStatus.READY:
        st.info(NO_DATA_MESSAGE)
        return

    roster = get_state('roster', [])
    selected_developer, graph_type = render_sidebar(roster)

    charts = visible_charts(selected_developer, graph_type)
    if not charts:
        st.caption("Select a developer to see their daily activity.")
        return

    developer = find_developer(roster, selected_developer)

    for chart in charts:
        if chart == ChartKind.SUMMARY_BAR:
            rows = build_summary_rows(roster, selected_developer)
            activity.summary_bar_chart(rows, selected_developer, get_state('default_color', "#8884d8"))
            if selected_developer == ALL_DEVELOPERS:
                activity.totals_table(roster)
        elif chart == ChartKind.DEVELOPER_LINE:
            activity.developer_line_chart(developer)
        elif chart == ChartKind.DEVELOPER_BAR:
            activity.developer_bar_chart(developer)


# Expose main render function as the public API
__all__ = ['render']
