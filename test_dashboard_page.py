"""End-to-end tests for the dashboard page.

Runs app.py headless with streamlit.testing.v1.AppTest and the worklog
fetch patched out.
Run with: pytest test_dashboard_page.py
"""

import logging
from pathlib import Path

import pytest
from unittest.mock import patch
from streamlit.testing.v1 import AppTest

from lib.worklog_client import WorklogAPIClient
from views.dashboard import NO_DATA_MESSAGE


def run_app(payload=None, error=None, **state):
    """Run app.py once with the worklog payload (or fetch error) given."""
    at = AppTest.from_file("app.py", default_timeout=30)
    for key, value in state.items():
        at.session_state[key] = value

    kwargs = {'side_effect': error} if error is not None else {'return_value': payload}
    with patch.object(WorklogAPIClient, 'get_payload', **kwargs) as get_payload:
        at.run()
    return at, get_payload


def plotly_charts(at):
    return at.get("plotly_chart")


def info_messages(at):
    return [info.value for info in at.info]


class TestDashboardStates:
    """Loading resolves to empty or ready."""

    def test_ready_renders_summary_chart(self, sample_payload):
        at, get_payload = run_app(sample_payload)

        assert not at.exception
        get_payload.assert_called_once()
        assert at.main.title[0].value == "Weekly Developer Activity"
        assert NO_DATA_MESSAGE not in info_messages(at)
        assert len(plotly_charts(at)) == 1
        assert at.session_state["worklog_loading"] is False

    def test_empty_roster_shows_no_data(self):
        at, _ = run_app({"AuthorWorklog": {"rows": []}})

        assert not at.exception
        assert NO_DATA_MESSAGE in info_messages(at)
        assert len(plotly_charts(at)) == 0

    def test_fetch_failure_shows_no_data(self, caplog):
        with caplog.at_level(logging.ERROR):
            at, _ = run_app(error=ConnectionError("Could not connect"))

        assert not at.exception
        assert NO_DATA_MESSAGE in info_messages(at)
        assert len(plotly_charts(at)) == 0
        assert at.session_state["worklog_loading"] is False
        assert at.session_state["roster"] == []
        assert "Error fetching data" in caplog.text


class TestDashboardSelections:
    """Sidebar selections drive which charts appear."""

    def test_developer_options(self, sample_payload):
        at, _ = run_app(sample_payload)

        developer_select = at.sidebar.selectbox(key="selected_developer")
        assert developer_select.options == ["All Developers", "Alice", "Bob"]
        graph_select = at.sidebar.selectbox(key="graph_type")
        assert graph_select.options == ["All Graphs", "Bar Chart", "Line Chart"]

    def test_line_with_all_developers_renders_nothing(self, sample_payload):
        at, _ = run_app(sample_payload, graph_type="Line")

        assert not at.exception
        assert len(plotly_charts(at)) == 0

    @pytest.mark.parametrize("graph_type, expected_charts", [
        ("All", 3),
        ("Bar", 2),
        ("Line", 1),
    ])
    def test_specific_developer(self, sample_payload, graph_type, expected_charts):
        at, _ = run_app(sample_payload, selected_developer="Alice", graph_type=graph_type)

        assert not at.exception
        assert len(plotly_charts(at)) == expected_charts

    def test_selection_change_does_not_refetch(self, sample_payload):
        at = AppTest.from_file("app.py", default_timeout=30)
        with patch.object(WorklogAPIClient, 'get_payload', return_value=sample_payload) as get_payload:
            at.run()
            at.sidebar.selectbox(key="selected_developer").set_value("Bob").run()

        assert not at.exception
        get_payload.assert_called_once()
        assert len(plotly_charts(at)) == 3


class TestAppLayout:
    """app.py is the only page Streamlit serves."""

    def test_no_auto_discovered_pages(self):
        app_dir = Path(__file__).parent
        assert not (app_dir / "pages").exists()
        assert (app_dir / "views" / "dashboard.py").is_file()
