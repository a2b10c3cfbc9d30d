"""Shared pytest fixtures for the worklog dashboard tests."""

import pytest
from unittest.mock import patch


def make_item(label, count, color="#8884d8"):
    return {"count": count, "label": label, "fillColor": color}


def make_day(date, *items):
    return {"date": date, "items": {"children": list(items)}}


def make_payload(*developers):
    return {"AuthorWorklog": {"rows": list(developers)}}


class SessionStateStub(dict):
    """Dict with attribute access, standing in for st.session_state."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)

    def __setattr__(self, key, value):
        self[key] = value


@pytest.fixture
def sample_payload():
    """Two developers over two days."""
    return make_payload(
        {
            "name": "Alice",
            "dayWiseActivity": [
                make_day("2024-01-01", make_item("Commits", "5", "#FAC76E"), make_item("PR Open", "2", "#EF6B6B")),
                make_day("2024-01-02", make_item("Commits", "3", "#FAC76E"), make_item("PR Merged", "1", "#61CDBB")),
            ],
        },
        {
            "name": "Bob",
            "dayWiseActivity": [
                make_day("2024-01-01", make_item("Commits", "7"), make_item("PR Reviewed", "4")),
                make_day("2024-01-02", make_item("Incident Alerts", "1"), make_item("Incidents Resolved", "1")),
            ],
        },
    )


@pytest.fixture
def sample_roster(sample_payload):
    from lib.models import parse_worklog
    return parse_worklog(sample_payload)


@pytest.fixture
def session_state():
    """Replace st.session_state with a plain stub for the test."""
    stub = SessionStateStub()
    with patch("streamlit.session_state", stub):
        yield stub
