"""Tests for worklog aggregation.

Run with: pytest test_aggregator.py
"""

import pytest

from conftest import make_day, make_item, make_payload
from lib.aggregator import (
    ALL_DEVELOPERS,
    METRIC_LABELS,
    build_summary_rows,
    build_time_series,
    find_developer,
    series_labels,
    total_for_developer,
    total_for_metric,
)
from lib.models import parse_worklog


@pytest.fixture
def alice_only():
    return parse_worklog(make_payload({
        "name": "Alice",
        "dayWiseActivity": [
            make_day("2024-01-01", make_item("Commits", "5"), make_item("PR Open", "2")),
        ],
    }))


class TestTotals:
    """Metric sums over developers and days."""

    def test_single_developer_scenario(self, alice_only):
        assert total_for_metric(alice_only, "Commits") == 5
        assert total_for_metric(alice_only, "PR Open") == 2
        assert total_for_metric(alice_only, "PR Merged") == 0

    def test_sums_across_days(self, sample_roster):
        alice = find_developer(sample_roster, "Alice")
        assert total_for_developer(alice, "Commits") == 8

    def test_developer_argument_restricts_sum(self, sample_roster):
        bob = find_developer(sample_roster, "Bob")
        assert total_for_metric(bob, "Commits") == 7

    @pytest.mark.parametrize("label", METRIC_LABELS + ["Unknown"])
    def test_roster_total_is_sum_of_developer_totals(self, sample_roster, label):
        expected = sum(total_for_metric(dev, label) for dev in sample_roster)
        assert total_for_metric(sample_roster, label) == expected

    def test_empty_roster(self):
        assert total_for_metric([], "Commits") == 0

    def test_malformed_count_counts_as_zero(self):
        roster = parse_worklog(make_payload({
            "name": "Alice",
            "dayWiseActivity": [
                make_day("2024-01-01", make_item("Commits", "abc")),
                make_day("2024-01-02", make_item("Commits", "4")),
            ],
        }))
        assert total_for_metric(roster, "Commits") == 4


class TestSummaryRows:
    """Seven fixed metrics, in fixed order."""

    def test_all_scenario(self, alice_only):
        rows = build_summary_rows(alice_only, ALL_DEVELOPERS)

        assert [row['name'] for row in rows] == METRIC_LABELS
        values = {row['name']: row['value'] for row in rows}
        assert values == {
            "PR Open": 2,
            "PR Merged": 0,
            "Commits": 5,
            "PR Reviewed": 0,
            "PR Comments": 0,
            "Incident Alerts": 0,
            "Incidents Resolved": 0,
        }

    def test_all_equals_per_developer_sums(self, sample_roster):
        rows = build_summary_rows(sample_roster, ALL_DEVELOPERS)

        per_developer = [build_summary_rows(sample_roster, dev.name) for dev in sample_roster]
        for index, row in enumerate(rows):
            assert row['value'] == sum(dev_rows[index]['value'] for dev_rows in per_developer)

    def test_selection_excludes_other_developers(self, sample_roster):
        rows = build_summary_rows(sample_roster, "Alice")
        values = {row['name']: row['value'] for row in rows}

        assert values["Commits"] == 8
        assert values["PR Reviewed"] == 0
        assert values["Incident Alerts"] == 0

    def test_default_selection_is_all(self, sample_roster):
        assert build_summary_rows(sample_roster) == build_summary_rows(sample_roster, ALL_DEVELOPERS)

    def test_unknown_developer(self, sample_roster):
        with pytest.raises(KeyError):
            build_summary_rows(sample_roster, "Mallory")

    def test_empty_roster_all_zero(self):
        rows = build_summary_rows([], ALL_DEVELOPERS)
        assert [row['value'] for row in rows] == [0] * len(METRIC_LABELS)


class TestTimeSeries:
    """Per-day rows and series legends for one developer."""

    def test_one_row_per_day(self, sample_roster):
        alice = find_developer(sample_roster, "Alice")

        assert build_time_series(alice) == [
            {"date": "2024-01-01", "Commits": "5", "PR Open": "2"},
            {"date": "2024-01-02", "Commits": "3", "PR Merged": "1"},
        ]

    def test_no_days(self):
        roster = parse_worklog(make_payload({"name": "Alice"}))
        assert build_time_series(roster[0]) == []
        assert series_labels(roster[0]) == []

    def test_series_labels_union_in_first_seen_order(self, sample_roster):
        alice = find_developer(sample_roster, "Alice")

        assert series_labels(alice) == [
            ("Commits", "#FAC76E"),
            ("PR Open", "#EF6B6B"),
            ("PR Merged", "#61CDBB"),
        ]

    def test_series_label_colour_from_first_occurrence(self):
        roster = parse_worklog(make_payload({
            "name": "Alice",
            "dayWiseActivity": [
                make_day("2024-01-01", make_item("Commits", "1", "#111111")),
                make_day("2024-01-02", make_item("Commits", "1", "#222222")),
            ],
        }))
        assert series_labels(roster[0]) == [("Commits", "#111111")]


class TestFindDeveloper:

    def test_found(self, sample_roster):
        assert find_developer(sample_roster, "Bob").name == "Bob"

    def test_missing(self, sample_roster):
        assert find_developer(sample_roster, "Mallory") is None

    def test_first_match_wins(self):
        roster = parse_worklog(make_payload(
            {"name": "Alice", "dayWiseActivity": [make_day("2024-01-01", make_item("Commits", "1"))]},
            {"name": "Alice", "dayWiseActivity": [make_day("2024-01-01", make_item("Commits", "9"))]},
        ))
        assert total_for_metric(find_developer(roster, "Alice"), "Commits") == 1
