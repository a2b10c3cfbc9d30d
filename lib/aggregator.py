"""Worklog aggregation.

Turns the nested roster into chart-ready rows: per-metric totals for the
summary bar chart and per-day rows for a single developer's time series.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

from lib.models import Developer

ALL_DEVELOPERS = "All"

METRIC_LABELS = [
    "PR Open",
    "PR Merged",
    "Commits",
    "PR Reviewed",
    "PR Comments",
    "Incident Alerts",
    "Incidents Resolved",
]


def find_developer(roster: Sequence[Developer], name: str) -> Optional[Developer]:
    """Return the first developer called ``name``, or None."""
    for developer in roster:
        if developer.name == name:
            return developer
    return None


def total_for_developer(developer: Developer, metric_label: str) -> int:
    """Sum one metric across every day of one developer's history."""
    total = 0
    for day in developer.day_wise_activity:
        for item in day.items:
            if item.label == metric_label:
                total += item.value
    return total


def total_for_metric(
    source: Union[Developer, Sequence[Developer]],
    metric_label: str
) -> int:
    """Sum one metric across a whole roster, or across a single developer.

    Args:
        source: A roster (sequence of developers) or one Developer
        metric_label: Metric name, e.g. 'Commits'

    Returns:
        Total count
    """
    if isinstance(source, Developer):
        return total_for_developer(source, metric_label)
    return sum(total_for_developer(developer, metric_label) for developer in source)


def build_summary_rows(
    roster: Sequence[Developer],
    selection: str = ALL_DEVELOPERS
) -> List[Dict[str, Union[str, int]]]:
    """Build the aggregate bar chart rows for the seven known metrics.

    Args:
        roster: All loaded developers
        selection: 'All' for roster-wide totals, otherwise a developer name

    Returns:
        List of {'name': label, 'value': total} in METRIC_LABELS order

    Raises:
        KeyError: If ``selection`` names a developer not in the roster
    """
    if selection == ALL_DEVELOPERS:
        source: Union[Developer, Sequence[Developer]] = roster
    else:
        source = find_developer(roster, selection)
        if source is None:
            raise KeyError(selection)

    return [
        {'name': label, 'value': total_for_metric(source, label)}
        for label in METRIC_LABELS
    ]


def build_time_series(developer: Developer) -> List[Dict[str, str]]:
    """Flatten a developer's history into one row per day.

    Each row maps 'date' to the day and every metric label present that day
    to its count text. When a label repeats within a day the last one wins.
    """
    rows = []
    for day in developer.day_wise_activity:
        row = {item.label: item.count for item in day.items}
        row['date'] = day.date
        rows.append(row)
    return rows


def series_labels(developer: Developer) -> List[Tuple[str, str]]:
    """Return the (label, colour) pairs to draw for a developer's series.

    Labels are collected across all days in first-seen order, so a metric
    that only shows up later in the week still gets a series. The colour is
    taken from the label's first occurrence.
    """
    seen: Dict[str, str] = {}
    for day in developer.day_wise_activity:
        for item in day.items:
            if item.label not in seen:
                seen[item.label] = item.fill_color
    return list(seen.items())
