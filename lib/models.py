"""Worklog data model.

The activity endpoint returns one record per developer, each holding a
day-by-day breakdown of metric counts:

{
    "AuthorWorklog": {
        "rows": [
            {
                "name": "Alice",
                "dayWiseActivity": [
                    {
                        "date": "2024-01-01",
                        "items": {
                            "children": [
                                {"count": "5", "label": "Commits", "fillColor": "#8884d8"}
                            ]
                        }
                    }
                ]
            }
        ]
    }
}
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

FALLBACK_COLOR = "#8884d8"


class WorklogFormatError(ValueError):
    """Raised when the worklog payload does not have the expected shape."""


def parse_count(text: Any) -> int:
    """Interpret a textual metric count as an integer.

    Leading and trailing whitespace is ignored. Text that is not an integer
    counts as 0 and is logged.
    """
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        logger.warning(f"Non-numeric metric count {text!r} treated as 0")
        return 0


@dataclass(frozen=True)
class MetricItem:
    """One metric count for one developer on one day."""
    count: str
    label: str
    fill_color: str = FALLBACK_COLOR

    @property
    def value(self) -> int:
        """Integer value of the count text."""
        return parse_count(self.count)


@dataclass(frozen=True)
class DayActivity:
    """A calendar day's metric breakdown for one developer."""
    date: str
    items: List[MetricItem] = field(default_factory=list)


@dataclass(frozen=True)
class Developer:
    """A developer and their day-wise activity history."""
    name: str
    day_wise_activity: List[DayActivity] = field(default_factory=list)


def _as_list(value: Any, field_name: str) -> List[Any]:
    """Return a JSON array field, treating a missing or null value as empty."""
    if not value:
        return []
    if not isinstance(value, list):
        raise WorklogFormatError(f'{field_name} must be a list, got {type(value).__name__}')
    return value


def _parse_item(raw: Dict[str, Any], default_color: str) -> MetricItem:
    fill_color = raw.get('fillColor')
    return MetricItem(
        count=str(raw.get('count', '')),
        label=str(raw.get('label', '')),
        fill_color=fill_color if isinstance(fill_color, str) and fill_color else default_color,
    )


def _parse_day(raw: Dict[str, Any], default_color: str) -> DayActivity:
    children = _as_list((raw.get('items') or {}).get('children'), 'items.children')
    return DayActivity(
        date=str(raw.get('date', '')),
        items=[_parse_item(item, default_color) for item in children],
    )


def parse_developer(raw: Dict[str, Any], default_color: str = FALLBACK_COLOR) -> Developer:
    """Build a Developer from one entry of AuthorWorklog.rows.

    Args:
        raw: Developer record as decoded from JSON
        default_color: Colour used for items without a fillColor

    Raises:
        WorklogFormatError: If the record is not a JSON object
    """
    if not isinstance(raw, dict):
        raise WorklogFormatError(f'Developer record must be an object, got {type(raw).__name__}')

    days = _as_list(raw.get('dayWiseActivity'), 'dayWiseActivity')
    try:
        return Developer(
            name=str(raw.get('name', '')),
            day_wise_activity=[_parse_day(day, default_color) for day in days],
        )
    except (AttributeError, TypeError) as e:
        raise WorklogFormatError(f"Malformed activity for developer {raw.get('name')!r}: {e}")


def parse_worklog(payload: Any, default_color: str = FALLBACK_COLOR) -> List[Developer]:
    """Extract the developer roster from a worklog payload.

    Args:
        payload: Decoded JSON response body
        default_color: Colour used for items without a fillColor

    Returns:
        Developers in payload order

    Raises:
        WorklogFormatError: If AuthorWorklog.rows is missing or not a list
    """
    if not isinstance(payload, dict):
        raise WorklogFormatError('Worklog payload must be a JSON object')

    worklog = payload.get('AuthorWorklog')
    if not isinstance(worklog, dict) or 'rows' not in worklog:
        raise WorklogFormatError('Worklog payload is missing AuthorWorklog.rows')

    rows = worklog['rows']
    if not isinstance(rows, list):
        raise WorklogFormatError('AuthorWorklog.rows must be a list')

    return [parse_developer(row, default_color) for row in rows]
