#!/usr/bin/env python3
"""Generate a sample worklog payload for running the dashboard offline.

This script writes a JSON document with the same shape the activity
endpoint returns, for a handful of developers over the last week.

Usage:
    python scripts/generate_sample_worklog.py [output_file]

Then point the dashboard at it in ~/.worklog-dashboard/config.toml:

    [dashboard]
    data_url = "file:///home/you/.worklog-dashboard/sample_worklog.json"
"""

import json
import os
import random
import sys
from datetime import date, timedelta

# Label, display colour, typical daily range
METRICS = [
    ("PR Open", "#EF6B6B", (0, 3)),
    ("PR Merged", "#61CDBB", (0, 3)),
    ("Commits", "#FAC76E", (0, 12)),
    ("PR Reviewed", "#C2528B", (0, 5)),
    ("PR Comments", "#0396A6", (0, 15)),
    ("Incident Alerts", "#5F50A9", (0, 2)),
    ("Incidents Resolved", "#8F3519", (0, 2)),
]

DEVELOPERS = ["alice@example.com", "bob@example.com", "carol@example.com", "dave@example.com"]


def generate_sample_worklog(
    output_file: str = "~/.worklog-dashboard/sample_worklog.json",
    num_days: int = 7
) -> dict:
    """Generate and write a sample worklog.

    Args:
        output_file: Path to output JSON file
        num_days: Number of days of history per developer

    Returns:
        The generated payload
    """
    output_file = os.path.expanduser(output_file)
    os.makedirs(os.path.dirname(output_file), exist_ok=True)

    today = date.today()
    rows = []

    for name in DEVELOPERS:
        days = []
        for offset in range(num_days - 1, -1, -1):
            day = today - timedelta(days=offset)
            children = [
                {
                    "count": str(random.randint(low, high)),
                    "label": label,
                    "fillColor": color
                }
                for label, color, (low, high) in METRICS
            ]
            days.append({
                "date": day.isoformat(),
                "items": {"children": children}
            })
        rows.append({"name": name, "totalActivity": [], "dayWiseActivity": days})

    payload = {"AuthorWorklog": {"activityMeta": [], "rows": rows}}

    with open(output_file, 'w') as f:
        json.dump(payload, f, indent=2)

    print(f"Generated worklog for {len(rows)} developers over {num_days} days")
    print(f"Output: {output_file}")

    return payload


if __name__ == "__main__":
    if len(sys.argv) > 1:
        generate_sample_worklog(sys.argv[1])
    else:
        generate_sample_worklog()
