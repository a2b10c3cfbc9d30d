"""Developer Totals Table Component.

Per-developer totals for the seven tracked metrics, shown under the
summary bar chart as a sortable dataframe.
"""

from typing import Sequence

import pandas as pd
import streamlit as st

from lib.aggregator import METRIC_LABELS, total_for_metric
from lib.models import Developer


def build_frame(roster: Sequence[Developer]) -> pd.DataFrame:
    """One row per developer, one column per metric, in roster order."""
    rows = []
    for developer in roster:
        row = {"Developer": developer.name}
        for label in METRIC_LABELS:
            row[label] = total_for_metric(developer, label)
        rows.append(row)
    return pd.DataFrame(rows, columns=["Developer"] + METRIC_LABELS)


def render(roster: Sequence[Developer]) -> None:
    """Render the totals table inside a collapsed expander."""
    df = build_frame(roster)

    with st.expander("Developer totals"):
        st.dataframe(
            df,
            use_container_width=True,
            hide_index=True,
            column_config={
                "Developer": st.column_config.TextColumn("Developer", width="medium"),
                **{
                    label: st.column_config.NumberColumn(label, format="%d")
                    for label in METRIC_LABELS
                },
            },
        )
