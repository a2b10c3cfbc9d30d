"""Summary Bar Chart Component.

Totals for the seven tracked metrics, either across the whole team or for
the selected developer.
"""

from typing import Dict, List, Union

import streamlit as st
import plotly.graph_objects as go

from lib.aggregator import ALL_DEVELOPERS


def build_figure(
    rows: List[Dict[str, Union[str, int]]],
    selection: str = ALL_DEVELOPERS,
    color: str = "#8884d8"
) -> go.Figure:
    """Build the aggregate bar chart.

    Args:
        rows: Output of build_summary_rows ({'name', 'value'} per metric)
        selection: 'All' or the developer the totals belong to
        color: Bar fill colour

    Returns:
        Plotly figure with one bar per metric
    """
    if selection == ALL_DEVELOPERS:
        title = "Team Activity Totals"
    else:
        title = f"Activity Totals: {selection}"

    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=[row['name'] for row in rows],
        y=[row['value'] for row in rows],
        name="value",
        marker=dict(color=color),
        hovertemplate='<b>%{x}</b><br>' +
                      'Total: %{y}<br>' +
                      '<extra></extra>'
    ))

    fig.update_layout(
        title={
            'text': title,
            'font': {'size': 20, 'color': '#87D7AF'}
        },
        template="plotly_dark",
        paper_bgcolor="#000000",
        plot_bgcolor="#000000",
        font=dict(color="#87D7AF", family="monospace"),
        xaxis=dict(
            title="Metric",
            showgrid=False,
            linecolor='#5FAF87'
        ),
        yaxis=dict(
            title="Count",
            showgrid=True,
            gridcolor='#1a1a1a',
            griddash='dash',
            linecolor='#5FAF87'
        ),
        height=400,
        showlegend=True,
        margin=dict(l=50, r=50, t=80, b=50)
    )

    return fig


def render(rows: List[Dict[str, Union[str, int]]], selection: str = ALL_DEVELOPERS, color: str = "#8884d8") -> None:
    """Render the aggregate bar chart."""
    st.plotly_chart(build_figure(rows, selection, color), use_container_width=True)
