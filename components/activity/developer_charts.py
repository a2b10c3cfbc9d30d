"""Developer Time Series Chart Components.

Day-by-day activity for a single developer, drawn either as lines or as
grouped bars. One series per metric label, coloured with the label's
fillColor from the worklog.
"""

from typing import Dict, List, Optional

import streamlit as st
import plotly.graph_objects as go

from lib.aggregator import build_time_series, series_labels
from lib.models import Developer, parse_count


def _series_values(rows: List[Dict[str, str]], label: str) -> List[Optional[int]]:
    """Integer values of one label across the rows, None where it is absent."""
    return [parse_count(row[label]) if label in row else None for row in rows]


def _apply_layout(fig: go.Figure, title: str) -> None:
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
            title="Date",
            type='category',
            showgrid=True,
            gridcolor='#1a1a1a',
            linecolor='#5FAF87'
        ),
        yaxis=dict(
            title="Count",
            showgrid=True,
            gridcolor='#1a1a1a',
            linecolor='#5FAF87'
        ),
        height=400,
        hovermode='x unified',
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="right",
            x=1,
            bgcolor="rgba(0,0,0,0.5)",
            bordercolor="#5FAF87",
            borderwidth=1
        ),
        margin=dict(l=50, r=50, t=80, b=50)
    )


def build_line_figure(developer: Developer) -> go.Figure:
    """Build the per-day line chart for one developer."""
    rows = build_time_series(developer)
    dates = [row['date'] for row in rows]

    fig = go.Figure()
    for label, color in series_labels(developer):
        fig.add_trace(go.Scatter(
            x=dates,
            y=_series_values(rows, label),
            name=label,
            line=dict(color=color, width=2, shape='spline'),
            mode='lines+markers',
            marker=dict(size=6),
            hovertemplate=f'<b>{label}</b>: %{{y}}<extra></extra>'
        ))

    _apply_layout(fig, f"Daily Activity: {developer.name}")
    return fig


def build_bar_figure(developer: Developer) -> go.Figure:
    """Build the per-day grouped bar chart for one developer."""
    rows = build_time_series(developer)
    dates = [row['date'] for row in rows]

    fig = go.Figure()
    for label, color in series_labels(developer):
        fig.add_trace(go.Bar(
            x=dates,
            y=_series_values(rows, label),
            name=label,
            marker=dict(color=color),
            hovertemplate=f'<b>{label}</b>: %{{y}}<extra></extra>'
        ))

    _apply_layout(fig, f"Daily Breakdown: {developer.name}")
    fig.update_layout(barmode='group')
    return fig


def render_line(developer: Developer) -> None:
    """Render the per-day line chart."""
    st.plotly_chart(build_line_figure(developer), use_container_width=True)


def render_bar(developer: Developer) -> None:
    """Render the per-day bar chart."""
    st.plotly_chart(build_bar_figure(developer), use_container_width=True)
