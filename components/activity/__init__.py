"""Activity chart components.

Plotly charts for the developer activity dashboard: the aggregate metric
totals and the per-developer daily line and bar charts.
"""

from .summary_bar_chart import render as summary_bar_chart
from .developer_charts import render_line as developer_line_chart
from .developer_charts import render_bar as developer_bar_chart
from .totals_table import render as totals_table

__all__ = [
    'summary_bar_chart',
    'developer_line_chart',
    'developer_bar_chart',
    'totals_table'
]
