"""Chart visibility rules for the activity dashboard.

Two independent selections drive what is drawn: the developer ('All' or a
roster name) and the graph type ('All', 'Bar' or 'Line').
"""

from enum import Enum
from typing import List

from lib.aggregator import ALL_DEVELOPERS


class GraphType(str, Enum):
    """Graph type options offered in the sidebar."""
    ALL = "All"
    BAR = "Bar"
    LINE = "Line"


class ChartKind(str, Enum):
    """Charts the dashboard can draw, in the order they are rendered."""
    SUMMARY_BAR = "summary_bar"
    DEVELOPER_LINE = "developer_line"
    DEVELOPER_BAR = "developer_bar"


GRAPH_TYPE_LABELS = {
    GraphType.ALL: "All Graphs",
    GraphType.BAR: "Bar Chart",
    GraphType.LINE: "Line Chart",
}


def visible_charts(selected_developer: str, graph_type: str) -> List[ChartKind]:
    """Decide which charts to render.

    | developer | graph type | charts                              |
    |-----------|------------|-------------------------------------|
    | All       | Bar, All   | summary bar                         |
    | All       | Line       | none                                |
    | specific  | Bar        | summary bar, developer bar          |
    | specific  | Line       | developer line                      |
    | specific  | All        | summary bar, developer line and bar |

    An unrecognised graph type renders nothing.

    Args:
        selected_developer: 'All' or a developer name
        graph_type: 'All', 'Bar' or 'Line'

    Returns:
        Chart kinds in render order
    """
    try:
        graph = GraphType(graph_type)
    except ValueError:
        return []

    show_bar = graph in (GraphType.BAR, GraphType.ALL)
    show_line = graph in (GraphType.LINE, GraphType.ALL)
    specific = selected_developer != ALL_DEVELOPERS

    charts = []
    if show_bar:
        charts.append(ChartKind.SUMMARY_BAR)
    if show_line and specific:
        charts.append(ChartKind.DEVELOPER_LINE)
    if show_bar and specific:
        charts.append(ChartKind.DEVELOPER_BAR)
    return charts
