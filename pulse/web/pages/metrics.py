"""Data tab: the fixed metric records as a paginated table."""

from __future__ import annotations

from dash import dash_table, html

from pulse.core.datasets import metrics_frame

PAGE_SIZE = 5

COLUMNS = [
    {"name": "ID", "id": "identifier"},
    {"name": "Metric", "id": "label"},
    {"name": "Value", "id": "value", "type": "numeric"},
]


def register():
    """Return a metrics table renderer."""

    def render() -> html.Div:
        frame = metrics_frame()
        return html.Div(
            [
                html.H3("Financial Metrics"),
                dash_table.DataTable(
                    id="metrics-table",
                    columns=COLUMNS,
                    data=frame.to_dict("records"),
                    page_size=PAGE_SIZE,
                    sort_action="native",
                    style_table={"overflowX": "auto"},
                ),
            ]
        )

    return render
