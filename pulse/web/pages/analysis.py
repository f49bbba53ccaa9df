"""Analysis tab: revenue and satisfaction trends with headline figures."""

from __future__ import annotations

from collections.abc import Callable

import plotly.graph_objects as go
from dash import dcc, html

from pulse.core.datasets import ANALYSIS_BOXES, revenue_frame, satisfaction_frame
from pulse.web.components import ACCENT, HIGHLIGHT, style_figure, value_box_row


def build_revenue_figure() -> go.Figure:
    frame = revenue_frame()
    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=frame["year"],
            y=frame["revenue"],
            mode="lines+markers",
            name="Revenue",
            line=dict(color=ACCENT),
        )
    )
    style_figure(figure, "Revenue by Year ($B)")
    figure.update_xaxes(title_text="Year", dtick=1)
    figure.update_yaxes(title_text="Revenue ($B)")
    return figure


def build_satisfaction_figure() -> go.Figure:
    """Bar per year; the most recent year is drawn in the highlight colour."""
    frame = satisfaction_frame()
    latest = frame["year"].max()
    colors = [HIGHLIGHT if year == latest else ACCENT for year in frame["year"]]
    figure = go.Figure()
    figure.add_trace(
        go.Bar(
            x=frame["year"],
            y=frame["satisfaction"],
            marker_color=colors,
            name="Satisfaction",
        )
    )
    style_figure(figure, "Patient Satisfaction (%)")
    figure.update_xaxes(title_text="Year", dtick=1)
    figure.update_yaxes(title_text="Satisfaction (%)")
    return figure


def register(asset_url: Callable[[str], str]):
    """Return an analysis page renderer."""

    def render() -> html.Div:
        return html.Div(
            [
                html.H3("Analysis"),
                value_box_row(ANALYSIS_BOXES, asset_url),
                html.Div(
                    [
                        dcc.Graph(id="revenue-graph", figure=build_revenue_figure()),
                        dcc.Graph(id="satisfaction-graph", figure=build_satisfaction_figure()),
                    ],
                    className="chart-grid",
                ),
            ]
        )

    return render
