"""Metrics overview tab: headline boxes and a revenue/satisfaction overlay."""

from __future__ import annotations

import math
from collections.abc import Callable

import plotly.graph_objects as go
from dash import dcc, html

from pulse.core.datasets import SATISFACTION_SCALE, overview_boxes, overview_frame
from pulse.web.components import ACCENT, HIGHLIGHT, style_figure, value_box_row

SECONDARY_TICK_STEP = 10


def _axis_range(values: list[float]) -> tuple[float, float]:
    low, high = min(values), max(values)
    pad = (high - low) * 0.1 or 1.0
    return math.floor(low - pad), math.ceil(high + pad)


def secondary_ticks(low: float, high: float) -> tuple[list[float], list[str]]:
    """Tick positions on the shared scale and their unscaled labels."""
    first = math.ceil(low / SATISFACTION_SCALE / SECONDARY_TICK_STEP) * SECONDARY_TICK_STEP
    last = math.floor(high / SATISFACTION_SCALE)
    labels = list(range(first, last + 1, SECONDARY_TICK_STEP))
    return [label * SATISFACTION_SCALE for label in labels], [str(label) for label in labels]


def build_overview_figure() -> go.Figure:
    """Revenue and satisfaction on one axis; the right axis reads satisfaction."""
    frame = overview_frame()
    plotted = frame["revenue"].tolist() + frame["satisfaction_scaled"].dropna().tolist()
    low, high = _axis_range(plotted)
    tickvals, ticktext = secondary_ticks(low, high)

    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=frame["year"],
            y=frame["revenue"],
            mode="lines+markers",
            name="Revenue ($B)",
            line=dict(color=ACCENT),
        )
    )
    figure.add_trace(
        go.Scatter(
            x=frame["year"],
            y=frame["satisfaction_scaled"],
            mode="lines+markers",
            name="Satisfaction (%)",
            line=dict(color=HIGHLIGHT, dash="dash"),
            customdata=frame["satisfaction"],
            hovertemplate="%{x}: %{customdata}%<extra>Satisfaction</extra>",
        )
    )
    # Invisible twin that anchors the right-hand axis.
    figure.add_trace(
        go.Scatter(
            x=frame["year"],
            y=frame["satisfaction_scaled"],
            yaxis="y2",
            mode="lines",
            line=dict(width=0),
            showlegend=False,
            hoverinfo="skip",
        )
    )
    style_figure(figure, "Revenue vs Patient Satisfaction", height=460)
    figure.update_layout(
        xaxis=dict(title="Year", dtick=1),
        yaxis=dict(title="Revenue ($B)", range=[low, high]),
        yaxis2=dict(
            title="Satisfaction (%)",
            overlaying="y",
            side="right",
            range=[low, high],
            tickmode="array",
            tickvals=tickvals,
            ticktext=ticktext,
            showgrid=False,
        ),
        legend=dict(orientation="h", y=-0.2),
    )
    return figure


def register(asset_url: Callable[[str], str]):
    """Return a metrics overview renderer."""

    def render() -> html.Div:
        return html.Div(
            [
                html.H3("Metrics Overview"),
                value_box_row(overview_boxes(), asset_url),
                dcc.Graph(id="overview-graph", figure=build_overview_figure()),
            ]
        )

    return render
