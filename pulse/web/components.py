"""Shared building blocks for the dashboard pages."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import plotly.graph_objects as go
from dash import html

from pulse.core.datasets import ValueBox

ACCENT = "#1f77b4"
HIGHLIGHT = "#d62728"


def style_figure(figure: go.Figure, title: str, height: int = 420) -> go.Figure:
    figure.update_layout(
        template="plotly_white",
        margin=dict(l=30, r=30, t=50, b=30),
        height=height,
        title=title,
    )
    return figure


def value_box(box: ValueBox, asset_url: Callable[[str], str]) -> html.Div:
    """Render a summary card with an icon, a headline value and a caption."""
    return html.Div(
        [
            html.Img(src=asset_url(box.icon), className="value-box-icon", alt=""),
            html.Div(
                [
                    html.Div(box.value, className="value-box-value"),
                    html.Div(box.caption, className="value-box-caption"),
                ]
            ),
        ],
        className="value-box",
    )


def value_box_row(boxes: Iterable[ValueBox], asset_url: Callable[[str], str]) -> html.Div:
    return html.Div([value_box(box, asset_url) for box in boxes], className="value-box-row")


def unavailable(message: str) -> html.Div:
    return html.Div([html.H4("Data unavailable"), html.P(message)], className="unavailable")
