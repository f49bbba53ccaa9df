"""Investigations tab: dated events on a timeline."""

from __future__ import annotations

import plotly.graph_objects as go
from dash import dcc, html

from pulse.core.datasets import events_frame
from pulse.web.components import HIGHLIGHT, style_figure


def build_timeline_figure() -> go.Figure:
    """Plot each event as a marker with its label beside it, unconnected."""
    frame = events_frame()
    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=frame["date"],
            y=[1] * len(frame),
            mode="markers+text",
            text=frame["description"],
            textposition="top right",
            marker=dict(size=14, color=HIGHLIGHT),
            name="Events",
            hovertemplate="%{x|%Y-%m-%d}<br>%{text}<extra></extra>",
        )
    )
    style_figure(figure, "Investigation Timeline", height=360)
    figure.update_yaxes(visible=False, range=[0.5, 1.8])
    figure.update_xaxes(title_text="Date")
    figure.update_layout(showlegend=False)
    return figure


def register():
    """Return an investigations page renderer."""

    def render() -> html.Div:
        return html.Div(
            [
                html.H3("Investigations"),
                dcc.Graph(id="timeline-graph", figure=build_timeline_figure()),
            ]
        )

    return render
