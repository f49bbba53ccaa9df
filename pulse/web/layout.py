"""Layout primitives for the Dash application."""

from __future__ import annotations

from dash import Dash, dcc, html

from pulse.core.sections import DEFAULT_SECTION, DROPDOWN, SECTIONS, TABS
from pulse.core.settings import Settings

STORE = "section"
PAGE = "page"


def make_layout(app: Dash, settings: Settings) -> html.Div:
    """Return the root Dash layout."""
    return html.Div(
        [
            html.Header(
                [
                    html.Img(src=app.get_asset_url("logo.svg"), className="logo", alt="Pulse"),
                    html.Div(
                        [
                            html.H1("Pulse Dashboard"),
                            html.P(f"Market and operating picture for {settings.ticker}."),
                        ]
                    ),
                    dcc.Dropdown(
                        id=DROPDOWN,
                        options=[{"label": section.value, "value": section.value} for section in SECTIONS],
                        value=DEFAULT_SECTION.value,
                        clearable=False,
                        searchable=False,
                        className="section-select",
                    ),
                ],
                className="header",
            ),
            dcc.Tabs(
                id=TABS,
                value=DEFAULT_SECTION.value,
                children=[dcc.Tab(label=section.value, value=section.value) for section in SECTIONS],
            ),
            dcc.Store(id=STORE, storage_type="memory", data=DEFAULT_SECTION.value),
            html.Div(id=PAGE, className="tab-content"),
        ]
    )
