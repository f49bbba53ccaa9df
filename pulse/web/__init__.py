"""Dash web module wiring."""

from __future__ import annotations

import logging
from collections.abc import Callable

from dash import Dash, Input, Output, State, ctx, html
from flask_caching import Cache

from pulse.core.data import DataSource
from pulse.core.sections import DROPDOWN, TABS, Section, UnknownSectionError
from pulse.core.settings import Settings
from pulse.web.layout import PAGE, STORE
from pulse.web.pages import analysis, investigations, metrics, overview, stock
from pulse.web.sync import reconcile_controls

LOGGER = logging.getLogger(__name__)


def build_renderers(
    app: Dash, cache: Cache, source: DataSource, settings: Settings
) -> dict[Section, Callable[[], html.Div]]:
    """Map every section onto its page renderer."""
    stock_renderer, _ = stock.register(cache, source, settings)
    return {
        Section.STOCK_IMPACT: stock_renderer,
        Section.INVESTIGATIONS: investigations.register(),
        Section.DATA: metrics.register(),
        Section.ANALYSIS: analysis.register(app.get_asset_url),
        Section.METRICS_OVERVIEW: overview.register(app.get_asset_url),
    }


def register(app: Dash, cache: Cache, source: DataSource, settings: Settings) -> None:
    """Register callbacks and page renderers with the Dash app."""

    renderers = build_renderers(app, cache, source, settings)

    @app.callback(  # type: ignore[misc]
        Output(DROPDOWN, "value"),
        Output(TABS, "value"),
        Output(STORE, "data"),
        Input(DROPDOWN, "value"),
        Input(TABS, "value"),
        State(STORE, "data"),
    )
    def _sync_section(dropdown_value, tab_value, stored):
        return reconcile_controls(ctx.triggered_id, dropdown_value, tab_value, stored)

    @app.callback(  # type: ignore[misc]
        Output(PAGE, "children"),
        Input(STORE, "data"),
    )
    def _render_page(section: str | None):
        return render_section(renderers, section)


def render_section(renderers: dict[Section, Callable[[], html.Div]], section: object) -> html.Div:
    try:
        key = Section.parse(section)
    except UnknownSectionError:
        return html.Div("Not Found")
    LOGGER.debug("Rendering section %s", key.value)
    return renderers[key]()
