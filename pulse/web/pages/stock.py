"""Stock impact tab: trailing adjusted-close prices for the tracked ticker."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

import pandas as pd
import plotly.graph_objects as go
from dash import dcc, html
from flask_caching import Cache

from pulse.core.data import DataSource, PriceDataUnavailable
from pulse.core.settings import Settings
from pulse.web.components import ACCENT, style_figure, unavailable

LOGGER = logging.getLogger(__name__)


def build_stock_figure(frame: pd.DataFrame, symbol: str) -> go.Figure:
    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=frame["date"],
            y=frame["adj_close"],
            mode="lines",
            name=symbol,
            line=dict(color=ACCENT),
        )
    )
    style_figure(figure, f"{symbol} Adjusted Close", height=520)
    figure.update_xaxes(title_text="Date")
    figure.update_yaxes(title_text="Adjusted Close (USD)")
    return figure


def register(
    cache: Cache,
    source: DataSource,
    settings: Settings,
    clock: Callable[[], date] = date.today,
):
    """Register the price loader and return a renderer and the loader.

    The loader is memoized per ``(symbol, days, today)`` so the trailing
    window moves forward with ``clock`` even while older entries are cached.
    """

    @cache.memoize(timeout=settings.cache_timeout)
    def load_prices(symbol: str, days: int, today: date) -> pd.DataFrame:
        frame = pd.DataFrame(source.get_ohlc(symbol, days=days, today=today)).copy()
        if not frame.empty:
            frame.sort_values("date", inplace=True)
        return frame

    def render() -> html.Div:
        symbol = settings.ticker
        try:
            frame = load_prices(symbol, settings.lookback_days, clock())
        except PriceDataUnavailable as exc:
            LOGGER.warning("Stock panel degraded for %s: %s", symbol, exc)
            return unavailable(f"Stock data for {symbol} is currently unavailable.")
        if frame.empty:
            return unavailable(f"No price data for {symbol} in the last {settings.lookback_days} days.")
        return html.Div(
            [
                html.H3(f"{symbol}: last {settings.lookback_days} days"),
                dcc.Graph(id="stock-graph", figure=build_stock_figure(frame, symbol)),
            ]
        )

    return render, load_prices
