"""Panel renderers and the figures they build."""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest
from dash import dash_table, dcc

from conftest import find, texts
from pulse.core.data import DataSource, DemoSource, PriceDataUnavailable
from pulse.core.sections import DEFAULT_SECTION, SECTIONS, Section
from pulse.core.settings import load_settings
from pulse.web import render_section
from pulse.web.components import HIGHLIGHT
from pulse.web.pages import analysis, investigations, metrics, overview, stock


class RecordingSource(DataSource):
    def __init__(self) -> None:
        self.calls: list[tuple[str, int, date | None]] = []

    def get_ohlc(self, symbol: str, days: int = 30, today: date | None = None) -> pd.DataFrame:
        self.calls.append((symbol, days, today))
        return DemoSource().get_ohlc(symbol, days=days, today=today)


TODAY = date(2025, 5, 30)


def fixed_clock() -> date:
    return TODAY


class FailingSource(DataSource):
    def get_ohlc(self, symbol: str, days: int = 30, today: date | None = None) -> pd.DataFrame:
        raise PriceDataUnavailable(f"No price data for {symbol}")


def test_stock_panel_plots_adjusted_close(cache, settings) -> None:
    source = RecordingSource()
    render, _ = stock.register(cache, source, settings, clock=fixed_clock)
    page = render()
    assert source.calls == [("UNH", 30, TODAY)]
    figure = find(page, "stock-graph").figure
    trace = figure.data[0]
    assert trace.mode == "lines"
    expected = DemoSource().get_ohlc("UNH", days=30, today=TODAY)
    assert list(trace.y) == pytest.approx(expected["adj_close"].tolist())
    assert figure.layout.yaxis.title.text == "Adjusted Close (USD)"


def test_stock_panel_caches_prices(cache, settings) -> None:
    source = RecordingSource()
    render, load_prices = stock.register(cache, source, settings, clock=fixed_clock)
    render()
    render()
    assert source.calls == [("UNH", 30, TODAY)]
    assert not load_prices("UNH", 30, TODAY).empty


def test_stock_window_follows_the_clock(cache) -> None:
    # A cached window must not outlive the day it was fetched for.
    days = iter([date(2025, 5, 30), date(2025, 5, 30), date(2025, 5, 31)])
    source = RecordingSource()
    long_lived = load_settings({"PULSE_CACHE_TIMEOUT": "86400", "PULSE_PRICE_SOURCE": "demo"})
    render, _ = stock.register(cache, source, long_lived, clock=lambda: next(days))
    render()
    render()
    render()
    assert [call[2] for call in source.calls] == [date(2025, 5, 30), date(2025, 5, 31)]


def test_stock_panel_degrades_when_fetch_fails(cache, settings, caplog) -> None:
    render, _ = stock.register(cache, FailingSource(), settings)
    page = render()
    assert page.className == "unavailable"
    assert "Stock data for UNH is currently unavailable." in texts(page)
    assert "Stock panel degraded" in caplog.text


def test_stock_panel_reports_empty_window(cache, settings) -> None:
    class EmptySource(DataSource):
        def get_ohlc(self, symbol, days=30, today=None):
            return pd.DataFrame(columns=["date", "adj_close"])

    render, _ = stock.register(cache, EmptySource(), settings)
    page = render()
    assert page.className == "unavailable"


def test_timeline_is_unconnected_labelled_points() -> None:
    figure = investigations.build_timeline_figure()
    trace = figure.data[0]
    assert trace.mode == "markers+text"
    assert "lines" not in trace.mode
    assert len(trace.x) == 3
    assert list(trace.text) == [
        "Medicare billing probe reported",
        "Senate inquiry into coding practices",
        "Guidance cut, shares fall",
    ]


def test_metrics_table_is_paginated_by_five() -> None:
    page = metrics.register()()
    table = find(page, "metrics-table")
    assert isinstance(table, dash_table.DataTable)
    assert table.page_size == 5
    assert len(table.data) == 5
    assert table.data[0] == {"identifier": 1, "label": "Revenue", "value": 324.2}


def test_revenue_figure() -> None:
    trace = analysis.build_revenue_figure().data[0]
    assert trace.mode == "lines+markers"
    assert list(trace.x) == [2018, 2019, 2020, 2021, 2022, 2023]
    assert list(trace.y) == [226.2, 240.1, 255.6, 287.6, 324.2, 360.0]


def test_satisfaction_figure_highlights_latest_year() -> None:
    trace = analysis.build_satisfaction_figure().data[0]
    assert trace.type == "bar"
    assert list(trace.y) == [88, 89, 90, 91, 92]
    colors = list(trace.marker.color)
    assert colors[-1] == HIGHLIGHT
    assert HIGHLIGHT not in colors[:-1]


def test_analysis_page_shows_value_boxes(asset_url) -> None:
    page = analysis.register(asset_url)()
    strings = texts(page)
    assert "7.2%" in strings
    assert "$1.8B" in strings
    assert "Operational Savings" in strings
    assert isinstance(find(page, "revenue-graph"), dcc.Graph)
    assert isinstance(find(page, "satisfaction-graph"), dcc.Graph)


def test_overview_secondary_axis_reads_unscaled_satisfaction() -> None:
    figure = overview.build_overview_figure()
    revenue, satisfaction, anchor = figure.data
    assert list(revenue.y) == [226.2, 240.1, 255.6, 287.6, 324.2, 360.0]
    assert [value for value in satisfaction.y if value == value] == [264, 267, 270, 273, 276]
    assert anchor.yaxis == "y2"
    axis = figure.layout.yaxis2
    assert axis.overlaying == "y"
    assert axis.side == "right"
    assert tuple(axis.range) == tuple(figure.layout.yaxis.range)
    for value, label in zip(axis.tickvals, axis.ticktext):
        assert value / 3 == float(label)


def test_secondary_ticks() -> None:
    tickvals, ticktext = overview.secondary_ticks(212, 374)
    assert ticktext == ["80", "90", "100", "110", "120"]
    assert tickvals == [240, 270, 300, 330, 360]


def test_overview_page_shows_three_boxes(asset_url) -> None:
    page = overview.register(asset_url)()
    strings = texts(page)
    for value in ("$324.2B", "5.2%", "92%"):
        assert value in strings
    assert isinstance(find(page, "overview-graph"), dcc.Graph)


def test_every_section_has_a_renderer(cache, settings, asset_url) -> None:
    source = RecordingSource()
    stock_render, _ = stock.register(cache, source, settings, clock=fixed_clock)
    renderers = {
        Section.STOCK_IMPACT: stock_render,
        Section.INVESTIGATIONS: investigations.register(),
        Section.DATA: metrics.register(),
        Section.ANALYSIS: analysis.register(asset_url),
        Section.METRICS_OVERVIEW: overview.register(asset_url),
    }
    for section in SECTIONS:
        assert render_section(renderers, section.value) is not None
    assert texts(render_section(renderers, "Elsewhere")) == ["Not Found"]


def test_default_section_fetches_stock_data(cache, settings) -> None:
    source = RecordingSource()
    stock_render, _ = stock.register(cache, source, settings, clock=fixed_clock)
    render_section({DEFAULT_SECTION: stock_render}, DEFAULT_SECTION.value)
    assert source.calls == [(settings.ticker, settings.lookback_days, TODAY)]
