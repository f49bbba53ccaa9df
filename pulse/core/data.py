"""Market-data access layer for the stock panel."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

import numpy as np
import pandas as pd
import yfinance as yf

from pulse.core.util import trailing_window

LOGGER = logging.getLogger(__name__)

PRICE_COLUMNS = ["date", "open", "high", "low", "close", "adj_close", "volume"]

_YF_COLUMNS = {
    "Date": "date",
    "Datetime": "date",
    "Open": "open",
    "High": "high",
    "Low": "low",
    "Close": "close",
    "Adj Close": "adj_close",
    "Volume": "volume",
}


class PriceDataUnavailable(RuntimeError):
    """Raised when no price series can be produced for a symbol."""


@dataclass
class DataSource:
    """Interface for retrieving daily prices for the UI."""

    def get_ohlc(self, symbol: str, days: int = 30, today: date | None = None) -> pd.DataFrame:  # pragma: no cover
        raise NotImplementedError


def normalize_history(raw: pd.DataFrame) -> pd.DataFrame:
    """Map a yfinance history frame onto :data:`PRICE_COLUMNS`."""
    frame = raw.reset_index().rename(columns=_YF_COLUMNS)
    if "adj_close" not in frame.columns and "close" in frame.columns:
        frame["adj_close"] = frame["close"]
    missing = [col for col in PRICE_COLUMNS if col not in frame.columns]
    if missing:
        raise PriceDataUnavailable(f"Price history is missing columns: {', '.join(missing)}")
    frame = frame[PRICE_COLUMNS].copy()
    dates = pd.to_datetime(frame["date"])
    if dates.dt.tz is not None:
        dates = dates.dt.tz_localize(None)
    frame["date"] = dates.dt.normalize()
    frame = frame.dropna(subset=["date", "adj_close"]).sort_values("date")
    return frame.reset_index(drop=True)


class YFinanceSource(DataSource):
    """Daily prices from Yahoo Finance for a trailing window."""

    def get_ohlc(self, symbol: str, days: int = 30, today: date | None = None) -> pd.DataFrame:
        start, end = trailing_window(days, today)
        LOGGER.info("Fetching %s prices from %s to %s", symbol, start, end)
        try:
            raw = yf.Ticker(symbol).history(
                start=start.isoformat(),
                end=(end + timedelta(days=1)).isoformat(),
                interval="1d",
                auto_adjust=False,
                actions=False,
            )
        except Exception as exc:  # noqa: BLE001
            raise PriceDataUnavailable(f"Price download for {symbol} failed: {exc}") from exc
        if raw is None or raw.empty:
            raise PriceDataUnavailable(f"No price data for {symbol} between {start} and {end}")
        frame = normalize_history(raw)
        if frame.empty:
            raise PriceDataUnavailable(f"No price data for {symbol} between {start} and {end}")
        LOGGER.info("Fetched %d price rows for %s", len(frame), symbol)
        return frame


class DemoSource(DataSource):
    """Deterministic generated prices used offline and in tests."""

    def get_ohlc(self, symbol: str, days: int = 30, today: date | None = None) -> pd.DataFrame:
        start, end = trailing_window(days, today)
        idx = pd.bdate_range(start=start, end=end)
        seed = sum(ord(ch) for ch in symbol)
        rng = np.random.default_rng(seed)
        base = rng.normal(loc=0.1, scale=1.5, size=len(idx)).cumsum() + 500
        close = base + rng.normal(0, 0.6, len(idx))
        return pd.DataFrame(
            {
                "date": idx,
                "open": base + rng.normal(0, 0.6, len(idx)),
                "high": base + rng.random(len(idx)) * 2,
                "low": base - rng.random(len(idx)) * 2,
                "close": close,
                "adj_close": close,
                "volume": rng.integers(1_000_000, 5_000_000, len(idx)),
            }
        )


SOURCES: dict[str, type[DataSource]] = {
    "yfinance": YFinanceSource,
    "demo": DemoSource,
}


def load_source(name: str = "yfinance") -> DataSource:
    """Return the data source registered under ``name``."""
    try:
        factory = SOURCES[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown price source {name!r}; expected one of {', '.join(sorted(SOURCES))}."
        ) from exc
    return factory()
