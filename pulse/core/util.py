"""Miscellaneous helpers used across the app."""

from __future__ import annotations

from datetime import date, timedelta


def trailing_window(days: int, today: date | None = None) -> tuple[date, date]:
    """Return the ``(start, end)`` dates covering the last ``days`` days."""
    if days < 1:
        raise ValueError("Lookback window must be at least one day.")
    end = today or date.today()
    return end - timedelta(days=days), end


def format_billions(value: float) -> str:
    return f"${value:,.1f}B"


def format_percent(value: float) -> str:
    """Render a percentage, dropping the decimals for whole numbers."""
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value:.1f}%"
