"""Literal datasets behind the dashboard panels.

The tuples below are the single source of truth; the ``*_frame`` helpers
return fresh DataFrames on every call.
"""

from __future__ import annotations

from datetime import date
from typing import NamedTuple

import pandas as pd

from pulse.core.util import format_billions, format_percent


class MetricRecord(NamedTuple):
    identifier: int
    label: str
    value: float


class SeriesPoint(NamedTuple):
    period: int
    value: float


class EventMarker(NamedTuple):
    date: date
    description: str


class ValueBox(NamedTuple):
    value: str
    caption: str
    icon: str


METRICS: tuple[MetricRecord, ...] = (
    MetricRecord(1, "Revenue", 324.2),
    MetricRecord(2, "Profit", 22.4),
    MetricRecord(3, "Market Share", 15.0),
    MetricRecord(4, "Patient Satisfaction", 92.0),
    MetricRecord(5, "Membership Growth", 5.2),
)

REVENUE: tuple[SeriesPoint, ...] = (
    SeriesPoint(2018, 226.2),
    SeriesPoint(2019, 240.1),
    SeriesPoint(2020, 255.6),
    SeriesPoint(2021, 287.6),
    SeriesPoint(2022, 324.2),
    SeriesPoint(2023, 360.0),
)

SATISFACTION: tuple[SeriesPoint, ...] = (
    SeriesPoint(2019, 88),
    SeriesPoint(2020, 89),
    SeriesPoint(2021, 90),
    SeriesPoint(2022, 91),
    SeriesPoint(2023, 92),
)

EVENTS: tuple[EventMarker, ...] = (
    EventMarker(date(2025, 2, 13), "Medicare billing probe reported"),
    EventMarker(date(2025, 4, 16), "Senate inquiry into coding practices"),
    EventMarker(date(2025, 4, 17), "Guidance cut, shares fall"),
)

# Satisfaction is drawn at this multiple so it shares the revenue axis.
SATISFACTION_SCALE = 3

ANALYSIS_BOXES: tuple[ValueBox, ...] = (
    ValueBox("7.2%", "CAGR", "icon.svg"),
    ValueBox("$1.8B", "Operational Savings", "icon.svg"),
)


def _metric(label: str) -> float:
    for record in METRICS:
        if record.label == label:
            return record.value
    raise KeyError(label)


def overview_boxes() -> tuple[ValueBox, ...]:
    """Summary strings for the overview panel, derived from the metric records."""
    return (
        ValueBox(format_billions(_metric("Revenue")), "Revenue", "icon.svg"),
        ValueBox(format_percent(_metric("Membership Growth")), "Membership Growth", "icon.svg"),
        ValueBox(format_percent(_metric("Patient Satisfaction")), "Patient Satisfaction", "icon.svg"),
    )


def metrics_frame() -> pd.DataFrame:
    return pd.DataFrame(
        [record._asdict() for record in METRICS],
        columns=list(MetricRecord._fields),
    )


def revenue_frame() -> pd.DataFrame:
    return pd.DataFrame(REVENUE, columns=["year", "revenue"])


def satisfaction_frame() -> pd.DataFrame:
    return pd.DataFrame(SATISFACTION, columns=["year", "satisfaction"])


def events_frame() -> pd.DataFrame:
    frame = pd.DataFrame(EVENTS, columns=["date", "description"])
    frame["date"] = pd.to_datetime(frame["date"])
    return frame


def overview_frame() -> pd.DataFrame:
    """Revenue and scaled satisfaction by year, 2018 onwards.

    Years without a satisfaction reading carry NaN.
    """
    merged = revenue_frame().merge(satisfaction_frame(), on="year", how="left")
    merged["satisfaction_scaled"] = merged["satisfaction"] * SATISFACTION_SCALE
    return merged
