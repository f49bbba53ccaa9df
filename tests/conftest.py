"""Shared fixtures and helpers for the dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask_caching import Cache

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pulse.core.settings import Settings  # noqa: E402


def walk(component):
    """Yield ``component`` and every Dash component nested below it."""
    if component is None or isinstance(component, (str, int, float)):
        return
    if isinstance(component, (list, tuple)):
        for child in component:
            yield from walk(child)
        return
    yield component
    yield from walk(getattr(component, "children", None))


def find(component, component_id: str):
    for node in walk(component):
        if getattr(node, "id", None) == component_id:
            return node
    raise LookupError(component_id)


def texts(component) -> list[str]:
    """Collect every literal string in the tree."""
    found: list[str] = []
    for node in walk(component):
        children = getattr(node, "children", None)
        if isinstance(children, str):
            found.append(children)
    return found


@pytest.fixture()
def cache() -> Cache:
    server = Flask(__name__)
    return Cache(server, config={"CACHE_TYPE": "SimpleCache"})


@pytest.fixture()
def settings() -> Settings:
    return Settings(ticker="UNH", lookback_days=30, price_source="demo")


@pytest.fixture()
def asset_url():
    return lambda path: f"/assets/{path}"
