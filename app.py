"""Dash application entry point for the Pulse dashboard."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dash import Dash
from flask import Flask, jsonify
from flask_caching import Cache

from pulse import web
from pulse.core.data import load_source
from pulse.core.logging import setup_logger
from pulse.core.settings import load_env_file, load_settings
from pulse.web.layout import make_layout

ASSETS_DIR = Path(__file__).resolve().parent / "pulse" / "web" / "assets"

load_env_file()
settings = load_settings()
setup_logger(settings)
LOGGER = logging.getLogger("pulse")

server = Flask(__name__)
cache = Cache(
    server,
    config={
        "CACHE_TYPE": "SimpleCache",
        "CACHE_DEFAULT_TIMEOUT": settings.cache_timeout,
    },
)


def _create_dash_app(flask_server: Flask) -> Dash:
    return Dash(
        __name__,
        server=flask_server,
        assets_folder=str(ASSETS_DIR),
        suppress_callback_exceptions=True,
        title="Pulse Dashboard",
    )


@server.get("/health")
def healthcheck() -> Any:
    """Return a basic health payload."""
    return jsonify({"ok": True, "ticker": settings.ticker})


app = _create_dash_app(server)
source = load_source(settings.price_source)
app.layout = make_layout(app, settings)
web.register(app, cache, source, settings)
LOGGER.info(
    "Dashboard ready: ticker=%s lookback=%sd source=%s",
    settings.ticker,
    settings.lookback_days,
    settings.price_source,
)


def main() -> None:
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
