"""Runtime configuration read from the environment and an optional .env file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, load_dotenv

ENV_PATH = Path(".env")

_ON_VALUES = {"1", "true", "yes", "y", "on"}
MAX_PORT = 65535


class SettingsError(ValueError):
    """Raised when a configuration value cannot be interpreted."""


def flag(name: str, default: str = "0", env: Mapping[str, str] | None = None) -> bool:
    """Return True when the variable resolves to an on-value."""
    source = os.environ if env is None else env
    return (source.get(name, default) or "").strip().lower() in _ON_VALUES


def _int(
    env: Mapping[str, str], name: str, default: int, minimum: int, maximum: int | None = None
) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise SettingsError(f"{name} must be an integer, got {raw!r}.") from exc
    if value < minimum:
        raise SettingsError(f"{name} must be >= {minimum}, got {value}.")
    if maximum is not None and value > maximum:
        raise SettingsError(f"{name} must be <= {maximum}, got {value}.")
    return value


@dataclass(frozen=True)
class Settings:
    ticker: str = "UNH"
    lookback_days: int = 30
    price_source: str = "yfinance"
    cache_timeout: int = 300
    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = False
    log_level: str = "INFO"
    log_dir: Path = Path("logs")


def load_env_file(path: Path = ENV_PATH) -> Mapping[str, str | None]:
    """Load key/value pairs from the local environment file into ``os.environ``."""
    if not path.exists():
        return {}
    load_dotenv(path, override=False)
    return dotenv_values(path)


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``env`` (defaults to the process environment)."""
    source = os.environ if env is None else env
    ticker = (source.get("PULSE_TICKER") or Settings.ticker).strip().upper()
    price_source = (source.get("PULSE_PRICE_SOURCE") or Settings.price_source).strip().lower()
    return Settings(
        ticker=ticker,
        lookback_days=_int(source, "PULSE_LOOKBACK_DAYS", Settings.lookback_days, 1),
        price_source=price_source,
        cache_timeout=_int(source, "PULSE_CACHE_TIMEOUT", Settings.cache_timeout, 1),
        host=(source.get("PULSE_HOST") or Settings.host).strip(),
        port=_int(source, "PULSE_PORT", Settings.port, 1, MAX_PORT),
        debug=flag("PULSE_DEBUG", "0", env=source),
        log_level=(source.get("LOG_LEVEL") or Settings.log_level).strip().upper(),
        log_dir=Path(source.get("PULSE_LOG_DIR") or Settings.log_dir),
    )
