"""Application logging configuration."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pulse.core.settings import Settings

LOG_FILE_NAME = "pulse.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logger(settings: Settings) -> Path:
    """Route the root logger to a rotating file under ``settings.log_dir`` and the console.

    Returns the path of the active log file.
    """
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = settings.log_dir / LOG_FILE_NAME

    formatter = logging.Formatter(LOG_FORMAT)
    rotating = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    console = logging.StreamHandler()
    for handler in (rotating, console):
        handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(settings.log_level)
    root.addHandler(rotating)
    root.addHandler(console)
    return log_file
