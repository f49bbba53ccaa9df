"""Core functionality for the Pulse dashboard."""

from . import data, datasets, logging, sections, settings, util

__all__ = [
    "data",
    "datasets",
    "logging",
    "sections",
    "settings",
    "util",
]
