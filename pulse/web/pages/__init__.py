"""Page registry exports."""

from . import analysis, investigations, metrics, overview, stock  # noqa: F401

__all__ = [
    "analysis",
    "investigations",
    "metrics",
    "overview",
    "stock",
]
