"""Pulse dashboard package."""
