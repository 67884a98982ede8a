"""Aggregate threat source counts by city location for dashboard maps."""

__version__ = "0.1.0"
