"""Integration settings __init__ - exports all integration settings."""

from location_mapper.infrastructure.configuration.integrations.maxmind import (
    MaxMindSettings,
)

__all__ = [
    "MaxMindSettings",
]
