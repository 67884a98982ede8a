"""Feature settings __init__ - exports all feature settings."""

from location_mapper.infrastructure.configuration.features.threat_map import (
    ThreatMapSettings,
)

__all__ = [
    "ThreatMapSettings",
]
