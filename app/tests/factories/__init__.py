"""Test data factories for deterministic test data generation."""

from tests.factories.geoip import make_city_response, make_threat_sources

__all__ = [
    "make_city_response",
    "make_threat_sources",
]
