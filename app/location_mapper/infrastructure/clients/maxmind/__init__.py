"""MaxMind GeoIP2 client for infrastructure layer.

Public API (Package Level):
- MaxMindClient: Client for GeoIP2 database operations
- GeoLocationData: Dataclass for geolocation results

Usage:
    from location_mapper.infrastructure.services import get_maxmind_client

    with get_maxmind_client() as maxmind:
        opened = maxmind.open()
        result = maxmind.geolocate(ip_address="8.8.8.8")
        if result.is_success:
            print(result.data["city"])
"""

from location_mapper.infrastructure.clients.maxmind.client import (
    GeoLocationData,
    MaxMindClient,
)

__all__ = [
    "MaxMindClient",
    "GeoLocationData",
]
