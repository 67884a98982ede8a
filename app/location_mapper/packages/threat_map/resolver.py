"""
Resolve source addresses to city-level locations.

Wraps the MaxMind client and applies the resolution policy of the pipeline:

- a missing city (or country) name is replaced with a placeholder
- missing coordinates, an address absent from the database, or an address
  the database cannot hold (IPv6 in an IPv4-only database) is a lookup miss,
  reported as a NOT_FOUND result with error code LOOKUP_MISS
- any other database failure is fatal
"""

from contextlib import contextmanager
from typing import Iterator

import structlog

from location_mapper.infrastructure.clients.maxmind import MaxMindClient
from location_mapper.infrastructure.operations import OperationResult, OperationStatus
from location_mapper.infrastructure.services import get_maxmind_client
from location_mapper.packages.threat_map.errors import DatabaseUnavailableError
from location_mapper.packages.threat_map.models import ResolvedLocation

logger = structlog.get_logger()

LOOKUP_MISS = "LOOKUP_MISS"
DEFAULT_UNKNOWN_NAME = "Unknown"


class LocationResolver:
    """Map one IP address to a ResolvedLocation or a lookup miss.

    Args:
        client: An open MaxMindClient. Lookups are read-only, so one client
            may be shared by several threads.
        unknown_city: Placeholder for locations without a city name.
        unknown_country: Placeholder for locations without a country name.
    """

    def __init__(
        self,
        client: MaxMindClient,
        unknown_city: str = DEFAULT_UNKNOWN_NAME,
        unknown_country: str = DEFAULT_UNKNOWN_NAME,
    ) -> None:
        self._client = client
        self.unknown_city = unknown_city
        self.unknown_country = unknown_country

    def resolve(self, ip_address: str) -> OperationResult:
        """Resolve ``ip_address``.

        Returns:
            OperationResult with a ResolvedLocation on success, or NOT_FOUND
            with error code LOOKUP_MISS.

        Raises:
            DatabaseUnavailableError: The database failed to answer.
        """
        result = self._client.geolocate(ip_address=ip_address)

        if result.status == OperationStatus.NOT_FOUND:
            return self._miss(ip_address, "address not in database")
        # Sources are validated on load, so this is a valid address the
        # database cannot hold.
        if result.error_code == "INVALID_IP_FORMAT":
            return self._miss(ip_address, result.message)
        if not result.is_success:
            raise DatabaseUnavailableError(result.message)

        data = result.data
        latitude = data.get("latitude")
        longitude = data.get("longitude")
        if latitude is None or longitude is None:
            return self._miss(ip_address, "no coordinates for address")

        location = ResolvedLocation(
            city_name=data.get("city") or self.unknown_city,
            latitude=latitude,
            longitude=longitude,
            country_name=data.get("country_name") or self.unknown_country,
        )
        return OperationResult.success(data=location, message="IP resolved")

    def _miss(self, ip_address: str, reason: str) -> OperationResult:
        logger.debug("lookup_miss", ip_address=ip_address, reason=reason)
        return OperationResult.not_found(
            message=f"No location for {ip_address}: {reason}",
            error_code=LOOKUP_MISS,
        )


@contextmanager
def open_location_resolver(
    db_path: str,
    unknown_city: str = DEFAULT_UNKNOWN_NAME,
    unknown_country: str = DEFAULT_UNKNOWN_NAME,
) -> Iterator[LocationResolver]:
    """Open the geolocation database for the duration of the block.

    Raises:
        DatabaseUnavailableError: The database file cannot be opened.
    """
    with get_maxmind_client(db_path=db_path) as client:
        opened = client.open()
        if not opened.is_success:
            raise DatabaseUnavailableError(opened.message)
        yield LocationResolver(
            client, unknown_city=unknown_city, unknown_country=unknown_country
        )
