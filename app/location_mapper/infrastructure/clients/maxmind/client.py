"""MaxMind GeoIP2 client for geolocation operations.

Provides type-safe access to a MaxMind GeoIP2 City database with consistent
error handling and OperationResult return types. One reader is opened per
client and shared by every lookup until the client is closed.
"""

from dataclasses import asdict, dataclass
from typing import Optional

import geoip2.database
import structlog
from geoip2.errors import AddressNotFoundError, GeoIP2Error
from maxminddb import InvalidDatabaseError

from location_mapper.infrastructure.operations import OperationResult

logger = structlog.get_logger()


@dataclass
class GeoLocationData:
    """Geolocation data for an IP address."""

    country_code: Optional[str] = None
    country_name: Optional[str] = None
    city: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    time_zone: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary format."""
        return asdict(self)


class MaxMindClient:
    """Client for MaxMind GeoIP2 database operations.

    All methods return OperationResult for consistent error handling.
    The client is a context manager; leaving the block closes the reader.

    Args:
        db_path: Path to a GeoLite2/GeoIP2 City database file

    Example:
        with MaxMindClient(db_path) as maxmind:
            result = maxmind.geolocate("8.8.8.8")
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = str(db_path)
        self._reader: Optional[geoip2.database.Reader] = None
        self._logger = logger.bind(component="maxmind_client")

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._reader is not None

    def open(self) -> OperationResult:
        """Open the database reader.

        Returns:
            OperationResult with SUCCESS, or TRANSIENT_ERROR when the
            database file is missing, unreadable or not a MaxMind database
        """
        log = self._logger.bind(db_path=self._db_path)
        if self._reader is not None:
            return OperationResult.success(message="MaxMind database already open")

        try:
            self._reader = geoip2.database.Reader(self._db_path)
        except InvalidDatabaseError as e:
            log.error("invalid_database", error=str(e))
            return OperationResult.transient_error(
                message=f"Invalid MaxMind database: {str(e)}",
                error_code="INVALID_DATABASE",
            )
        except (FileNotFoundError, IOError) as e:
            log.error("database_file_error", error=str(e))
            return OperationResult.transient_error(
                message=f"MaxMind database file error: {str(e)}",
                error_code="DB_FILE_ERROR",
            )

        log.debug("database_opened")
        return OperationResult.success(message="MaxMind database opened")

    def close(self) -> None:
        """Close the database reader if it is open."""
        if self._reader is None:
            return
        self._reader.close()
        self._reader = None
        self._logger.debug("database_closed", db_path=self._db_path)

    def __enter__(self) -> "MaxMindClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def geolocate(self, ip_address: str) -> OperationResult:
        """Geolocate an IP address using the open MaxMind database.

        Args:
            ip_address: IPv4 or IPv6 address to geolocate

        Returns:
            OperationResult with GeoLocationData as a dict, or error
        """
        log = self._logger.bind(ip_address=ip_address)

        if self._reader is None:
            return OperationResult.permanent_error(
                message="MaxMind database is not open",
                error_code="READER_NOT_OPEN",
            )

        try:
            response = self._reader.city(ip_address)
        except AddressNotFoundError:
            log.debug("ip_not_found")
            return OperationResult.not_found(
                message=f"IP address not found in database: {ip_address}",
                error_code="IP_NOT_FOUND",
            )
        except ValueError as e:
            log.warning("invalid_ip_format", error=str(e))
            return OperationResult.permanent_error(
                message=f"Invalid IP address format: {ip_address}: {e}",
                error_code="INVALID_IP_FORMAT",
            )
        except (GeoIP2Error, InvalidDatabaseError) as e:
            log.error("geoip2_error", error=str(e))
            return OperationResult.transient_error(
                message=f"GeoIP2 database error: {str(e)}",
                error_code="GEOIP2_ERROR",
            )

        location = GeoLocationData(
            country_code=response.country.iso_code,
            country_name=response.country.name,
            city=response.city.name,
            latitude=response.location.latitude,
            longitude=response.location.longitude,
            time_zone=response.location.time_zone,
        )
        log.debug("geolocation_success", city=location.city)
        return OperationResult.success(
            data=location.to_dict(), message="IP geolocated successfully"
        )
