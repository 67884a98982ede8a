"""MaxMind integration settings."""

from pydantic import Field

from location_mapper.infrastructure.configuration.base import IntegrationSettings


class MaxMindSettings(IntegrationSettings):
    """MaxMind GeoIP database configuration.

    Environment Variables:
        MAXMIND_DB_PATH: Path to a MaxMind GeoLite2/GeoIP2 City database file

    Example:
        ```python
        from location_mapper.infrastructure.services import get_settings

        settings = get_settings()

        db_path = settings.maxmind.MAXMIND_DB_PATH
        ```
    """

    MAXMIND_DB_PATH: str = Field(default="geoip2/city.mmdb", alias="MAXMIND_DB_PATH")
