"""Threat map feature settings."""

from pydantic import Field

from location_mapper.infrastructure.configuration.base import FeatureSettings


class ThreatMapSettings(FeatureSettings):
    """Threat location mapping configuration.

    Environment Variables:
        THREAT_SOURCES_PATH: JSON document holding the Count/Source arrays
        LOCATIONS_OUTPUT_PATH: CSV file the aggregated locations are written to
        UNKNOWN_CITY_NAME: Placeholder written when a location has no city name
        UNKNOWN_COUNTRY_NAME: Placeholder written when a location has no country name
        INCLUDE_COUNTRY: Add a country column to the output (default: False)
        RESOLVER_WORKERS: Threads used to resolve addresses (default: 1)

    Example:
        ```python
        from location_mapper.infrastructure.services import get_settings

        settings = get_settings()

        output_path = settings.threat_map.LOCATIONS_OUTPUT_PATH
        ```
    """

    THREAT_SOURCES_PATH: str = Field(
        default="threat_sources.json", alias="THREAT_SOURCES_PATH"
    )
    LOCATIONS_OUTPUT_PATH: str = Field(
        default="locations.csv", alias="LOCATIONS_OUTPUT_PATH"
    )
    UNKNOWN_CITY_NAME: str = Field(default="Unknown", alias="UNKNOWN_CITY_NAME")
    UNKNOWN_COUNTRY_NAME: str = Field(default="Unknown", alias="UNKNOWN_COUNTRY_NAME")
    INCLUDE_COUNTRY: bool = Field(default=False, alias="INCLUDE_COUNTRY")
    RESOLVER_WORKERS: int = Field(default=1, ge=1, alias="RESOLVER_WORKERS")
