"""Infrastructure configuration module - public API.

Centralized configuration management for the location mapper using
Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class
    MaxMindSettings: MaxMind database settings
    ThreatMapSettings: Pipeline settings

Example:
    ```python
    from location_mapper.infrastructure.services import get_settings

    settings = get_settings()
    sources = settings.threat_map.THREAT_SOURCES_PATH
    ```
"""

from location_mapper.infrastructure.configuration.settings import Settings
from location_mapper.infrastructure.configuration.integrations import MaxMindSettings
from location_mapper.infrastructure.configuration.features import ThreatMapSettings

__all__ = ["Settings", "MaxMindSettings", "ThreatMapSettings"]
