"""Location mapper configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from location_mapper.infrastructure.configuration.integrations import MaxMindSettings

# Feature settings
from location_mapper.infrastructure.configuration.features import ThreatMapSettings


class Settings(BaseSettings):
    """Location mapper configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External data sources (the MaxMind database)
    - **Features**: The threat map pipeline itself

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment; "production" renders JSON logs

    Example:
        ```python
        from location_mapper.infrastructure.services import get_settings

        settings = get_settings()

        db_path = settings.maxmind.MAXMIND_DB_PATH
        workers = settings.threat_map.RESOLVER_WORKERS

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # Integration settings
    maxmind: MaxMindSettings

    # Feature settings
    threat_map: ThreatMapSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "maxmind": MaxMindSettings,
            # Features
            "threat_map": ThreatMapSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
