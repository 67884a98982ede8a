"""Unit tests for location mapper settings."""

import pytest
from pydantic import ValidationError

from location_mapper.infrastructure.configuration import (
    MaxMindSettings,
    Settings,
    ThreatMapSettings,
)
from location_mapper.infrastructure.services import get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the host environment and any .env file."""
    for name in (
        "LOG_LEVEL",
        "ENVIRONMENT",
        "MAXMIND_DB_PATH",
        "THREAT_SOURCES_PATH",
        "LOCATIONS_OUTPUT_PATH",
        "UNKNOWN_CITY_NAME",
        "UNKNOWN_COUNTRY_NAME",
        "INCLUDE_COUNTRY",
        "RESOLVER_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.mark.unit
class TestMaxMindSettings:
    def test_default_values(self):
        settings = MaxMindSettings()

        assert settings.MAXMIND_DB_PATH == "geoip2/city.mmdb"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MAXMIND_DB_PATH", "/data/GeoLite2-City.mmdb")

        assert MaxMindSettings().MAXMIND_DB_PATH == "/data/GeoLite2-City.mmdb"


@pytest.mark.unit
class TestThreatMapSettings:
    def test_default_values(self):
        settings = ThreatMapSettings()

        assert settings.THREAT_SOURCES_PATH == "threat_sources.json"
        assert settings.LOCATIONS_OUTPUT_PATH == "locations.csv"
        assert settings.UNKNOWN_CITY_NAME == "Unknown"
        assert settings.UNKNOWN_COUNTRY_NAME == "Unknown"
        assert settings.INCLUDE_COUNTRY is False
        assert settings.RESOLVER_WORKERS == 1

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("INCLUDE_COUNTRY", "true")
        monkeypatch.setenv("RESOLVER_WORKERS", "4")
        monkeypatch.setenv("UNKNOWN_CITY_NAME", "(no city)")

        settings = ThreatMapSettings()

        assert settings.INCLUDE_COUNTRY is True
        assert settings.RESOLVER_WORKERS == 4
        assert settings.UNKNOWN_CITY_NAME == "(no city)"

    def test_rejects_zero_workers(self, monkeypatch):
        monkeypatch.setenv("RESOLVER_WORKERS", "0")

        with pytest.raises(ValidationError):
            ThreatMapSettings()

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LOCATIONS_OUTPUT_PATH=out/map.csv\n")

        assert ThreatMapSettings().LOCATIONS_OUTPUT_PATH == "out/map.csv"


@pytest.mark.unit
class TestSettings:
    def test_aggregates_sections(self):
        settings = Settings()

        assert isinstance(settings.maxmind, MaxMindSettings)
        assert isinstance(settings.threat_map, ThreatMapSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_is_production(self, monkeypatch):
        assert Settings().is_production is False

        monkeypatch.setenv("ENVIRONMENT", "production")
        assert Settings().is_production is True

    def test_section_override(self):
        custom = ThreatMapSettings(INCLUDE_COUNTRY=True)

        settings = Settings(threat_map=custom)

        assert settings.threat_map.INCLUDE_COUNTRY is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
