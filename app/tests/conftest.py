import pytest

from location_mapper.infrastructure.services import get_settings
from tests.factories.geoip import make_city_response
from tests.fixtures.geoip_reader import FakeReader


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reload them for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def geoip_responses():
    """Address -> City response map served by the fake reader.

    8.8.8.8 and 8.8.4.4 share one location; 1.1.1.1 resolves elsewhere.
    """
    return {
        "8.8.8.8": make_city_response(),
        "8.8.4.4": make_city_response(),
        "2001:4860:4860::8888": make_city_response(),
        "1.1.1.1": make_city_response(
            city="Sydney",
            latitude=-33.8688,
            longitude=151.209,
            country="Australia",
            country_code="AU",
            time_zone="Australia/Sydney",
        ),
    }


@pytest.fixture
def fake_reader(monkeypatch, geoip_responses):
    """Patch geoip2.database.Reader with a FakeReader over geoip_responses.

    Returns the list of readers created, so tests can inspect lookups and
    whether the reader was closed.
    """
    readers = []

    def _open(db_path, *args, **kwargs):
        reader = FakeReader(db_path, geoip_responses)
        readers.append(reader)
        return reader

    monkeypatch.setattr("geoip2.database.Reader", _open)
    return readers
