"""End-to-end runs of the threat map pipeline over files on disk."""

import csv
import json

import pytest

from location_mapper.packages.threat_map import run_from_settings, run_pipeline
from tests.factories.geoip import make_city_response, make_threat_sources


@pytest.mark.integration
def test_wrapped_document_round_trip(fake_reader, geoip_responses, tmp_path):
    geoip_responses["9.9.9.9"] = make_city_response(
        city="Washington, D.C.", latitude=38.8951, longitude=-77.0364
    )
    input_path = tmp_path / "threat_sources.json"
    input_path.write_text(
        json.dumps(
            make_threat_sources(
                [2, 7, 1, 4, 11, 6],
                ["1.1.1.1", "9.9.9.9", "192.0.2.1", "8.8.8.8", "2001:db8::1", "9.9.9.9"],
                wrapped=True,
            )
        )
    )
    output_path = tmp_path / "locations.csv"

    summary = run_pipeline(input_path, tmp_path / "city.mmdb", output_path)

    with output_path.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert [(row["city"], int(row["total_count"])) for row in rows] == [
        ("Washington, D.C.", 13),
        ("Mountain View", 4),
        ("Sydney", 2),
    ]
    assert float(rows[0]["latitude"]) == 38.8951
    assert summary.skipped == 2
    assert summary.skipped_count_total == 12
    assert sum(int(row["total_count"]) for row in rows) == summary.total_count


@pytest.mark.integration
def test_repeated_runs_are_byte_identical(fake_reader, tmp_path):
    sources = ["8.8.8.8", "1.1.1.1", "8.8.4.4", "203.0.113.9"]
    input_path = tmp_path / "threat_sources.json"
    input_path.write_text(json.dumps(make_threat_sources([3, 3, 0, 5], sources)))
    output_path = tmp_path / "locations.csv"

    run_pipeline(input_path, "city.mmdb", output_path)
    first = output_path.read_bytes()
    run_pipeline(input_path, "city.mmdb", output_path, workers=3)

    assert output_path.read_bytes() == first
    # equal totals keep first-seen order
    assert first.decode("utf-8").splitlines()[1:] == [
        "Mountain View,3,37.386,-122.0838",
        "Sydney,3,-33.8688,151.209",
    ]


@pytest.mark.integration
def test_settings_from_dotenv(fake_reader, tmp_path, monkeypatch):
    for name in (
        "THREAT_SOURCES_PATH",
        "LOCATIONS_OUTPUT_PATH",
        "MAXMIND_DB_PATH",
        "INCLUDE_COUNTRY",
        "UNKNOWN_CITY_NAME",
        "RESOLVER_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sources.json").write_text(json.dumps(make_threat_sources([1], ["1.1.1.1"])))
    (tmp_path / ".env").write_text(
        "THREAT_SOURCES_PATH=sources.json\n"
        "LOCATIONS_OUTPUT_PATH=map.csv\n"
        "MAXMIND_DB_PATH=db/city.mmdb\n"
        "INCLUDE_COUNTRY=true\n"
    )

    summary = run_from_settings()

    assert fake_reader[0].db_path == "db/city.mmdb"
    assert summary.locations == 1
    assert (tmp_path / "map.csv").read_text() == (
        "city,country,total_count,latitude,longitude\n"
        "Sydney,Australia,1,-33.8688,151.209\n"
    )
