"""Unit tests for the threat sources loader."""

import json

import pytest

from location_mapper.packages.threat_map.errors import (
    InputUnavailableError,
    InvalidAddressError,
    MalformedInputError,
)
from location_mapper.packages.threat_map.loader import (
    load_threat_records,
    parse_threat_sources,
)
from location_mapper.packages.threat_map.models import ThreatRecord
from tests.factories.geoip import make_threat_sources


@pytest.mark.unit
class TestParseThreatSources:
    def test_pairs_arrays_in_order(self):
        document = make_threat_sources([5, 3], ["8.8.8.8", "2001:4860:4860::8888"])

        records = parse_threat_sources(document)

        assert records == [
            ThreatRecord(source_ip="8.8.8.8", count=5),
            ThreatRecord(source_ip="2001:4860:4860::8888", count=3),
        ]

    def test_accepts_threat_sources_wrapper(self):
        document = make_threat_sources([7], ["1.1.1.1"], wrapped=True)

        records = parse_threat_sources(document)

        assert records == [ThreatRecord(source_ip="1.1.1.1", count=7)]

    def test_ignores_extra_keys(self):
        document = make_threat_sources([1], ["1.1.1.1"])
        document["Generated"] = "2024-05-01"

        assert len(parse_threat_sources(document)) == 1

    def test_empty_arrays_give_no_records(self):
        assert parse_threat_sources(make_threat_sources([], [])) == []

    def test_zero_count_is_allowed(self):
        records = parse_threat_sources(make_threat_sources([0], ["8.8.8.8"]))

        assert records[0].count == 0

    def test_strips_whitespace_around_addresses(self):
        records = parse_threat_sources(make_threat_sources([1], [" 8.8.8.8 "]))

        assert records[0].source_ip == "8.8.8.8"

    def test_length_mismatch_is_malformed(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_threat_sources(make_threat_sources([1, 2], ["8.8.8.8"]))

        assert "Count has 2 entries but Source has 1" in str(exc_info.value)
        assert exc_info.value.error_code == "MALFORMED_INPUT"

    @pytest.mark.parametrize(
        "document",
        [
            [],
            "Count",
            {"Count": [1]},
            {"Source": ["8.8.8.8"]},
            {"Count": 1, "Source": ["8.8.8.8"]},
            {"Count": [1], "Source": "8.8.8.8"},
            {"Threat Sources": []},
        ],
    )
    def test_wrong_shape_is_malformed(self, document):
        with pytest.raises(MalformedInputError):
            parse_threat_sources(document)

    @pytest.mark.parametrize("count", [-1, 1.5, "3", True, None])
    def test_counts_must_be_non_negative_integers(self, count):
        with pytest.raises(MalformedInputError):
            parse_threat_sources(make_threat_sources([count], ["8.8.8.8"]))

    def test_sources_must_be_strings(self):
        with pytest.raises(MalformedInputError):
            parse_threat_sources(make_threat_sources([1], [134744072]))

    def test_invalid_address_fails_whole_load(self):
        document = make_threat_sources([1, 2, 3], ["8.8.8.8", "999.1.1.1", "1.1.1.1"])

        with pytest.raises(InvalidAddressError) as exc_info:
            parse_threat_sources(document)

        assert exc_info.value.index == 1
        assert exc_info.value.value == "999.1.1.1"
        assert exc_info.value.error_code == "INVALID_ADDRESS"

    @pytest.mark.parametrize("source", ["", "example.com", "8.8.8.8/32", "1.2.3"])
    def test_rejects_non_addresses(self, source):
        with pytest.raises(InvalidAddressError):
            parse_threat_sources(make_threat_sources([1], [source]))


@pytest.mark.unit
class TestLoadThreatRecords:
    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "threat_sources.json"
        path.write_text(json.dumps(make_threat_sources([5, 3], ["8.8.8.8", "8.8.4.4"])))

        records = load_threat_records(path)

        assert [record.count for record in records] == [5, 3]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputUnavailableError):
            load_threat_records(tmp_path / "missing.json")

    def test_invalid_json_is_malformed(self, tmp_path):
        path = tmp_path / "threat_sources.json"
        path.write_text('{"Count": [1], "Source": [')

        with pytest.raises(MalformedInputError):
            load_threat_records(path)

    def test_non_utf8_is_malformed(self, tmp_path):
        path = tmp_path / "threat_sources.json"
        path.write_bytes(b"\xff\xfe\x00{")

        with pytest.raises(MalformedInputError):
            load_threat_records(path)
