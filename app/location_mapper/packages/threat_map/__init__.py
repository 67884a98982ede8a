"""Threat map package.

Turns a threat sources export (parallel Count/Source arrays) into a CSV of
threat totals per city location.

Public API:
    run_pipeline / run_from_settings: run the whole batch
    load_threat_records: Input Loader
    LocationResolver / open_location_resolver: Location Resolver
    LocationAggregator: Aggregator
    write_locations_csv: Output Writer
"""

from location_mapper.packages.threat_map.aggregator import (
    LocationAggregator,
    location_key,
)
from location_mapper.packages.threat_map.errors import (
    DatabaseUnavailableError,
    InputUnavailableError,
    InvalidAddressError,
    MalformedInputError,
    ThreatMapError,
    WriteFailureError,
)
from location_mapper.packages.threat_map.loader import (
    load_threat_records,
    parse_threat_sources,
)
from location_mapper.packages.threat_map.models import (
    AggregateRow,
    ResolvedLocation,
    ThreatRecord,
)
from location_mapper.packages.threat_map.resolver import (
    LOOKUP_MISS,
    LocationResolver,
    open_location_resolver,
)
from location_mapper.packages.threat_map.service import (
    RunSummary,
    run_from_settings,
    run_pipeline,
)
from location_mapper.packages.threat_map.writer import (
    LOCATION_COLUMNS,
    LOCATION_COLUMNS_WITH_COUNTRY,
    write_locations_csv,
)

__all__ = [
    "AggregateRow",
    "DatabaseUnavailableError",
    "InputUnavailableError",
    "InvalidAddressError",
    "LOCATION_COLUMNS",
    "LOCATION_COLUMNS_WITH_COUNTRY",
    "LOOKUP_MISS",
    "LocationAggregator",
    "LocationResolver",
    "MalformedInputError",
    "ResolvedLocation",
    "RunSummary",
    "ThreatMapError",
    "ThreatRecord",
    "WriteFailureError",
    "load_threat_records",
    "location_key",
    "open_location_resolver",
    "parse_threat_sources",
    "run_from_settings",
    "run_pipeline",
    "write_locations_csv",
]
