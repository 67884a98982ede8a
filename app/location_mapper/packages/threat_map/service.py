"""
Business logic for building the threat location map.

Runs the whole batch in one pass: load the threat sources, resolve every
source address, aggregate counts per location and write the CSV once at the
end. Any ThreatMapError aborts the run before the output file is replaced.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

import structlog

from location_mapper.infrastructure.logging import bind_run_context
from location_mapper.infrastructure.operations import OperationResult
from location_mapper.infrastructure.services import get_settings
from location_mapper.packages.threat_map.aggregator import LocationAggregator
from location_mapper.packages.threat_map.loader import load_threat_records
from location_mapper.packages.threat_map.models import ThreatRecord
from location_mapper.packages.threat_map.resolver import (
    LocationResolver,
    open_location_resolver,
)
from location_mapper.packages.threat_map.writer import write_locations_csv

logger = structlog.get_logger()


@dataclass(frozen=True)
class RunSummary:
    """Outcome of one pipeline run."""

    run_id: str
    records: int
    resolved: int
    skipped: int
    skipped_count_total: int
    locations: int
    total_count: int
    output_path: Path


def resolve_records(
    resolver: LocationResolver,
    records: Sequence[ThreatRecord],
    workers: int = 1,
) -> Iterator[OperationResult]:
    """Yield one resolution outcome per record, in record order.

    With more than one worker the lookups run on a thread pool; Executor.map
    still yields in submission order.
    """
    addresses = [record.source_ip for record in records]
    if workers <= 1:
        yield from map(resolver.resolve, addresses)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        yield from executor.map(resolver.resolve, addresses)


def run_pipeline(
    input_path: Union[str, Path],
    db_path: Union[str, Path],
    output_path: Union[str, Path],
    include_country: bool = False,
    unknown_city: str = "Unknown",
    unknown_country: str = "Unknown",
    workers: int = 1,
    run_id: Optional[str] = None,
) -> RunSummary:
    """Build the locations CSV from a threat sources file.

    Args:
        input_path: JSON document with the Count/Source arrays
        db_path: MaxMind City database
        output_path: CSV file to create or replace
        include_country: Add a country column to the output
        unknown_city: Placeholder for locations without a city name
        unknown_country: Placeholder for locations without a country name
        workers: Threads used for address resolution
        run_id: Identifier bound to every log entry of the run

    Returns:
        RunSummary for the run

    Raises:
        ThreatMapError: On any fatal failure; lookup misses are not fatal.
    """
    with bind_run_context(run_id=run_id, input_path=str(input_path)) as bound_run_id:
        log = logger.bind(operation="run_pipeline")
        log.info("run_started", db_path=str(db_path), output_path=str(output_path))

        records = load_threat_records(input_path)

        aggregator = LocationAggregator()
        with open_location_resolver(
            str(db_path), unknown_city=unknown_city, unknown_country=unknown_country
        ) as resolver:
            outcomes = resolve_records(resolver, records, workers=workers)
            for record, outcome in zip(records, outcomes):
                aggregator.add(record, outcome)

        rows = aggregator.rows()
        written_path = write_locations_csv(
            rows, output_path, include_country=include_country
        )

        summary = RunSummary(
            run_id=bound_run_id,
            records=aggregator.records,
            resolved=aggregator.resolved,
            skipped=aggregator.skipped,
            skipped_count_total=aggregator.skipped_count_total,
            locations=len(rows),
            total_count=aggregator.total_count,
            output_path=written_path,
        )
        if summary.skipped:
            log.warning(
                "lookup_misses_skipped",
                skipped=summary.skipped,
                skipped_count_total=summary.skipped_count_total,
            )
        log.info(
            "run_completed",
            records=summary.records,
            locations=summary.locations,
            total_count=summary.total_count,
        )
        return summary


def run_from_settings(**overrides) -> RunSummary:
    """Run the pipeline with configured settings, overriding any given argument.

    Keyword arguments are those of run_pipeline; None values are ignored.
    """
    settings = get_settings()
    options = {
        "input_path": settings.threat_map.THREAT_SOURCES_PATH,
        "db_path": settings.maxmind.MAXMIND_DB_PATH,
        "output_path": settings.threat_map.LOCATIONS_OUTPUT_PATH,
        "include_country": settings.threat_map.INCLUDE_COUNTRY,
        "unknown_city": settings.threat_map.UNKNOWN_CITY_NAME,
        "unknown_country": settings.threat_map.UNKNOWN_COUNTRY_NAME,
        "workers": settings.threat_map.RESOLVER_WORKERS,
    }
    options.update({key: value for key, value in overrides.items() if value is not None})
    return run_pipeline(**options)
