"""
Sum threat counts per distinct resolved location.

Records are grouped on the exact bit pattern of their (latitude, longitude)
pair. The first record seen for a location fixes the city and country names
shown for it. Rows come out by descending total; equal totals keep the order
in which their locations were first seen.
"""

from typing import Tuple

import structlog

from location_mapper.infrastructure.operations import OperationResult
from location_mapper.packages.threat_map.models import (
    AggregateRow,
    ResolvedLocation,
    ThreatRecord,
)

logger = structlog.get_logger()

LocationKey = Tuple[str, str]


def location_key(location: ResolvedLocation) -> LocationKey:
    """Grouping key for a location.

    float.hex is exact, so two keys are equal only when both coordinates
    are bit-for-bit equal (0.0 and -0.0 differ).
    """
    return (float(location.latitude).hex(), float(location.longitude).hex())


class LocationAggregator:
    """Accumulate (record, resolution outcome) pairs into per-location totals.

    Only this object mutates its mapping; feed it from a single thread.
    """

    def __init__(self) -> None:
        self._locations: dict[LocationKey, ResolvedLocation] = {}
        self._totals: dict[LocationKey, int] = {}
        self.records = 0
        self.resolved = 0
        self.skipped = 0
        self.skipped_count_total = 0

    def add(self, record: ThreatRecord, outcome: OperationResult) -> bool:
        """Add one record. Returns False when the record was skipped."""
        self.records += 1
        if not outcome.is_success:
            self.skipped += 1
            self.skipped_count_total += record.count
            return False

        location: ResolvedLocation = outcome.data
        key = location_key(location)
        if key in self._totals:
            self._totals[key] += record.count
        else:
            self._locations[key] = location
            self._totals[key] = record.count
        self.resolved += 1
        return True

    def __len__(self) -> int:
        return len(self._totals)

    @property
    def total_count(self) -> int:
        return sum(self._totals.values())

    def rows(self) -> list[AggregateRow]:
        """Final rows, highest total first, ties in first-seen order."""
        rows = [
            AggregateRow(
                city_name=location.city_name,
                total_count=self._totals[key],
                latitude=location.latitude,
                longitude=location.longitude,
                country_name=location.country_name,
            )
            for key, location in self._locations.items()
        ]
        logger.debug(
            "records_aggregated",
            records=self.records,
            skipped=self.skipped,
            locations=len(rows),
        )
        # sorted() is stable, reverse=True included
        return sorted(rows, key=lambda row: row.total_count, reverse=True)
