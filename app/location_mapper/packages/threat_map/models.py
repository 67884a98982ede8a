"""Data types flowing through the threat map pipeline."""

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator

THREAT_SOURCES_KEY = "Threat Sources"

ThreatCount = Annotated[int, Field(strict=True, ge=0)]


class ThreatSourcesDocument(BaseModel):
    """The parallel Count/Source arrays of a threat sources export.

    Element i of ``Count`` is the number of events seen from element i of
    ``Source``.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    counts: list[ThreatCount] = Field(alias="Count")
    sources: list[StrictStr] = Field(alias="Source")

    @model_validator(mode="after")
    def check_equal_lengths(self) -> "ThreatSourcesDocument":
        if len(self.counts) != len(self.sources):
            raise ValueError(
                f"Count has {len(self.counts)} entries but Source has {len(self.sources)}"
            )
        return self


@dataclass(frozen=True)
class ThreatRecord:
    """One source address and the number of threat events it produced."""

    source_ip: str
    count: int


@dataclass(frozen=True)
class ResolvedLocation:
    """City-level location of an address.

    ``city_name`` and ``country_name`` already hold the placeholder when the
    database has no name for the location.
    """

    city_name: str
    latitude: float
    longitude: float
    country_name: str = ""


@dataclass(frozen=True)
class AggregateRow:
    """Total threat count for one distinct location."""

    city_name: str
    total_count: int
    latitude: float
    longitude: float
    country_name: str = ""
