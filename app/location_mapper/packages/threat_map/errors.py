"""Exceptions raised by the threat map pipeline.

Every fatal failure of a run is a ThreatMapError. Lookup misses are not
errors: the resolver reports them as NOT_FOUND results and the aggregator
drops the record.
"""

from typing import Optional


class ThreatMapError(Exception):
    """Base exception for all threat map pipeline errors.

    Attributes:
        error_code: Machine-readable code, also used in logs.

    Example:
        try:
            run_pipeline(...)
        except ThreatMapError as e:
            logger.error("run_failed", error_code=e.error_code, error=str(e))
    """

    error_code = "THREAT_MAP_ERROR"


class InputUnavailableError(ThreatMapError):
    """Raised when the threat sources file cannot be opened or read."""

    error_code = "INPUT_UNAVAILABLE"


class MalformedInputError(ThreatMapError):
    """Raised when the threat sources document is structurally invalid.

    Covers invalid JSON, missing or mistyped Count/Source arrays, negative
    counts, and arrays of different lengths.

    Example:
        >>> parse_threat_sources({"Count": [1, 2], "Source": ["8.8.8.8"]})
        Traceback (most recent call last):
        ...
        MalformedInputError: Malformed threat sources document: Count has 2 entries but Source has 1
    """

    error_code = "MALFORMED_INPUT"


class InvalidAddressError(ThreatMapError):
    """Raised when a Source entry is not a valid IPv4 or IPv6 address.

    Attributes:
        index: Position of the offending entry in the Source array.
        value: The offending entry.
    """

    error_code = "INVALID_ADDRESS"

    def __init__(self, message: str, index: Optional[int] = None, value: Optional[str] = None):
        super().__init__(message)
        self.index = index
        self.value = value


class DatabaseUnavailableError(ThreatMapError):
    """Raised when the geolocation database cannot be opened or read."""

    error_code = "DATABASE_UNAVAILABLE"


class WriteFailureError(ThreatMapError):
    """Raised when the locations file cannot be created or written."""

    error_code = "WRITE_FAILURE"
