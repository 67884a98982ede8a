"""Load threat source records from a JSON export.

The export carries two parallel arrays, ``Count`` and ``Source``, either at
the top level or inside a ``"Threat Sources"`` object. Loading is all or
nothing: a structural problem raises MalformedInputError and a bad address
raises InvalidAddressError, before any lookup happens.
"""

import ipaddress
import json
from pathlib import Path
from typing import Any, Union

import structlog
from pydantic import ValidationError

from location_mapper.packages.threat_map.errors import (
    InputUnavailableError,
    InvalidAddressError,
    MalformedInputError,
)
from location_mapper.packages.threat_map.models import (
    THREAT_SOURCES_KEY,
    ThreatRecord,
    ThreatSourcesDocument,
)

logger = structlog.get_logger()


def _describe_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        message = detail["msg"].removeprefix("Value error, ")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


def parse_threat_sources(document: Any) -> list[ThreatRecord]:
    """Build threat records from a decoded threat sources document.

    Args:
        document: Decoded JSON value.

    Returns:
        One ThreatRecord per array position, in input order.

    Raises:
        MalformedInputError: The document does not hold two equal-length
            arrays of non-negative integers and strings.
        InvalidAddressError: A Source entry is not an IPv4 or IPv6 address.
    """
    if isinstance(document, dict) and THREAT_SOURCES_KEY in document:
        document = document[THREAT_SOURCES_KEY]

    try:
        sources = ThreatSourcesDocument.model_validate(document)
    except ValidationError as e:
        raise MalformedInputError(
            f"Malformed threat sources document: {_describe_validation_error(e)}"
        ) from e

    records = []
    for index, (count, source_ip) in enumerate(zip(sources.counts, sources.sources)):
        try:
            ipaddress.ip_address(source_ip)
        except ValueError as e:
            raise InvalidAddressError(
                f"Source[{index}] is not a valid IP address: {source_ip!r}",
                index=index,
                value=source_ip,
            ) from e
        records.append(ThreatRecord(source_ip=source_ip, count=count))

    return records


def load_threat_records(path: Union[str, Path]) -> list[ThreatRecord]:
    """Read and parse the threat sources file at ``path``.

    Raises:
        InputUnavailableError: The file cannot be opened or read.
        MalformedInputError: The file is not valid JSON or has the wrong shape.
        InvalidAddressError: A Source entry is not a valid IP address.
    """
    path = Path(path)
    log = logger.bind(input_path=str(path))

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Threat sources file is not UTF-8 text: {path}") from e
    except OSError as e:
        raise InputUnavailableError(f"Cannot read threat sources file {path}: {e}") from e

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Threat sources file is not valid JSON: {e}") from e

    records = parse_threat_sources(document)
    log.info("threat_sources_loaded", records=len(records))
    return records
