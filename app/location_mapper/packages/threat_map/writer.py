"""
Write aggregated locations to a CSV file.

Rows are written in the order given. The file is first written under a
temporary name next to the destination and then renamed over it, so the
destination only ever holds a complete file.
"""

import csv
import os
import uuid
from pathlib import Path
from typing import Sequence, Union

import pandas as pd
import structlog

from location_mapper.packages.threat_map.errors import WriteFailureError
from location_mapper.packages.threat_map.models import AggregateRow

logger = structlog.get_logger()

LOCATION_COLUMNS = ["city", "total_count", "latitude", "longitude"]
LOCATION_COLUMNS_WITH_COUNTRY = ["city", "country", "total_count", "latitude", "longitude"]


def rows_to_dataframe(
    rows: Sequence[AggregateRow], include_country: bool = False
) -> pd.DataFrame:
    """Tabulate ``rows`` without reordering them."""
    columns = LOCATION_COLUMNS_WITH_COUNTRY if include_country else LOCATION_COLUMNS
    records = [
        {
            "city": row.city_name,
            "country": row.country_name,
            "total_count": row.total_count,
            "latitude": row.latitude,
            "longitude": row.longitude,
        }
        for row in rows
    ]
    return pd.DataFrame(records, columns=columns)


def write_locations_csv(
    rows: Sequence[AggregateRow],
    output_path: Union[str, Path],
    include_country: bool = False,
) -> Path:
    """Write ``rows`` to ``output_path``, replacing any existing file.

    Returns:
        The destination path.

    Raises:
        WriteFailureError: The path has no file name, or the file cannot be
            created, encoded or written.
    """
    output_path = Path(output_path)
    if not output_path.name:
        logger.error("locations_write_failed", output_path=str(output_path), error="no file name")
        raise WriteFailureError(
            f"Cannot write locations file {output_path}: path has no file name"
        )

    tmp_path = output_path.with_name(f".{output_path.name}.{uuid.uuid4().hex}.tmp")
    frame = rows_to_dataframe(rows, include_country=include_country)

    try:
        with open(tmp_path, "x", encoding="utf-8", newline="") as handle:
            frame.to_csv(
                handle,
                index=False,
                lineterminator="\n",
                quoting=csv.QUOTE_MINIMAL,
            )
        os.replace(tmp_path, output_path)
    except (OSError, UnicodeEncodeError) as e:
        logger.error("locations_write_failed", output_path=str(output_path), error=str(e))
        raise WriteFailureError(f"Cannot write locations file {output_path}: {e}") from e
    finally:
        # no-op once the rename has happened
        tmp_path.unlink(missing_ok=True)

    logger.info("locations_written", output_path=str(output_path), rows=len(frame))
    return output_path
