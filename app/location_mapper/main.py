from pathlib import Path
from typing import Optional

import typer

from location_mapper.infrastructure.logging import configure_logging, get_module_logger
from location_mapper.infrastructure.services import get_settings
from location_mapper.packages.threat_map import ThreatMapError, run_from_settings

app = typer.Typer(
    add_completion=False,
    help="Aggregate threat source counts by city location into a CSV file.",
)

logger = get_module_logger()


@app.command()
def main(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Threat sources JSON file (default: THREAT_SOURCES_PATH).",
    ),
    db_path: Optional[Path] = typer.Option(
        None,
        "--database",
        "-d",
        help="MaxMind City database file (default: MAXMIND_DB_PATH).",
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="CSV file to write (default: LOCATIONS_OUTPUT_PATH).",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Threads used to resolve addresses (default: RESOLVER_WORKERS).",
    ),
    include_country: Optional[bool] = typer.Option(
        None,
        "--include-country/--no-include-country",
        help="Add a country column to the output (default: INCLUDE_COUNTRY).",
    ),
    unknown_city: Optional[str] = typer.Option(
        None,
        "--unknown-city",
        help="Placeholder for locations without a city name (default: UNKNOWN_CITY_NAME).",
    ),
):
    """
    Resolve every threat source address with the MaxMind database, sum the
    counts per city location and write them, highest total first.

    Example:
        location-mapper -i threat_sources.json -d geoip2/city.mmdb -o locations.csv
    """
    configure_logging(get_settings())

    try:
        summary = run_from_settings(
            input_path=input_path,
            db_path=db_path,
            output_path=output_path,
            workers=workers,
            include_country=include_country,
            unknown_city=unknown_city,
        )
    except ThreatMapError as e:
        logger.error("run_failed", error_code=e.error_code, error=str(e))
        typer.echo(f"Error [{e.error_code}]: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Wrote {summary.locations} locations "
        f"({summary.records} records, {summary.skipped} skipped) "
        f"to {summary.output_path}"
    )


if __name__ == "__main__":
    app()
