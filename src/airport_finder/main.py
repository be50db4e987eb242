"""Command line airport finder.

Loads the OurAirports CSV files into memory, downloading them first if
they are missing, and runs one query.

Typical usage:
    airport-finder icao KLAX
    airport-finder iata DUS
    airport-finder nearest 33.9425 -118.408 --radius-m 25000 --types active
    airport-finder nearest 33.9425 -118.408 --radius-nm 100 --max 10 --types runways
    airport-finder navaids 33.9425 -118.408 --radius-m 50000
    airport-finder region US-CA --types large
    airport-finder country IS --types large medium
    airport-finder download
"""

import argparse
import sys
from pathlib import Path

from airport_finder.airports.finder import AirportFinder
from airport_finder.airports.types import AirportType
from airport_finder.airports.views import Airport, Navaid
from airport_finder.core.config import AppConfig, ConfigError, ConfigLoader, LoadOptions
from airport_finder.core.logging_system import LoggingError, get_logger, initialize_logging
from airport_finder.errors import InvalidCategoryError
from airport_finder.geo.distance import distance, nautical_miles_to_meters
from airport_finder.ingest.downloader import download_database, missing_files


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="airport-finder",
        description="Query OurAirports data held in memory",
    )
    parser.add_argument("--config", help="Settings YAML file")
    parser.add_argument("--log-config", help="Logging YAML file")
    parser.add_argument("--data-dir", help="Directory holding the CSV files")
    parser.add_argument(
        "--no-download", action="store_true", help="Do not download missing CSV files"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("download", help="Download the OurAirports CSV files")

    icao = subparsers.add_parser("icao", help="Find an airport by ICAO code")
    icao.add_argument("code")

    iata = subparsers.add_parser("iata", help="Find an airport by IATA code")
    iata.add_argument("code")

    nearest = subparsers.add_parser("nearest", help="Find airports near a coordinate")
    _add_position_arguments(nearest)
    _add_types_argument(nearest, default=["active"])

    navaids = subparsers.add_parser("navaids", help="Find navaids near a coordinate")
    _add_position_arguments(navaids)

    region = subparsers.add_parser("region", help="List airports in an ISO region")
    region.add_argument("code")
    _add_types_argument(region, default=["all"])

    country = subparsers.add_parser("country", help="List airports in an ISO country")
    country.add_argument("code")
    _add_types_argument(country, default=["all"])

    return parser.parse_args(argv)


def _add_position_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("latitude", type=float)
    parser.add_argument("longitude", type=float)
    radius = parser.add_mutually_exclusive_group()
    radius.add_argument("--radius-m", type=float, default=None, help="Radius in meters")
    radius.add_argument("--radius-nm", type=float, default=None, help="Radius in nautical miles")
    parser.add_argument("--max", type=int, default=10, help="Maximum results (-1 for all)")


def _add_types_argument(parser: argparse.ArgumentParser, default: list[str]) -> None:
    parser.add_argument(
        "--types",
        nargs="+",
        default=default,
        help="Airport categories: closed heliport seaplane_base small medium large active runways all",
    )


def _radius_m(args: argparse.Namespace) -> float:
    if args.radius_nm is not None:
        return nautical_miles_to_meters(args.radius_nm)
    if args.radius_m is not None:
        return args.radius_m
    return 50000.0


def format_airport(airport: Airport, origin: tuple[float, float] | None = None) -> str:
    """Render an airport on one line, with distance when an origin is given."""
    region = airport.region.name or airport.iso_region
    country = airport.country.name or airport.iso_country
    line = f"{airport} [{airport.type}] {airport.municipality}, {region}, {country}"
    if origin is not None:
        km = distance(origin[0], origin[1], airport.latitude_deg, airport.longitude_deg) / 1000.0
        line += f" - {km:.1f} km"
    return line


def format_airport_details(airport: Airport) -> str:
    lines = [format_airport(airport)]
    if airport.elevation_ft is not None:
        lines.append(f"  elevation: {airport.elevation_ft} ft")
    for runway in airport.runways:
        lines.append(
            f"  runway {runway.runway_id}: {runway.length_ft}x{runway.width_ft} ft {runway.surface}"
        )
    for frequency in airport.frequencies:
        lines.append(f"  {frequency.type} {frequency.description}: {frequency.frequency_mhz:.3f} MHz")
    for navaid in airport.navaids:
        lines.append(f"  navaid {navaid}")
    return "\n".join(lines)


def format_navaid(navaid: Navaid, origin: tuple[float, float]) -> str:
    km = distance(origin[0], origin[1], navaid.latitude_deg, navaid.longitude_deg) / 1000.0
    return f"{navaid} {navaid.name} - {km:.1f} km"


def run(args: argparse.Namespace) -> int:
    """Execute the parsed command.

    Returns:
        Exit code (0 for success).
    """
    log = get_logger("airport_finder.main")

    config = AppConfig(ConfigLoader.load(args.config) if args.config else None)
    data_dir = Path(args.data_dir) if args.data_dir else config.data_dir
    files = config.files

    if args.command == "download":
        failures = download_database(data_dir, config.base_url, files)
        for filename, error in failures:
            print(f"Failed to download {filename}: {error}", file=sys.stderr)
        return 1 if failures else 0

    missing = missing_files(data_dir, files)
    if missing and not args.no_download:
        log.info("Downloading missing files: %s", ", ".join(missing))
        download_database(data_dir, config.base_url, {k: v for k, v in files.items() if v in missing})

    finder = AirportFinder()
    errors = finder.load(LoadOptions.preset(data_dir, files), config.airport_filter)
    for error in errors:
        log.warning("Load error: %s", error)

    if args.command == "icao":
        return _print_airport(finder.find_airport_by_icao_code(args.code))

    if args.command == "iata":
        return _print_airport(finder.find_airport_by_iata_code(args.code))

    if args.command == "nearest":
        origin = (args.latitude, args.longitude)
        airports = finder.find_nearest_airports(
            args.latitude, args.longitude, _radius_m(args), args.max, AirportType.from_names(args.types)
        )
        for i, airport in enumerate(airports, start=1):
            print(f"#{i}: {format_airport(airport, origin)}")
        return 0 if airports else 1

    if args.command == "navaids":
        origin = (args.latitude, args.longitude)
        navaids = finder.find_nearest_navaids(args.latitude, args.longitude, _radius_m(args), args.max)
        for i, navaid in enumerate(navaids, start=1):
            print(f"#{i}: {format_navaid(navaid, origin)}")
        return 0 if navaids else 1

    if args.command in ("region", "country"):
        mask = AirportType.from_names(args.types)
        if args.command == "region":
            airports = finder.find_airports_by_region(args.code, mask)
        else:
            airports = finder.find_airports_by_country(args.code, mask)
        for i, airport in enumerate(airports, start=1):
            print(f"#{i}: {format_airport(airport)}")
        return 0 if airports else 1

    return 2


def _print_airport(airport: Airport | None) -> int:
    if airport is None:
        print("Airport not found", file=sys.stderr)
        return 1
    print(format_airport_details(airport))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)

    try:
        initialize_logging(args.log_config)
        return run(args)
    except (ConfigError, LoggingError, InvalidCategoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
