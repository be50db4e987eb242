"""OurAirports CSV readers.

Each reader yields typed records for one table. Rows with an unparseable
id or required numeric field are logged and skipped; a missing file or a
header without the required columns raises :class:`SourceError`.

Column reference: https://ourairports.com/help/data-dictionary.html

Typical usage:
    from airport_finder.ingest.csv_reader import read_airports, read_runways

    airports = list(read_airports("data/airports.csv", AirportType.ACTIVE))
    runways = list(read_runways("data/runways.csv"))
"""

import csv
import logging
import math
from collections.abc import Iterator
from pathlib import Path

from airport_finder.airports.airport_db import AirportData
from airport_finder.airports.country_db import CountryData
from airport_finder.airports.frequency_db import FrequencyData
from airport_finder.airports.navaid_db import NavaidData
from airport_finder.airports.region_db import RegionData
from airport_finder.airports.runway_db import RunwayData
from airport_finder.airports.types import AirportType
from airport_finder.errors import SourceError

logger = logging.getLogger(__name__)

AIRPORT_COLUMNS = ("id", "ident", "type", "name", "latitude_deg", "longitude_deg")
FREQUENCY_COLUMNS = ("id", "airport_ref", "frequency_mhz")
RUNWAY_COLUMNS = ("id", "airport_ref")
REGION_COLUMNS = ("id", "code")
COUNTRY_COLUMNS = ("id", "code")
NAVAID_COLUMNS = ("id", "ident", "latitude_deg", "longitude_deg")


def _rows(path: str | Path, required: tuple[str, ...]) -> Iterator[tuple[int, dict[str, str]]]:
    """Yield (line number, row) pairs from a CSV file with a header line."""
    path = Path(path)
    try:
        f = open(path, encoding="utf-8", newline="")
    except OSError as e:
        raise SourceError(str(path), f"cannot open file: {e}") from e

    with f:
        reader = csv.DictReader(f)
        try:
            header = reader.fieldnames or []
        except (csv.Error, UnicodeDecodeError, OSError) as e:
            raise SourceError(str(path), f"cannot read header: {e}") from e
        missing = [column for column in required if column not in header]
        if missing:
            raise SourceError(str(path), f"missing columns: {', '.join(missing)}")

        try:
            for row in reader:
                yield reader.line_num, row
        except (csv.Error, UnicodeDecodeError, OSError) as e:
            raise SourceError(str(path), f"line {reader.line_num}: {e}") from e


def _text(row: dict[str, str], column: str) -> str:
    return (row.get(column) or "").strip()


def _required_int(row: dict[str, str], column: str) -> int:
    return int(_text(row, column))


def _required_float(row: dict[str, str], column: str) -> float:
    return float(_text(row, column))


def _check_finite(latitude: float, longitude: float) -> None:
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise ValueError(f"non-finite coordinates ({latitude}, {longitude})")


def _int(row: dict[str, str], column: str, default: int = 0) -> int:
    value = _text(row, column)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        try:
            return int(float(value))
        except ValueError:
            return default


def _float(row: dict[str, str], column: str, default: float = 0.0) -> float:
    value = _text(row, column)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _bool(row: dict[str, str], column: str) -> bool:
    return _text(row, column).lower() in ("1", "yes", "true")


def read_airports(path: str | Path, type_filter: int = AirportType.ALL) -> Iterator[AirportData]:
    """Read airports, skipping unknown types and types outside the filter.

    Args:
        path: Path to airports.csv
        type_filter: Categories to keep

    Yields:
        Airport records in file order
    """
    for line, row in _rows(path, AIRPORT_COLUMNS):
        type_flag = AirportType.parse(_text(row, "type"))
        if type_flag is None or not type_flag & type_filter:
            continue

        try:
            airport_id = _required_int(row, "id")
            latitude = _required_float(row, "latitude_deg")
            longitude = _required_float(row, "longitude_deg")
            _check_finite(latitude, longitude)
        except ValueError as e:
            logger.warning("%s:%d: skipping airport %s: %s", path, line, _text(row, "ident"), e)
            continue

        elevation = _text(row, "elevation_ft")
        yield AirportData(
            id=airport_id,
            icao_code=_text(row, "ident"),
            type=_text(row, "type"),
            type_flag=type_flag,
            name=_text(row, "name"),
            latitude_deg=latitude,
            longitude_deg=longitude,
            elevation_ft=_int(row, "elevation_ft") if elevation else None,
            continent=_text(row, "continent"),
            iso_country=_text(row, "iso_country"),
            iso_region=_text(row, "iso_region"),
            municipality=_text(row, "municipality"),
            scheduled_service=_bool(row, "scheduled_service"),
            gps_code=_text(row, "gps_code"),
            iata_code=_text(row, "iata_code"),
            local_code=_text(row, "local_code"),
            home_link=_text(row, "home_link"),
            wikipedia_link=_text(row, "wikipedia_link"),
            keywords=_text(row, "keywords"),
        )


def read_frequencies(path: str | Path) -> Iterator[FrequencyData]:
    for line, row in _rows(path, FREQUENCY_COLUMNS):
        try:
            frequency = FrequencyData(
                id=_required_int(row, "id"),
                airport_id=_required_int(row, "airport_ref"),
                airport_ident=_text(row, "airport_ident"),
                type=_text(row, "type"),
                description=_text(row, "description"),
                frequency_mhz=_required_float(row, "frequency_mhz"),
            )
        except ValueError as e:
            logger.warning("%s:%d: skipping frequency: %s", path, line, e)
            continue
        yield frequency


def read_runways(path: str | Path) -> Iterator[RunwayData]:
    for line, row in _rows(path, RUNWAY_COLUMNS):
        try:
            runway_id = _required_int(row, "id")
            airport_id = _required_int(row, "airport_ref")
        except ValueError as e:
            logger.warning("%s:%d: skipping runway: %s", path, line, e)
            continue

        yield RunwayData(
            id=runway_id,
            airport_id=airport_id,
            airport_ident=_text(row, "airport_ident"),
            length_ft=_int(row, "length_ft"),
            width_ft=_int(row, "width_ft"),
            surface=_text(row, "surface"),
            lighted=_bool(row, "lighted"),
            closed=_bool(row, "closed"),
            le_ident=_text(row, "le_ident"),
            le_latitude_deg=_float(row, "le_latitude_deg"),
            le_longitude_deg=_float(row, "le_longitude_deg"),
            le_elevation_ft=_int(row, "le_elevation_ft"),
            le_heading_deg_t=_float(row, "le_heading_degT"),
            le_displaced_threshold_ft=_int(row, "le_displaced_threshold_ft"),
            he_ident=_text(row, "he_ident"),
            he_latitude_deg=_float(row, "he_latitude_deg"),
            he_longitude_deg=_float(row, "he_longitude_deg"),
            he_elevation_ft=_int(row, "he_elevation_ft"),
            he_heading_deg_t=_float(row, "he_heading_degT"),
            he_displaced_threshold_ft=_int(row, "he_displaced_threshold_ft"),
        )


def read_regions(path: str | Path) -> Iterator[RegionData]:
    for line, row in _rows(path, REGION_COLUMNS):
        try:
            region_id = _required_int(row, "id")
        except ValueError as e:
            logger.warning("%s:%d: skipping region: %s", path, line, e)
            continue

        yield RegionData(
            id=region_id,
            iso_code=_text(row, "code"),
            local_code=_text(row, "local_code"),
            name=_text(row, "name"),
            continent=_text(row, "continent"),
            iso_country=_text(row, "iso_country"),
            wikipedia_link=_text(row, "wikipedia_link"),
            keywords=_text(row, "keywords"),
        )


def read_countries(path: str | Path) -> Iterator[CountryData]:
    for line, row in _rows(path, COUNTRY_COLUMNS):
        try:
            country_id = _required_int(row, "id")
        except ValueError as e:
            logger.warning("%s:%d: skipping country: %s", path, line, e)
            continue

        yield CountryData(
            id=country_id,
            iso_code=_text(row, "code"),
            name=_text(row, "name"),
            continent=_text(row, "continent"),
            wikipedia_link=_text(row, "wikipedia_link"),
            keywords=_text(row, "keywords"),
        )


def read_navaids(path: str | Path) -> Iterator[NavaidData]:
    for line, row in _rows(path, NAVAID_COLUMNS):
        try:
            navaid_id = _required_int(row, "id")
            latitude = _float(row, "latitude_deg")
            longitude = _float(row, "longitude_deg")
            _check_finite(latitude, longitude)
        except ValueError as e:
            logger.warning("%s:%d: skipping navaid %s: %s", path, line, _text(row, "ident"), e)
            continue

        yield NavaidData(
            id=navaid_id,
            filename=_text(row, "filename"),
            ident=_text(row, "ident"),
            name=_text(row, "name"),
            type=_text(row, "type"),
            frequency_khz=_int(row, "frequency_khz"),
            latitude_deg=latitude,
            longitude_deg=longitude,
            elevation_ft=_int(row, "elevation_ft"),
            iso_country=_text(row, "iso_country"),
            dme_frequency_khz=_int(row, "dme_frequency_khz"),
            dme_channel=_text(row, "dme_channel"),
            dme_latitude_deg=_float(row, "dme_latitude_deg"),
            dme_longitude_deg=_float(row, "dme_longitude_deg"),
            dme_elevation_ft=_int(row, "dme_elevation_ft"),
            slaved_variation_deg=_float(row, "slaved_variation_deg"),
            magnetic_variation_deg=_float(row, "magnetic_variation_deg"),
            usage_type=_text(row, "usageType"),
            power=_text(row, "power"),
            associated_airport=_text(row, "associated_airport"),
        )
