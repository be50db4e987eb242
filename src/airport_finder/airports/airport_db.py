"""Airport table and its query operations.

Airports are kept in load order in a plain list. Code lookups and filters
are linear scans; nearest-neighbor queries delegate to
:mod:`airport_finder.geo.nearest`.

Typical usage:
    db = AirportDB()
    db.extend(read_airports("data/airports.csv"), AirportType.ACTIVE)

    lax = db.find_by_icao_code("KLAX")
    nearby = db.find_nearest_many(33.9425, -118.408, 50000, 10, AirportType.RUNWAYS)
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from airport_finder.airports.types import AirportType, validate_filter
from airport_finder.geo.nearest import find_nearest, rank_by_distance

logger = logging.getLogger(__name__)


@dataclass
class AirportData:
    """Airport record as stored in the table.

    Attributes:
        id: Numeric OurAirports id (unique per snapshot)
        icao_code: ICAO identifier (e.g., "KLAX")
        type: Source type string (e.g., "large_airport")
        type_flag: Single category flag derived from ``type``
        name: Airport name
        latitude_deg: Latitude in degrees (WGS84)
        longitude_deg: Longitude in degrees (WGS84)
        elevation_ft: Elevation in feet, None if unknown
        continent: Continent code (e.g., "NA")
        iso_country: ISO country code (e.g., "US")
        iso_region: ISO region code (e.g., "US-CA")
        municipality: City/town name
        scheduled_service: Whether airport has scheduled airline service
        gps_code: GPS code
        iata_code: IATA code, empty if none
        local_code: Local code
        home_link: Airport website URL
        wikipedia_link: Wikipedia URL
        keywords: Free-text keywords
    """

    id: int
    icao_code: str
    type: str
    type_flag: AirportType
    name: str
    latitude_deg: float
    longitude_deg: float
    elevation_ft: int | None = None
    continent: str = ""
    iso_country: str = ""
    iso_region: str = ""
    municipality: str = ""
    scheduled_service: bool = False
    gps_code: str = ""
    iata_code: str = ""
    local_code: str = ""
    home_link: str = ""
    wikipedia_link: str = ""
    keywords: str = ""


class AirportDB:
    """In-memory airport table.

    The first airport loaded with a given id is kept; later duplicates are
    skipped.

    Examples:
        >>> db = AirportDB()
        >>> db.append(lax)
        True
        >>> db.find_by_iata_code("LAX").icao_code
        'KLAX'
    """

    def __init__(self) -> None:
        """Initialize empty table."""
        self.airports: list[AirportData] = []
        self._ids: set[int] = set()

    def __len__(self) -> int:
        return len(self.airports)

    def __iter__(self) -> Iterator[AirportData]:
        return iter(self.airports)

    def clear(self) -> None:
        """Remove all airports."""
        self.airports = []
        self._ids.clear()

    def append(self, airport: AirportData, type_filter: int = AirportType.ALL) -> bool:
        """Store an airport if its category passes the filter.

        Args:
            airport: Airport record
            type_filter: Categories to keep

        Returns:
            True if stored, False if filtered out or a duplicate id
        """
        if not airport.type_flag & type_filter:
            return False
        if airport.id in self._ids:
            logger.warning("Skipping duplicate airport id %d (%s)", airport.id, airport.icao_code)
            return False
        self._ids.add(airport.id)
        self.airports.append(airport)
        return True

    def extend(self, airports: Iterable[AirportData], type_filter: int = AirportType.ALL) -> int:
        """Store a batch of airports.

        Returns:
            Number of airports stored
        """
        type_filter = validate_filter(type_filter)
        return sum(1 for airport in airports if self.append(airport, type_filter))

    def find_by_icao_code(self, icao_code: str) -> AirportData | None:
        for airport in self.airports:
            if airport.icao_code == icao_code:
                return airport
        return None

    def find_by_iata_code(self, iata_code: str) -> AirportData | None:
        if not iata_code:
            return None
        for airport in self.airports:
            if airport.iata_code == iata_code:
                return airport
        return None

    def find_by_type(self, type_filter: int) -> list[AirportData]:
        type_filter = validate_filter(type_filter)
        return [airport for airport in self.airports if airport.type_flag & type_filter]

    def find_by_region(self, iso_region: str, type_filter: int) -> list[AirportData]:
        type_filter = validate_filter(type_filter)
        return [
            airport
            for airport in self.airports
            if airport.type_flag & type_filter and airport.iso_region == iso_region
        ]

    def find_by_country(self, iso_country: str, type_filter: int) -> list[AirportData]:
        type_filter = validate_filter(type_filter)
        return [
            airport
            for airport in self.airports
            if airport.type_flag & type_filter and airport.iso_country == iso_country
        ]

    def find_by_continent(self, continent: str, type_filter: int) -> list[AirportData]:
        type_filter = validate_filter(type_filter)
        return [
            airport
            for airport in self.airports
            if airport.type_flag & type_filter and airport.continent == continent
        ]

    def find_all(
        self,
        iso_region: str = "",
        iso_country: str = "",
        continent: str = "",
        type_filter: int = AirportType.ALL,
    ) -> list[AirportData]:
        """Find airports matching every non-empty filter.

        Args:
            iso_region: Region code, empty for any region
            iso_country: Country code, empty for any country
            continent: Continent code, empty for any continent
            type_filter: Categories to match

        Returns:
            Matching airports in load order

        Examples:
            >>> db.find_all(iso_country="US", type_filter=AirportType.LARGE)
        """
        type_filter = validate_filter(type_filter)
        results = []
        for airport in self.airports:
            if not airport.type_flag & type_filter:
                continue
            if iso_region and airport.iso_region != iso_region:
                continue
            if iso_country and airport.iso_country != iso_country:
                continue
            if continent and airport.continent != continent:
                continue
            results.append(airport)
        return results

    def get_all_by_filter(self, type_filter: int) -> list[AirportData]:
        return self.find_by_type(type_filter)

    def find_nearest(
        self, latitude_deg: float, longitude_deg: float, radius_m: float, type_filter: int
    ) -> AirportData | None:
        """Find the closest airport of the given categories.

        Args:
            latitude_deg: Query latitude in degrees
            longitude_deg: Query longitude in degrees
            radius_m: Search radius in meters (negative = unbounded)
            type_filter: Categories to consider

        Returns:
            Closest airport, or None if none lies within the radius
        """
        candidates = self.find_by_type(type_filter)
        return find_nearest(candidates, latitude_deg, longitude_deg, radius_m)

    def find_nearest_many(
        self,
        latitude_deg: float,
        longitude_deg: float,
        radius_m: float,
        max_results: int,
        type_filter: int,
    ) -> list[AirportData]:
        """Find airports of the given categories ordered by distance.

        Args:
            latitude_deg: Query latitude in degrees
            longitude_deg: Query longitude in degrees
            radius_m: Search radius in meters (negative = unbounded)
            max_results: Maximum number of results (negative = unbounded)
            type_filter: Categories to consider

        Returns:
            Airports sorted by ascending distance, ties in load order
        """
        candidates = self.find_by_type(type_filter)
        return rank_by_distance(candidates, latitude_deg, longitude_deg, radius_m, max_results)
