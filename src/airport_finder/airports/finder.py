"""Airport finder: multi-table store with joined query results.

The finder owns one table per OurAirports dataset. Tables are bulk-loaded
once and then only read. Every airport returned by a query is assembled
into a denormalized :class:`~airport_finder.airports.views.Airport` on the
way out, so join cost follows the size of the result rather than the size
of the table.

The finder does no locking. Queries are read-only and may run from
several threads once loading has finished; ``clear`` and ``load`` must not
overlap with queries.

Typical usage:
    finder = AirportFinder()
    errors = finder.load(LoadOptions.preset("data"), AirportType.ALL)

    lax = finder.find_airport_by_icao_code("KLAX")
    nearest = finder.find_nearest_airport(33.9425, -118.408, 25000, AirportType.ACTIVE)
"""

import logging
from collections.abc import Callable, Iterable

from airport_finder.airports.airport_db import AirportData, AirportDB
from airport_finder.airports.country_db import CountryData, CountryDB
from airport_finder.airports.frequency_db import FrequencyData, FrequencyDB
from airport_finder.airports.navaid_db import NavaidData, NavaidDB
from airport_finder.airports.region_db import RegionData, RegionDB
from airport_finder.airports.runway_db import RunwayData, RunwayDB
from airport_finder.airports.types import AirportType, validate_filter
from airport_finder.airports.views import Airport, Country, Navaid, Region, make_airport
from airport_finder.core.config import LoadOptions
from airport_finder.errors import AirportFinderError, SourceError
from airport_finder.ingest.csv_reader import (
    read_airports,
    read_countries,
    read_frequencies,
    read_navaids,
    read_regions,
    read_runways,
)

logger = logging.getLogger(__name__)


class AirportFinder:
    """Query interface over the airport, runway, frequency, region,
    country and navaid tables.

    Examples:
        >>> finder = AirportFinder()
        >>> finder.load(LoadOptions.preset("data"))
        []
        >>> finder.find_airport_by_iata_code("DUS").icao_code
        'EDDL'
    """

    def __init__(self) -> None:
        self.airport_db = AirportDB()
        self.frequency_db = FrequencyDB()
        self.runway_db = RunwayDB()
        self.region_db = RegionDB()
        self.country_db = CountryDB()
        self.navaid_db = NavaidDB()

    def clear(self) -> None:
        """Reset every table to empty."""
        self.airport_db.clear()
        self.frequency_db.clear()
        self.runway_db.clear()
        self.region_db.clear()
        self.country_db.clear()
        self.navaid_db.clear()
        logger.info("Cleared all tables")

    def load(
        self, options: LoadOptions | None, airport_filter: int = AirportType.ALL
    ) -> list[Exception]:
        """Load CSV files into the tables.

        Every source is attempted even if an earlier one fails, so a run
        where airports load but frequencies do not still leaves a usable
        airport-only store.

        Args:
            options: Paths of the files to load; only the airports file is required
            airport_filter: Airport categories to store; others are dropped

        Returns:
            List of per-source errors (empty on full success)

        Raises:
            InvalidCategoryError: If airport_filter is empty or unknown
        """
        airport_filter = validate_filter(airport_filter)

        if options is None:
            return [AirportFinderError("unable to load anything since options are None")]
        if not options.airports_filename:
            return [AirportFinderError("cannot load airports: invalid filename")]

        sources: list[tuple[str, str, Callable[[str], int]]] = [
            (
                "airports",
                options.airports_filename,
                lambda path: self.airport_db.extend(read_airports(path, airport_filter), airport_filter),
            ),
            ("frequencies", options.frequencies_filename, lambda path: self.frequency_db.extend(read_frequencies(path))),
            ("runways", options.runways_filename, lambda path: self.runway_db.extend(read_runways(path))),
            ("regions", options.regions_filename, lambda path: self.region_db.extend(read_regions(path))),
            ("countries", options.countries_filename, lambda path: self.country_db.extend(read_countries(path))),
            ("navaids", options.navaids_filename, lambda path: self.navaid_db.extend(read_navaids(path))),
        ]

        errors: list[Exception] = []
        for name, path, loader in sources:
            if not path:
                continue
            logger.info("Loading %s from %s", name, path)
            try:
                count = loader(path)
            except SourceError as e:
                logger.error("Failed to load %s: %s", name, e)
                errors.append(e)
                continue
            logger.info("Loaded %d %s", count, name)

        return errors

    def load_records(
        self,
        airports: Iterable[AirportData] = (),
        frequencies: Iterable[FrequencyData] = (),
        runways: Iterable[RunwayData] = (),
        regions: Iterable[RegionData] = (),
        countries: Iterable[CountryData] = (),
        navaids: Iterable[NavaidData] = (),
        airport_filter: int = AirportType.ALL,
    ) -> None:
        """Bulk-load records that were already parsed elsewhere.

        Args:
            airports: Airport records
            frequencies: Frequency records
            runways: Runway records
            regions: Region records
            countries: Country records
            navaids: Navaid records
            airport_filter: Airport categories to store
        """
        self.airport_db.extend(airports, airport_filter)
        self.frequency_db.extend(frequencies)
        self.runway_db.extend(runways)
        self.region_db.extend(regions)
        self.country_db.extend(countries)
        self.navaid_db.extend(navaids)

    def counts(self) -> dict[str, int]:
        """Number of records in each table."""
        return {
            "airports": len(self.airport_db),
            "frequencies": len(self.frequency_db),
            "runways": len(self.runway_db),
            "regions": len(self.region_db),
            "countries": len(self.country_db),
            "navaids": len(self.navaid_db),
        }

    # Airports

    def find_airport_by_icao_code(self, icao_code: str) -> Airport | None:
        return self._make_airport(self.airport_db.find_by_icao_code(icao_code))

    def find_airport_by_iata_code(self, iata_code: str) -> Airport | None:
        return self._make_airport(self.airport_db.find_by_iata_code(iata_code))

    def find_airports_by_type(self, airport_filter: int) -> list[Airport]:
        return self._make_airports(self.airport_db.find_by_type(airport_filter))

    def find_airports_by_region(self, iso_region: str, airport_filter: int) -> list[Airport]:
        return self._make_airports(self.airport_db.find_by_region(iso_region, airport_filter))

    def find_airports_by_country(self, iso_country: str, airport_filter: int) -> list[Airport]:
        return self._make_airports(self.airport_db.find_by_country(iso_country, airport_filter))

    def find_airports_by_continent(self, continent: str, airport_filter: int) -> list[Airport]:
        return self._make_airports(self.airport_db.find_by_continent(continent, airport_filter))

    def find_all_airports(
        self,
        iso_region: str = "",
        iso_country: str = "",
        continent: str = "",
        airport_filter: int = AirportType.ALL,
    ) -> list[Airport]:
        """Find airports matching every non-empty filter (empty string = any)."""
        return self._make_airports(
            self.airport_db.find_all(iso_region, iso_country, continent, airport_filter)
        )

    def get_all_airports(self, airport_filter: int = AirportType.ALL) -> list[Airport]:
        return self._make_airports(self.airport_db.get_all_by_filter(airport_filter))

    def find_nearest_airport(
        self, latitude_deg: float, longitude_deg: float, radius_m: float, airport_filter: int
    ) -> Airport | None:
        """Find the closest airport of the given categories within radius.

        Args:
            latitude_deg: Query latitude in degrees
            longitude_deg: Query longitude in degrees
            radius_m: Search radius in meters (negative = unbounded)
            airport_filter: Categories to consider

        Returns:
            Airport view, or None if nothing lies within the radius
        """
        nearest = self.airport_db.find_nearest(latitude_deg, longitude_deg, radius_m, airport_filter)
        return self._make_airport(nearest)

    def find_nearest_airports(
        self,
        latitude_deg: float,
        longitude_deg: float,
        radius_m: float,
        max_results: int,
        airport_filter: int,
    ) -> list[Airport]:
        """Find airports within radius ordered by ascending distance.

        Args:
            latitude_deg: Query latitude in degrees
            longitude_deg: Query longitude in degrees
            radius_m: Search radius in meters (negative = unbounded)
            max_results: Maximum number of results (negative = unbounded)
            airport_filter: Categories to consider

        Returns:
            Airport views, closest first
        """
        nearest = self.airport_db.find_nearest_many(
            latitude_deg, longitude_deg, radius_m, max_results, airport_filter
        )
        return self._make_airports(nearest)

    # Navaids

    def find_nearest_navaid(self, latitude_deg: float, longitude_deg: float, radius_m: float) -> Navaid | None:
        navaid = self.navaid_db.find_nearest(latitude_deg, longitude_deg, radius_m)
        return Navaid.from_data(navaid) if navaid is not None else None

    def find_nearest_navaids(
        self, latitude_deg: float, longitude_deg: float, radius_m: float, max_results: int
    ) -> list[Navaid]:
        nearest = self.navaid_db.find_nearest_many(latitude_deg, longitude_deg, radius_m, max_results)
        return [Navaid.from_data(navaid) for navaid in nearest]

    def find_navaids_by_airport_icao_code(self, icao_code: str) -> list[Navaid]:
        return [Navaid.from_data(navaid) for navaid in self.navaid_db.find_by_airport_icao_code(icao_code)]

    def get_all_navaids(self) -> list[Navaid]:
        return [Navaid.from_data(navaid) for navaid in self.navaid_db]

    # Regions and countries

    def find_region(self, iso_code: str) -> Region | None:
        region = self.region_db.find_by_iso_code(iso_code)
        return Region.from_data(region) if region is not None else None

    def find_country(self, iso_code: str) -> Country | None:
        country = self.country_db.find_by_iso_code(iso_code)
        return Country.from_data(country) if country is not None else None

    def _make_airport(self, airport: AirportData | None) -> Airport | None:
        if airport is None:
            return None
        return make_airport(
            airport,
            self.region_db.find_by_iso_code(airport.iso_region),
            self.country_db.find_by_iso_code(airport.iso_country),
            self.frequency_db.find_by_airport_id(airport.id),
            self.runway_db.find_by_airport_id(airport.id),
            self.navaid_db.find_by_airport_icao_code(airport.icao_code),
        )

    def _make_airports(self, airports: Iterable[AirportData]) -> list[Airport]:
        return [view for view in map(self._make_airport, airports) if view is not None]
