"""Airport tables, category flags and denormalized views.

This package holds the in-memory tables for the OurAirports datasets
(airports, runways, frequencies, regions, countries and navaids) and the
view types assembled from them. The query facade lives in
:mod:`airport_finder.airports.finder`.

Typical usage:
    from airport_finder.airports import AirportType
    from airport_finder.airports.finder import AirportFinder

    finder = AirportFinder()
    finder.load(LoadOptions.preset("data"), AirportType.ACTIVE)
"""

from airport_finder.airports.airport_db import AirportData, AirportDB
from airport_finder.airports.country_db import CountryData, CountryDB
from airport_finder.airports.frequency_db import FrequencyData, FrequencyDB
from airport_finder.airports.navaid_db import NavaidData, NavaidDB
from airport_finder.airports.region_db import RegionData, RegionDB
from airport_finder.airports.runway_db import RunwayData, RunwayDB
from airport_finder.airports.types import AirportType, validate_filter
from airport_finder.airports.views import (
    Airport,
    Country,
    Frequency,
    Navaid,
    Region,
    Runway,
    RunwayEnd,
    make_airport,
)

__all__ = [
    "Airport",
    "AirportData",
    "AirportDB",
    "AirportType",
    "Country",
    "CountryData",
    "CountryDB",
    "Frequency",
    "FrequencyData",
    "FrequencyDB",
    "Navaid",
    "NavaidData",
    "NavaidDB",
    "Region",
    "RegionData",
    "RegionDB",
    "Runway",
    "RunwayData",
    "RunwayDB",
    "RunwayEnd",
    "make_airport",
    "validate_filter",
]
