"""In-memory OurAirports store with lookup, filter and nearest-neighbor queries.

Typical usage:
    from airport_finder import AirportFinder, AirportType, LoadOptions

    finder = AirportFinder()
    errors = finder.load(LoadOptions.preset("data"), AirportType.ALL)
    lax = finder.find_airport_by_icao_code("KLAX")
"""

from airport_finder.airports.finder import AirportFinder
from airport_finder.airports.types import AirportType
from airport_finder.airports.views import Airport, Country, Frequency, Navaid, Region, Runway
from airport_finder.core.config import OURAIRPORTS_FILES, LoadOptions
from airport_finder.errors import AirportFinderError, InvalidCategoryError, SourceError

__version__ = "0.1.0"

__all__ = [
    "OURAIRPORTS_FILES",
    "Airport",
    "AirportFinder",
    "AirportFinderError",
    "AirportType",
    "Country",
    "Frequency",
    "InvalidCategoryError",
    "LoadOptions",
    "Navaid",
    "Region",
    "Runway",
    "SourceError",
]
