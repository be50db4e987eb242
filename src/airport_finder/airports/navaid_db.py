"""Navaid table.

Navaids reference airports only through the free-text
``associated_airport`` field, which is matched against airport ICAO
codes by value at query time. Nothing guarantees that the value names a
loaded airport, or only one.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from airport_finder.geo.nearest import find_nearest, rank_by_distance


@dataclass
class NavaidData:
    """Navigation aid record.

    Attributes:
        id: Numeric OurAirports id
        filename: Source file name in the OurAirports archive
        ident: Navaid identifier (e.g., "LAX")
        name: Navaid name
        type: Navaid type (e.g., "VORTAC", "NDB")
        frequency_khz: Frequency in kHz
        latitude_deg: Latitude in degrees
        longitude_deg: Longitude in degrees
        elevation_ft: Elevation in feet
        iso_country: ISO country code
        dme_frequency_khz: Paired DME frequency in kHz, 0 if none
        dme_channel: DME channel (e.g., "083X")
        dme_latitude_deg: DME antenna latitude in degrees
        dme_longitude_deg: DME antenna longitude in degrees
        dme_elevation_ft: DME antenna elevation in feet
        slaved_variation_deg: Magnetic variation the station is aligned to, in degrees
        magnetic_variation_deg: Local magnetic variation in degrees
        usage_type: Airspace usage (e.g., "HI", "LO", "BOTH", "TERMINAL", "RNAV")
        power: Power class (e.g., "LOW", "MEDIUM", "HIGH")
        associated_airport: ICAO code of the associated airport, may be empty
    """

    id: int
    ident: str
    latitude_deg: float
    longitude_deg: float
    filename: str = ""
    name: str = ""
    type: str = ""
    frequency_khz: int = 0
    elevation_ft: int = 0
    iso_country: str = ""
    dme_frequency_khz: int = 0
    dme_channel: str = ""
    dme_latitude_deg: float = 0.0
    dme_longitude_deg: float = 0.0
    dme_elevation_ft: int = 0
    slaved_variation_deg: float = 0.0
    magnetic_variation_deg: float = 0.0
    usage_type: str = ""
    power: str = ""
    associated_airport: str = ""


class NavaidDB:
    """In-memory navaid table in load order."""

    def __init__(self) -> None:
        self.navaids: list[NavaidData] = []

    def __len__(self) -> int:
        return len(self.navaids)

    def __iter__(self) -> Iterator[NavaidData]:
        return iter(self.navaids)

    def clear(self) -> None:
        self.navaids = []

    def append(self, navaid: NavaidData) -> None:
        self.navaids.append(navaid)

    def extend(self, navaids: Iterable[NavaidData]) -> int:
        count = 0
        for navaid in navaids:
            self.append(navaid)
            count += 1
        return count

    def find_by_airport_icao_code(self, icao_code: str) -> list[NavaidData]:
        """Get all navaids associated with an airport ICAO code.

        Args:
            icao_code: Airport ICAO code

        Returns:
            Matching navaids in load order (empty if none)
        """
        if not icao_code:
            return []
        return [navaid for navaid in self.navaids if navaid.associated_airport == icao_code]

    def find_nearest(self, latitude_deg: float, longitude_deg: float, radius_m: float) -> NavaidData | None:
        return find_nearest(self.navaids, latitude_deg, longitude_deg, radius_m)

    def find_nearest_many(
        self, latitude_deg: float, longitude_deg: float, radius_m: float, max_results: int
    ) -> list[NavaidData]:
        """Find navaids ordered by distance.

        Args:
            latitude_deg: Query latitude in degrees
            longitude_deg: Query longitude in degrees
            radius_m: Search radius in meters (negative = unbounded)
            max_results: Maximum number of results (negative = unbounded)

        Returns:
            Navaids sorted by ascending distance, ties in load order
        """
        return rank_by_distance(self.navaids, latitude_deg, longitude_deg, radius_m, max_results)
