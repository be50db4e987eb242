"""Runway table, grouped by owning airport id."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class RunwayData:
    """Runway record.

    ``le_*`` fields describe the low-numbered end, ``he_*`` the
    high-numbered end. Numeric fields are 0 when the source leaves
    them empty.

    Attributes:
        id: Numeric OurAirports id
        airport_id: Owning airport id
        airport_ident: Owning airport ident, informational only
        length_ft: Runway length in feet
        width_ft: Runway width in feet
        surface: Surface code (e.g., "ASPH", "CON")
        lighted: Whether runway is lighted
        closed: Whether runway is closed
    """

    id: int
    airport_id: int
    airport_ident: str = ""
    length_ft: int = 0
    width_ft: int = 0
    surface: str = ""
    lighted: bool = False
    closed: bool = False
    le_ident: str = ""
    le_latitude_deg: float = 0.0
    le_longitude_deg: float = 0.0
    le_elevation_ft: int = 0
    le_heading_deg_t: float = 0.0
    le_displaced_threshold_ft: int = 0
    he_ident: str = ""
    he_latitude_deg: float = 0.0
    he_longitude_deg: float = 0.0
    he_elevation_ft: int = 0
    he_heading_deg_t: float = 0.0
    he_displaced_threshold_ft: int = 0


class RunwayDB:
    """In-memory runway table keyed by airport id."""

    def __init__(self) -> None:
        self.runways: defaultdict[int, list[RunwayData]] = defaultdict(list)

    def __len__(self) -> int:
        return sum(len(group) for group in self.runways.values())

    def clear(self) -> None:
        self.runways.clear()

    def append(self, runway: RunwayData) -> None:
        self.runways[runway.airport_id].append(runway)

    def extend(self, runways: Iterable[RunwayData]) -> int:
        count = 0
        for runway in runways:
            self.append(runway)
            count += 1
        return count

    def find_by_airport_id(self, airport_id: int) -> list[RunwayData]:
        """Get runways for an airport, in load order (empty if none found)."""
        return list(self.runways.get(airport_id, ()))
