"""Airport radio frequency table, grouped by owning airport id."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class FrequencyData:
    """Radio frequency record.

    Attributes:
        id: Numeric OurAirports id
        airport_id: Owning airport id
        airport_ident: Owning airport ident, informational only
        type: Frequency type tag (e.g., "TWR", "ATIS")
        description: Frequency description
        frequency_mhz: Frequency in MHz
    """

    id: int
    airport_id: int
    airport_ident: str
    type: str
    description: str
    frequency_mhz: float


class FrequencyDB:
    """In-memory frequency table keyed by airport id."""

    def __init__(self) -> None:
        self.frequencies: defaultdict[int, list[FrequencyData]] = defaultdict(list)

    def __len__(self) -> int:
        return sum(len(group) for group in self.frequencies.values())

    def clear(self) -> None:
        self.frequencies.clear()

    def append(self, frequency: FrequencyData) -> None:
        self.frequencies[frequency.airport_id].append(frequency)

    def extend(self, frequencies: Iterable[FrequencyData]) -> int:
        count = 0
        for frequency in frequencies:
            self.append(frequency)
            count += 1
        return count

    def find_by_airport_id(self, airport_id: int) -> list[FrequencyData]:
        """Get frequencies for an airport.

        Args:
            airport_id: Owning airport id

        Returns:
            New list of frequencies in load order (empty if none found)
        """
        # .get() so lookups never insert empty groups
        return list(self.frequencies.get(airport_id, ()))
