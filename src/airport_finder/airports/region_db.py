"""ISO region table keyed by region code."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class RegionData:
    """Region record.

    Attributes:
        id: Numeric OurAirports id
        iso_code: ISO 3166-2 region code (e.g., "US-CA")
        local_code: Local region code (e.g., "CA")
        name: Display name
        continent: Continent code
        iso_country: Owning country code
        wikipedia_link: Wikipedia URL
        keywords: Free-text keywords
    """

    id: int
    iso_code: str
    local_code: str = ""
    name: str = ""
    continent: str = ""
    iso_country: str = ""
    wikipedia_link: str = ""
    keywords: str = ""


class RegionDB:
    """In-memory region table.

    The first region loaded with a given code is kept.
    """

    def __init__(self) -> None:
        self.regions: dict[str, RegionData] = {}

    def __len__(self) -> int:
        return len(self.regions)

    def clear(self) -> None:
        self.regions.clear()

    def append(self, region: RegionData) -> bool:
        if region.iso_code in self.regions:
            logger.warning("Skipping duplicate region code %s", region.iso_code)
            return False
        self.regions[region.iso_code] = region
        return True

    def extend(self, regions: Iterable[RegionData]) -> int:
        return sum(1 for region in regions if self.append(region))

    def find_by_iso_code(self, iso_code: str) -> RegionData | None:
        return self.regions.get(iso_code)
