"""Country table keyed by ISO country code."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class CountryData:
    """Country record.

    Attributes:
        id: Numeric OurAirports id
        iso_code: ISO 3166-1 alpha-2 code (e.g., "US")
        name: Display name
        continent: Continent code
        wikipedia_link: Wikipedia URL
        keywords: Free-text keywords
    """

    id: int
    iso_code: str
    name: str = ""
    continent: str = ""
    wikipedia_link: str = ""
    keywords: str = ""


class CountryDB:
    """In-memory country table.

    The first country loaded with a given code is kept.
    """

    def __init__(self) -> None:
        self.countries: dict[str, CountryData] = {}

    def __len__(self) -> int:
        return len(self.countries)

    def clear(self) -> None:
        self.countries.clear()

    def append(self, country: CountryData) -> bool:
        if country.iso_code in self.countries:
            logger.warning("Skipping duplicate country code %s", country.iso_code)
            return False
        self.countries[country.iso_code] = country
        return True

    def extend(self, countries: Iterable[CountryData]) -> int:
        return sum(1 for country in countries if self.append(country))

    def find_by_iso_code(self, iso_code: str) -> CountryData | None:
        return self.countries.get(iso_code)
