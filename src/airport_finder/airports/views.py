"""Denormalized airport views.

A view copies an airport record together with its region, country,
frequencies, runways and associated navaids. Views are detached from the
tables: changing a view never changes stored data.

Typical usage:
    airport = make_airport(data, region, country, frequencies, runways, navaids)
    for runway in airport.runways:
        print(runway.low_end.ident, runway.high_end.ident)
"""

from dataclasses import dataclass, field

from airport_finder.airports.airport_db import AirportData
from airport_finder.airports.country_db import CountryData
from airport_finder.airports.frequency_db import FrequencyData
from airport_finder.airports.navaid_db import NavaidData
from airport_finder.airports.region_db import RegionData
from airport_finder.airports.runway_db import RunwayData
from airport_finder.airports.types import AirportType


@dataclass
class Region:
    """Region view. All fields are empty when the region is unknown."""

    iso_code: str = ""
    local_code: str = ""
    name: str = ""
    continent: str = ""
    iso_country: str = ""
    wikipedia_link: str = ""
    keywords: str = ""

    @classmethod
    def from_data(cls, region: RegionData) -> "Region":
        return cls(
            iso_code=region.iso_code,
            local_code=region.local_code,
            name=region.name,
            continent=region.continent,
            iso_country=region.iso_country,
            wikipedia_link=region.wikipedia_link,
            keywords=region.keywords,
        )


@dataclass
class Country:
    """Country view. All fields are empty when the country is unknown."""

    iso_code: str = ""
    name: str = ""
    continent: str = ""
    wikipedia_link: str = ""
    keywords: str = ""

    @classmethod
    def from_data(cls, country: CountryData) -> "Country":
        return cls(
            iso_code=country.iso_code,
            name=country.name,
            continent=country.continent,
            wikipedia_link=country.wikipedia_link,
            keywords=country.keywords,
        )


@dataclass
class Frequency:
    type: str
    description: str
    frequency_mhz: float

    @classmethod
    def from_data(cls, frequency: FrequencyData) -> "Frequency":
        return cls(
            type=frequency.type,
            description=frequency.description,
            frequency_mhz=frequency.frequency_mhz,
        )


@dataclass
class RunwayEnd:
    """One end of a runway.

    Attributes:
        ident: End identifier (e.g., "25R")
        latitude_deg: Threshold latitude in degrees
        longitude_deg: Threshold longitude in degrees
        elevation_ft: Threshold elevation in feet
        heading_deg_t: True heading in degrees
        displaced_threshold_ft: Displaced threshold length in feet
    """

    ident: str
    latitude_deg: float
    longitude_deg: float
    elevation_ft: int
    heading_deg_t: float
    displaced_threshold_ft: int


@dataclass
class Runway:
    length_ft: int
    width_ft: int
    surface: str
    lighted: bool
    closed: bool
    low_end: RunwayEnd
    high_end: RunwayEnd

    @property
    def runway_id(self) -> str:
        """Combined identifier such as "07L/25R"."""
        return f"{self.low_end.ident}/{self.high_end.ident}"

    @classmethod
    def from_data(cls, runway: RunwayData) -> "Runway":
        return cls(
            length_ft=runway.length_ft,
            width_ft=runway.width_ft,
            surface=runway.surface,
            lighted=runway.lighted,
            closed=runway.closed,
            low_end=RunwayEnd(
                ident=runway.le_ident,
                latitude_deg=runway.le_latitude_deg,
                longitude_deg=runway.le_longitude_deg,
                elevation_ft=runway.le_elevation_ft,
                heading_deg_t=runway.le_heading_deg_t,
                displaced_threshold_ft=runway.le_displaced_threshold_ft,
            ),
            high_end=RunwayEnd(
                ident=runway.he_ident,
                latitude_deg=runway.he_latitude_deg,
                longitude_deg=runway.he_longitude_deg,
                elevation_ft=runway.he_elevation_ft,
                heading_deg_t=runway.he_heading_deg_t,
                displaced_threshold_ft=runway.he_displaced_threshold_ft,
            ),
        )


@dataclass
class Navaid:
    ident: str
    name: str
    type: str
    frequency_khz: int
    latitude_deg: float
    longitude_deg: float
    elevation_ft: int
    iso_country: str
    dme_frequency_khz: int
    dme_channel: str
    dme_latitude_deg: float
    dme_longitude_deg: float
    dme_elevation_ft: int
    slaved_variation_deg: float
    magnetic_variation_deg: float
    usage_type: str
    power: str
    associated_airport: str

    @classmethod
    def from_data(cls, navaid: NavaidData) -> "Navaid":
        return cls(
            ident=navaid.ident,
            name=navaid.name,
            type=navaid.type,
            frequency_khz=navaid.frequency_khz,
            latitude_deg=navaid.latitude_deg,
            longitude_deg=navaid.longitude_deg,
            elevation_ft=navaid.elevation_ft,
            iso_country=navaid.iso_country,
            dme_frequency_khz=navaid.dme_frequency_khz,
            dme_channel=navaid.dme_channel,
            dme_latitude_deg=navaid.dme_latitude_deg,
            dme_longitude_deg=navaid.dme_longitude_deg,
            dme_elevation_ft=navaid.dme_elevation_ft,
            slaved_variation_deg=navaid.slaved_variation_deg,
            magnetic_variation_deg=navaid.magnetic_variation_deg,
            usage_type=navaid.usage_type,
            power=navaid.power,
            associated_airport=navaid.associated_airport,
        )

    def __str__(self) -> str:
        if self.frequency_khz:
            return f"{self.ident} ({self.type} {self.frequency_khz} kHz)"
        return f"{self.ident} ({self.type})"


@dataclass
class Airport:
    """Fully denormalized airport.

    Attributes:
        id: Numeric OurAirports id
        icao_code: ICAO identifier
        iata_code: IATA code, empty if none
        type: Source type string
        type_flag: Category flag
        region: Region view (empty if the region is unknown)
        country: Country view (empty if the country is unknown)
        frequencies: Radio frequencies in load order
        runways: Runways in load order
        navaids: Navaids whose associated airport is this ICAO code
    """

    id: int
    icao_code: str
    iata_code: str
    type: str
    type_flag: AirportType
    name: str
    latitude_deg: float
    longitude_deg: float
    elevation_ft: int | None
    continent: str
    iso_country: str
    iso_region: str
    municipality: str
    scheduled_service: bool
    gps_code: str
    local_code: str
    home_link: str
    wikipedia_link: str
    keywords: str
    region: Region = field(default_factory=Region)
    country: Country = field(default_factory=Country)
    frequencies: list[Frequency] = field(default_factory=list)
    runways: list[Runway] = field(default_factory=list)
    navaids: list[Navaid] = field(default_factory=list)

    def __str__(self) -> str:
        codes = self.icao_code if not self.iata_code else f"{self.icao_code}/{self.iata_code}"
        return f"{codes} {self.name} ({self.latitude_deg:.4f}, {self.longitude_deg:.4f})"


def make_airport(
    airport: AirportData | None,
    region: RegionData | None,
    country: CountryData | None,
    frequencies: list[FrequencyData],
    runways: list[RunwayData],
    navaids: list[NavaidData],
) -> Airport | None:
    """Assemble a denormalized airport view.

    Args:
        airport: Airport record, or None
        region: Matching region, or None for an empty region view
        country: Matching country, or None for an empty country view
        frequencies: The airport's frequencies
        runways: The airport's runways
        navaids: Navaids associated with the airport

    Returns:
        Airport view, or None if ``airport`` is None
    """
    if airport is None:
        return None

    return Airport(
        id=airport.id,
        icao_code=airport.icao_code,
        iata_code=airport.iata_code,
        type=airport.type,
        type_flag=airport.type_flag,
        name=airport.name,
        latitude_deg=airport.latitude_deg,
        longitude_deg=airport.longitude_deg,
        elevation_ft=airport.elevation_ft,
        continent=airport.continent,
        iso_country=airport.iso_country,
        iso_region=airport.iso_region,
        municipality=airport.municipality,
        scheduled_service=airport.scheduled_service,
        gps_code=airport.gps_code,
        local_code=airport.local_code,
        home_link=airport.home_link,
        wikipedia_link=airport.wikipedia_link,
        keywords=airport.keywords,
        region=Region.from_data(region) if region is not None else Region(),
        country=Country.from_data(country) if country is not None else Country(),
        frequencies=[Frequency.from_data(f) for f in frequencies],
        runways=[Runway.from_data(r) for r in runways],
        navaids=[Navaid.from_data(n) for n in navaids],
    )
