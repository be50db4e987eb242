"""Tests for denormalized airport views."""

from airport_finder.airports.airport_db import AirportData
from airport_finder.airports.country_db import CountryData
from airport_finder.airports.frequency_db import FrequencyData
from airport_finder.airports.navaid_db import NavaidData
from airport_finder.airports.region_db import RegionData
from airport_finder.airports.runway_db import RunwayData
from airport_finder.airports.types import AirportType
from airport_finder.airports.views import Country, Navaid, Region, make_airport


def make_runway() -> RunwayData:
    return RunwayData(
        240922,
        3632,
        "KLAX",
        length_ft=12091,
        width_ft=150,
        surface="CON",
        lighted=True,
        le_ident="07L",
        le_heading_deg_t=83.0,
        he_ident="25R",
        he_heading_deg_t=263.0,
        he_displaced_threshold_ft=957,
    )


class TestMakeAirport:
    """Test assembling an airport view from table records."""

    def test_none_airport_is_none(self) -> None:
        assert make_airport(None, None, None, [], [], []) is None

    def test_copies_scalar_fields(self, lax: AirportData) -> None:
        airport = make_airport(lax, None, None, [], [], [])
        assert airport is not None
        assert airport.icao_code == "KLAX"
        assert airport.iata_code == "LAX"
        assert airport.type_flag == AirportType.LARGE
        assert airport.latitude_deg == lax.latitude_deg

    def test_missing_region_and_country_are_empty(self, lax: AirportData) -> None:
        airport = make_airport(lax, None, None, [], [], [])
        assert airport is not None
        assert airport.region == Region()
        assert airport.country == Country()
        assert airport.region.name == ""

    def test_joins_region_and_country(self, lax: AirportData) -> None:
        region = RegionData(306080, "US-CA", "CA", "California", "NA", "US")
        country = CountryData(302755, "US", "United States", "NA")

        airport = make_airport(lax, region, country, [], [], [])
        assert airport is not None
        assert airport.region.iso_code == "US-CA"
        assert airport.region.iso_country == "US"
        assert airport.region.name == "California"
        assert airport.country.name == "United States"

    def test_children_keep_order(self, lax: AirportData) -> None:
        frequencies = [
            FrequencyData(1, 3632, "KLAX", "ATIS", "ATIS", 133.8),
            FrequencyData(2, 3632, "KLAX", "TWR", "Tower", 133.9),
        ]
        navaids = [
            NavaidData(1, "LAX", 33.93, -118.43, type="VORTAC", associated_airport="KLAX"),
            NavaidData(2, "LX", 33.95, -118.37, type="NDB", associated_airport="KLAX"),
        ]

        airport = make_airport(lax, None, None, frequencies, [make_runway()], navaids)
        assert airport is not None
        assert [f.type for f in airport.frequencies] == ["ATIS", "TWR"]
        assert [n.ident for n in airport.navaids] == ["LAX", "LX"]
        assert len(airport.runways) == 1

    def test_view_is_detached(self, lax: AirportData) -> None:
        """Test changing a view leaves the source records untouched."""
        frequency = FrequencyData(1, 3632, "KLAX", "ATIS", "ATIS", 133.8)
        region = RegionData(306080, "US-CA", name="California")

        airport = make_airport(lax, region, None, [frequency], [], [])
        assert airport is not None
        airport.name = "Renamed"
        airport.region.name = "Renamed"
        airport.frequencies[0].frequency_mhz = 0.0

        assert lax.name == "KLAX"
        assert region.name == "California"
        assert frequency.frequency_mhz == 133.8

    def test_str(self, lax: AirportData, heliport: AirportData) -> None:
        lax_view = make_airport(lax, None, None, [], [], [])
        heliport_view = make_airport(heliport, None, None, [], [], [])
        assert str(lax_view) == "KLAX/LAX KLAX (33.9425, -118.4080)"
        assert str(heliport_view).startswith("H1 ")


class TestRunwayView:
    """Test runway end splitting."""

    def test_ends(self, lax: AirportData) -> None:
        airport = make_airport(lax, None, None, [], [make_runway()], [])
        assert airport is not None
        runway = airport.runways[0]

        assert runway.low_end.ident == "07L"
        assert runway.high_end.ident == "25R"
        assert runway.high_end.displaced_threshold_ft == 957
        assert runway.low_end.displaced_threshold_ft == 0
        assert runway.runway_id == "07L/25R"
        assert runway.lighted is True


class TestNavaidView:
    def test_str_with_frequency(self) -> None:
        navaid = Navaid.from_data(NavaidData(1, "LX", 33.95, -118.37, type="NDB", frequency_khz=338))
        assert str(navaid) == "LX (NDB 338 kHz)"

    def test_str_without_frequency(self) -> None:
        navaid = Navaid.from_data(NavaidData(1, "FIX", 0.0, 0.0, type="DME"))
        assert str(navaid) == "FIX (DME)"
