"""Tests for the frequency, runway, region, country and navaid tables."""

import pytest

from airport_finder.airports.country_db import CountryData, CountryDB
from airport_finder.airports.frequency_db import FrequencyData, FrequencyDB
from airport_finder.airports.navaid_db import NavaidData, NavaidDB
from airport_finder.airports.region_db import RegionData, RegionDB
from airport_finder.airports.runway_db import RunwayData, RunwayDB


class TestFrequencyDB:
    """Test frequencies grouped by airport id."""

    @pytest.fixture
    def db(self) -> FrequencyDB:
        db = FrequencyDB()
        db.extend(
            [
                FrequencyData(1, 3632, "KLAX", "ATIS", "ATIS", 133.8),
                FrequencyData(2, 2001, "KSMO", "CTAF", "CTAF", 120.1),
                FrequencyData(3, 3632, "KLAX", "TWR", "Tower", 133.9),
            ]
        )
        return db

    def test_group_in_insertion_order(self, db: FrequencyDB) -> None:
        result = db.find_by_airport_id(3632)
        assert [f.type for f in result] == ["ATIS", "TWR"]

    def test_unknown_airport_is_empty(self, db: FrequencyDB) -> None:
        assert db.find_by_airport_id(999) == []

    def test_lookup_does_not_create_groups(self, db: FrequencyDB) -> None:
        db.find_by_airport_id(999)
        assert 999 not in db.frequencies

    def test_returned_list_is_a_copy(self, db: FrequencyDB) -> None:
        db.find_by_airport_id(3632).clear()
        assert len(db.find_by_airport_id(3632)) == 2

    def test_len_and_clear(self, db: FrequencyDB) -> None:
        assert len(db) == 3
        db.clear()
        assert len(db) == 0
        assert db.find_by_airport_id(3632) == []


class TestRunwayDB:
    """Test runways grouped by airport id."""

    @pytest.fixture
    def db(self) -> RunwayDB:
        db = RunwayDB()
        db.extend(
            [
                RunwayData(10, 3632, "KLAX", le_ident="07L", he_ident="25R"),
                RunwayData(11, 3632, "KLAX", le_ident="06R", he_ident="24L"),
            ]
        )
        return db

    def test_group_in_insertion_order(self, db: RunwayDB) -> None:
        assert [r.le_ident for r in db.find_by_airport_id(3632)] == ["07L", "06R"]

    def test_unknown_airport_is_empty(self, db: RunwayDB) -> None:
        assert db.find_by_airport_id(1) == []

    def test_empty_table(self) -> None:
        """Test a table with no data loaded still answers lookups."""
        assert RunwayDB().find_by_airport_id(3632) == []


class TestRegionDB:
    """Test regions keyed by ISO code."""

    def test_find_by_iso_code(self) -> None:
        db = RegionDB()
        db.append(RegionData(1, "US-CA", "CA", "California", "NA", "US"))
        region = db.find_by_iso_code("US-CA")
        assert region is not None
        assert region.name == "California"

    def test_absent_code(self) -> None:
        assert RegionDB().find_by_iso_code("US-CA") is None

    def test_duplicate_first_wins(self) -> None:
        db = RegionDB()
        assert db.append(RegionData(1, "US-CA", name="California")) is True
        assert db.append(RegionData(2, "US-CA", name="Duplicate")) is False

        region = db.find_by_iso_code("US-CA")
        assert region is not None
        assert region.name == "California"
        assert len(db) == 1


class TestCountryDB:
    """Test countries keyed by ISO code."""

    def test_find_by_iso_code(self) -> None:
        db = CountryDB()
        db.extend([CountryData(1, "US", "United States", "NA"), CountryData(2, "IS", "Iceland", "EU")])
        country = db.find_by_iso_code("IS")
        assert country is not None
        assert country.name == "Iceland"

    def test_duplicate_first_wins(self) -> None:
        db = CountryDB()
        stored = db.extend([CountryData(1, "US", "United States"), CountryData(2, "US", "Other")])
        assert stored == 1
        country = db.find_by_iso_code("US")
        assert country is not None
        assert country.name == "United States"

    def test_clear(self) -> None:
        db = CountryDB()
        db.append(CountryData(1, "US", "United States"))
        db.clear()
        assert db.find_by_iso_code("US") is None


class TestNavaidDB:
    """Test navaid association by value and nearest search."""

    @pytest.fixture
    def db(self) -> NavaidDB:
        db = NavaidDB()
        db.extend(
            [
                NavaidData(1, "LAX", 33.9331, -118.4320, type="VORTAC", associated_airport="KLAX"),
                NavaidData(2, "SMO", 34.0103, -118.4569, type="VOR-DME", associated_airport="KSMO"),
                NavaidData(3, "LX", 33.9500, -118.3700, type="NDB", associated_airport="KLAX"),
                NavaidData(4, "NWH", 35.0, -117.0, type="NDB", associated_airport="ZZZZ"),
                NavaidData(5, "FREE", 34.5, -118.0, type="NDB"),
            ]
        )
        return db

    def test_multiple_matches_in_order(self, db: NavaidDB) -> None:
        assert [n.ident for n in db.find_by_airport_icao_code("KLAX")] == ["LAX", "LX"]

    def test_single_match(self, db: NavaidDB) -> None:
        assert [n.ident for n in db.find_by_airport_icao_code("KSMO")] == ["SMO"]

    def test_no_match(self, db: NavaidDB) -> None:
        assert db.find_by_airport_icao_code("KVNY") == []

    def test_empty_code_matches_nothing(self, db: NavaidDB) -> None:
        """Test navaids without an associated airport are not joined to empty codes."""
        assert db.find_by_airport_icao_code("") == []

    def test_find_nearest_many(self, db: NavaidDB) -> None:
        result = db.find_nearest_many(33.9425, -118.408, 50_000, -1)
        assert [n.ident for n in result] == ["LAX", "LX", "SMO"]

    def test_find_nearest_many_unbounded(self, db: NavaidDB) -> None:
        result = db.find_nearest_many(33.9425, -118.408, -1, 2)
        assert [n.ident for n in result] == ["LAX", "LX"]

    def test_find_nearest(self, db: NavaidDB) -> None:
        navaid = db.find_nearest(35.0, -117.0, 0)
        assert navaid is not None
        assert navaid.ident == "NWH"

    def test_iteration_and_clear(self, db: NavaidDB) -> None:
        assert len(list(db)) == 5
        db.clear()
        assert len(db) == 0
