"""Pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from airport_finder.airports.airport_db import AirportData
from airport_finder.airports.types import AirportType

LAX = (33.9425, -118.408)
MIA = (25.7932, -80.2906)

AIRPORTS_CSV = (
    '"id","ident","type","name","latitude_deg","longitude_deg","elevation_ft",'
    '"continent","iso_country","iso_region","municipality","scheduled_service",'
    '"gps_code","iata_code","local_code","home_link","wikipedia_link","keywords"\n'
    '3632,"KLAX","large_airport","Los Angeles International Airport",33.9425,-118.408,125,'
    '"NA","US","US-CA","Los Angeles","yes","KLAX","LAX","LAX","https://www.flylax.com/",'
    '"https://en.wikipedia.org/wiki/Los_Angeles_International_Airport",""\n'
    '1001,"H1","heliport","Harbor Heliport",33.95,-118.40,,'
    '"NA","US","US-CA","Los Angeles","no","","","","","",""\n'
    '3001,"KXXX","closed","Old Field",33.96,-118.41,90,'
    '"NA","US","US-CA","Los Angeles","no","","","","","",""\n'
    '2001,"KSMO","small_airport","Santa Monica Municipal Airport",34.0158,-118.4513,177,'
    '"NA","US","US-CA","Santa Monica","no","KSMO","SMO","SMO","","",""\n'
    '2002,"KVNY","medium_airport","Van Nuys Airport",34.2098,-118.4898,802,'
    '"NA","US","US-CA","Van Nuys","no","KVNY","VNY","VNY","","",""\n'
    '5001,"KMIA","large_airport","Miami International Airport",25.7932,-80.2906,8,'
    '"NA","US","US-FL","Miami","yes","KMIA","MIA","MIA","","",""\n'
    '4001,"BIKF","large_airport","Keflavik International Airport",63.985,-22.6056,171,'
    '"EU","IS","IS-2","Reykjavik","yes","BIKF","KEF","","","",""\n'
    '6001,"XB1","balloonport","Balloon Field",34.0,-118.0,,'
    '"NA","US","US-CA","","no","","","","","",""\n'
    'bad,"KBAD","small_airport","Broken Row",34.0,-118.0,,'
    '"NA","US","US-CA","","no","","","","","",""\n'
)

FREQUENCIES_CSV = (
    '"id","airport_ref","airport_ident","type","description","frequency_mhz"\n'
    '60768,3632,"KLAX","ATIS","ATIS",133.8\n'
    '60769,3632,"KLAX","TWR","LAX Tower",133.9\n'
    '60770,2001,"KSMO","CTAF","SMO CTAF",120.1\n'
    '60771,3632,"KLAX","GND","broken",not-a-number\n'
)

RUNWAYS_CSV = (
    '"id","airport_ref","airport_ident","length_ft","width_ft","surface","lighted",'
    '"closed","le_ident","le_latitude_deg","le_longitude_deg","le_elevation_ft",'
    '"le_heading_degT","le_displaced_threshold_ft","he_ident","he_latitude_deg",'
    '"he_longitude_deg","he_elevation_ft","he_heading_degT","he_displaced_threshold_ft"\n'
    '240922,3632,"KLAX",12091,150,"CON",1,0,"07L",33.9358,-118.419,119,83,,'
    '"25R",33.9399,-118.38,94,263,957\n'
    '240923,3632,"KLAX",11095,200,"CON",1,0,"06R",33.9467,-118.4352,126,83,,'
    '"24L",33.9501,-118.4012,97,263,\n'
    '240924,2001,"KSMO",3500,150,"ASP",1,0,"03",34.0116,-118.4571,171,44,,'
    '"21",34.0197,-118.4478,175,224,\n'
)

REGIONS_CSV = (
    '"id","code","local_code","name","continent","iso_country","wikipedia_link","keywords"\n'
    '306080,"US-CA","CA","California","NA","US","https://en.wikipedia.org/wiki/California",\n'
    '306081,"US-FL","FL","Florida","NA","US","https://en.wikipedia.org/wiki/Florida",\n'
    '999999,"US-CA","CA","Duplicate California","NA","US","",\n'
)

COUNTRIES_CSV = (
    '"id","code","name","continent","wikipedia_link","keywords"\n'
    '302755,"US","United States","NA","https://en.wikipedia.org/wiki/United_States","America"\n'
)

NAVAIDS_CSV = (
    '"id","filename","ident","name","type","frequency_khz","latitude_deg",'
    '"longitude_deg","elevation_ft","iso_country","dme_frequency_khz","dme_channel",'
    '"dme_latitude_deg","dme_longitude_deg","dme_elevation_ft","slaved_variation_deg",'
    '"magnetic_variation_deg","usageType","power","associated_airport"\n'
    '90184,"Los_Angeles_VORTAC_US","LAX","Los Angeles","VORTAC",113600,33.9331,-118.4320,182,'
    '"US",113600,"083X",33.9334,-118.432,180,15.001,13.076,"BOTH","HIGH","KLAX"\n'
    '90185,"Lennox_NDB_US","LX","Lennox","NDB",338,33.9500,-118.3700,70,'
    '"US",,,,,,,12.5,"TERMINAL","LOW","KLAX"\n'
    '90186,"Santa_Monica_VOR_US","SMO","Santa Monica","VOR-DME",110800,34.0103,-118.4569,120,'
    '"US",110800,"045X",34.0103,-118.4569,120,15.0,12.0,"TERMINAL","LOW","KSMO"\n'
    '90187,"Nowhere_NDB_US","NWH","Nowhere","NDB",400,35.0,-117.0,2000,'
    '"US",,,,,,,12.0,"RNAV","LOW","ZZZZ"\n'
)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create a directory of OurAirports-format CSV files."""
    (tmp_path / "airports.csv").write_text(AIRPORTS_CSV, encoding="utf-8")
    (tmp_path / "airport-frequencies.csv").write_text(FREQUENCIES_CSV, encoding="utf-8")
    (tmp_path / "runways.csv").write_text(RUNWAYS_CSV, encoding="utf-8")
    (tmp_path / "regions.csv").write_text(REGIONS_CSV, encoding="utf-8")
    (tmp_path / "countries.csv").write_text(COUNTRIES_CSV, encoding="utf-8")
    (tmp_path / "navaids.csv").write_text(NAVAIDS_CSV, encoding="utf-8")
    return tmp_path


def make_airport_data(
    airport_id: int,
    icao_code: str,
    type_flag: AirportType,
    latitude_deg: float,
    longitude_deg: float,
    **kwargs,
) -> AirportData:
    """Build an AirportData with sensible defaults for the remaining fields."""
    fields = {
        "type": type_flag.name.lower() if type_flag.name else "",
        "name": icao_code,
        "continent": "NA",
        "iso_country": "US",
        "iso_region": "US-CA",
    }
    fields.update(kwargs)
    return AirportData(
        id=airport_id,
        icao_code=icao_code,
        type_flag=type_flag,
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
        **fields,
    )


@pytest.fixture
def lax() -> AirportData:
    return make_airport_data(3632, "KLAX", AirportType.LARGE, *LAX, iata_code="LAX")


@pytest.fixture
def heliport() -> AirportData:
    return make_airport_data(1001, "H1", AirportType.HELIPORT, 33.95, -118.40)


@pytest.fixture
def airport_factory():
    """Return the AirportData builder used across table and finder tests."""
    return make_airport_data
