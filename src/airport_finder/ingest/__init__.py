"""Ingestion adapters: CSV readers and the OurAirports downloader."""

from airport_finder.ingest.csv_reader import (
    read_airports,
    read_countries,
    read_frequencies,
    read_navaids,
    read_regions,
    read_runways,
)
from airport_finder.ingest.downloader import download_database, missing_files

__all__ = [
    "download_database",
    "missing_files",
    "read_airports",
    "read_countries",
    "read_frequencies",
    "read_navaids",
    "read_regions",
    "read_runways",
]
