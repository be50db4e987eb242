"""Geodesic math and nearest-neighbor search."""

from airport_finder.geo.distance import (
    DEG_TO_RAD,
    EARTH_RADIUS_M,
    distance,
    kilometers_to_meters,
    meters_to_kilometers,
    meters_to_miles,
    meters_to_nautical_miles,
    miles_to_meters,
    nautical_miles_to_meters,
)
from airport_finder.geo.nearest import find_nearest, rank_by_distance

__all__ = [
    "DEG_TO_RAD",
    "EARTH_RADIUS_M",
    "distance",
    "find_nearest",
    "kilometers_to_meters",
    "meters_to_kilometers",
    "meters_to_miles",
    "meters_to_nautical_miles",
    "miles_to_meters",
    "nautical_miles_to_meters",
    "rank_by_distance",
]
