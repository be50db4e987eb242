"""Nearest-neighbor selection over geographic records.

Distances for a whole candidate set are computed in one vectorized pass
with numpy. No spatial index is built: every query scans the candidates
it is given, which is the full in-memory table at most.

Records only need ``latitude_deg`` and ``longitude_deg`` attributes.

Typical usage:
    from airport_finder.geo.nearest import find_nearest, rank_by_distance

    closest = find_nearest(airports, 33.9425, -118.408, radius_m=25000)
    top10 = rank_by_distance(airports, 33.9425, -118.408, radius_m=-1, max_results=10)
"""

import sys
from collections.abc import Sequence
from typing import Protocol, TypeVar

import numpy as np
import numpy.typing as npt

from airport_finder.geo.distance import DEG_TO_RAD, EARTH_RADIUS_M, distance

UNBOUNDED_RADIUS_M = sys.float_info.max

# Relative band around the radius where numpy and math results may disagree
BOUNDARY_RTOL = 1e-9


class Located(Protocol):
    """Anything with a WGS84 coordinate in degrees."""

    latitude_deg: float
    longitude_deg: float


T = TypeVar("T", bound=Located)


def normalize_radius(radius_m: float) -> float:
    """Map a negative radius to the largest representable distance."""
    if radius_m < 0:
        return UNBOUNDED_RADIUS_M
    return radius_m


def distances_to(
    latitude_deg: float,
    longitude_deg: float,
    latitudes_deg: npt.ArrayLike,
    longitudes_deg: npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """Haversine distance from one point to many.

    Args:
        latitude_deg: Query latitude in degrees.
        longitude_deg: Query longitude in degrees.
        latitudes_deg: Candidate latitudes in degrees.
        longitudes_deg: Candidate longitudes in degrees.

    Returns:
        Array of distances in meters, one per candidate.
    """
    lat1 = latitude_deg * DEG_TO_RAD
    lon1 = longitude_deg * DEG_TO_RAD
    lat2 = np.asarray(latitudes_deg, dtype=np.float64) * DEG_TO_RAD
    lon2 = np.asarray(longitudes_deg, dtype=np.float64) * DEG_TO_RAD

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = np.sin(dlat * 0.5) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon * 0.5) ** 2
    # Rounding can push near-antipodal values just above 1
    a = np.clip(a, 0.0, 1.0)
    return 2 * np.arcsin(np.sqrt(a)) * EARTH_RADIUS_M


def _distances(items: Sequence[Located], latitude_deg: float, longitude_deg: float) -> npt.NDArray[np.float64]:
    lats = np.fromiter((item.latitude_deg for item in items), dtype=np.float64, count=len(items))
    lons = np.fromiter((item.longitude_deg for item in items), dtype=np.float64, count=len(items))
    return distances_to(latitude_deg, longitude_deg, lats, lons)


def _within_radius(
    items: Sequence[Located],
    latitude_deg: float,
    longitude_deg: float,
    distances: npt.NDArray[np.float64],
    radius_m: float,
) -> npt.NDArray[np.intp]:
    """Indices of items whose distance is at most radius_m, in input order.

    Candidates within a few ulps of the radius are decided with the scalar
    :func:`~airport_finder.geo.distance.distance` so that a record lying
    exactly on the bound is kept. Non-finite distances never match.
    """
    inside = distances <= radius_m
    (boundary,) = np.nonzero(np.abs(distances - radius_m) <= radius_m * BOUNDARY_RTOL)
    for i in boundary:
        item = items[i]
        inside[i] = distance(latitude_deg, longitude_deg, item.latitude_deg, item.longitude_deg) <= radius_m
    (within,) = np.nonzero(inside)
    return within


def rank_by_distance(
    items: Sequence[T],
    latitude_deg: float,
    longitude_deg: float,
    radius_m: float,
    max_results: int,
) -> list[T]:
    """Return items within radius, closest first.

    Equal distances keep the order the items were given in.

    Args:
        items: Candidate records.
        latitude_deg: Query latitude in degrees.
        longitude_deg: Query longitude in degrees.
        radius_m: Search radius in meters (negative = unbounded).
        max_results: Maximum number of results (negative = unbounded).

    Returns:
        Matching items sorted by ascending distance.

    Examples:
        >>> rank_by_distance(airports, 33.9425, -118.408, 50000, 5)
    """
    if max_results < 0:
        max_results = len(items)
    if not items or max_results == 0:
        return []

    radius_m = normalize_radius(radius_m)
    distances = _distances(items, latitude_deg, longitude_deg)

    within = _within_radius(items, latitude_deg, longitude_deg, distances, radius_m)
    order = within[np.argsort(distances[within], kind="stable")]
    return [items[i] for i in order[:max_results]]


def find_nearest(
    items: Sequence[T],
    latitude_deg: float,
    longitude_deg: float,
    radius_m: float,
) -> T | None:
    """Return the single closest item within radius.

    The first item encountered wins a tie.

    Args:
        items: Candidate records.
        latitude_deg: Query latitude in degrees.
        longitude_deg: Query longitude in degrees.
        radius_m: Search radius in meters (negative = unbounded).

    Returns:
        Closest item, or None if nothing lies within the radius.
    """
    if not items:
        return None

    radius_m = normalize_radius(radius_m)
    distances = _distances(items, latitude_deg, longitude_deg)

    within = _within_radius(items, latitude_deg, longitude_deg, distances, radius_m)
    if within.size == 0:
        return None
    # argmin returns the first minimum, so ties go to the earliest item
    index = within[int(np.argmin(distances[within]))]
    return items[index]
