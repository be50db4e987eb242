"""Great-circle distance and unit conversions.

All distances are in meters unless a function name says otherwise.

Typical usage example:
    from airport_finder.geo.distance import distance, nautical_miles_to_meters

    meters = distance(33.9425, -118.408, 25.7932, -80.2906)
    radius = nautical_miles_to_meters(100.0)
"""

import math

DEG_TO_RAD = math.pi / 180.0
EARTH_RADIUS_M = 6371.0 * 1000.0


def distance(
    from_latitude_deg: float,
    from_longitude_deg: float,
    to_latitude_deg: float,
    to_longitude_deg: float,
) -> float:
    """Calculate great circle distance between two coordinates.

    Uses the Haversine formula on a spherical Earth.

    Args:
        from_latitude_deg: Latitude of the first point in degrees.
        from_longitude_deg: Longitude of the first point in degrees.
        to_latitude_deg: Latitude of the second point in degrees.
        to_longitude_deg: Longitude of the second point in degrees.

    Returns:
        Distance in meters.

    Examples:
        >>> round(distance(33.9425, -118.408, 25.7932, -80.2906) / 1000)
        3757
    """
    lat1 = from_latitude_deg * DEG_TO_RAD
    lon1 = from_longitude_deg * DEG_TO_RAD
    lat2 = to_latitude_deg * DEG_TO_RAD
    lon2 = to_longitude_deg * DEG_TO_RAD

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat * 0.5) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon * 0.5) ** 2
    # Rounding can push near-antipodal values just above 1
    a = min(a, 1.0)
    c = 2 * math.asin(math.sqrt(a))
    return c * EARTH_RADIUS_M


def kilometers_to_meters(km: float) -> float:
    return km * 1000.0


def miles_to_meters(mi: float) -> float:
    return mi * 1609.34


def nautical_miles_to_meters(nm: float) -> float:
    return nm * 1852.0


def meters_to_kilometers(m: float) -> float:
    return m * 0.001


def meters_to_miles(m: float) -> float:
    return m * 0.000621373


def meters_to_nautical_miles(m: float) -> float:
    return m * 0.000539957
