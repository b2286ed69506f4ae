"""
Distance Resolution for Geocoding Results

Extracts (lat, lon) pairs from result records and request contexts, and
provides the default geodesic distance primitive.

Functions:
    - to_coordinate: Normalize a raw coordinate value, or None if unusable
    - parse_lat_lon: Read a (lat, lon) pair from a dict, flat or nested keys
    - center_point: The (lat, lon) of a result's center point, if complete
    - haversine_distance: Great-circle distance in metres
"""

import math

from typing import Optional
from tclogger import dict_get

from sorters.constants import (
    CENTER_POINT_FIELDS,
    LAT_FIELD,
    LON_FIELD,
    EARTH_RADIUS_M,
)

LatLon = tuple[float, float]


def to_coordinate(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        coord = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(coord) or math.isinf(coord):
        return None
    return coord


def _lookup(obj: dict, key: str):
    # request contexts carry flat dotted keys like "focus.point.lat"
    if key in obj:
        return obj[key]
    return dict_get(obj, key, None)


def parse_lat_lon(obj: dict, lat_field: str, lon_field: str) -> Optional[LatLon]:
    """Read a (lat, lon) pair from `obj`.

    Both fields must be present and numeric, otherwise None is returned.
    Keys may be literal (`{"focus.point.lat": 0}`) or dotted paths into
    nested dicts (`{"focus": {"point": {"lat": 0}}}`).
    """
    if not isinstance(obj, dict):
        return None
    lat = to_coordinate(_lookup(obj, lat_field))
    lon = to_coordinate(_lookup(obj, lon_field))
    if lat is None or lon is None:
        return None
    return (lat, lon)


def center_point(result: dict) -> Optional[LatLon]:
    for field in CENTER_POINT_FIELDS:
        point = result.get(field)
        if point is not None:
            return parse_lat_lon(point, LAT_FIELD, LON_FIELD)
    return None


def haversine_distance(
    point_a: LatLon, point_b: LatLon, radius: float = EARTH_RADIUS_M
) -> float:
    """Compute the great-circle distance between two (lat, lon) points.

    Args:
        point_a: (lat, lon) in degrees.
        point_b: (lat, lon) in degrees.
        radius: Sphere radius, defaults to the mean Earth radius in metres.

    Returns:
        Non-negative distance in the unit of `radius`.
    """
    lat1, lon1 = point_a
    lat2, lon2 = point_b

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # clamp float drift near the poles / antipodes
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius * c
