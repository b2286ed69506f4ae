"""
Geocoding Result Comparator

Builds the two-argument ordering function used to sort geocoding results:
administrative importance first, then population/popularity within a band,
then proximity to the request's focus point.

Usage:
    >>> from sorters import build_comparator, sort_results
    >>> compare = build_comparator({"focus.point.lat": 0, "focus.point.lon": 0})
    >>> results.sort(key=functools.cmp_to_key(compare))
    >>> # or, without mutating the input
    >>> ordered = sort_results(results, clean)
"""

import functools

from typing import Callable, Optional
from tclogger import logger, logstr

from configs.envs import GEO_SORT_ENVS
from sorters.bands import select_band
from sorters.constants import FOCUS_POINT_LAT, FOCUS_POINT_LON
from sorters.distance import LatLon, parse_lat_lon, haversine_distance
from sorters.strategies import STRATEGIES, SortContext


def parse_focus_point(clean: Optional[dict]) -> Optional[LatLon]:
    """Focus point of a request context, or None if either field is unusable."""
    if not clean:
        return None
    focus_point = parse_lat_lon(clean, FOCUS_POINT_LAT, FOCUS_POINT_LON)
    if focus_point is None and (FOCUS_POINT_LAT in clean or FOCUS_POINT_LON in clean):
        logger.warn(
            f"× Ignore incomplete focus point: "
            f"lat={clean.get(FOCUS_POINT_LAT)}, lon={clean.get(FOCUS_POINT_LON)}"
        )
    return focus_point


def build_comparator(
    clean: Optional[dict] = None,
    distance_func: Callable[[LatLon, LatLon], float] = haversine_distance,
    strict_ties: Optional[bool] = None,
) -> Callable[[dict, dict], float]:
    """Build a comparator for one search request.

    Args:
        clean: Request context, optionally with "focus.point.lat" and
            "focus.point.lon" (flat keys or nested dicts).
        distance_func: Geodesic primitive, only called when both results and
            the request have coordinates.
        strict_ties: Never return 0 for non-identical score ties.
            None uses `geo_sort.strict_ties` from configs.

    Returns:
        `compare(result_a, result_b)`: negative if result_a sorts first,
        positive if result_b sorts first.
    """
    if strict_ties is None:
        strict_ties = bool(GEO_SORT_ENVS.get("strict_ties", True))
    context = SortContext(
        focus_point=parse_focus_point(clean),
        distance_func=distance_func,
        strict_ties=strict_ties,
    )

    def compare(result_a: dict, result_b: dict) -> float:
        band = select_band(result_a, result_b)
        return STRATEGIES[band.strategy](band, result_a, result_b, context)

    compare.context = context
    return compare


def sort_results(
    results: list[dict],
    clean: Optional[dict] = None,
    verbose: Optional[bool] = None,
    **kwargs,
) -> list[dict]:
    """Return a new list of `results` in ranking order.

    Extra kwargs are passed to `build_comparator`.
    """
    if verbose is None:
        verbose = bool(GEO_SORT_ENVS.get("verbose", False))
    compare = build_comparator(clean, **kwargs)
    sorted_results = sorted(results, key=functools.cmp_to_key(compare))
    if verbose:
        focus_point = compare.context.focus_point
        if focus_point:
            focus_str = logstr.okay(f"{focus_point[0]},{focus_point[1]}")
        else:
            focus_str = logstr.mesg("none")
        logger.note(f"> Sorted {len(sorted_results)} results, focus point: {focus_str}")
    return sorted_results
