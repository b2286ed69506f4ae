"""
Tie-break Strategies

Each strategy orders two results once a band has been selected for the pair.
Return values follow the comparator convention: negative when the first
result sorts first, positive when the second does, 0 when they are equal.

Strategies:
    - population: population descending, missing population as 0
    - distance: distance to focus point ascending, then field descending
    - score: relevance score descending, NaN and ties favor the first result

Every strategy returns 0 for a result compared with itself.
"""

import math

from dataclasses import dataclass
from typing import Callable, Optional

from sorters.bands import Band, field_value
from sorters.distance import LatLon, center_point, haversine_distance
from sorters.constants import (
    FIELD_POPULATION,
    SCORE_FIELDS,
    STRATEGY_POPULATION,
    STRATEGY_DISTANCE,
    STRATEGY_SCORE,
    STRICT_TIES,
    TIE_SENTINEL,
)


@dataclass(frozen=True)
class SortContext:
    """Per-request state shared by all pairwise comparisons.

    Attributes:
        focus_point: (lat, lon) to bias towards, or None for no bias.
        distance_func: Geodesic primitive `(point_a, point_b) -> distance`.
        strict_ties: If True, score ties never return 0.
    """

    focus_point: Optional[LatLon] = None
    distance_func: Callable[[LatLon, LatLon], float] = haversine_distance
    strict_ties: bool = STRICT_TIES


def score_value(result: dict) -> float:
    for field in SCORE_FIELDS:
        value = result.get(field)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return math.nan
        return float(value)
    return math.nan


def _membership(band: Band, result_a: dict, result_b: dict) -> Optional[int]:
    """-1 / 1 when only one side is in `band`, None when both are."""
    a_in = band.contains(result_a)
    b_in = band.contains(result_b)
    if a_in and b_in:
        return None
    if a_in:
        return -1
    return 1


def _by_field(result_a: dict, result_b: dict, field: str):
    return field_value(result_b, field) - field_value(result_a, field)


def resolve_population(
    band: Band, result_a: dict, result_b: dict, context: SortContext
) -> float:
    if result_a is result_b:
        return 0
    winner = _membership(band, result_a, result_b)
    if winner is not None:
        return winner
    return _by_field(result_a, result_b, FIELD_POPULATION)


def resolve_distance(
    band: Band, result_a: dict, result_b: dict, context: SortContext
) -> float:
    """Closer to the focus point wins; without one, larger `band.field` wins.

    A result with a usable center point beats one without. When neither has
    one, the field comparison decides.
    """
    if result_a is result_b:
        return 0
    winner = _membership(band, result_a, result_b)
    if winner is not None:
        return winner

    if context.focus_point is not None:
        point_a = center_point(result_a)
        point_b = center_point(result_b)
        if point_a is not None and point_b is not None:
            distance_a = context.distance_func(context.focus_point, point_a)
            distance_b = context.distance_func(context.focus_point, point_b)
            return distance_a - distance_b
        if point_a is not None:
            return -1
        if point_b is not None:
            return 1

    return _by_field(result_a, result_b, band.field or FIELD_POPULATION)


def resolve_score(
    band: Band, result_a: dict, result_b: dict, context: SortContext
) -> float:
    """Higher score wins.

    NaN scores are never compared with `<`/`>`. Distinct records with tied or
    NaN scores get TIE_SENTINEL when `strict_ties` is set, else 0.
    """
    if result_a is result_b:
        return 0
    winner = _membership(band, result_a, result_b)
    if winner is not None:
        return winner
    score_a = score_value(result_a)
    score_b = score_value(result_b)
    if math.isnan(score_a) or math.isnan(score_b) or score_a == score_b:
        return TIE_SENTINEL if context.strict_ties else 0
    return -1 if score_a > score_b else 1


STRATEGIES = {
    STRATEGY_POPULATION: resolve_population,
    STRATEGY_DISTANCE: resolve_distance,
    STRATEGY_SCORE: resolve_score,
}
