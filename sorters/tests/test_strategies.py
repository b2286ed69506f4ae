"""
Tests for sorters/strategies.py — population, distance and score tie-breaks.
"""

import math

from tclogger import logger

from sorters.bands import BAND_TABLE, FALLBACK_BAND
from sorters.strategies import SortContext, score_value
from sorters.strategies import resolve_population, resolve_distance, resolve_score

BANDS = {band.name: band for band in BAND_TABLE}


def _make_result(layer: str, lat=None, lon=None, **kwargs) -> dict:
    """Helper to create a minimal result dict with an optional center point."""
    center_point = {}
    if lat is not None:
        center_point["lat"] = lat
    if lon is not None:
        center_point["lon"] = lon
    return {"layer": layer, "center_point": center_point, **kwargs}


def test_population_strategy():
    logger.note("> Test: population strategy")

    band = BANDS["region"]
    context = SortContext()
    big = _make_result("region", population=2)
    small = _make_result("region", population=1)
    none = _make_result("region")

    assert resolve_population(band, big, small, context) < 0
    assert resolve_population(band, small, big, context) > 0
    assert resolve_population(band, small, none, context) < 0
    assert resolve_population(band, none, small, context) > 0
    assert resolve_population(band, big, big, context) == 0

    logger.success("  PASSED")


def test_population_strategy_single_member():
    """Only one side in the band: that side wins regardless of population."""
    logger.note("> Test: population strategy single member")

    band = BANDS["country"]
    context = SortContext()
    country = _make_result("country")
    region = _make_result("region", population=10**9)

    assert resolve_population(band, country, region, context) == -1
    assert resolve_population(band, region, country, context) == 1

    logger.success("  PASSED")


def test_distance_strategy_without_focus_point():
    logger.note("> Test: distance strategy without focus point")

    band = BANDS["medium_locality"]
    context = SortContext()
    near_small = _make_result("locality", lat=1, lon=1, population=10_000)
    far_big = _make_result("locality", lat=2, lon=2, population=20_000)

    assert resolve_distance(band, far_big, near_small, context) < 0
    assert resolve_distance(band, near_small, far_big, context) > 0

    logger.success("  PASSED")


def test_distance_strategy_popularity_field():
    logger.note("> Test: distance strategy on popularity field")

    band = BANDS["popular_neighbourhood"]
    context = SortContext()
    more = _make_result("neighbourhood", popularity=3000)
    less = _make_result("neighbourhood", popularity=2000)

    assert resolve_distance(band, more, less, context) == -1000
    assert resolve_distance(band, less, more, context) == 1000

    logger.success("  PASSED")


def test_distance_strategy_with_focus_point():
    logger.note("> Test: distance strategy with focus point")

    band = BANDS["medium_locality"]
    context = SortContext(focus_point=(0.0, 0.0))
    near_small = _make_result("locality", lat=1, lon=1, population=10_000)
    far_big = _make_result("locality", lat=2, lon=2, population=20_000)
    no_point_big = _make_result("locality", population=400_000)
    no_point_small = _make_result("locality", population=6_000)

    assert resolve_distance(band, near_small, far_big, context) < 0
    assert resolve_distance(band, far_big, near_small, context) > 0
    # a usable center point beats a missing one
    assert resolve_distance(band, far_big, no_point_big, context) == -1
    assert resolve_distance(band, no_point_big, far_big, context) == 1
    # neither has a center point: population decides
    assert resolve_distance(band, no_point_big, no_point_small, context) < 0
    assert resolve_distance(band, no_point_small, no_point_big, context) > 0
    assert resolve_distance(band, near_small, near_small, context) == 0

    logger.success("  PASSED")


def test_distance_strategy_custom_distance_func():
    """The injected primitive is used, and only when both points exist."""
    logger.note("> Test: distance strategy with custom distance func")

    calls = []

    def manhattan(point_a, point_b):
        calls.append((point_a, point_b))
        return abs(point_a[0] - point_b[0]) + abs(point_a[1] - point_b[1])

    band = BANDS["small_locality"]
    context = SortContext(focus_point=(10.0, 10.0), distance_func=manhattan)
    a = _make_result("locality", lat=9, lon=9, population=1)
    b = _make_result("locality", lat=0, lon=0, population=2)

    assert resolve_distance(band, a, b, context) == 2 - 20
    assert calls == [((10.0, 10.0), (9.0, 9.0)), ((10.0, 10.0), (0.0, 0.0))]

    calls.clear()
    c = _make_result("locality", population=3)
    assert resolve_distance(band, a, c, context) == -1
    assert calls == []

    calls.clear()
    assert resolve_distance(band, a, b, SortContext(distance_func=manhattan)) == 1
    assert calls == []

    logger.success("  PASSED")


def test_score_value():
    logger.note("> Test: score value")

    assert score_value({"score": 2}) == 2.0
    assert score_value({"_score": 1.5}) == 1.5
    assert score_value({"score": 3, "_score": 1}) == 3.0
    assert math.isnan(score_value({}))
    assert math.isnan(score_value({"score": "high"}))
    assert math.isnan(score_value({"score": math.nan}))

    logger.success("  PASSED")


def test_score_strategy():
    logger.note("> Test: score strategy")

    context = SortContext(strict_ties=True)
    high = _make_result("address", score=2.0)
    low = _make_result("address", score=1.0)

    assert resolve_score(FALLBACK_BAND, high, low, context) < 0
    assert resolve_score(FALLBACK_BAND, low, high, context) > 0
    assert resolve_score(FALLBACK_BAND, high, high, context) == 0

    logger.success("  PASSED")


def test_score_strategy_ties_and_nan():
    """Ties and NaN never return 0 in strict mode: first argument wins."""
    logger.note("> Test: score strategy ties and NaN")

    strict = SortContext(strict_ties=True)
    loose = SortContext(strict_ties=False)
    a = _make_result("address", score=1.0)
    b = _make_result("address", score=1.0)
    nan = _make_result("address", score=math.nan)
    missing = _make_result("address")

    for x, y in [(a, b), (b, a), (a, nan), (nan, a), (nan, missing), (missing, a)]:
        assert resolve_score(FALLBACK_BAND, x, y, strict) == -1
        assert resolve_score(FALLBACK_BAND, x, y, loose) == 0

    logger.success("  PASSED")


def test_score_strategy_venue_membership():
    """A venue beats a non-venue even with a lower score."""
    logger.note("> Test: score strategy venue membership")

    band = BANDS["venue"]
    context = SortContext()
    venue = _make_result("venue", score=0.1)
    address = _make_result("address", score=100.0)

    assert resolve_score(band, venue, address, context) == -1
    assert resolve_score(band, address, venue, context) == 1

    logger.success("  PASSED")


if __name__ == "__main__":
    test_population_strategy()
    test_population_strategy_single_member()
    test_distance_strategy_without_focus_point()
    test_distance_strategy_popularity_field()
    test_distance_strategy_with_focus_point()
    test_distance_strategy_custom_distance_func()
    test_score_value()
    test_score_strategy()
    test_score_strategy_ties_and_nan()
    test_score_strategy_venue_membership()
    logger.success("\n✓ All sorters/strategies tests passed")

    # python -m sorters.tests.test_strategies
