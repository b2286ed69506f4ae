"""
Band Classifier and Band Table

A band is a named classification of a geocoding result: a layer tag,
optionally restricted to a half-open [low, high) range of a numeric field
(population or popularity). Bands are ordered by priority in BAND_TABLE,
highest first; the first band that either side of a pair belongs to decides
which tie-break strategy orders that pair.

Priority (highest first):
    1.  mega locality / mega localadmin          population
    2.  continent                                population
    3.  country                                  population
    4.  dependency                               population
    5.  large locality / large localadmin        distance, population
    6.  macroregion                              population
    7.  region                                   population
    8.  borough                                  population
    9.  very popular neighbourhood               distance, popularity
    10. medium locality / medium localadmin      distance, population
    11. macrocounty                              population
    12. county                                   population
    13. macrohood                                population
    14. venue                                    score
    15. popular neighbourhood                    distance, popularity
    16. small locality / small localadmin        distance, population
    17. non popular neighbourhood                distance, popularity
    18. fallback                                 score

Counties rank below medium cities so that e.g. Lancaster County, PA does not
outrank Lancaster, PA (the city).
"""

import math

from dataclasses import dataclass
from typing import Optional

from sorters.constants import (
    CITY_LAYERS,
    LAYER_CONTINENT,
    LAYER_COUNTRY,
    LAYER_DEPENDENCY,
    LAYER_MACROREGION,
    LAYER_REGION,
    LAYER_BOROUGH,
    LAYER_NEIGHBOURHOOD,
    LAYER_MACROCOUNTY,
    LAYER_COUNTY,
    LAYER_MACROHOOD,
    LAYER_VENUE,
    MEGA_POPULATION,
    LARGE_POPULATION,
    MEDIUM_POPULATION,
    SMALL_POPULATION,
    VERY_POPULAR_POPULARITY,
    POPULAR_POPULARITY,
    NON_POPULAR_POPULARITY,
    FIELD_LAYER,
    FIELD_POPULATION,
    FIELD_POPULARITY,
    STRATEGY_TYPE,
    STRATEGY_POPULATION,
    STRATEGY_DISTANCE,
    STRATEGY_SCORE,
)


def field_value(result: dict, field: str):
    """Numeric value of `field`, with missing or non-numeric values as 0."""
    value = result.get(field)
    if value is None or isinstance(value, bool):
        return 0
    if not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and math.isnan(value):
        return 0
    return value


@dataclass(frozen=True)
class Band:
    """One row of the band table.

    Attributes:
        name: Band name, e.g. "large_locality".
        strategy: Tie-break strategy used when this band is selected.
        layer: Layer tag the result must carry. None matches any result.
        field: Numeric field restricting the band, or None for layer-only bands.
        low: Inclusive lower bound of `field`.
        high: Exclusive upper bound of `field`.
    """

    name: str
    strategy: STRATEGY_TYPE
    layer: Optional[str] = None
    field: Optional[str] = None
    low: float = 0
    high: float = math.inf

    def contains(self, result: dict) -> bool:
        if self.layer is not None and result.get(FIELD_LAYER) != self.layer:
            return False
        if self.field is None:
            return True
        return self.low <= field_value(result, self.field) < self.high

    def either_contains(self, result_a: dict, result_b: dict) -> bool:
        return self.contains(result_a) or self.contains(result_b)


def layer_band(layer: str, strategy: STRATEGY_TYPE = STRATEGY_POPULATION) -> Band:
    return Band(name=layer, strategy=strategy, layer=layer)


def sized_bands(
    size: str,
    bounds: tuple,
    layers: tuple = CITY_LAYERS,
    field: str = FIELD_POPULATION,
    strategy: STRATEGY_TYPE = STRATEGY_DISTANCE,
) -> tuple:
    """One band per layer for the same size tier, in `layers` order."""
    low, high = bounds
    return tuple(
        Band(
            name=f"{size}_{layer}",
            strategy=strategy,
            layer=layer,
            field=field,
            low=low,
            high=high,
        )
        for layer in layers
    )


def neighbourhood_band(size: str, bounds: tuple) -> Band:
    (band,) = sized_bands(
        size, bounds, layers=(LAYER_NEIGHBOURHOOD,), field=FIELD_POPULARITY
    )
    return band


BAND_TABLE: tuple = (
    *sized_bands("mega", MEGA_POPULATION, strategy=STRATEGY_POPULATION),
    layer_band(LAYER_CONTINENT),
    layer_band(LAYER_COUNTRY),
    layer_band(LAYER_DEPENDENCY),
    *sized_bands("large", LARGE_POPULATION),
    layer_band(LAYER_MACROREGION),
    layer_band(LAYER_REGION),
    layer_band(LAYER_BOROUGH),
    neighbourhood_band("very_popular", VERY_POPULAR_POPULARITY),
    *sized_bands("medium", MEDIUM_POPULATION),
    layer_band(LAYER_MACROCOUNTY),
    layer_band(LAYER_COUNTY),
    layer_band(LAYER_MACROHOOD),
    layer_band(LAYER_VENUE, strategy=STRATEGY_SCORE),
    neighbourhood_band("popular", POPULAR_POPULARITY),
    *sized_bands("small", SMALL_POPULATION),
    neighbourhood_band("non_popular", NON_POPULAR_POPULARITY),
)

FALLBACK_BAND = Band(name="fallback", strategy=STRATEGY_SCORE)


def select_band(result_a: dict, result_b: dict) -> Band:
    """First band in priority order that either result belongs to."""
    for band in BAND_TABLE:
        if band.either_contains(result_a, result_b):
            return band
    return FALLBACK_BAND


def classify(result: dict) -> str:
    """Name of the highest-priority band `result` belongs to."""
    for band in BAND_TABLE:
        if band.contains(result):
            return band.name
    return FALLBACK_BAND.name
