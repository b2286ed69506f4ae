"""
Geocoding Sort Constants

This module contains all constants used to order geocoding results:
layer tags, population/popularity band bounds, record field names and
the tie-break sentinel.

Organization:
    1. Layer Tags - administrative/geographic result types
    2. Population Bands - locality/localadmin size tiers
    3. Popularity Bands - neighbourhood popularity tiers
    4. Record Fields - keys read from result records
    5. Focus Point - request keys for the proximity bias
    6. Tie-break Strategies - strategy names and sentinel
    7. Geodesy - distance primitive parameters
"""

from typing import Literal

# =============================================================================
# Layer Tags
# =============================================================================

LAYER_LOCALITY = "locality"
LAYER_LOCALADMIN = "localadmin"
LAYER_CONTINENT = "continent"
LAYER_COUNTRY = "country"
LAYER_DEPENDENCY = "dependency"
LAYER_MACROREGION = "macroregion"
LAYER_REGION = "region"
LAYER_BOROUGH = "borough"
LAYER_NEIGHBOURHOOD = "neighbourhood"
LAYER_MACROCOUNTY = "macrocounty"
LAYER_COUNTY = "county"
LAYER_MACROHOOD = "macrohood"
LAYER_VENUE = "venue"

# Locality-like layers share the same population tiers.
# Order matters: locality is checked before localadmin within a tier.
CITY_LAYERS = (LAYER_LOCALITY, LAYER_LOCALADMIN)

# =============================================================================
# Population Bands
# =============================================================================

# Half-open ranges: [low, high)
INF = float("inf")

MEGA_POPULATION = (4_000_000, INF)
LARGE_POPULATION = (500_000, 4_000_000)
MEDIUM_POPULATION = (5_000, 500_000)
SMALL_POPULATION = (0, 5_000)

# =============================================================================
# Popularity Bands
# =============================================================================

VERY_POPULAR_POPULARITY = (10_000, INF)
POPULAR_POPULARITY = (1_000, 10_000)
NON_POPULAR_POPULARITY = (0, 1_000)

# =============================================================================
# Record Fields
# =============================================================================

FIELD_LAYER = "layer"
FIELD_POPULATION = "population"
FIELD_POPULARITY = "popularity"

# First key present wins; camelCase is accepted from JSON producers.
CENTER_POINT_FIELDS = ("center_point", "centerPoint")
LAT_FIELD = "lat"
LON_FIELD = "lon"

# "_score" is what search backends attach to hits
SCORE_FIELDS = ("score", "_score")

# =============================================================================
# Focus Point
# =============================================================================

FOCUS_POINT_LAT = "focus.point.lat"
FOCUS_POINT_LON = "focus.point.lon"

# =============================================================================
# Tie-break Strategies
# =============================================================================

STRATEGY_TYPE = Literal["population", "distance", "score"]

STRATEGY_POPULATION = "population"
STRATEGY_DISTANCE = "distance"
STRATEGY_SCORE = "score"

# Returned instead of 0 for non-identical score ties: first argument wins.
TIE_SENTINEL = -1

# Default for `strict_ties` when configs do not set it
STRICT_TIES = True

# =============================================================================
# Geodesy
# =============================================================================

EARTH_RADIUS_M = 6371000.0
