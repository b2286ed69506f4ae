"""
Sorters Module - Geocoding Result Ordering

Orders geocoding search results the way a human expects: administrative
importance first (country before neighbourhood), then population or
popularity within a layer, then proximity to the user's focus point.

Module Structure:
    - constants.py: Layer tags, band bounds, field names, tie-break sentinel
    - bands.py: Band classifier and the priority-ordered band table
    - strategies.py: Tie-break strategies (population, distance, score)
    - distance.py: Coordinate parsing and the haversine distance primitive
    - comparator.py: Comparator factory and sort helper

Usage:
    from sorters import build_comparator, sort_results
    from sorters.bands import BAND_TABLE, classify
"""

from sorters.bands import BAND_TABLE, FALLBACK_BAND, Band, classify, select_band
from sorters.comparator import build_comparator, parse_focus_point, sort_results
from sorters.distance import haversine_distance
