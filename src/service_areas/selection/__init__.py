"""Suburb selection: significance scoring, distance rings, smart selection, name matching."""

from service_areas.selection.significance import (
    population_percentile,
    is_regional_center,
    detect_commercial_centers,
    find_significant_suburbs,
)
from service_areas.selection.rings import RingBoundaries, find_ring_boundaries, classify_rings
from service_areas.selection.selector import ring_quotas, score_suburbs, smart_select
from service_areas.selection.matching import (
    name_matches,
    match_quality,
    find_matches,
    select_best_suburb_match,
    process_featured_suburbs,
)

__all__ = [
    "population_percentile",
    "is_regional_center",
    "detect_commercial_centers",
    "find_significant_suburbs",
    "RingBoundaries",
    "find_ring_boundaries",
    "classify_rings",
    "ring_quotas",
    "score_suburbs",
    "smart_select",
    "name_matches",
    "match_quality",
    "find_matches",
    "select_best_suburb_match",
    "process_featured_suburbs",
]
