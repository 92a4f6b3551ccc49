"""
Distance ring classification.

Splits suburbs into inner/middle/outer/satellite bands at natural gaps in
the sorted distance sequence, with fixed fallbacks when there are no gaps.
"""

from typing import NamedTuple, Sequence

from service_areas.data.models import EnrichedSuburb

RINGS = ("inner", "middle", "outer", "satellite")

GAP_THRESHOLD_KM = 2.0

DEFAULT_BOUNDARIES = (10.0, 20.0, 30.0)
# (ceiling, replacement) per boundary
BOUNDARY_LIMITS = ((15.0, 10.0), (25.0, 20.0), (40.0, 35.0))


class RingBoundaries(NamedTuple):
    inner: float
    middle: float
    outer: float


def find_ring_boundaries(suburbs: Sequence[EnrichedSuburb]) -> RingBoundaries:
    """
    Ring boundaries from the first three distance gaps wider than 2 km.

    A boundary is the distance of the suburb just after the gap. Missing
    boundaries fall back to 10/20/30 km; a boundary beyond its ceiling
    (15/25/40 km) is replaced with 10/20/35 km.
    """
    distances = sorted(s.distance_km or 0.0 for s in suburbs)

    gaps = [
        distances[i] for i in range(1, len(distances))
        if distances[i] - distances[i - 1] > GAP_THRESHOLD_KM
    ]

    boundaries = []
    for i, default in enumerate(DEFAULT_BOUNDARIES):
        value = gaps[i] if i < len(gaps) else default
        ceiling, replacement = BOUNDARY_LIMITS[i]
        boundaries.append(replacement if value > ceiling else value)

    return RingBoundaries(*boundaries)


def classify_rings(suburbs: Sequence[EnrichedSuburb]) -> dict[str, list[EnrichedSuburb]]:
    """Assign each suburb to the first ring whose upper boundary it is within, nearest first."""
    rings: dict[str, list[EnrichedSuburb]] = {ring: [] for ring in RINGS}
    if not suburbs:
        return rings

    boundaries = find_ring_boundaries(suburbs)
    for suburb in sorted(suburbs, key=lambda s: s.distance_km or 0.0):
        distance = suburb.distance_km or 0.0
        if distance <= boundaries.inner:
            rings["inner"].append(suburb)
        elif distance <= boundaries.middle:
            rings["middle"].append(suburb)
        elif distance <= boundaries.outer:
            rings["outer"].append(suburb)
        else:
            rings["satellite"].append(suburb)
    return rings
