"""
Smart footer suburb selection.

Scores every suburb on population signals, then fills the result with
per-ring quotas so the footer covers near and far areas, topping up from
the global score order.
"""

from typing import Optional, Sequence

from service_areas.data.models import Coordinates, EnrichedSuburb, ScoredSuburb
from service_areas.logging_config import get_logger
from service_areas.selection.rings import RINGS, classify_rings
from service_areas.selection.significance import (
    detect_commercial_centers,
    find_significant_suburbs,
    is_regional_center,
    population_percentile,
)

logger = get_logger(__name__)

DEFAULT_COUNT = 11

NO_POPULATION_SCORE = -1000.0
REGIONAL_CENTER_BONUS = 30
COMMERCIAL_CENTER_BONUS = 25
SIGNIFICANCE_BONUS = 20
DENSITY_BONUS = 15
URBAN_DENSITY = 1000

# (percentile floor, points), checked top down
PERCENTILE_TIERS = ((0.9, 100), (0.8, 80), (0.7, 60), (0.5, 40))
PERCENTILE_FALLBACK_WEIGHT = 40

RING_SHARES = {"inner": 0.25, "middle": 0.35, "outer": 0.30, "satellite": 0.10}
RING_MINIMUMS = {"inner": 2, "middle": 3, "outer": 3, "satellite": 0}


def ring_quotas(count: int) -> dict[str, int]:
    """Per-ring quotas for ``count`` picks; minimums mean they can sum past ``count``."""
    return {
        ring: max(RING_MINIMUMS[ring], int(count * RING_SHARES[ring]))
        for ring in RINGS
    }


def _percentile_points(percentile: float) -> float:
    for floor, points in PERCENTILE_TIERS:
        if percentile > floor:
            return points
    return percentile * PERCENTILE_FALLBACK_WEIGHT


def score_suburbs(suburbs: Sequence[EnrichedSuburb]) -> list[ScoredSuburb]:
    """
    Score every suburb, highest first. Equal scores keep input order.

    Suburbs without population start at -1000 so they only fill slots no
    populated suburb can take.
    """
    significant = find_significant_suburbs(suburbs)
    commercial = detect_commercial_centers(suburbs)
    logger.info(
        "Found %d significant suburbs, %d commercial centers",
        len(significant), len(commercial),
    )

    scored = []
    for suburb in suburbs:
        if not suburb.population:
            score = NO_POPULATION_SCORE
        else:
            score = _percentile_points(population_percentile(suburb, suburbs))
            if is_regional_center(suburb, suburbs):
                score += REGIONAL_CENTER_BONUS
            if suburb.id in commercial:
                score += COMMERCIAL_CENTER_BONUS
            if suburb.id in significant:
                score += SIGNIFICANCE_BONUS
            if suburb.population_density and suburb.population_density > URBAN_DENSITY:
                score += DENSITY_BONUS
        scored.append(ScoredSuburb(suburb=suburb, score=score))

    return sorted(scored, key=lambda s: -s.score)


def smart_select(
    suburbs: Sequence[EnrichedSuburb],
    count: int = DEFAULT_COUNT,
    center: Optional[Coordinates] = None,
) -> list[EnrichedSuburb]:
    """
    Pick up to ``count`` suburbs spread across distance rings.

    First pass takes the top-scored members of each ring up to its quota,
    in inner/middle/outer/satellite order. Second pass fills any remaining
    slots from the global score order. No suburb appears twice.
    """
    if not suburbs or count <= 0:
        return []

    if center is None:
        nearest = min(suburbs, key=lambda s: s.distance_km)
        center = nearest.coordinates
    logger.info("Smart selection starting with %d suburbs around (%.4f, %.4f)", len(suburbs), center.lat, center.lng)

    scored = score_suburbs(suburbs)
    rings = classify_rings(suburbs)
    quotas = ring_quotas(count)

    selected: list[EnrichedSuburb] = []
    selected_ids: set[int] = set()

    def take(suburb: EnrichedSuburb) -> None:
        selected.append(suburb)
        selected_ids.add(suburb.id)

    for ring in RINGS:
        ring_ids = {s.id for s in rings[ring]}
        ring_top = [s for s in scored if s.suburb.id in ring_ids][:quotas[ring]]
        for entry in ring_top:
            if len(selected) >= count:
                break
            if entry.suburb.id not in selected_ids:
                take(entry.suburb)

    for entry in scored:
        if len(selected) >= count:
            break
        if entry.suburb.id not in selected_ids:
            take(entry.suburb)

    scores = {entry.suburb.id: entry.score for entry in scored}
    for position, suburb in enumerate(selected, start=1):
        logger.debug(
            "%d. %s (pop: %s, dist: %skm, score: %.1f)",
            position, suburb.name, suburb.population or "N/A", suburb.distance_km, scores[suburb.id],
        )

    return selected
