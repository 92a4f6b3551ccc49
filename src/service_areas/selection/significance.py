"""
Population significance analysis.

Statistical signals used to score suburbs: population percentile,
regional-center and commercial-center detection, and population outliers.
Suburbs without population data never count as significant.
"""

from typing import Sequence

import numpy as np

from service_areas.data.models import EnrichedSuburb
from service_areas.geo import distance_km

REGIONAL_CENTER_MIN_POPULATION = 1000
REGIONAL_NEIGHBOUR_RADIUS_KM = 10.0
REGIONAL_DOMINANCE_RATIO = 1.5

COMMERCIAL_MIN_POPULATION = 2000
COMMERCIAL_CLUSTER_RADIUS_KM = 5.0

OUTLIER_STDDEV_FACTOR = 0.5


def _between(a: EnrichedSuburb, b: EnrichedSuburb) -> float:
    return distance_km((a.latitude, a.longitude), (b.latitude, b.longitude))


def population_percentile(suburb: EnrichedSuburb, population: Sequence[EnrichedSuburb]) -> float:
    """
    Position of the suburb's population among all positive populations, in [0, 1].

    The rank is the index of the first sorted population that is at least the
    suburb's, so the most populous suburb scores (n - 1) / n. No data gives 0.
    """
    values = sorted(s.population for s in population if s.population and s.population > 0)
    if not values or not suburb.population:
        return 0.0

    rank = next((i for i, p in enumerate(values) if p >= suburb.population), -1)
    return rank / len(values)


def is_regional_center(suburb: EnrichedSuburb, population: Sequence[EnrichedSuburb]) -> bool:
    """
    True for a suburb of at least 1000 people that dominates its 10 km neighbourhood.

    An isolated suburb (no other suburb within 10 km) is presumed significant.
    Otherwise it must exceed 1.5x the mean population of its neighbours, where
    neighbours without data count as zero.
    """
    if not suburb.population or suburb.population < REGIONAL_CENTER_MIN_POPULATION:
        return False

    nearby = [
        other for other in population
        if other.id != suburb.id and _between(suburb, other) < REGIONAL_NEIGHBOUR_RADIUS_KM
    ]
    if not nearby:
        return True

    mean_nearby = sum(other.population or 0 for other in nearby) / len(nearby)
    return suburb.population > mean_nearby * REGIONAL_DOMINANCE_RATIO


def detect_commercial_centers(population: Sequence[EnrichedSuburb]) -> set[int]:
    """
    Ids of the most populous suburb in each 5 km population cluster.

    Clustering is greedy single-link in input order: each candidate joins the
    first existing cluster with any member closer than 5 km, else starts a new
    one. This is order-dependent and not an optimal clustering; it is kept
    as is so the same input always yields the same footer.
    """
    candidates = [s for s in population if s.population and s.population >= COMMERCIAL_MIN_POPULATION]

    clusters: list[list[EnrichedSuburb]] = []
    for suburb in candidates:
        for cluster in clusters:
            if any(_between(suburb, member) < COMMERCIAL_CLUSTER_RADIUS_KM for member in cluster):
                cluster.append(suburb)
                break
        else:
            clusters.append([suburb])

    centers = set()
    for cluster in clusters:
        largest = cluster[0]
        for member in cluster[1:]:
            # Strictly greater: the earliest member wins a tie
            if (member.population or 0) > (largest.population or 0):
                largest = member
        centers.add(largest.id)
    return centers


def find_significant_suburbs(population: Sequence[EnrichedSuburb]) -> set[int]:
    """Ids of suburbs whose population is above mean + 0.5 * stddev of positive populations."""
    values = np.array([s.population for s in population if s.population and s.population > 0], dtype=float)
    if values.size == 0:
        return set()

    threshold = values.mean() + values.std() * OUTLIER_STDDEV_FACTOR
    return {s.id for s in population if s.population and s.population > threshold}
