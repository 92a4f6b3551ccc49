"""
Fuzzy suburb-name matching and best-match resolution.

Resolves names typed into business.yaml ("Salisbury") against catalogue
entries ("Salisbury", "Salisbury North", ...). Matching is deliberately
broad; when a term matches several suburbs, ``select_best_suburb_match``
picks one with a fixed, deterministic ordering.
"""

import math
from typing import Iterable, Sequence

from service_areas.data.models import EnrichedSuburb, SelectionMode
from service_areas.exceptions import NoSuburbMatchError
from service_areas.logging_config import get_logger

logger = get_logger(__name__)

EXACT_MATCH_QUALITY = 100
PREFIX_MATCH_QUALITY = 50
SUBSTRING_MATCH_QUALITY = 25


def _normalize(name: str) -> str:
    return name.strip().lower()


def name_matches(term: str, name: str) -> bool:
    """
    Whether catalogue ``name`` matches search ``term``, case-insensitively.

    Matches when equal, when the name starts with the term (with or without
    a following space), contains it as a middle word, or ends with it as a
    final word. "Salisbury" therefore matches "Salisbury North" and also
    "Salisburyton".
    """
    term = _normalize(term)
    name = _normalize(name)
    if not term:
        return False
    return (
        name == term
        or name.startswith(term + " ")
        or name.startswith(term)
        or f" {term} " in name
        or name.endswith(" " + term)
    )


def match_quality(term: str, name: str) -> int:
    """100 for an exact name, 50 for ``term + " "`` prefix, 25 for any other match, 0 for none."""
    term = _normalize(term)
    name = _normalize(name)
    if name == term:
        return EXACT_MATCH_QUALITY
    if name.startswith(term + " "):
        return PREFIX_MATCH_QUALITY
    if name_matches(term, name):
        return SUBSTRING_MATCH_QUALITY
    return 0


def find_matches(term: str, catalogue: Iterable[EnrichedSuburb]) -> list[EnrichedSuburb]:
    """All catalogue entries matching ``term``, in catalogue order."""
    return [s for s in catalogue if name_matches(term, s.name)]


def select_best_suburb_match(term: str, candidates: Sequence[EnrichedSuburb]) -> EnrichedSuburb:
    """
    Pick the single best candidate for ``term``.

    Ordering, first difference wins:
        1. has population data
        2. higher population relative to the largest candidate
        3. name equals the term exactly
        4. higher match quality
        5. closer to the business center
        6. alphabetical name

    Raises:
        NoSuburbMatchError: ``candidates`` is empty. Callers filter out
            unmatched terms before calling, so this is a programming error.
    """
    if not candidates:
        raise NoSuburbMatchError(term)

    max_population = max((c.population or 0 for c in candidates), default=0)
    normalized_term = _normalize(term)

    def sort_key(candidate: EnrichedSuburb):
        population = candidate.population or 0
        normalized_population = population / max_population if max_population > 0 else 0.0
        distance = candidate.distance_km if candidate.distance_km is not None else math.inf
        return (
            0 if candidate.has_population else 1,
            -normalized_population,
            0 if _normalize(candidate.name) == normalized_term else 1,
            -match_quality(term, candidate.name),
            distance,
            candidate.name.lower(),
        )

    return min(candidates, key=sort_key)


def process_featured_suburbs(
    terms: Sequence[str],
    catalogue: Sequence[EnrichedSuburb],
    mode: SelectionMode = SelectionMode.BEST_MATCH,
) -> list[EnrichedSuburb]:
    """
    Resolve manually featured names against the catalogue.

    ``best_match`` keeps one suburb per term, ``all_variations`` keeps every
    match. Results are de-duplicated by id; the first occurrence wins and
    input term order is preserved. Terms with no match are skipped with a
    warning.
    """
    mode = SelectionMode(mode)
    selected: list[EnrichedSuburb] = []
    seen: set[int] = set()

    for term in terms:
        if not term or not term.strip():
            continue

        matches = find_matches(term, catalogue)
        if not matches:
            logger.warning("Featured suburb '%s' not found in catalogue, skipping", term)
            continue

        if mode is SelectionMode.BEST_MATCH:
            best = select_best_suburb_match(term, matches)
            if len(matches) > 1:
                logger.debug(
                    "'%s' matched %d suburbs, using %s (%s)",
                    term, len(matches), best.name, best.postcode or "no postcode",
                )
            picks = [best]
        else:
            picks = matches

        for suburb in picks:
            if suburb.id not in seen:
                seen.add(suburb.id)
                selected.append(suburb)

    return selected
