"""
Repository layer: read-only queries over the static suburb catalogue.

Distance and direction are never stored against the catalogue; every
query computes them from the center it is given.
"""

from typing import Iterable, Optional

from service_areas.config import CatalogueSettings
from service_areas.data.cache import RunCache
from service_areas.data.catalogue import Catalogue, load_catalogue_file
from service_areas.data.models import Coordinates, Demographics, EnrichedSuburb, Suburb
from service_areas.exceptions import CatalogueError, GeocodingNotSupportedError
from service_areas.geo import direction, rounded_distance_km
from service_areas.logging_config import get_logger
from service_areas.selection.matching import name_matches

logger = get_logger(__name__)


class SuburbRepository:
    """
    All catalogue queries for suburb data.

    Usage:
        cache = RunCache()
        repo = SuburbRepository(settings.catalogue, cache=cache)
        nearby = repo.within_radius(Coordinates(lat=-34.85, lng=138.58), 50)
    """

    def __init__(self, catalogue_settings: CatalogueSettings | None = None, cache: RunCache | None = None):
        self.settings = catalogue_settings or CatalogueSettings()
        self.cache = cache if cache is not None else RunCache()

    # --- Catalogue ---

    def load_catalogue(self) -> Catalogue:
        """
        Load the catalogue once per run.

        A missing or unreadable file yields an empty catalogue and a warning;
        it never raises.
        """
        return self.cache.get_or_compute(RunCache.CATALOGUE, self._read_catalogue)

    def _read_catalogue(self) -> Catalogue:
        try:
            return load_catalogue_file(self.settings.path, lock_timeout=self.settings.lock_timeout)
        except CatalogueError as e:
            logger.warning(
                "No usable suburbs catalogue (%s). Generate one with scripts/generate_suburbs.py",
                e.message,
            )
            return Catalogue()

    @property
    def suburbs(self) -> tuple[Suburb, ...]:
        return self.load_catalogue().suburbs

    def get_by_id(self, suburb_id: int) -> Optional[Suburb]:
        """Get a suburb by id, or None if not found."""
        return next((s for s in self.suburbs if s.id == suburb_id), None)

    def demographics_for(self, suburb_id: int) -> Optional[Demographics]:
        """Demographics supplied by the catalogue source, if any."""
        return self.load_catalogue().demographics.get(suburb_id)

    def test_connection(self) -> bool:
        """Static data is always available; logs how many suburbs it holds."""
        logger.info("Static suburbs data loaded: %d suburbs", len(self.load_catalogue()))
        return True

    # --- Enrichment ---

    def enrich(self, suburb: Suburb, center: Coordinates, with_population: bool = False) -> EnrichedSuburb:
        """Attach distance/direction from ``center`` and, optionally, source demographics."""
        origin = (center.lat, center.lng)
        target = (suburb.latitude, suburb.longitude)
        fields = suburb.model_dump()
        fields["distance_km"] = rounded_distance_km(origin, target)
        fields["direction"] = direction(origin, target)

        if with_population:
            demo = self.demographics_for(suburb.id)
            if demo is not None:
                fields.update(demo.model_dump())

        return EnrichedSuburb(**fields)

    # --- Queries ---

    def within_radius(self, center: Coordinates, radius_km: float) -> list[EnrichedSuburb]:
        """All suburbs within ``radius_km`` of ``center``, nearest first, without demographics."""
        enriched = [self.enrich(s, center) for s in self.suburbs]
        return sorted(
            (s for s in enriched if s.distance_km <= radius_km),
            key=lambda s: s.distance_km,
        )

    def suburbs_with_population(self, center: Coordinates, radius_km: float) -> list[EnrichedSuburb]:
        """
        Same as within_radius, with population fields the source supplied.

        Suburbs without source data keep ``population=None`` and are treated
        as "no demographic data" downstream.
        """
        enriched = [self.enrich(s, center, with_population=True) for s in self.suburbs]
        return sorted(
            (s for s in enriched if s.distance_km <= radius_km),
            key=lambda s: s.distance_km,
        )

    def by_names(self, names: Iterable[str]) -> list[Suburb]:
        """
        Every suburb whose name fuzzy-matches any of ``names``, in catalogue order.

        Not radius-filtered: manual selections may deliberately reach outside
        the service radius.
        """
        terms = [n for n in names if n and n.strip()]
        return [s for s in self.suburbs if any(name_matches(term, s.name) for term in terms)]

    def nearest(self, point: Coordinates, limit: int = 10, exclude_id: Optional[int] = None) -> list[EnrichedSuburb]:
        """The ``limit`` suburbs closest to ``point``, optionally excluding one id."""
        enriched = [self.enrich(s, point) for s in self.suburbs if s.id != exclude_id]
        enriched.sort(key=lambda s: s.distance_km)
        return enriched[:limit]

    def geocode(self, address: str) -> Coordinates:
        """Static data cannot geocode. Always raises GeocodingNotSupportedError."""
        logger.warning("Geocoding requested for '%s' but static suburb data cannot geocode", address)
        raise GeocodingNotSupportedError(address=address)
