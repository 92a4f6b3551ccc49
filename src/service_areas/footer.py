"""
Footer location links.

Chooses the suburbs linked from the site footer for SEO discovery, either
from a manually featured list (topped up by smart selection) or entirely
by smart selection over the service radius.
"""

from typing import Optional

from service_areas.business import BusinessConfig
from service_areas.config import LocationSettings
from service_areas.data.cache import RunCache
from service_areas.data.models import Coordinates, EnrichedSuburb, FooterLocationEntry, Suburb
from service_areas.data.repository import SuburbRepository
from service_areas.locations import generate_location_slug, generate_location_url, resolve_center
from service_areas.logging_config import get_logger
from service_areas.selection.matching import process_featured_suburbs
from service_areas.selection.selector import smart_select

logger = get_logger(__name__)


class FooterLocationService:
    """
    Builds the footer location list once per generation run.

    Usage:
        cache = RunCache()
        repo = SuburbRepository(settings.catalogue, cache=cache)
        business = load_business_config(settings.paths.business_config)
        service = FooterLocationService(repo, settings.locations, business=business)
        entries = service.get_footer_locations()
    """

    def __init__(
        self,
        repository: SuburbRepository,
        location_settings: LocationSettings | None = None,
        business: BusinessConfig | None = None,
        center: Coordinates | None = None,
        cache: RunCache | None = None,
    ):
        self.repository = repository
        self.business = business
        self.settings = (location_settings or LocationSettings()).merged_with(business)
        self.cache = cache if cache is not None else repository.cache
        self._center = center
        self.cache_key = self._build_cache_key()

    def _build_cache_key(self) -> str:
        """
        Run-cache key for this service's footer.

        Every input that changes the result is part of the key.
        """
        parts = [RunCache.FOOTER_LOCATIONS, self.settings.model_dump_json()]
        if self._center is not None:
            parts.append(self._center.model_dump_json())
        if self.business is not None:
            parts.append(self.business.address.full_address)
        return "|".join(parts)

    @property
    def center(self) -> Coordinates:
        """Business center, resolved on first use. May raise GeocodingNotSupportedError."""
        if self._center is None:
            self._center = resolve_center(self.settings, self.repository, self.business)
        return self._center

    # --- Public API ---

    def get_footer_locations(self) -> list[FooterLocationEntry]:
        """
        Footer entries for this run, computed on first call and cached.

        Never raises: any failure is logged and yields an empty list so the
        footer cannot break page rendering.
        """
        return self.cache.get_or_compute(self.cache_key, self._compute_or_empty)

    def get_related_locations(self, suburb: Suburb, limit: int = 6) -> list[FooterLocationEntry]:
        """Nearest other suburbs to ``suburb``, for "nearby areas" links on its page."""
        nearby = self.repository.nearest(suburb.coordinates, limit=limit, exclude_id=suburb.id)
        return [self.to_entry(s) for s in nearby]

    def to_entry(self, suburb: EnrichedSuburb) -> FooterLocationEntry:
        return FooterLocationEntry(
            suburb=suburb,
            slug=generate_location_slug(suburb),
            url=generate_location_url(suburb, self.settings.base_path),
        )

    # --- Selection ---

    def _compute_or_empty(self) -> list[FooterLocationEntry]:
        try:
            return self.compute_footer_locations()
        except Exception:
            logger.exception("Error getting footer locations")
            return []

    def compute_footer_locations(self) -> list[FooterLocationEntry]:
        """Uncached selection. Errors propagate; use get_footer_locations in page code."""
        featured = self.settings.footer_featured_suburbs
        if featured:
            suburbs = self._select_manual(featured)
        else:
            suburbs = self._select_smart()
        return [self.to_entry(s) for s in suburbs]

    def _select_manual(self, featured: list[str]) -> list[EnrichedSuburb]:
        center = self.center
        radius = self.settings.service_radius_km
        mode = self.settings.suburb_selection_mode
        logger.info("Using manual footer suburbs (%s): %s", mode.value, ", ".join(featured))

        candidates = [
            self.repository.enrich(s, center, with_population=True)
            for s in self.repository.by_names(featured)
        ]
        chosen = process_featured_suburbs(featured, candidates, mode)

        for suburb in chosen:
            if suburb.distance_km > radius:
                logger.warning(
                    "Featured suburb %s is %.1fkm away, outside the %.0fkm service radius (kept)",
                    suburb.name, suburb.distance_km, radius,
                )

        target = self.settings.footer_count
        if self.settings.auto_supplement and len(chosen) < target:
            chosen_ids = {s.id for s in chosen}
            pool = [
                s for s in self.repository.suburbs_with_population(center, radius)
                if s.id not in chosen_ids
            ]
            supplement = smart_select(pool, target - len(chosen), center)
            logger.info("Supplemented %d featured suburbs with %d smart picks", len(chosen), len(supplement))
            chosen = chosen + supplement

        limit = self.settings.suburb_limit
        if limit:
            chosen = chosen[:limit]
        return chosen

    def _select_smart(self) -> list[EnrichedSuburb]:
        center = self.center
        logger.info("Using smart selection for footer suburbs")

        suburbs = self.repository.suburbs_with_population(center, self.settings.service_radius_km)
        if not suburbs:
            logger.warning("No suburbs found for footer selection. Check the suburbs catalogue.")
            return []

        return smart_select(suburbs, self.settings.footer_count, center)
