"""
Per-run memo cache.

One generation run owns one RunCache. The suburb catalogue and the
computed footer list are stored here so they are computed once per run
and recomputed by the next run. There is no expiry and no invalidation
beyond ``clear()``.
"""

from typing import Any, Callable, Optional, TypeVar

from service_areas.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class RunCache:
    """
    In-memory cache for the lifetime of a single generation run.

    Usage:
        cache = RunCache()
        repo = SuburbRepository(catalogue_settings, cache=cache)
        service = FooterLocationService(repo, location_settings, cache=cache)
    """

    CATALOGUE = "catalogue"
    FOOTER_LOCATIONS = "footer_locations"

    def __init__(self):
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if nothing was stored under ``key``."""
        return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def has(self, key: str) -> bool:
        return key in self._entries

    def get_or_compute(self, key: str, factory: Callable[[], T]) -> T:
        """
        Return the cached value for ``key``, computing and storing it on first use.

        A falsy result (such as an empty list) is cached like any other.
        """
        if key in self._entries:
            return self._entries[key]
        value = factory()
        self._entries[key] = value
        logger.debug("Cached %s for this run", key)
        return value

    def clear(self) -> int:
        """
        Drop every entry.

        Returns:
            Number of entries removed.
        """
        count = len(self._entries)
        self._entries.clear()
        return count

    def stats(self) -> dict[str, int]:
        """Return entry sizes: length for sized values, 1 for anything else."""
        return {
            key: len(value) if hasattr(value, "__len__") else 1
            for key, value in self._entries.items()
        }
