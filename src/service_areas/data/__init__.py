"""Data layer: suburb models, catalogue file I/O, and the per-run cache.

SuburbRepository lives in service_areas.data.repository; it depends on the
settings module, which itself imports the models from here.
"""

from service_areas.data.models import (
    Coordinates, Suburb, Demographics, EnrichedSuburb, ScoredSuburb,
    FooterLocationEntry, CatalogueRow, CatalogueFile, SelectionMode,
)
from service_areas.data.cache import RunCache
from service_areas.data.catalogue import (
    Catalogue, read_catalogue_file, load_catalogue_file,
    build_catalogue_file, write_catalogue_file,
)

__all__ = [
    "Coordinates", "Suburb", "Demographics", "EnrichedSuburb", "ScoredSuburb",
    "FooterLocationEntry", "CatalogueRow", "CatalogueFile", "SelectionMode",
    "RunCache",
    "Catalogue", "read_catalogue_file", "load_catalogue_file",
    "build_catalogue_file", "write_catalogue_file",
]
