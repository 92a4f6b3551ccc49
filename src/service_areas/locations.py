"""Location page helpers: slugs, URLs and the business center."""

import re
from typing import Optional

from service_areas.business import BusinessConfig
from service_areas.config import LocationSettings
from service_areas.data.models import Coordinates, Suburb
from service_areas.data.repository import SuburbRepository
from service_areas.logging_config import get_logger

logger = get_logger(__name__)


def slugify(text: str) -> str:
    text = text.strip().lower()
    text = re.sub(r"&", " and ", text)
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return re.sub(r"-{2,}", "-", text).strip("-")


def generate_location_slug(suburb: Suburb) -> str:
    return slugify(suburb.name)


def generate_location_url(suburb: Suburb, base_path: str = "/locations") -> str:
    """Page path for a suburb, e.g. ``/locations/salisbury-north/``."""
    return f"{base_path.rstrip('/')}/{generate_location_slug(suburb)}/"


def resolve_center(
    location_settings: LocationSettings,
    repository: SuburbRepository,
    business: Optional[BusinessConfig] = None,
) -> Coordinates:
    """
    Business center for distance calculations.

    Order: coordinates in the location settings, then business.yaml
    ``service.center_lat/center_lng``, then geocoding the business address.

    Raises:
        GeocodingNotSupportedError: No coordinates are configured and the
            repository cannot geocode.
    """
    if location_settings.center is not None:
        return location_settings.center

    if business is not None:
        service = business.service
        if service.center_lat is not None and service.center_lng is not None:
            return Coordinates(lat=service.center_lat, lng=service.center_lng)
        address = business.address.full_address
    else:
        address = ""

    logger.info("No center coordinates configured, geocoding '%s'", address)
    return repository.geocode(address)
