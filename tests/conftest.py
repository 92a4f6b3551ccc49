"""
Shared fixtures: suburb factories placed by kilometre offsets from a center,
and temporary catalogue files.
"""

import itertools
import json
import math

import pytest

from service_areas.data.cache import RunCache
from service_areas.data.models import Coordinates, EnrichedSuburb
from service_areas.geo import direction, rounded_distance_km

CENTER = Coordinates(lat=-34.85, lng=138.58)
KM_PER_DEGREE = 6371.0 * math.pi / 180


def offset(north_km: float = 0.0, east_km: float = 0.0, center: Coordinates = CENTER) -> tuple[float, float]:
    """(lat, lng) of a point ``north_km``/``east_km`` from ``center``."""
    lat = center.lat + north_km / KM_PER_DEGREE
    lng = center.lng + east_km / (KM_PER_DEGREE * math.cos(math.radians(center.lat)))
    return lat, lng


@pytest.fixture
def make_suburb():
    """Factory for EnrichedSuburb records with auto-incrementing ids."""
    ids = itertools.count(1)

    def _make(
        name: str,
        north_km: float = 0.0,
        east_km: float = 0.0,
        population: int | None = None,
        density: float | None = None,
        suburb_id: int | None = None,
    ) -> EnrichedSuburb:
        lat, lng = offset(north_km, east_km)
        origin = (CENTER.lat, CENTER.lng)
        return EnrichedSuburb(
            id=suburb_id if suburb_id is not None else next(ids),
            name=name,
            postcode="5000",
            state="SA",
            latitude=lat,
            longitude=lng,
            distance_km=rounded_distance_km(origin, (lat, lng)),
            direction=direction(origin, (lat, lng)),
            population=population,
            population_density=density,
        )

    return _make


@pytest.fixture
def write_catalogue(tmp_path):
    """Write a suburbs.json from (name, north_km, east_km, population) tuples and return its path."""

    def _write(rows, filename: str = "suburbs.json"):
        suburbs = []
        for index, (name, north_km, east_km, population) in enumerate(rows, start=1):
            lat, lng = offset(north_km, east_km)
            suburbs.append({
                "id": index,
                "name": name,
                "postcode": "5000",
                "state": "SA",
                "latitude": lat,
                "longitude": lng,
                "distanceKm": 0,
                "direction": "N",
                "population": population,
            })
        document = {
            "generated": "2026-01-01T00:00:00+00:00",
            "center": {"lat": CENTER.lat, "lng": CENTER.lng},
            "radiusKm": 50,
            "count": len(suburbs),
            "suburbs": suburbs,
        }
        path = tmp_path / filename
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def run_cache():
    return RunCache()
