"""Distance and direction between geographic coordinates.

Both functions take ``(latitude, longitude)`` pairs in decimal degrees.
"""

import math
from typing import Tuple

EARTH_RADIUS_KM = 6371.0

DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

LatLng = Tuple[float, float]


def round_half_up(value: float, ndigits: int = 0) -> float:
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def distance_km(a: LatLng, b: LatLng) -> float:
    """
    Great-circle distance between two points using the Haversine formula.

    Args:
        a: (latitude, longitude) of the first point
        b: (latitude, longitude) of the second point

    Returns:
        float: Distance in kilometres

    Example:
        >>> distance_km((-34.9285, 138.6007), (-34.9285, 138.6007))
        0.0
    """
    lat1, lon1 = a
    lat2, lon2 = b

    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    h = (math.sin(dlat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2)

    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def direction(origin: LatLng, target: LatLng) -> str:
    """
    8-point compass label from ``origin`` towards ``target``.

    The angle is ``atan2(Δlng, Δlat)``, which is not a true compass bearing.
    Published suburb pages use these labels, so the formula is kept as is.
    Identical points give an angle of 0 and therefore "N".
    """
    dlat = target[0] - origin[0]
    dlng = target[1] - origin[1]

    angle = math.degrees(math.atan2(dlng, dlat))
    normalized = (angle + 360) % 360
    index = int(round_half_up(normalized / 45)) % 8

    return DIRECTIONS[index]


def rounded_distance_km(a: LatLng, b: LatLng) -> float:
    """Distance rounded half-up to 0.1 km, as attached to suburb records."""
    return round_half_up(distance_km(a, b), 1)
