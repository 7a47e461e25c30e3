"""Haversine distance between GPS coordinates."""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0
MILES_PER_KM = 0.621371192


def great_circle_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance in km between two points given in degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.sin(d_lon / 2) ** 2 * math.cos(phi1) * math.cos(phi2)
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def km_to_miles(km: float) -> float:
    return km * MILES_PER_KM


def segment_miles(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Miles between two ``(x, y)`` track points.

    Points are stored in GeoJSON order, so ``y`` is the latitude and ``x``
    the longitude.
    """
    return km_to_miles(great_circle_km(a[1], a[0], b[1], b[0]))
