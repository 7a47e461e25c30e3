"""Great-circle distance and duration/pace formatting.

Public API
----------
great_circle_km   - haversine distance between two lat/lon pairs
km_to_miles       - unit conversion
segment_miles     - miles between two ``(x, y)`` track points
format_duration   - ``H:MM:SS`` / ``MM:SS`` elapsed text
format_pace       - ``MM:SS`` minutes-per-mile text
"""

from activity_player.geo.distance import (
    EARTH_RADIUS_KM,
    MILES_PER_KM,
    great_circle_km,
    km_to_miles,
    segment_miles,
)
from activity_player.geo.formatting import format_duration, format_pace

__all__ = [
    "EARTH_RADIUS_KM",
    "MILES_PER_KM",
    "format_duration",
    "format_pace",
    "great_circle_km",
    "km_to_miles",
    "segment_miles",
]
