"""Recorded activity tracks and the multi-track centroid."""

from activity_player.track.center import CenterLocator
from activity_player.track.models import Point, Track

__all__ = ["CenterLocator", "Point", "Track"]
