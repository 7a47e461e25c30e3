"""Incremental per-track distance and average-pace bookkeeping."""

from __future__ import annotations

from collections.abc import Iterable

from activity_player.geo import format_pace, segment_miles
from activity_player.track.models import Track


class DistanceAccumulator:
    """Fold track segments into ``Track.accumulated_distance`` up to a cursor.

    :meth:`accumulate` only moves forward: repeated calls with a
    non-decreasing cursor add just the new segments.  After the cursor moves
    backward the counters must be cleared first, which :meth:`recompute` does.
    """

    def accumulate(self, tracks: Iterable[Track], cursor_seconds: int) -> None:
        """Bring every track's distance and pace up to *cursor_seconds*."""
        for track in tracks:
            self._accumulate_track(track, cursor_seconds)

    def recompute(self, tracks: Iterable[Track], cursor_seconds: int) -> None:
        """Clear all counters and accumulate from each track's start."""
        tracks = list(tracks)
        for track in tracks:
            track.reset_counters()
        self.accumulate(tracks, cursor_seconds)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _accumulate_track(self, track: Track, cursor: int) -> None:
        # last_accumulated_second is the last t whose segment (t-1 -> t) is
        # already in the total; 0 means nothing has been folded in yet.
        last = track.last_accumulated_second
        if last <= cursor:
            points = track.points
            for t in range(last + 1, cursor + 1):
                if t < len(points):
                    track.accumulated_distance += segment_miles(points[t - 1], points[t])
            track.last_accumulated_second = cursor

        if cursor > 0 and len(track.points) >= cursor + 1:
            if track.accumulated_distance > 0:
                track.average_pace = format_pace(cursor, track.accumulated_distance)
            else:
                track.average_pace = ""
