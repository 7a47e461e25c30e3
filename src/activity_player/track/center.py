"""Centroid of all tracks at the playback cursor, for map centering."""

from __future__ import annotations

from collections.abc import Sequence

from activity_player.track.models import Point, Track


class CenterLocator:
    """Average the positions of every track that has a point at a given second."""

    def center(self, tracks: Sequence[Track], cursor_seconds: int) -> Point | None:
        """Return the coordinate-wise mean at *cursor_seconds*.

        Tracks that ended before *cursor_seconds* are skipped.  Returns None
        when no track has a point at that index.
        """
        x_sum = 0.0
        y_sum = 0.0
        count = 0
        for track in tracks:
            if track.has_point(cursor_seconds):
                x, y = track.points[cursor_seconds]
                x_sum += x
                y_sum += y
                count += 1

        if not count:
            return None
        return (x_sum / count, y_sum / count)
