"""Track data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass
class Track:
    """One recorded activity, sampled once per second.

    ``points[t]`` is the position ``t`` seconds after the start, stored as
    ``(x, y)`` = ``(longitude, latitude)``.  The accumulation fields are
    written by :class:`~activity_player.playback.accumulator.DistanceAccumulator`
    and are only meaningful relative to the clock cursor that produced them.
    """

    points: list[Point] = field(default_factory=list)
    """Second-indexed positions; ``len(points) == duration + 1``."""

    name: str = ""
    """Display label."""

    accumulated_distance: float = 0.0
    """Miles covered up to ``last_accumulated_second``."""

    last_accumulated_second: int = 0
    """Last second folded into ``accumulated_distance`` (0 = nothing yet)."""

    average_pace: str = ""
    """``MM:SS`` per mile, empty while unavailable."""

    @property
    def duration_seconds(self) -> int:
        """Seconds between the first and the last point (-1 when empty)."""
        return len(self.points) - 1

    def has_point(self, second: int) -> bool:
        return 0 <= second < len(self.points)

    def reset_counters(self) -> None:
        """Forget all accumulated distance and pace."""
        self.accumulated_distance = 0.0
        self.last_accumulated_second = 0
        self.average_pace = ""
