"""PlaybackService — owns the clock behind the Web API."""

from __future__ import annotations

from activity_player.geo import format_duration
from activity_player.playback.clock import PlaybackClock
from activity_player.track.models import Track
from activity_player.web.schemas import PlaybackSnapshot, TrackPayload, TrackStatus


class PlaybackService:
    """Translates API payloads into clock commands and clock state into snapshots.

    Parameters
    ----------
    clock:
        The :class:`~activity_player.playback.clock.PlaybackClock` to drive.
    """

    def __init__(self, clock: PlaybackClock) -> None:
        self._clock = clock

    @property
    def clock(self) -> PlaybackClock:
        return self._clock

    def load_tracks(self, payloads: list[TrackPayload]) -> PlaybackSnapshot:
        tracks = [
            Track(points=[(float(x), float(y)) for x, y in p.points], name=p.name)
            for p in payloads
        ]
        self._clock.set_tracks(tracks)
        return self.snapshot()

    def clear_tracks(self) -> PlaybackSnapshot:
        self._clock.clear_tracks()
        return self.snapshot()

    def toggle(self, paused: bool | None = None) -> PlaybackSnapshot:
        self._clock.toggle_play(paused)
        return self.snapshot()

    def step(self, forward: bool) -> PlaybackSnapshot:
        if forward:
            self._clock.step_forward()
        else:
            self._clock.step_backward()
        return self.snapshot()

    def adjust_speed(self, increase: bool) -> PlaybackSnapshot:
        self._clock.adjust_speed(increase)
        return self.snapshot()

    def snapshot(self) -> PlaybackSnapshot:
        """Read the clock into a response model, all at the same tick."""
        with self._clock.locked():
            state = self._clock.state
            return PlaybackSnapshot(
                cursor_seconds=state.cursor_seconds,
                elapsed=format_duration(state.cursor_seconds),
                speed_multiplier=state.speed_multiplier,
                paused=state.paused,
                done=state.done,
                max_duration_seconds=state.max_duration_seconds,
                tick_event_name=self._clock.tick_event_name,
                center=self._clock.center(),
                tracks=[
                    TrackStatus(
                        name=t.name,
                        duration_seconds=t.duration_seconds,
                        distance_miles=t.accumulated_distance,
                        average_pace=t.average_pace,
                    )
                    for t in self._clock.tracks
                ],
            )
