"""PlaybackClock moves the playback cursor over the loaded tracks."""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from activity_player.geo import format_duration
from activity_player.playback.accumulator import DistanceAccumulator
from activity_player.playback.config import PlaybackConfig
from activity_player.playback.scheduler import ScheduleHandle, ThreadingScheduler
from activity_player.track.center import CenterLocator
from activity_player.track.models import Point, Track

_logger = logging.getLogger(__name__)

MIN_SPEED_MULTIPLIER = 1


def next_speed(multiplier: int, increase: bool) -> int:
    """Return the next step of the speed ladder.

    Going up: ``+1`` below 10, ``+5`` from 10 to 49, ``+10`` from 50.
    Going down: ``-5`` above 10, ``-1`` from 10 to 2, never below 1.
    """
    if increase:
        if multiplier >= 50:
            return multiplier + 10
        if multiplier >= 10:
            return multiplier + 5
        return multiplier + 1

    if multiplier > 10:
        return multiplier - 5
    if multiplier > MIN_SPEED_MULTIPLIER:
        return multiplier - 1
    return MIN_SPEED_MULTIPLIER


@dataclass
class PlaybackState:
    """Snapshot of everything the clock owns."""

    cursor_seconds: int = 0
    """Current playback position in simulated seconds."""

    speed_multiplier: int = 10
    """Simulated seconds per real second (= ticks per real second)."""

    paused: bool = True

    done: bool = False
    """True once the cursor has reached ``max_duration_seconds``."""

    max_duration_seconds: int = -1
    """Longest track duration; -1 when no tracks are loaded."""


class PlaybackClock:
    """Drives playback of a set of tracks over simulated time.

    Each tick advances the cursor by one simulated second.  Ticks are
    installed on *scheduler* at a period of ``1 / speed_multiplier`` seconds,
    so the multiplier is both the simulated seconds per real second and the
    tick rate.  Distance and pace are folded in incrementally every
    ``recalc_interval_seconds`` ticks and when playback reaches the end; any
    seek or reload recomputes them from scratch.

    Parameters
    ----------
    scheduler:
        Object with ``schedule(period_s, callback)`` and ``cancel(handle)``;
        defaults to :class:`~activity_player.playback.scheduler.ThreadingScheduler`.
    config:
        Initial speed, tick event name, and recalculation interval.
    accumulator:
        Distance/pace bookkeeper, injectable for tests.
    locator:
        Centroid calculator used by :meth:`center`.
    """

    def __init__(
        self,
        scheduler=None,
        config: PlaybackConfig | None = None,
        accumulator: DistanceAccumulator | None = None,
        locator: CenterLocator | None = None,
    ) -> None:
        self._cfg = config or PlaybackConfig()
        self._scheduler = scheduler or ThreadingScheduler()
        self._accumulator = accumulator or DistanceAccumulator()
        self._locator = locator or CenterLocator()
        self._lock = threading.RLock()
        self._state = PlaybackState(speed_multiplier=self._cfg.speed_multiplier)
        self._tracks: list[Track] = []
        self._timer: ScheduleHandle | None = None
        self._generation = 0
        self._observers: list[Callable[[], None]] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        """A copy of the current state."""
        with self._lock:
            return dataclasses.replace(self._state)

    @property
    def cursor_seconds(self) -> int:
        return self._state.cursor_seconds

    @property
    def speed_multiplier(self) -> int:
        return self._state.speed_multiplier

    @property
    def paused(self) -> bool:
        return self._state.paused

    @property
    def done(self) -> bool:
        return self._state.done

    @property
    def max_duration_seconds(self) -> int:
        return self._state.max_duration_seconds

    @property
    def tracks(self) -> list[Track]:
        with self._lock:
            return list(self._tracks)

    @property
    def tick_event_name(self) -> str:
        return self._cfg.tick_event_name

    @property
    def is_scheduled(self) -> bool:
        """True while a repeating tick is installed."""
        return self._timer is not None

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the clock lock so several reads describe the same tick."""
        with self._lock:
            yield

    def center(self) -> Point | None:
        """Mean position of all tracks at the cursor, or None."""
        with self._lock:
            return self._locator.center(self._tracks, self._state.cursor_seconds)

    def elapsed_text(self) -> str:
        """The cursor formatted as ``H:MM:SS`` / ``MM:SS``."""
        return format_duration(self._state.cursor_seconds)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Call *callback* (no arguments) after every tick."""
        self._observers.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def set_tracks(self, tracks: Iterable[Track]) -> None:
        """Replace the track list and rewind to the start, paused."""
        with self._lock:
            self._tracks = list(tracks)
            _logger.debug("Loaded %d track(s)", len(self._tracks))
            self.reset()

    def clear_tracks(self) -> None:
        """Drop every track (clearing its counters) and rewind, paused."""
        with self._lock:
            for track in self._tracks:
                track.reset_counters()
            self._tracks = []
            self.reset()

    def reset(self) -> None:
        """Pause, move the cursor to 0, and recompute every track."""
        with self._lock:
            self.toggle_play(paused=True)
            self._state.cursor_seconds = 0
            self.refresh_calculations()

    def refresh_calculations(self) -> None:
        """Clear all track counters and recompute them at the current cursor."""
        with self._lock:
            lengths = [len(t.points) for t in self._tracks]
            self._state.max_duration_seconds = max(lengths, default=0) - 1
            self._accumulator.recompute(self._tracks, self._state.cursor_seconds)
            self._sync_done()

    def toggle_play(self, paused: bool | None = None) -> bool:
        """Invert the paused flag, or set it to *paused* when given.

        Resuming is ignored when nothing is left to play.  Returns the new
        paused value.
        """
        with self._lock:
            new_paused = (not self._state.paused) if paused is None else bool(paused)
            if not new_paused and not self._can_run():
                _logger.debug("Resume ignored: nothing left to play")
                new_paused = True
            if new_paused != self._state.paused:
                _logger.debug("Playback %s at %ds", "paused" if new_paused else "running",
                              self._state.cursor_seconds)
            self._state.paused = new_paused
            self._restart_timer()
            return new_paused

    def adjust_speed(self, increase: bool) -> int:
        """Move one step along the speed ladder; return the new multiplier."""
        with self._lock:
            self._state.speed_multiplier = next_speed(self._state.speed_multiplier, increase)
            _logger.debug("Speed multiplier now %d", self._state.speed_multiplier)
            self._restart_timer()
            return self._state.speed_multiplier

    def seek(self, delta_seconds: int) -> int:
        """Move the cursor by *delta_seconds*, clamped, and recompute all tracks.

        Returns the new cursor.
        """
        with self._lock:
            upper = max(self._state.max_duration_seconds, 0)
            cursor = self._state.cursor_seconds + int(delta_seconds)
            self._state.cursor_seconds = min(max(cursor, 0), upper)
            self.refresh_calculations()
            return self._state.cursor_seconds

    def step_forward(self) -> int:
        return self.seek(self._state.speed_multiplier)

    def step_backward(self) -> int:
        return self.seek(-self._state.speed_multiplier)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _can_run(self) -> bool:
        st = self._state
        return st.max_duration_seconds >= 0 and st.cursor_seconds < st.max_duration_seconds

    def _sync_done(self) -> None:
        st = self._state
        st.done = st.max_duration_seconds >= 0 and st.cursor_seconds >= st.max_duration_seconds
        if st.done and not st.paused:
            st.paused = True
            self._cancel_timer()

    def _cancel_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._scheduler.cancel(self._timer)
            self._timer = None

    def _restart_timer(self) -> None:
        self._cancel_timer()
        if self._state.paused:
            return
        generation = self._generation
        period_s = 1.0 / self._state.speed_multiplier
        self._timer = self._scheduler.schedule(period_s, lambda: self._on_tick(generation))

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._state.paused:
                return
            st = self._state
            if st.cursor_seconds < st.max_duration_seconds:
                st.cursor_seconds += 1
            st.done = st.cursor_seconds >= st.max_duration_seconds

            if st.cursor_seconds % self._cfg.recalc_interval_seconds == 0 or st.done:
                try:
                    self._accumulator.accumulate(self._tracks, st.cursor_seconds)
                except Exception:
                    st.paused = True
                    self._cancel_timer()
                    _logger.error("Recalculation failed at %s; playback paused",
                                  format_duration(st.cursor_seconds))
                    raise

            if st.done:
                st.paused = True
                self._cancel_timer()
                _logger.info("Playback finished at %s", format_duration(st.cursor_seconds))

        self._notify()

    def _notify(self) -> None:
        for callback in list(self._observers):
            try:
                callback()
            except Exception:
                _logger.exception("Tick observer %r failed", callback)
