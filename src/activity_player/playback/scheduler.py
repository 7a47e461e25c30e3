"""Repeating-callback schedulers used to drive the playback clock.

A scheduler exposes ``schedule(period_s, callback) -> ScheduleHandle`` and
``cancel(handle)``.  The handle is opaque to callers; they only keep it to
cancel later and to check whether a schedule is installed.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

_logger = logging.getLogger(__name__)


class ScheduleHandle:
    """Cancellation token for one repeating schedule."""

    def __init__(self, period_s: float, callback: Callable[[], None]) -> None:
        self.period_s = period_s
        self._callback = callback
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def _cancel(self) -> None:
        self._cancelled.set()


class ThreadingScheduler:
    """Runs each schedule on a daemon thread.

    The thread waits *period_s* between calls, so the first call happens one
    period after :meth:`schedule`.  A callback always runs to completion
    before the next wait starts.  A callback that raises is logged and its
    schedule is cancelled.
    """

    def __init__(self, name: str = "PlaybackTick") -> None:
        self._name = name

    def schedule(self, period_s: float, callback: Callable[[], None]) -> ScheduleHandle:
        """Start calling *callback* every *period_s* seconds."""
        if period_s <= 0:
            raise ValueError("period_s must be > 0")
        handle = ScheduleHandle(period_s, callback)
        thread = threading.Thread(
            target=self._run, args=(handle,), daemon=True, name=self._name
        )
        thread.start()
        return handle

    def cancel(self, handle: ScheduleHandle | None) -> None:
        """Stop *handle*; cancelling twice (or None) is a no-op."""
        if handle is not None:
            handle._cancel()

    def _run(self, handle: ScheduleHandle) -> None:
        while not handle._cancelled.wait(handle.period_s):
            try:
                handle._callback()
            except Exception:
                _logger.exception("Scheduled callback %r failed; schedule stopped",
                                  handle._callback)
                handle._cancel()


class ManualScheduler:
    """Scheduler whose ticks fire only when :meth:`fire` is called.

    Used by tests and by hosts with their own event loop.  ``handles`` keeps
    the schedules handed out since the last cancelled ones were pruned,
    which happens on every :meth:`schedule` and :meth:`fire`.
    """

    def __init__(self) -> None:
        self.handles: list[ScheduleHandle] = []

    def schedule(self, period_s: float, callback: Callable[[], None]) -> ScheduleHandle:
        if period_s <= 0:
            raise ValueError("period_s must be > 0")
        self._prune()
        handle = ScheduleHandle(period_s, callback)
        self.handles.append(handle)
        return handle

    def cancel(self, handle: ScheduleHandle | None) -> None:
        if handle is not None:
            handle._cancel()

    @property
    def active(self) -> list[ScheduleHandle]:
        """Schedules that have not been cancelled."""
        return [h for h in self.handles if not h.cancelled]

    def fire(self, times: int = 1) -> int:
        """Run every active callback *times* times; return how many calls ran.

        A schedule cancelled during a round (e.g. playback reached the end)
        receives no further calls.  Exceptions from callbacks propagate.
        """
        calls = 0
        for _ in range(times):
            for handle in self.active:
                if not handle.cancelled:
                    handle._callback()
                    calls += 1
        self._prune()
        return calls

    def _prune(self) -> None:
        self.handles = [h for h in self.handles if not h.cancelled]
