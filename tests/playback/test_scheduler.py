"""Tests for the tick schedulers."""

from __future__ import annotations

import logging
import threading
import time

import pytest

from activity_player.playback.scheduler import ManualScheduler, ThreadingScheduler


class TestThreadingScheduler:
    def test_callback_repeats(self):
        calls = []
        reached = threading.Event()

        def cb():
            calls.append(1)
            if len(calls) >= 3:
                reached.set()

        sched = ThreadingScheduler()
        handle = sched.schedule(0.01, cb)
        try:
            assert reached.wait(timeout=2.0)
        finally:
            sched.cancel(handle)

    def test_cancel_stops_callbacks(self):
        calls = []
        sched = ThreadingScheduler()
        handle = sched.schedule(0.01, lambda: calls.append(1))
        time.sleep(0.05)
        sched.cancel(handle)
        time.sleep(0.03)  # let an in-flight callback finish
        count = len(calls)
        time.sleep(0.05)
        assert len(calls) == count
        assert handle.cancelled

    def test_cancel_is_idempotent(self):
        sched = ThreadingScheduler()
        handle = sched.schedule(0.5, lambda: None)
        sched.cancel(handle)
        sched.cancel(handle)  # should not raise
        sched.cancel(None)
        assert handle.cancelled

    def test_non_positive_period_rejected(self):
        with pytest.raises(ValueError):
            ThreadingScheduler().schedule(0, lambda: None)

    def test_failing_callback_is_logged_and_cancelled(self, caplog):
        calls = []

        def cb():
            calls.append(1)
            raise RuntimeError("boom")

        sched = ThreadingScheduler()
        with caplog.at_level(logging.ERROR, logger="activity_player.playback.scheduler"):
            handle = sched.schedule(0.01, cb)
            deadline = time.monotonic() + 2.0
            while not handle.cancelled and time.monotonic() < deadline:
                time.sleep(0.01)
        assert handle.cancelled
        time.sleep(0.05)
        assert calls == [1]
        assert "schedule stopped" in caplog.text
        assert "boom" in caplog.text


class TestManualScheduler:
    def test_fire_runs_active_callbacks(self):
        calls = []
        sched = ManualScheduler()
        sched.schedule(0.1, lambda: calls.append("a"))
        assert sched.fire(3) == 3
        assert calls == ["a", "a", "a"]

    def test_cancelled_handle_is_not_fired(self):
        calls = []
        sched = ManualScheduler()
        handle = sched.schedule(0.1, lambda: calls.append(1))
        sched.cancel(handle)
        sched.cancel(handle)
        assert sched.fire() == 0
        assert calls == []
        assert sched.active == []

    def test_handle_cancelled_by_its_own_callback_stops(self):
        sched = ManualScheduler()
        calls = []

        def cb():
            calls.append(1)
            sched.cancel(handle)

        handle = sched.schedule(0.1, cb)
        sched.fire(5)
        assert calls == [1]

    def test_period_recorded(self):
        sched = ManualScheduler()
        handle = sched.schedule(0.25, lambda: None)
        assert handle.period_s == 0.25
        assert sched.handles == [handle]

    def test_cancelled_handles_are_pruned(self):
        sched = ManualScheduler()
        for _ in range(50):
            sched.cancel(sched.schedule(0.1, lambda: None))
        live = sched.schedule(0.1, lambda: None)
        assert sched.handles == [live]

        stopped = sched.schedule(0.1, lambda: sched.cancel(stopped))
        sched.fire()
        assert sched.handles == [live]
