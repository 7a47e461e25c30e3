"""Playback clock and incremental distance bookkeeping.

Public API
----------
PlaybackClock        - cursor, pause/resume, seek, speed ladder, tick observers
PlaybackState        - snapshot of the clock's state
PlaybackConfig       - initial speed, tick event name, recalculation interval
DistanceAccumulator  - per-track distance and average pace up to a cursor
ThreadingScheduler   - repeating ticks on a daemon thread
ManualScheduler      - ticks fired explicitly (tests, external loops)
next_speed           - one step of the speed ladder
"""

from activity_player.playback.accumulator import DistanceAccumulator
from activity_player.playback.clock import PlaybackClock, PlaybackState, next_speed
from activity_player.playback.config import PlaybackConfig
from activity_player.playback.scheduler import (
    ManualScheduler,
    ScheduleHandle,
    ThreadingScheduler,
)

__all__ = [
    "DistanceAccumulator",
    "ManualScheduler",
    "PlaybackClock",
    "PlaybackConfig",
    "PlaybackState",
    "ScheduleHandle",
    "ThreadingScheduler",
    "next_speed",
]
