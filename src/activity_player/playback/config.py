"""Playback configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SPEED_MULTIPLIER = 10
DEFAULT_TICK_EVENT_NAME = "player-tick"
DEFAULT_RECALC_INTERVAL_SECONDS = 10


@dataclass
class PlaybackConfig:
    """Settings read once when a :class:`PlaybackClock` is built."""

    speed_multiplier: int = DEFAULT_SPEED_MULTIPLIER
    """Initial simulated seconds per real second."""

    tick_event_name: str = DEFAULT_TICK_EVENT_NAME
    """Name under which tick notifications are published."""

    recalc_interval_seconds: int = DEFAULT_RECALC_INTERVAL_SECONDS
    """Distance/pace is refreshed every this many simulated seconds while playing."""

    def __post_init__(self) -> None:
        if self.speed_multiplier < 1:
            raise ValueError("speed_multiplier must be >= 1")
        if self.recalc_interval_seconds < 1:
            raise ValueError("recalc_interval_seconds must be >= 1")

    @classmethod
    def from_env(cls) -> PlaybackConfig:
        """Build a config from ``ACTIVITY_PLAYER_*`` environment variables.

        Call ``dotenv.load_dotenv()`` first to pick up a project ``.env``.
        """
        return cls(
            speed_multiplier=int(
                os.environ.get("ACTIVITY_PLAYER_SPEED", DEFAULT_SPEED_MULTIPLIER)
            ),
            tick_event_name=os.environ.get(
                "ACTIVITY_PLAYER_TICK_EVENT", DEFAULT_TICK_EVENT_NAME
            ),
            recalc_interval_seconds=int(
                os.environ.get(
                    "ACTIVITY_PLAYER_RECALC_INTERVAL", DEFAULT_RECALC_INTERVAL_SECONDS
                )
            ),
        )
