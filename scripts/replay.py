"""Replay one or more tracks in the console.

The input is a JSON file shaped like the ``PUT /api/tracks`` body::

    {"tracks": [{"name": "morning run", "points": [[lon, lat], ...]}]}

Usage:
    uv run python scripts/replay.py tracks.json
    uv run python scripts/replay.py tracks.json --speed 50
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
import threading
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from pydantic import ValidationError  # noqa: E402

from activity_player.playback.clock import PlaybackClock  # noqa: E402
from activity_player.playback.config import PlaybackConfig  # noqa: E402
from activity_player.track.models import Track  # noqa: E402
from activity_player.web.schemas import TracksRequest  # noqa: E402


def _positive_int(text: str) -> int:
    """argparse type for options that must be >= 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _load_tracks(path: Path) -> list[Track]:
    req = TracksRequest.model_validate_json(path.read_text(encoding="utf-8"))
    return [
        Track(points=[(x, y) for x, y in t.points], name=t.name or f"track {i}")
        for i, t in enumerate(req.tracks, 1)
    ]


def _print_status(clock: PlaybackClock) -> None:
    center = clock.center()
    center_str = f"({center[0]:.5f}, {center[1]:.5f})" if center else "-"
    parts = [f"{t.name}: {t.accumulated_distance:6.2f} mi {t.average_pace or '--:--'}/mi"
             for t in clock.tracks]
    print(f"{clock.elapsed_text():>8}  {center_str:<24}  " + "  ".join(parts), flush=True)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Activity player — console replay")
    ap.add_argument("tracks", type=Path, help="JSON file with the tracks to play")
    ap.add_argument("--speed", type=_positive_int, default=None, help="Initial speed multiplier")
    ap.add_argument("--every", type=_positive_int, default=10, help="Print every N simulated seconds")
    return ap


def main() -> None:
    args = build_parser().parse_args()

    logging.basicConfig(level=logging.INFO)

    try:
        tracks = _load_tracks(args.tracks)
    except (OSError, ValidationError) as exc:
        print(f"Cannot read {args.tracks}: {exc}", file=sys.stderr)
        sys.exit(1)

    cfg = PlaybackConfig.from_env()
    if args.speed is not None:
        cfg = dataclasses.replace(cfg, speed_multiplier=args.speed)

    clock = PlaybackClock(config=cfg)
    finished = threading.Event()

    def on_tick() -> None:
        if clock.done or clock.cursor_seconds % args.every == 0:
            _print_status(clock)
        if clock.done:
            finished.set()

    clock.subscribe(on_tick)
    clock.set_tracks(tracks)
    print(f"Loaded {len(tracks)} track(s), {clock.max_duration_seconds}s at x{clock.speed_multiplier}.")

    if not clock.toggle_play(paused=False):
        try:
            finished.wait()
        except KeyboardInterrupt:
            pass
        finally:
            clock.toggle_play(paused=True)
    _print_status(clock)


if __name__ == "__main__":
    main()
