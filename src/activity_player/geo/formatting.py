"""Elapsed-time and pace text for the playback overlay."""

from __future__ import annotations

import math


def _pad(value: int) -> str:
    return f"{value:02d}"


def format_duration(total_seconds: int) -> str:
    """Format *total_seconds* as ``H:MM:SS``, or ``MM:SS`` below one hour.

    The hours part is not padded; minutes and seconds always are.
    """
    total_seconds = int(total_seconds)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    hours_text = f"{hours}:" if hours > 0 else ""
    return f"{hours_text}{_pad(minutes)}:{_pad(seconds)}"


def format_pace(total_seconds: float, distance_miles: float) -> str:
    """Format the average pace in minutes per mile as ``MM:SS``.

    Both parts are truncated, not rounded.

    Raises
    ------
    ValueError
        If *distance_miles* is not positive; the pace is undefined there.
    """
    if not distance_miles > 0:
        raise ValueError(f"pace undefined for distance {distance_miles!r} mi")

    pace = total_seconds / distance_miles / 60
    minutes = math.trunc(pace)
    seconds = math.trunc((pace - minutes) * 60)
    return f"{_pad(minutes)}:{_pad(seconds)}"
