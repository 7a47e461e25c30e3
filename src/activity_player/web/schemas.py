"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from pydantic import BaseModel, Field, FiniteFloat


class HealthResponse(BaseModel):
    status: str
    version: str


class TrackPayload(BaseModel):
    name: str = ""
    points: list[tuple[FiniteFloat, FiniteFloat]] = Field(default_factory=list)


class TracksRequest(BaseModel):
    tracks: list[TrackPayload]


class ToggleRequest(BaseModel):
    paused: bool | None = None


class SpeedRequest(BaseModel):
    increase: bool


class TrackStatus(BaseModel):
    name: str
    duration_seconds: int
    distance_miles: float
    average_pace: str


class PlaybackSnapshot(BaseModel):
    cursor_seconds: int
    elapsed: str
    speed_multiplier: int
    paused: bool
    done: bool
    max_duration_seconds: int
    tick_event_name: str
    center: tuple[float, float] | None
    tracks: list[TrackStatus]
