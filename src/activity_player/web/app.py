"""FastAPI application exposing playback commands and state."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import Depends, FastAPI

from activity_player.playback.clock import PlaybackClock
from activity_player.playback.config import PlaybackConfig
from activity_player.web.schemas import (
    HealthResponse,
    PlaybackSnapshot,
    SpeedRequest,
    ToggleRequest,
    TracksRequest,
)
from activity_player.web.service import PlaybackService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

VERSION = "0.1.0"

_service: PlaybackService | None = None


def get_service() -> PlaybackService:
    """Return the process-wide service, building it on first use."""
    global _service
    if _service is None:
        _service = PlaybackService(PlaybackClock(config=PlaybackConfig.from_env()))
    return _service


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    if _service is not None:
        _logger.info("Stopping playback")
        _service.clock.toggle_play(paused=True)


app = FastAPI(title="Activity Player", version=VERSION, lifespan=_lifespan)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=VERSION)


@app.get("/api/playback", response_model=PlaybackSnapshot)
def playback_state(svc: PlaybackService = Depends(get_service)) -> PlaybackSnapshot:
    return svc.snapshot()


@app.put("/api/tracks", response_model=PlaybackSnapshot)
def load_tracks(
    req: TracksRequest, svc: PlaybackService = Depends(get_service)
) -> PlaybackSnapshot:
    """Replace the loaded tracks and rewind to the start."""
    return svc.load_tracks(req.tracks)


@app.delete("/api/tracks", response_model=PlaybackSnapshot)
def clear_tracks(svc: PlaybackService = Depends(get_service)) -> PlaybackSnapshot:
    return svc.clear_tracks()


@app.post("/api/playback/toggle", response_model=PlaybackSnapshot)
def toggle(
    req: ToggleRequest | None = None, svc: PlaybackService = Depends(get_service)
) -> PlaybackSnapshot:
    """Pause/resume; an explicit ``paused`` value wins over toggling."""
    return svc.toggle(req.paused if req is not None else None)


@app.post("/api/playback/forward", response_model=PlaybackSnapshot)
def step_forward(svc: PlaybackService = Depends(get_service)) -> PlaybackSnapshot:
    return svc.step(forward=True)


@app.post("/api/playback/backward", response_model=PlaybackSnapshot)
def step_backward(svc: PlaybackService = Depends(get_service)) -> PlaybackSnapshot:
    return svc.step(forward=False)


@app.post("/api/playback/speed", response_model=PlaybackSnapshot)
def adjust_speed(
    req: SpeedRequest, svc: PlaybackService = Depends(get_service)
) -> PlaybackSnapshot:
    return svc.adjust_speed(req.increase)
