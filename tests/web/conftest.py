"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from activity_player.playback.clock import PlaybackClock
from activity_player.playback.scheduler import ManualScheduler
from activity_player.web.app import app, get_service
from activity_player.web.service import PlaybackService


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def service(scheduler):
    return PlaybackService(PlaybackClock(scheduler=scheduler))


@pytest.fixture
def client(service):
    """FastAPI test client bound to a manually ticked clock."""
    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
