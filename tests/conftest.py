"""Shared fixtures. The API client runs without the lifespan so no MongoDB is needed."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from script_chunker.main import app
from script_chunker.services.history.autosave import AutoSaver
from script_chunker.services.history.cache import HistoryCache


@pytest.fixture
def history_loader():
    return AsyncMock(return_value=[])


@pytest.fixture
def autosaver():
    return MagicMock(spec=AutoSaver)


@pytest.fixture
def client(history_loader, autosaver):
    app.state.history_cache = HistoryCache(loader=history_loader, ttl_seconds=60, limit=100)
    app.state.autosaver = autosaver
    return TestClient(app)
