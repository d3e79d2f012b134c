"""FastAPI dependencies for app-owned history helpers (created in the lifespan, kept on app.state)."""

from fastapi import Request

from script_chunker.services.history.autosave import AutoSaver
from script_chunker.services.history.cache import HistoryCache


def get_history_cache(request: Request) -> HistoryCache:
    return request.app.state.history_cache


def get_autosaver(request: Request) -> AutoSaver:
    return request.app.state.autosaver
