"""Tests for the debounced AutoSaver."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from script_chunker.config.markers.models import MarkerPair
from script_chunker.repositories.mongodb.base import RepositoryError
from script_chunker.services.history.autosave import AUTOSAVE_NAME, AutoSaver, is_empty_state


def test_is_empty_state():
    blank = MarkerPair(id=1, pattern_template="  ")

    assert is_empty_state("   ", [blank])
    assert is_empty_state("", [])
    assert not is_empty_state("text", [blank])
    assert not is_empty_state("", [MarkerPair(id=1)])


@pytest.mark.asyncio()
async def test_saves_after_delay():
    save = AsyncMock(return_value="state_1")
    on_saved = MagicMock()
    saver = AutoSaver(save=save, delay=0, on_saved=on_saved)

    task = saver.schedule("Hello.", 100, [])
    await task

    save.assert_awaited_once_with("Hello.", 100, [], AUTOSAVE_NAME)
    on_saved.assert_called_once_with("state_1")
    assert saver.last_state_id == "state_1"
    assert not saver.pending


@pytest.mark.asyncio()
async def test_new_schedule_replaces_pending_save():
    save = AsyncMock(return_value="state_2")
    saver = AutoSaver(save=save, delay=0.05)

    first = saver.schedule("First draft.", 100, [])
    second = saver.schedule("Second draft.", 100, [])
    await second
    await asyncio.sleep(0)

    assert first.cancelled()
    save.assert_awaited_once_with("Second draft.", 100, [], AUTOSAVE_NAME)


@pytest.mark.asyncio()
async def test_empty_state_is_not_scheduled():
    save = AsyncMock()
    saver = AutoSaver(save=save, delay=0)

    assert saver.schedule("  ", 100, []) is None
    assert not saver.pending
    save.assert_not_awaited()


@pytest.mark.asyncio()
async def test_storage_failure_is_logged_not_raised():
    save = AsyncMock(side_effect=RepositoryError("unavailable"))
    on_saved = MagicMock()
    saver = AutoSaver(save=save, delay=0, on_saved=on_saved)

    await saver.schedule("Hello.", 100, [])

    on_saved.assert_not_called()
    assert saver.last_state_id is None


@pytest.mark.asyncio()
async def test_unexpected_save_error_is_logged(caplog):
    save = AsyncMock(side_effect=RuntimeError("boom"))
    on_saved = MagicMock()
    saver = AutoSaver(save=save, delay=0, on_saved=on_saved)

    with caplog.at_level(logging.ERROR, logger="script_chunker.services.history.autosave"):
        await saver.schedule("Hello.", 100, [])

    on_saved.assert_not_called()
    assert saver.last_state_id is None
    assert any(r.message == "Auto-save crashed" and r.exc_info for r in caplog.records)


@pytest.mark.asyncio()
async def test_aclose_cancels_pending_save():
    save = AsyncMock()
    saver = AutoSaver(save=save, delay=10)

    task = saver.schedule("Hello.", 100, [])
    await saver.aclose()

    assert task.cancelled()
    assert not saver.pending
    save.assert_not_awaited()
