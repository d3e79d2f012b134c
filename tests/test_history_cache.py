"""Tests for the history listing cache."""

from unittest.mock import AsyncMock

import pytest

from script_chunker.repositories.mongodb.base import RepositoryError
from script_chunker.services.history.cache import HistoryCache


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.mark.asyncio()
async def test_serves_cached_states_within_ttl(clock):
    loader = AsyncMock(return_value=[{"state_id": "a"}])
    cache = HistoryCache(loader=loader, ttl_seconds=5, limit=10, clock=clock)

    assert await cache.load() == [{"state_id": "a"}]
    clock.now += 4
    assert await cache.load() == [{"state_id": "a"}]

    loader.assert_awaited_once_with(10)


@pytest.mark.asyncio()
async def test_reloads_after_ttl(clock):
    loader = AsyncMock(side_effect=[[{"state_id": "a"}], [{"state_id": "b"}]])
    cache = HistoryCache(loader=loader, ttl_seconds=5, limit=10, clock=clock)

    await cache.load()
    clock.now += 5

    assert await cache.load() == [{"state_id": "b"}]
    assert loader.await_count == 2


@pytest.mark.asyncio()
async def test_force_and_invalidate_bypass_cache(clock):
    loader = AsyncMock(return_value=[])
    cache = HistoryCache(loader=loader, ttl_seconds=5, limit=10, clock=clock)

    await cache.load()
    await cache.load(force=True)
    cache.invalidate("state_x")
    assert not cache.is_cached
    await cache.load()

    assert loader.await_count == 3


@pytest.mark.asyncio()
async def test_loader_error_keeps_previous_states(clock):
    loader = AsyncMock(side_effect=[[{"state_id": "a"}], RepositoryError("down")])
    cache = HistoryCache(loader=loader, ttl_seconds=5, limit=10, clock=clock)

    await cache.load()
    with pytest.raises(RepositoryError):
        await cache.load(force=True)

    assert cache.states == [{"state_id": "a"}]


@pytest.mark.asyncio()
async def test_returned_list_is_a_copy(clock):
    cache = HistoryCache(loader=AsyncMock(return_value=[{"state_id": "a"}]), ttl_seconds=5, limit=10, clock=clock)

    states = await cache.load()
    states.clear()

    assert cache.states == [{"state_id": "a"}]
