"""Short-lived cache in front of the history listing."""

import time
from collections.abc import Awaitable, Callable
from typing import Any

from script_chunker.config.settings import get_settings
from script_chunker.repositories.mongodb.history_repository import list_states

LoadFn = Callable[[int], Awaitable[list[dict[str, Any]]]]


class HistoryCache:
    """Caches list_states() results for a few seconds; writes should call invalidate()."""

    def __init__(
        self,
        loader: LoadFn = list_states,
        ttl_seconds: float | None = None,
        limit: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        settings = get_settings()
        self._loader = loader
        self._ttl = settings.history_cache_seconds if ttl_seconds is None else ttl_seconds
        self._limit = settings.history_list_limit if limit is None else limit
        self._clock = clock
        self._states: list[dict[str, Any]] | None = None
        self._fetched_at = 0.0

    @property
    def is_cached(self) -> bool:
        return self._states is not None

    @property
    def states(self) -> list[dict[str, Any]]:
        return list(self._states or [])

    async def load(self, force: bool = False) -> list[dict[str, Any]]:
        """Return cached states when fresh, else reload. Loader errors propagate and leave the cache as it was."""
        now = self._clock()
        if not force and self._states is not None and now - self._fetched_at < self._ttl:
            return self.states
        states = await self._loader(self._limit)
        self._states = states
        self._fetched_at = now
        return self.states

    def invalidate(self, *_: Any) -> None:
        self._states = None
        self._fetched_at = 0.0
