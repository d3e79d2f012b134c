"""
Debounced auto-save of the working chunking state.

The AutoSaver is owned by its caller (the app keeps one on app.state): every
schedule() cancels the pending save and starts a new delayed one, and the
returned task handle can be cancelled or awaited directly.
"""

import asyncio
import contextlib
from collections.abc import Awaitable, Callable

from script_chunker.config.logging import get_logger
from script_chunker.config.markers.models import MarkerPair
from script_chunker.config.settings import get_settings
from script_chunker.repositories.mongodb.base import RepositoryError
from script_chunker.repositories.mongodb.history_repository import save_state

logger = get_logger(__name__)

AUTOSAVE_NAME = "Auto-saved"

SaveFn = Callable[[str, int, list[MarkerPair], str | None], Awaitable[str]]


def is_empty_state(input_text: str, marker_pairs: list[MarkerPair]) -> bool:
    """A state with blank text and only blank templates is not worth saving."""
    return not input_text.strip() and all(not mp.pattern_template.strip() for mp in marker_pairs)


class AutoSaver:
    def __init__(
        self,
        save: SaveFn = save_state,
        delay: float | None = None,
        on_saved: Callable[[str], None] | None = None,
    ):
        self._save = save
        self._delay = get_settings().autosave_delay_seconds if delay is None else delay
        self._on_saved = on_saved
        self._pending: asyncio.Task[None] | None = None
        self.last_state_id: str | None = None

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def schedule(
        self,
        input_text: str,
        max_characters: int,
        marker_pairs: list[MarkerPair],
    ) -> asyncio.Task[None] | None:
        """
        Replace any pending save with a new one that fires after the delay.
        Returns the task, or None when the state is empty and nothing was scheduled.
        Must be called from a running event loop.
        """
        self.cancel()
        if is_empty_state(input_text, marker_pairs):
            return None
        self._pending = asyncio.create_task(self._save_later(input_text, max_characters, list(marker_pairs)))
        return self._pending

    async def _save_later(self, input_text: str, max_characters: int, marker_pairs: list[MarkerPair]) -> None:
        await asyncio.sleep(self._delay)
        try:
            state_id = await self._save(input_text, max_characters, marker_pairs, AUTOSAVE_NAME)
        except RepositoryError as e:
            logger.warning("Auto-save failed", extra={"error": str(e)})
            return
        except Exception:
            # The task is never awaited
            logger.exception("Auto-save crashed")
            return
        self.last_state_id = state_id
        if self._on_saved is not None:
            self._on_saved(state_id)

    def cancel(self) -> None:
        """Cancel the pending save, if any."""
        if self.pending:
            self._pending.cancel()
        self._pending = None

    async def aclose(self) -> None:
        """Cancel the pending save and wait for it to finish unwinding."""
        task = self._pending
        self.cancel()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task
