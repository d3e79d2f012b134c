"""/history: save, list, load, rename, delete and auto-save chunking states."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from script_chunker.controllers.dependencies import get_autosaver, get_history_cache
from script_chunker.controllers.schema.history import (
    AutoSaveResponse,
    ClearHistoryResponse,
    RenameStateRequest,
    SaveStateResponse,
    StateRequest,
    StateResponse,
)
from script_chunker.repositories.mongodb.base import RepositoryError
from script_chunker.repositories.mongodb.history_repository import (
    clear_states,
    delete_state,
    get_latest_state,
    get_state,
    save_state,
    update_state_name,
)
from script_chunker.services.history.autosave import AutoSaver
from script_chunker.services.history.cache import HistoryCache

router = APIRouter(prefix="/history", tags=["history"])

_UNAVAILABLE = "Storage temporarily unavailable"


def _not_found(state_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"State not found: {state_id!r}")


@router.get("", response_model=list[StateResponse])
async def list_history(
    force: bool = False,
    history_cache: HistoryCache = Depends(get_history_cache),
) -> list[StateResponse]:
    """Saved states, newest first. Served from a short-lived cache unless force=true."""
    try:
        states = await history_cache.load(force=force)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail=_UNAVAILABLE) from e
    return [StateResponse.model_validate(s) for s in states]


@router.get("/latest", response_model=StateResponse)
async def latest_state() -> StateResponse:
    try:
        state = await get_latest_state()
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail=_UNAVAILABLE) from e
    if state is None:
        raise HTTPException(status_code=404, detail="History is empty")
    return StateResponse.model_validate(state)


@router.get("/{state_id}", response_model=StateResponse)
async def load_state(state_id: str) -> StateResponse:
    try:
        state = await get_state(state_id)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail=_UNAVAILABLE) from e
    if state is None:
        raise _not_found(state_id)
    return StateResponse.model_validate(state)


@router.post("", response_model=SaveStateResponse, status_code=status.HTTP_201_CREATED)
async def save_history_state(
    body: StateRequest,
    history_cache: HistoryCache = Depends(get_history_cache),
) -> SaveStateResponse:
    try:
        state_id = await save_state(body.input_text, body.max_characters, body.marker_pairs, body.name)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail=_UNAVAILABLE) from e
    history_cache.invalidate()
    return SaveStateResponse(state_id=state_id)


@router.post("/autosave", response_model=AutoSaveResponse, status_code=status.HTTP_202_ACCEPTED)
async def autosave(
    body: StateRequest,
    autosaver: AutoSaver = Depends(get_autosaver),
) -> AutoSaveResponse:
    """Queue a debounced save; a newer request replaces a pending one. Empty states are not queued."""
    task = autosaver.schedule(body.input_text, body.max_characters, body.marker_pairs)
    return AutoSaveResponse(scheduled=task is not None)


@router.patch("/{state_id}", status_code=status.HTTP_204_NO_CONTENT)
async def rename_state(
    state_id: str,
    body: RenameStateRequest,
    history_cache: HistoryCache = Depends(get_history_cache),
) -> Response:
    try:
        found = await update_state_name(state_id, body.name)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail=_UNAVAILABLE) from e
    if not found:
        raise _not_found(state_id)
    history_cache.invalidate()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{state_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_state(
    state_id: str,
    history_cache: HistoryCache = Depends(get_history_cache),
) -> Response:
    try:
        found = await delete_state(state_id)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail=_UNAVAILABLE) from e
    if not found:
        raise _not_found(state_id)
    history_cache.invalidate()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", response_model=ClearHistoryResponse)
async def clear_history(history_cache: HistoryCache = Depends(get_history_cache)) -> ClearHistoryResponse:
    try:
        deleted = await clear_states()
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail=_UNAVAILABLE) from e
    history_cache.invalidate()
    return ClearHistoryResponse(deleted=deleted)
