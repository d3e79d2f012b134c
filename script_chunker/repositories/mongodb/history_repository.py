"""Async CRUD for saved chunking states (history). Newest-first listings by timestamp."""

from typing import Any

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from script_chunker.config.logging import get_logger
from script_chunker.config.markers.models import MarkerPair
from script_chunker.repositories.mongodb.base import (
    _translate_pymongo_error,
    chunking_states_collection,
    state_filter,
)
from script_chunker.utils.ids import generate_state_id
from script_chunker.utils.time import ensure_utc, utc_now

logger = get_logger(__name__)

_PROJECTION = {"_id": 0}


def _from_storage(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    if doc is None:
        return None
    out = dict(doc)
    out.pop("_id", None)
    if out.get("timestamp") is not None:
        out["timestamp"] = ensure_utc(out["timestamp"])
    return out


async def save_state(
    input_text: str,
    max_characters: int,
    marker_pairs: list[MarkerPair],
    name: str | None = None,
) -> str:
    """Insert a new state and return its state_id. Marker pairs are stored without compiled patterns."""
    coll = chunking_states_collection()
    doc = {
        "state_id": generate_state_id(),
        "input_text": input_text,
        "max_characters": max_characters,
        "marker_pairs": [mp.model_dump(mode="json") for mp in marker_pairs],
        "timestamp": utc_now(),
        "name": name,
    }
    try:
        await coll.insert_one(doc)
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "save state") from e
    logger.info("Saved chunking state", extra={"state_id": doc["state_id"], "state_name": name})
    return doc["state_id"]


async def get_state(state_id: str) -> dict[str, Any] | None:
    """Return the state with the given id, or None if not found."""
    coll = chunking_states_collection()
    try:
        doc = await coll.find_one(state_filter(state_id), _PROJECTION)
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "get state") from e
    return _from_storage(doc)


async def get_latest_state() -> dict[str, Any] | None:
    """Return the most recently saved state, or None when history is empty."""
    coll = chunking_states_collection()
    try:
        doc = await coll.find_one({}, _PROJECTION, sort=[("timestamp", DESCENDING)])
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "get latest state") from e
    return _from_storage(doc)


async def list_states(limit: int = 100) -> list[dict[str, Any]]:
    """Return up to `limit` states, newest first."""
    coll = chunking_states_collection()
    try:
        cursor = coll.find({}, _PROJECTION).sort("timestamp", DESCENDING).limit(limit)
        docs = await cursor.to_list(length=limit)
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "list states") from e
    return [_from_storage(d) for d in docs]


async def update_state_name(state_id: str, name: str) -> bool:
    """Rename a state. Returns False when no state has that id."""
    coll = chunking_states_collection()
    try:
        result = await coll.update_one(state_filter(state_id), {"$set": {"name": name}})
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "update state name") from e
    return result.matched_count > 0


async def delete_state(state_id: str) -> bool:
    """Delete a state. Returns False when no state has that id."""
    coll = chunking_states_collection()
    try:
        result = await coll.delete_one(state_filter(state_id))
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "delete state") from e
    return result.deleted_count > 0


async def clear_states() -> int:
    """Delete every saved state. Returns the number removed."""
    coll = chunking_states_collection()
    try:
        result = await coll.delete_many({})
    except PyMongoError as e:
        raise _translate_pymongo_error(e, "clear states") from e
    logger.info("Cleared chunking history", extra={"deleted": result.deleted_count})
    return result.deleted_count
