"""Static chunking profiles (static.json) and request-time settings resolution. Read-only; no business logic."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from script_chunker.config.chunking.models import ChunkSettings

_PROFILES_PATH = Path(__file__).resolve().parent / "static.json"

ACTIVE = "active"


@lru_cache(maxsize=1)
def _read_profiles_file() -> tuple[str, dict[str, ChunkSettings]]:
    data = json.loads(_PROFILES_PATH.read_text(encoding="utf-8"))
    profiles = {name: ChunkSettings.model_validate(raw) for name, raw in data.get("profiles", {}).items()}
    return data.get("active", "default"), profiles


def load_chunking_profiles() -> dict[str, ChunkSettings]:
    """Profile name -> settings, as declared in static.json."""
    return dict(_read_profiles_file()[1])


def get_chunking_profile(profile_name: str) -> ChunkSettings | None:
    return _read_profiles_file()[1].get(profile_name)


def get_active_profile_name() -> str:
    """Name of the profile marked active in static.json ('default' when unset)."""
    return _read_profiles_file()[0]


def resolve_chunk_settings(profile_name: str = ACTIVE, overrides: dict[str, Any] | None = None) -> ChunkSettings:
    """
    Look up a profile ("active" means the one static.json marks active) and
    layer the non-None overrides on top. Raises ValueError for an unknown profile.
    """
    name = get_active_profile_name() if profile_name == ACTIVE else profile_name
    base = get_chunking_profile(name)
    if base is None:
        raise ValueError(f"Unknown chunking profile: {name!r}")
    updates = {k: v for k, v in (overrides or {}).items() if v is not None}
    return base.model_copy(update=updates) if updates else base
