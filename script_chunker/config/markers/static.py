"""Static default marker pairs loader. Read-only; no business logic."""

import json
from pathlib import Path

from script_chunker.config.markers.models import MarkerPair

_config_path = Path(__file__).resolve().parent / "static.json"

_cached: list[MarkerPair] | None = None


def load_default_marker_pairs() -> list[MarkerPair]:
    """Return the default marker pairs from static.json. Cached after first read."""
    global _cached
    if _cached is None:
        data = json.loads(_config_path.read_text(encoding="utf-8"))
        _cached = [MarkerPair.model_validate(p) for p in data.get("marker_pairs", [])]
    return list(_cached)
