"""Tests for static chunking profiles and default marker pairs."""

import pytest

from script_chunker.config.chunking.static import (
    get_active_profile_name,
    load_chunking_profiles,
    resolve_chunk_settings,
)
from script_chunker.config.markers.static import load_default_marker_pairs


def test_profiles_are_loaded():
    profiles = load_chunking_profiles()

    assert {"default", "strict", "long_form"} <= set(profiles)
    assert profiles["strict"].fallback_split is True


def test_active_profile_resolves():
    settings = resolve_chunk_settings()

    assert settings == load_chunking_profiles()[get_active_profile_name()]
    assert settings.max_characters == 490


def test_overrides_skip_none_values():
    settings = resolve_chunk_settings("long_form", {"max_characters": None, "fallback_split": True})

    assert settings.max_characters == 1000
    assert settings.fallback_split is True


def test_unknown_profile_raises():
    with pytest.raises(ValueError, match="Unknown chunking profile"):
        resolve_chunk_settings("missing")


def test_default_marker_pairs_are_copies():
    pairs = load_default_marker_pairs()
    pairs.clear()

    first = load_default_marker_pairs()[0]
    assert first.start_marker == "### Voice Script Segments"
    assert first.end_marker == "### Storyboard Images"
