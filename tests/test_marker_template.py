"""Tests for segment-marker template compilation."""

import pytest

from script_chunker.config.markers.static import load_default_marker_pairs
from script_chunker.services.markers.template import compile_marker_template, template_to_regex


def test_optional_bold_template_source():
    source = template_to_regex("%o{**}Segment %n:%o{**} (%d characters)")

    assert source == r"(?:\*\*)?Segment[ \t]*\d+:(?:\*\*)?[ \t]*(?:\(\d+[ \t]*characters\))?"


@pytest.mark.parametrize(
    "header",
    [
        "**Segment 1:** (42 characters)",
        "Segment 12: (7 characters)",
        "**segment 3:**",
        "Segment 4:** (10   characters)",
        "Segment\t5:",
    ],
)
def test_default_template_matches_header_variants(header):
    pattern = compile_marker_template(load_default_marker_pairs()[0].pattern_template)

    match = pattern.match(header)
    assert match is not None
    assert match.group(0) == header


def test_character_count_is_optional():
    pattern = compile_marker_template("**Segment %n:** (%d characters)")

    assert pattern.fullmatch("**Segment 2:**") is not None
    assert pattern.fullmatch("**Segment 2:** (15 characters)") is not None


def test_literal_text_is_escaped():
    pattern = compile_marker_template("[Part %n]")

    assert pattern.fullmatch("[Part 9]") is not None
    assert pattern.fullmatch("Part 9") is None


def test_number_must_be_digits():
    pattern = compile_marker_template("Segment %n:")

    assert pattern.search("Segment one:") is None


@pytest.mark.parametrize("template", ["", "   "])
def test_blank_template_compiles_to_none(template):
    assert compile_marker_template(template) is None


def test_compiled_patterns_are_cached():
    assert compile_marker_template("Scene %n") is compile_marker_template("Scene %n")
