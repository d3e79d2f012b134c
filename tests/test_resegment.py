"""Tests for document re-segmentation and document statistics."""

import pytest

from script_chunker.config.markers.models import MarkerPair
from script_chunker.config.markers.static import load_default_marker_pairs
from script_chunker.services.chunking.errors import OversizedUnboundedContent
from script_chunker.services.markers.resegment import (
    count_segments,
    document_stats,
    find_sections,
    format_segment,
    resegment_document,
)

DOCUMENT = (
    "# Title\n\n"
    "### Voice Script Segments\n\n"
    "**Segment 1:** (10 characters)\n\n"
    "First sentence here.\nSecond sentence here.\n\n"
    "**Segment 2:** (5 characters)\n\n"
    "Third sentence here.\n\n"
    "---\n\n"
    "### Storyboard Images\n\n"
    "Image notes.\n"
)

EXPECTED = (
    "# Title\n\n"
    "### Voice Script Segments\n\n"
    "**Segment 1:** (42 characters)\n\n"
    "First sentence here. Second sentence here.\n\n"
    "**Segment 2:** (20 characters)\n\n"
    "Third sentence here.\n\n"
    "---\n\n"
    "### Storyboard Images\n\n"
    "Image notes.\n"
)


@pytest.fixture
def pairs():
    return load_default_marker_pairs()


class TestResegmentDocument:
    def test_rewrites_segments_inside_section(self, pairs):
        assert resegment_document(DOCUMENT, pairs, 50) == EXPECTED

    def test_is_idempotent(self, pairs):
        once = resegment_document(DOCUMENT, pairs, 50)

        assert resegment_document(once, pairs, 50) == once

    def test_larger_limit_merges_segments(self, pairs):
        out = resegment_document(DOCUMENT, pairs, 500)

        assert "**Segment 1:** (63 characters)" in out
        assert "**Segment 2:**" not in out
        assert out.endswith("---\n\n### Storyboard Images\n\nImage notes.\n")

    def test_text_outside_sections_is_untouched(self, pairs):
        out = resegment_document(DOCUMENT, pairs, 50)

        assert out.startswith("# Title\n\n### Voice Script Segments\n\n")
        assert out.endswith("### Storyboard Images\n\nImage notes.\n")

    def test_without_sections_chunks_whole_text(self, pairs):
        out = resegment_document("One. Two.", pairs, 5)

        assert out == "**Segment 1:** (4 characters)\n\nOne.\n\n**Segment 2:** (4 characters)\n\nTwo."

    def test_section_without_headers_is_unchanged(self, pairs):
        text = "### Voice Script Segments\nplain notes. More notes.\n### Storyboard Images\n"

        assert resegment_document(text, pairs, 10) == text

    def test_unterminated_section_runs_to_end(self, pairs):
        text = "### Voice Script Segments\n\n**Segment 1:**\n\nAlpha. Beta."

        out = resegment_document(text, pairs, 6)

        assert out == (
            "### Voice Script Segments\n\n"
            "**Segment 1:** (6 characters)\n\nAlpha.\n\n"
            "**Segment 2:** (5 characters)\n\nBeta.\n\n"
        )

    def test_chunking_errors_propagate(self, pairs):
        text = "### Voice Script Segments\n\n**Segment 1:**\n\n" + "a" * 80 + "\n### Storyboard Images"

        with pytest.raises(OversizedUnboundedContent):
            resegment_document(text, pairs, 50, fallback_split=False)


class TestSections:
    def test_sections_are_ordered_and_non_overlapping(self):
        pairs = [
            MarkerPair(id=1, start_marker="<a>", end_marker="</a>"),
            MarkerPair(id=2, start_marker="<b>", end_marker="</b>"),
        ]
        text = "<b>x</b> <a>y <b>z</b></a> <a>w</a>"

        sections = find_sections(text, pairs)

        assert [(s.start, s.marker_pair.id) for s in sections] == [(0, 2), (9, 1), (27, 1)]

    def test_pairs_without_markers_are_ignored(self):
        assert find_sections("anything", [MarkerPair(id=1)]) == []


class TestStats:
    def test_format_segment(self):
        assert format_segment(3, "Hello.") == "**Segment 3:** (6 characters)\n\nHello."

    def test_count_segments(self, pairs):
        assert count_segments(DOCUMENT, pairs) == 2

    def test_document_stats(self, pairs):
        stats = document_stats(DOCUMENT, pairs)

        assert stats["total_chars"] == len(DOCUMENT)
        assert stats["total_words"] == len(DOCUMENT.split())
        assert stats["segment_count"] == 2
        assert stats["avg_size"] == int(len(DOCUMENT) / 2 + 0.5)

    def test_document_stats_without_segments(self, pairs):
        assert document_stats("", pairs) == {"total_chars": 0, "total_words": 0, "segment_count": 0, "avg_size": 0}
