"""
Document re-segmentation. Locates sections between start/end markers, gathers the
text under each segment header, re-chunks it, and writes it back as sequentially
numbered "**Segment N:** (L characters)" blocks. Text outside sections is untouched.
"""

import re
from typing import NamedTuple

from script_chunker.config.chunking.models import ChunkSettings
from script_chunker.config.logging import get_logger
from script_chunker.config.markers.models import MarkerPair
from script_chunker.services.chunking.chunker import chunk_text
from script_chunker.services.chunking.cleaners import count_words, flatten_paragraphs
from script_chunker.services.chunking.stats import round_half_up
from script_chunker.services.markers.template import compile_marker_template

logger = get_logger(__name__)

# Segment content stops early at a horizontal rule or a level-3 heading
_SEPARATOR_RE = re.compile(r"\n\n---\n|^---\n|^###\s", re.MULTILINE)


class Section(NamedTuple):
    start: int
    end: int
    marker_pair: MarkerPair


def format_segment(number: int, content: str) -> str:
    return f"**Segment {number}:** ({len(content)} characters)\n\n{content}"


def find_sections(text: str, marker_pairs: list[MarkerPair]) -> list[Section]:
    """
    Return sections opened by a start marker and closed by the next end marker
    (exclusive), or by the end of the text when no end marker follows.
    Sorted by position; a section overlapping an earlier one is dropped.
    """
    found: list[Section] = []
    for mp in marker_pairs:
        if not mp.start_marker or not mp.end_marker:
            continue
        pos = 0
        while pos < len(text):
            start = text.find(mp.start_marker, pos)
            if start == -1:
                break
            end = text.find(mp.end_marker, start + len(mp.start_marker))
            if end == -1:
                found.append(Section(start, len(text), mp))
                break
            found.append(Section(start, end, mp))
            pos = end + len(mp.end_marker)

    found.sort(key=lambda s: s.start)
    sections: list[Section] = []
    for section in found:
        if sections and section.start < sections[-1].end:
            continue
        sections.append(section)
    return sections


def find_marker_spans(text: str, marker_pairs: list[MarkerPair]) -> list[tuple[int, int]]:
    """(start, end) of every segment header matched by any pair's template, in text order, non-overlapping."""
    spans: list[tuple[int, int]] = []
    for mp in marker_pairs:
        pattern = compile_marker_template(mp.pattern_template)
        if pattern is None:
            continue
        spans.extend((m.start(), m.end()) for m in pattern.finditer(text) if m.end() > m.start())
    spans.sort(key=lambda s: (s[0], -s[1]))
    out: list[tuple[int, int]] = []
    for span in spans:
        if out and span[0] < out[-1][1]:
            continue
        out.append(span)
    return out


def count_segments(text: str, marker_pairs: list[MarkerPair]) -> int:
    return len(find_marker_spans(text, marker_pairs))


def document_stats(text: str, marker_pairs: list[MarkerPair]) -> dict[str, int]:
    """Character, word and segment counts for a document, plus average characters per segment."""
    chars = len(text)
    segments = count_segments(text, marker_pairs)
    return {
        "total_chars": chars,
        "total_words": count_words(text),
        "segment_count": segments,
        "avg_size": round_half_up(chars / segments) if segments else 0,
    }


def resegment_section(section_text: str, marker_pairs: list[MarkerPair], settings: ChunkSettings) -> str:
    """Re-chunk the segments inside one section. A section without segment headers is returned as is."""
    spans = find_marker_spans(section_text, marker_pairs)
    if not spans:
        return section_text

    contents: list[str] = []
    tail_start = spans[-1][1]
    for i, (_, marker_end) in enumerate(spans):
        content_end = spans[i + 1][0] if i + 1 < len(spans) else len(section_text)
        raw = section_text[marker_end:content_end]
        separator = _SEPARATOR_RE.search(raw)
        if separator is not None:
            raw = raw[: separator.start()]
        content = raw.strip()
        if content:
            contents.append(content)
            tail_start = marker_end + len(raw.rstrip())

    result = chunk_text("\n\n".join(contents), settings)

    parts = [section_text[: spans[0][0]]]
    for number, chunk in enumerate(result.chunks, start=1):
        parts.append(format_segment(number, flatten_paragraphs(chunk.content)) + "\n\n")
    parts.append(section_text[tail_start:].lstrip())
    return "".join(parts)


def resegment_document(
    text: str,
    marker_pairs: list[MarkerPair],
    max_characters: int,
    fallback_split: bool = True,
) -> str:
    """
    Re-segment every marked section of a document. When no section is found the
    whole text is chunked and returned as numbered segments joined by blank lines.
    Chunking errors propagate; nothing is partially rewritten.
    """
    settings = ChunkSettings(max_characters=max_characters, fallback_split=fallback_split)
    sections = find_sections(text, marker_pairs)
    if not sections:
        result = chunk_text(text, settings)
        logger.debug("No marked sections; chunked whole document", extra={"chunks": len(result.chunks)})
        return "\n\n".join(format_segment(c.id, c.content) for c in result.chunks)

    parts: list[str] = []
    last = 0
    for section in sections:
        parts.append(text[last : section.start])
        parts.append(resegment_section(text[section.start : section.end], marker_pairs, settings))
        last = section.end
    parts.append(text[last:])
    logger.debug("Resegmented document", extra={"sections": len(sections)})
    return "".join(parts)
