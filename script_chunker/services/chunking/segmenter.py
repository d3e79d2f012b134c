"""
Sentence segmentation for chunking. Two passes over the untouched input:

1. mark protected character ranges (known abbreviations, quoted dialogue);
2. scan for unprotected runs of terminators (. ! ?) followed by whitespace or end of text.

The input is never rewritten, so nothing has to be restored afterwards and no
placeholder text can leak into a sentence.
"""

import re

TERMINATORS = frozenset(".!?")

# Case-insensitive; the trailing period of each is never a sentence boundary
ABBREVIATIONS = ("Dr", "Mr", "Mrs", "Ms", "Prof", "Sr", "Jr", "etc", "vs", "e.g", "i.e")

_ABBREVIATION_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(a) for a in ABBREVIATIONS) + r")\.",
    re.IGNORECASE,
)

_DOUBLE_QUOTE_RE = re.compile(r'"[^"]*"|“[^”]*”')

# Dialogue in single quotes: opens at start/whitespace/bracket, closes before end/whitespace/punctuation,
# at least two characters inside. Apostrophes in "don't" or "the dogs' bowl" never open a span.
# Inside a span only in-word apostrophes ("can't") are allowed, so a failed opener stops at the next quote.
_SINGLE_QUOTE_RE = re.compile(
    r"(?<![^\s(\[{])'(?:[^'\n]|(?<=\w)'(?=\w)){2,}?'(?![^\s.,;:!?)\]}\"])"
    r"|‘(?:[^‘’\n]|(?<=\w)’(?=\w)){2,}?’(?![^\s.,;:!?)\]}\"])"
)

_TERMINAL_RE = re.compile(r"[.!?]+[\"'”’]?$")


def _protected_mask(text: str) -> bytearray:
    """Return a per-character mask: 1 where a terminator must not end a sentence."""
    mask = bytearray(len(text))
    for pattern in (_ABBREVIATION_RE, _DOUBLE_QUOTE_RE, _SINGLE_QUOTE_RE):
        for m in pattern.finditer(text):
            mask[m.start() : m.end()] = b"\x01" * (m.end() - m.start())
    return mask


def segment(text: str) -> list[str]:
    """
    Split text into trimmed sentences, each keeping its terminal punctuation.
    Trailing text without a terminator is returned as a final sentence; text
    with no terminators at all comes back as a single sentence.
    """
    if not text or not text.strip():
        return []
    mask = _protected_mask(text)
    n = len(text)
    sentences: list[str] = []
    start = 0
    i = 0
    while i < n:
        if text[i] not in TERMINATORS or mask[i]:
            i += 1
            continue
        run_end = i
        while run_end < n and text[run_end] in TERMINATORS and not mask[run_end]:
            run_end += 1
        # A bare run of terminators (e.g. a leading "...") stays with the next sentence
        if (run_end == n or text[run_end].isspace()) and text[start:i].strip():
            sentences.append(text[start:run_end].strip())
            start = run_end
        i = run_end
    remainder = text[start:].strip()
    if remainder:
        sentences.append(remainder)
    return sentences


def has_terminal_punctuation(sentence: str) -> bool:
    """True when the sentence ends in . ! or ? (optionally followed by one closing quote)."""
    return bool(_TERMINAL_RE.search(sentence.strip()))


def count_sentences(text: str) -> int:
    return len(segment(text))
