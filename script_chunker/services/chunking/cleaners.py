"""Text cleaners used around chunking: paragraph flattening and word counting."""

import re

_LINE_BREAKS_RE = re.compile(r"[ \t]*(?:\r?\n)+[ \t]*")


def flatten_paragraphs(text: str) -> str:
    """
    Join all lines into one paragraph: every run of line breaks (and the spaces
    around it) becomes a single space. Other whitespace is left as is.
    """
    if not text or not isinstance(text, str):
        return ""
    return _LINE_BREAKS_RE.sub(" ", text).strip()


def count_words(text: str) -> int:
    """Number of whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())
