"""
Segment-marker templates compiled to regular expressions.

Template syntax:
    %n              segment number (digits)
    %d              character count (digits)
    %o{...}         optional literal text, e.g. %o{**} for optional bold markers
    (%d characters) optional as a whole, with flexible spacing inside
Whitespace in the template matches any run of spaces or tabs; everything else is literal.
Matching is case-insensitive.
"""

import re
from functools import lru_cache

from script_chunker.config.logging import get_logger

logger = get_logger(__name__)

_TOKEN_RE = re.compile(r"%o\{([^}]*)\}|\(%d\s*characters\)|%n|%d|\s+")

_DIGITS = r"\d+"
_BLANKS = r"[ \t]*"
_CHAR_COUNT = r"(?:\(\d+[ \t]*characters\))?"


def _literal(text: str) -> str:
    """Escape literal text; whitespace runs inside it stay flexible."""
    return _BLANKS.join(re.escape(part) for part in re.split(r"\s+", text))


def template_to_regex(template: str) -> str:
    """Translate a marker template into regex source."""
    parts: list[str] = []
    pos = 0
    for m in _TOKEN_RE.finditer(template):
        if m.start() > pos:
            parts.append(re.escape(template[pos : m.start()]))
        token = m.group(0)
        if m.group(1) is not None:
            parts.append(f"(?:{_literal(m.group(1))})?")
        elif token.startswith("("):
            parts.append(_CHAR_COUNT)
        elif token in ("%n", "%d"):
            parts.append(_DIGITS)
        else:
            parts.append(_BLANKS)
        pos = m.end()
    parts.append(re.escape(template[pos:]))
    return "".join(parts)


@lru_cache(maxsize=128)
def compile_marker_template(template: str) -> re.Pattern[str] | None:
    """Compile a segment-marker template. Returns None for a blank or uncompilable template."""
    if not template or not template.strip():
        return None
    source = template_to_regex(template.strip())
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as e:
        logger.warning("Failed to compile marker template", extra={"template": template, "error": str(e)})
        return None
