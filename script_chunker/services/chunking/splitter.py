"""Fallback splitter: hard character-limit splitting for text that cannot be split on sentences."""

from script_chunker.services.chunking.errors import InvalidConfiguration

# Only whitespace in the last 20% of a window is used as a cut point
WORD_BOUNDARY_WINDOW = 0.8


def _cut_index(text: str, max_characters: int) -> int:
    """Index to cut text at: the last whitespace past 80% of the window, else exactly max_characters."""
    floor = WORD_BOUNDARY_WINDOW * max_characters
    # A space right at the limit still yields a piece of max_characters
    for idx in range(max_characters, int(floor), -1):
        if idx > floor and text[idx].isspace():
            return idx
    return max_characters


def force_split(text: str, max_characters: int) -> list[str]:
    """
    Split text into trimmed pieces of at most max_characters each.
    Prefers word boundaries near the end of each window; cuts mid-word as a last resort.
    """
    if max_characters <= 0:
        raise InvalidConfiguration()
    remaining = text.strip()
    pieces: list[str] = []
    while len(remaining) > max_characters:
        cut = _cut_index(remaining, max_characters)
        piece = remaining[:cut].strip()
        if piece:
            pieces.append(piece)
        remaining = remaining[cut:].strip()
    if remaining:
        pieces.append(remaining)
    return pieces
