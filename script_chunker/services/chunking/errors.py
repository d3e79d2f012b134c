"""Chunking engine errors. Raised by the engine, translated to HTTP responses by the app."""

PREVIEW_EDGE = 50


def preview_text(text: str, edge: int = PREVIEW_EDGE) -> str:
    """Return text unchanged when short, else its head and tail joined by ' ... '."""
    if len(text) <= edge * 2:
        return text
    return f"{text[:edge]} ... {text[-edge:]}"


class ChunkingError(ValueError):
    """Base class for errors raised by the chunking engine."""


class InvalidConfiguration(ChunkingError):
    """Raised when chunk settings are unusable (max_characters <= 0)."""

    def __init__(self, message: str = "maxCharacters must be greater than 0"):
        super().__init__(message)


class OversizedUnboundedContent(ChunkingError):
    """
    Raised when a run of text without a sentence terminator exceeds the limit
    and fallback splitting is off. Carries the length, the limit, and a preview.
    """

    def __init__(self, text: str, limit: int):
        self.length = len(text)
        self.limit = limit
        self.preview = preview_text(text)
        super().__init__(
            f"Text contains continuous content ({self.length} characters) without sentence boundaries "
            f"that exceeds the limit of {limit} characters. Please add punctuation, increase the "
            f'character limit, or enable fallback splitting. Preview: "{self.preview}"'
        )
