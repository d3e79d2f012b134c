"""
Greedy chunk packer. Sentences are taken in order and appended to the current
chunk while it stays within max_characters; chunk boundaries fall only between
sentences unless fallback splitting was requested.
"""

from script_chunker.config.chunking.models import ChunkSettings
from script_chunker.config.logging import get_logger
from script_chunker.services.chunking.errors import OversizedUnboundedContent
from script_chunker.services.chunking.models import Chunk
from script_chunker.services.chunking.segmenter import count_sentences, has_terminal_punctuation
from script_chunker.services.chunking.splitter import force_split

logger = get_logger(__name__)


def make_chunk(chunk_id: int, content: str) -> Chunk:
    """Build a chunk from raw content; counts are derived from the trimmed text."""
    text = content.strip()
    return Chunk(
        id=chunk_id,
        content=text,
        character_count=len(text),
        sentence_count=count_sentences(text),
    )


def _enforce_ceiling(chunks: list[Chunk], max_characters: int) -> list[Chunk]:
    """Force-split any chunk over the limit and renumber ids 1..N."""
    if all(c.character_count <= max_characters for c in chunks):
        return chunks
    contents: list[str] = []
    for chunk in chunks:
        if chunk.character_count > max_characters:
            contents.extend(force_split(chunk.content, max_characters))
        else:
            contents.append(chunk.content)
    return [make_chunk(i, text) for i, text in enumerate(contents, start=1)]


def pack(sentences: list[str], settings: ChunkSettings) -> list[Chunk]:
    """
    Pack sentences into chunks of at most settings.max_characters.

    A sentence that alone exceeds the limit is handled by kind:
    - no terminal punctuation (unbounded run): OversizedUnboundedContent, or
      force-split when fallback_split is set;
    - a real sentence: kept whole as its own chunk, or force-split when
      fallback_split is set.
    """
    max_chars = settings.max_characters
    chunks: list[Chunk] = []
    current = ""

    def flush() -> None:
        nonlocal current
        if current.strip():
            chunks.append(make_chunk(len(chunks) + 1, current))
        current = ""

    for sentence in sentences:
        text = sentence.strip()
        if not text:
            continue

        if len(text) > max_chars:
            unbounded = not has_terminal_punctuation(text)
            if unbounded and not settings.fallback_split:
                logger.debug(
                    "Unbounded content exceeds limit",
                    extra={"length": len(text), "max_characters": max_chars},
                )
                raise OversizedUnboundedContent(text, max_chars)
            flush()
            if settings.fallback_split:
                pieces = force_split(text, max_chars)
                logger.debug(
                    "Force-split oversized unit",
                    extra={"length": len(text), "pieces": len(pieces), "unbounded": unbounded},
                )
                for piece in pieces:
                    chunks.append(make_chunk(len(chunks) + 1, piece))
            else:
                logger.debug("Emitting oversized sentence as its own chunk", extra={"length": len(text)})
                chunks.append(make_chunk(len(chunks) + 1, text))
            continue

        candidate = f"{current} {text}" if current else text
        if len(candidate) <= max_chars:
            current = candidate
        else:
            flush()
            current = text

    flush()

    if settings.fallback_split:
        chunks = _enforce_ceiling(chunks, max_chars)
    return chunks
