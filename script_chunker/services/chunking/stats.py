"""Aggregate statistics over a chunk sequence."""

import math

from script_chunker.services.chunking.models import Chunk, ChunkStats


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (round() would give 2 for 2.5)."""
    return math.floor(value + 0.5)


def calculate_stats(chunks: list[Chunk]) -> ChunkStats:
    if not chunks:
        return ChunkStats()
    sizes = [c.character_count for c in chunks]
    total = sum(sizes)
    return ChunkStats(
        total_chunks=len(chunks),
        total_characters=total,
        average_chunk_size=round_half_up(total / len(chunks)),
        largest_chunk=max(sizes),
        smallest_chunk=min(sizes),
    )
