"""Chunking result models: chunks, aggregate stats, and export file descriptors."""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """One bounded-size unit of output text. Ids are 1-based and contiguous within a result."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    content: str = Field(..., min_length=1)
    character_count: int = Field(..., ge=1)
    sentence_count: int = Field(..., ge=0)


class ChunkStats(BaseModel):
    """Aggregate over a chunk sequence. All zero for an empty sequence."""

    model_config = ConfigDict(frozen=True)

    total_chunks: int = 0
    total_characters: int = 0
    average_chunk_size: int = 0
    largest_chunk: int = 0
    smallest_chunk: int = 0


class ChunkResult(BaseModel):
    chunks: list[Chunk] = Field(default_factory=list)
    stats: ChunkStats = Field(default_factory=ChunkStats)


class ExportFile(BaseModel):
    filename: str
    content: str
