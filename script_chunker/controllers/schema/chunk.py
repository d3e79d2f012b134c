"""Request/response schemas for POST /chunk and POST /chunk/export."""

from typing import Literal

from pydantic import BaseModel, Field

from script_chunker.services.chunking.models import Chunk, ChunkResult


class ChunkRequest(BaseModel):
    """POST /chunk request body. Settings come from a profile; inline values override it."""

    text: str = Field(..., description="Text to split into chunks")
    profile: str = Field(default="active", description="Chunking profile name from static.json, or 'active'")
    max_characters: int | None = Field(default=None, description="Override for the profile's character budget")
    fallback_split: bool | None = Field(default=None, description="Override for the profile's fallback policy")


class ChunkResponse(ChunkResult):
    """POST /chunk response body: chunks in order plus aggregate stats."""


class ExportRequest(BaseModel):
    """POST /chunk/export request body."""

    chunks: list[Chunk] = Field(default_factory=list, description="Chunks as returned by POST /chunk")
    format: Literal["single", "files", "zip"] = Field(
        default="single",
        description="single: one text file; files: JSON list of {filename, content}; zip: archive",
    )


class OversizedContentDetail(BaseModel):
    """Error body for content that cannot be chunked without fallback splitting."""

    detail: str
    length: int = Field(..., ge=0)
    limit: int
    preview: str
