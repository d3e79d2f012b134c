"""Chunking configuration models. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field


class ChunkSettings(BaseModel):
    """Character budget and overflow policy for one chunking call.

    max_characters is not range-checked here; the engine rejects
    non-positive values with InvalidConfiguration.
    """

    model_config = ConfigDict(frozen=True)

    max_characters: int = Field(..., description="Maximum characters per chunk")
    fallback_split: bool = Field(
        default=False,
        description="Force-split content that cannot fit instead of failing",
    )
