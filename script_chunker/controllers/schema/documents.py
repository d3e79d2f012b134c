"""Request/response schemas for document re-segmentation and document stats."""

from pydantic import BaseModel, Field

from script_chunker.config.markers.models import MarkerPair


class ResegmentRequest(BaseModel):
    """POST /documents/resegment request body. Marker pairs default to config/markers/static.json."""

    text: str = Field(..., description="Full document text")
    marker_pairs: list[MarkerPair] | None = Field(default=None, description="Section markers and segment templates")
    max_characters: int | None = Field(default=None, description="Character budget; defaults to the active profile")
    fallback_split: bool = Field(default=True, description="Force-split content that cannot fit")
    save_to_history: bool = Field(default=False, description="Save the input as a 'Processed' history state")


class ResegmentResponse(BaseModel):
    text: str = Field(..., description="Document with re-chunked, renumbered segments")
    segment_count: int = Field(..., ge=0)
    state_id: str | None = Field(default=None, description="History state id when save_to_history was set")


class DocumentStatsRequest(BaseModel):
    text: str
    marker_pairs: list[MarkerPair] | None = None


class DocumentStatsResponse(BaseModel):
    total_chars: int = Field(..., ge=0)
    total_words: int = Field(..., ge=0)
    segment_count: int = Field(..., ge=0)
    avg_size: int = Field(..., ge=0, description="Characters per segment, rounded")
