"""Request/response schemas for /history."""

from datetime import datetime

from pydantic import BaseModel, Field

from script_chunker.config.markers.models import MarkerPair


class StateRequest(BaseModel):
    """POST /history and POST /history/autosave request body."""

    input_text: str = Field(default="", description="Working text")
    max_characters: int = Field(..., ge=1, description="Character budget in use")
    marker_pairs: list[MarkerPair] = Field(default_factory=list)
    name: str | None = Field(default=None, max_length=200, description="Ignored by autosave")


class StateResponse(BaseModel):
    state_id: str
    input_text: str
    max_characters: int
    marker_pairs: list[MarkerPair] = Field(default_factory=list)
    timestamp: datetime
    name: str | None = None


class SaveStateResponse(BaseModel):
    state_id: str


class RenameStateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class AutoSaveResponse(BaseModel):
    scheduled: bool = Field(..., description="False when the state was empty and nothing was queued")


class ClearHistoryResponse(BaseModel):
    deleted: int = Field(..., ge=0)
