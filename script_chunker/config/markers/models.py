"""Marker pair configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field


class MarkerPair(BaseModel):
    """Section boundaries plus the template that recognises segment headers inside a section."""

    id: int = Field(..., ge=1)
    start_marker: str = Field(default="", description="Text that opens a section")
    end_marker: str = Field(default="", description="Text that closes a section")
    pattern_template: str = Field(
        default="**Segment %n:** (%d characters)",
        description="Segment header template: %n number, %d count, %o{...} optional",
    )
    format: Literal["double-star", "plain", "custom"] = Field(default="double-star")
