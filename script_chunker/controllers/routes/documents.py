"""POST /documents/resegment and POST /documents/stats: marker-aware document processing."""

from fastapi import APIRouter, Depends, HTTPException

from script_chunker.config.chunking.static import resolve_chunk_settings
from script_chunker.config.markers.models import MarkerPair
from script_chunker.config.markers.static import load_default_marker_pairs
from script_chunker.controllers.dependencies import get_history_cache
from script_chunker.controllers.schema.documents import (
    DocumentStatsRequest,
    DocumentStatsResponse,
    ResegmentRequest,
    ResegmentResponse,
)
from script_chunker.repositories.mongodb.base import RepositoryError
from script_chunker.repositories.mongodb.history_repository import save_state
from script_chunker.services.history.cache import HistoryCache
from script_chunker.services.markers.resegment import count_segments, document_stats, resegment_document

router = APIRouter(prefix="/documents", tags=["documents"])

PROCESSED_STATE_NAME = "Processed"


def _marker_pairs(requested: list[MarkerPair] | None) -> list[MarkerPair]:
    return requested if requested is not None else load_default_marker_pairs()


@router.post("/resegment", response_model=ResegmentResponse)
async def resegment(
    body: ResegmentRequest,
    history_cache: HistoryCache = Depends(get_history_cache),
) -> ResegmentResponse:
    """
    Re-chunk every marked section of the document and renumber its segments.
    Without sections, the whole text is chunked into numbered segments.
    Optionally saves the input to history after a successful run.
    """
    marker_pairs = _marker_pairs(body.marker_pairs)
    max_characters = body.max_characters
    if max_characters is None:
        max_characters = resolve_chunk_settings().max_characters

    text = resegment_document(body.text, marker_pairs, max_characters, body.fallback_split)

    state_id = None
    if body.save_to_history:
        try:
            state_id = await save_state(body.text, max_characters, marker_pairs, PROCESSED_STATE_NAME)
        except RepositoryError as e:
            raise HTTPException(status_code=503, detail="Storage temporarily unavailable") from e
        history_cache.invalidate()

    return ResegmentResponse(
        text=text,
        segment_count=count_segments(text, marker_pairs),
        state_id=state_id,
    )


@router.post("/stats", response_model=DocumentStatsResponse)
async def stats(body: DocumentStatsRequest) -> DocumentStatsResponse:
    """Character, word and segment counts for a document."""
    return DocumentStatsResponse(**document_stats(body.text, _marker_pairs(body.marker_pairs)))
