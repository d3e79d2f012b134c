"""POST /chunk: split text into sentence-respecting chunks. POST /chunk/export: download chunks."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from script_chunker.config.chunking.models import ChunkSettings
from script_chunker.config.chunking.static import resolve_chunk_settings
from script_chunker.controllers.schema.chunk import ChunkRequest, ChunkResponse, ExportRequest
from script_chunker.services.chunking.chunker import (
    build_zip_archive,
    chunk_text,
    export_as_single_file,
    prepare_multiple_files,
)

router = APIRouter(prefix="/chunk", tags=["chunking"])


def _resolve_settings(body: ChunkRequest) -> ChunkSettings:
    """Profile settings with the request's inline overrides applied. Unknown profile → 400."""
    overrides = {"max_characters": body.max_characters, "fallback_split": body.fallback_split}
    try:
        return resolve_chunk_settings(body.profile, overrides)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("", response_model=ChunkResponse)
async def chunk(body: ChunkRequest) -> ChunkResponse:
    """
    Chunk the text with the resolved settings. Chunking errors (invalid limit,
    unbounded content without fallback) are translated by the app's exception handlers.
    """
    settings = _resolve_settings(body)
    result = chunk_text(body.text, settings)
    return ChunkResponse(chunks=result.chunks, stats=result.stats)


@router.post("/export")
async def export_chunks(body: ExportRequest) -> Response:
    """Return the chunks as one text file, a JSON list of per-chunk files, or a ZIP archive."""
    if body.format == "files":
        files = prepare_multiple_files(body.chunks)
        return JSONResponse(content=[f.model_dump() for f in files])
    if body.format == "zip":
        return Response(
            content=build_zip_archive(body.chunks),
            media_type="application/zip",
            headers={"Content-Disposition": 'attachment; filename="chunks.zip"'},
        )
    return PlainTextResponse(
        content=export_as_single_file(body.chunks),
        headers={"Content-Disposition": 'attachment; filename="chunks.txt"'},
    )
