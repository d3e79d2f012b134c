"""
Chunker: takes raw text + chunk settings and returns chunks with statistics.
Deterministic and side-effect free. Pipeline: segment → pack (with fallback splits) → stats.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from script_chunker.config.chunking.models import ChunkSettings
from script_chunker.config.logging import get_logger
from script_chunker.services.chunking.errors import InvalidConfiguration
from script_chunker.services.chunking.export import (
    build_zip_archive,
    export_as_single_file,
    prepare_multiple_files,
)
from script_chunker.services.chunking.models import ChunkResult
from script_chunker.services.chunking.packer import pack
from script_chunker.services.chunking.segmenter import segment
from script_chunker.services.chunking.stats import calculate_stats

__all__ = [
    "build_zip_archive",
    "chunk_text",
    "export_as_single_file",
    "prepare_multiple_files",
]

logger = get_logger(__name__)


def _coerce_settings(settings: ChunkSettings | Mapping[str, Any]) -> ChunkSettings:
    if isinstance(settings, ChunkSettings):
        return settings
    try:
        return ChunkSettings.model_validate(dict(settings))
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid chunk settings: {e.errors()[0]['msg']}") from e


def chunk_text(text: str, settings: ChunkSettings | Mapping[str, Any]) -> ChunkResult:
    """
    Split text into chunks of at most settings.max_characters without cutting sentences.

    Blank text yields no chunks and all-zero stats. Raises InvalidConfiguration when
    max_characters <= 0, and OversizedUnboundedContent when a run without sentence
    boundaries exceeds the limit and fallback_split is off. Nothing partial is returned
    alongside an error.
    """
    cfg = _coerce_settings(settings)
    if not text or not text.strip():
        return ChunkResult(chunks=[], stats=calculate_stats([]))
    if cfg.max_characters <= 0:
        raise InvalidConfiguration()

    sentences = segment(text)
    chunks = pack(sentences, cfg)
    stats = calculate_stats(chunks)
    logger.debug(
        "Chunked text",
        extra={
            "input_length": len(text),
            "sentences": len(sentences),
            "chunks": stats.total_chunks,
            "max_characters": cfg.max_characters,
            "fallback_split": cfg.fallback_split,
        },
    )
    return ChunkResult(chunks=chunks, stats=stats)
