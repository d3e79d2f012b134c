"""Export helpers: one text file, one file per chunk, or a ZIP of per-chunk files."""

import io
import zipfile

from script_chunker.services.chunking.models import Chunk, ExportFile

CHUNK_SEPARATOR = "\n\n"


def export_as_single_file(chunks: list[Chunk]) -> str:
    """Concatenate chunk contents, unmodified, separated by a blank line."""
    return CHUNK_SEPARATOR.join(chunk.content for chunk in chunks)


def prepare_multiple_files(chunks: list[Chunk]) -> list[ExportFile]:
    """One descriptor per chunk, named chunk-<id>.txt, in chunk order."""
    return [ExportFile(filename=f"chunk-{chunk.id}.txt", content=chunk.content) for chunk in chunks]


def build_zip_archive(chunks: list[Chunk]) -> bytes:
    """Return a deflated ZIP archive holding the files from prepare_multiple_files."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
        for file in prepare_multiple_files(chunks):
            archive.writestr(file.filename, file.content.encode("utf-8"))
    return buffer.getvalue()
