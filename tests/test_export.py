"""Tests for export helpers."""

import io
import zipfile

from script_chunker.services.chunking.chunker import (
    build_zip_archive,
    chunk_text,
    export_as_single_file,
    prepare_multiple_files,
)
from script_chunker.services.chunking.packer import make_chunk


def _chunks():
    return [make_chunk(1, "First chunk."), make_chunk(2, "Second chunk."), make_chunk(3, "Third.")]


def test_single_file_joins_with_blank_lines():
    assert export_as_single_file(_chunks()) == "First chunk.\n\nSecond chunk.\n\nThird."


def test_single_file_of_nothing_is_empty():
    assert export_as_single_file([]) == ""


def test_multiple_files_are_named_by_id():
    files = prepare_multiple_files(_chunks())

    assert [f.filename for f in files] == ["chunk-1.txt", "chunk-2.txt", "chunk-3.txt"]
    assert [f.content for f in files] == ["First chunk.", "Second chunk.", "Third."]


def test_zip_holds_one_file_per_chunk():
    data = build_zip_archive(_chunks())

    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        assert archive.namelist() == ["chunk-1.txt", "chunk-2.txt", "chunk-3.txt"]
        assert archive.read("chunk-2.txt").decode("utf-8") == "Second chunk."
        assert all(info.compress_type == zipfile.ZIP_DEFLATED for info in archive.infolist())


def test_export_round_trip_keeps_words():
    text = "One sentence here. Another sentence there. And a third one."
    result = chunk_text(text, {"max_characters": 25})

    assert export_as_single_file(result.chunks).split() == text.split()
