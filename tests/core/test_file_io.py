"""
Tests for the file_io module using pytest.

Tests cover:
- FilesystemFileReader: reading bytes and text, I/O errors
- AtomicFileWriter: destination checks, replacement, cleanup on failure
- MockFileReader / MockDictionaryWriter
"""

from pathlib import Path

import pytest

from core.exceptions import FileReadError, FileWriteError, InvalidFilePathError
from core.file_io import (
    AtomicFileWriter,
    FilesystemFileReader,
    MockDictionaryWriter,
    MockFileReader,
)


# ============================================================================
# Tests for FilesystemFileReader
# ============================================================================


@pytest.mark.unit
def test_read_bytes_success(tmp_path):
    file_path = tmp_path / "a.go"
    file_path.write_bytes(b"package a\n")

    assert FilesystemFileReader().read_bytes(file_path) == b"package a\n"


@pytest.mark.unit
def test_read_text_decodes_utf8(tmp_path):
    file_path = tmp_path / "settings.json"
    file_path.write_text('{"extra_words": ["héllo"]}', encoding="utf-8")

    assert FilesystemFileReader().read_text(file_path) == '{"extra_words": ["héllo"]}'


@pytest.mark.unit
def test_read_text_replaces_invalid_utf8(tmp_path):
    file_path = tmp_path / "a.go"
    file_path.write_bytes(b"ok\xff\n")

    assert FilesystemFileReader().read_text(file_path) == "ok�\n"


@pytest.mark.unit
def test_read_missing_file_raises(tmp_path):
    missing = tmp_path / "missing.go"

    with pytest.raises(FileReadError) as exc_info:
        FilesystemFileReader().read_bytes(missing)

    assert exc_info.value.file_path == str(missing)
    assert isinstance(exc_info.value.original_exception, FileNotFoundError)


# ============================================================================
# Tests for AtomicFileWriter.from_path
# ============================================================================


@pytest.mark.unit
def test_from_path_valid(tmp_path):
    writer = AtomicFileWriter.from_path(tmp_path / "go.dic")
    assert writer.file_path == tmp_path / "go.dic"


@pytest.mark.unit
def test_from_path_missing_parent_raises(tmp_path):
    with pytest.raises(InvalidFilePathError) as exc_info:
        AtomicFileWriter.from_path(tmp_path / "nope" / "go.dic")

    assert "does not exist" in exc_info.value.message


@pytest.mark.unit
def test_from_path_directory_raises(tmp_path):
    with pytest.raises(InvalidFilePathError) as exc_info:
        AtomicFileWriter.from_path(tmp_path)

    assert "is a directory" in exc_info.value.message


@pytest.mark.unit
@pytest.mark.mock
def test_from_path_unwritable_parent_raises(tmp_path, mocker):
    mocker.patch("core.file_io.os.access", return_value=False)

    with pytest.raises(InvalidFilePathError) as exc_info:
        AtomicFileWriter.from_path(tmp_path / "go.dic")

    assert "not writable" in exc_info.value.message


# ============================================================================
# Tests for AtomicFileWriter.write_words
# ============================================================================


@pytest.mark.unit
def test_write_words_replaces_previous_content(tmp_path):
    target = tmp_path / "go.dic"
    target.write_text("stale\nwords\n", encoding="utf-8")

    AtomicFileWriter.from_path(target).write_words("append\nbreak\n")

    assert target.read_bytes() == b"append\nbreak\n"
    assert [p.name for p in tmp_path.iterdir()] == ["go.dic"]


@pytest.mark.unit
@pytest.mark.mock
def test_write_words_failed_rename_keeps_destination(tmp_path, mocker):
    target = tmp_path / "go.dic"
    target.write_text("previous\n", encoding="utf-8")
    mocker.patch("core.file_io.os.replace", side_effect=PermissionError("locked"))

    with pytest.raises(FileWriteError) as exc_info:
        AtomicFileWriter(target).write_words("new\n")

    assert exc_info.value.file_path == str(target)
    assert isinstance(exc_info.value.original_exception, PermissionError)
    assert target.read_text(encoding="utf-8") == "previous\n"
    # The temporary file is cleaned up
    assert [p.name for p in tmp_path.iterdir()] == ["go.dic"]


@pytest.mark.unit
def test_write_words_missing_directory_raises(tmp_path):
    writer = AtomicFileWriter(tmp_path / "gone" / "go.dic")

    with pytest.raises(FileWriteError):
        writer.write_words("x\n")


# ============================================================================
# Tests for the mocks
# ============================================================================


@pytest.mark.unit
def test_mock_file_reader_serves_known_files():
    reader = MockFileReader({Path("x.go"): b"package x\n"})

    assert reader.read_bytes(Path("x.go")) == b"package x\n"
    assert reader.read_text(Path("x.go")) == "package x\n"
    assert reader.read_calls == [Path("x.go"), Path("x.go")]


@pytest.mark.unit
def test_mock_file_reader_default_content():
    reader = MockFileReader(default=b"package y\n")
    assert reader.read_bytes(Path("any.go")) == b"package y\n"


@pytest.mark.unit
def test_mock_file_reader_unknown_path_raises():
    with pytest.raises(FileReadError) as exc_info:
        MockFileReader().read_bytes(Path("missing.go"))

    assert exc_info.value.file_path == "missing.go"


@pytest.mark.unit
def test_mock_dictionary_writer_keeps_writes():
    writer = MockDictionaryWriter()
    assert writer.text is None

    writer.write_words("a\n")
    writer.write_words("b\n")

    assert writer.writes == ["a\n", "b\n"]
    assert writer.text == "b\n"
