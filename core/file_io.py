"""
File access for godict.

Go sources and the settings file are read through a FileReader, and the
finished dictionary goes out through a DictionaryWriter. The filesystem
implementations wrap OSError in the FileIOError family; the Mock ones keep
everything in memory for tests.
"""

import os
from pathlib import Path
import tempfile
from typing import Mapping, Protocol

from core.exceptions import (
    FileReadError,
    FileWriteError,
    InvalidFilePathError,
)


class FileReader(Protocol):
    """Reads whole files, raising FileReadError when they cannot be read."""

    def read_bytes(self, file_path: Path) -> bytes:
        """Return the raw content of a file."""

    def read_text(self, file_path: Path) -> str:
        """Return the content of a file decoded as UTF-8."""


class DictionaryWriter(Protocol):
    """Destination for the rendered word list."""

    def write_words(self, text: str) -> None:
        """
        Replace the destination's content with the rendered word list.

        Args:
            text: Newline-terminated words, already sorted.
        """


class FilesystemFileReader:
    def read_bytes(self, file_path: Path) -> bytes:
        """
        Read a file without decoding it.

        Go sources go to tree-sitter as bytes, so node offsets stay byte offsets.

        Raises:
            FileReadError: If the file does not exist or an I/O error occurs.
        """
        try:
            return file_path.read_bytes()
        except OSError as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e

    def read_text(self, file_path: Path) -> str:
        # Invalid sequences become U+FFFD instead of failing the whole run
        return self.read_bytes(file_path).decode("utf-8", errors="replace")


class AtomicFileWriter:
    """
    Writes the dictionary next to its destination, then renames it into place.

    Readers of the destination see either the previous dictionary or the new
    one, never a truncated file.
    """

    def __init__(self, file_path: Path):
        self.file_path = file_path

    @classmethod
    def from_path(cls, file_path: Path) -> "AtomicFileWriter":
        """
        Create a writer after checking that the destination can be replaced.

        Args:
            file_path: Where the dictionary should end up.

        Returns:
            AtomicFileWriter: A writer bound to file_path.

        Raises:
            InvalidFilePathError: If file_path is a directory, or its parent is
                missing or not writable.
        """
        if file_path.is_dir():
            raise InvalidFilePathError(
                message=f"Output path is a directory: {file_path}",
                file_path=str(file_path),
            )

        parent = file_path.parent
        if not parent.is_dir():
            raise InvalidFilePathError(
                message=f"Parent directory does not exist: {parent}",
                file_path=str(file_path),
            )
        # The temporary file is created in parent, so it must be writable too
        if not os.access(parent, os.W_OK):
            raise InvalidFilePathError(
                message=f"Parent directory is not writable: {parent}",
                file_path=str(file_path),
            )

        return cls(file_path)

    def write_words(self, text: str) -> None:
        """
        Write text to a temporary sibling file and move it over the destination.

        Raises:
            FileWriteError: If the temporary file cannot be written or renamed.
                The temporary file is removed and the destination is untouched.
        """
        tmp_path: Path | None = None
        try:
            fd, name = tempfile.mkstemp(
                dir=self.file_path.parent,
                prefix=f".{self.file_path.name}.",
                suffix=".tmp",
            )
            tmp_path = Path(name)
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise FileWriteError(
                message=f"Failed to write dictionary to {self.file_path}",
                file_path=str(self.file_path),
                original_exception=e,
            ) from e


class MockFileReader:
    """
    In-memory FileReader for tests.

    Paths listed in `files` return their content; any other path returns
    `default`, or raises FileReadError when no default is set, the same way a
    missing file does on disk.

    Attributes:
        read_calls: Every path passed to read_bytes() or read_text(), in order.
    """

    def __init__(
        self,
        files: Mapping[Path, bytes] | None = None,
        default: bytes | None = None,
    ):
        self.files = dict(files or {})
        self.default = default
        self.read_calls: list[Path] = []

    def read_bytes(self, file_path: Path) -> bytes:
        self.read_calls.append(file_path)
        if file_path in self.files:
            return self.files[file_path]
        if self.default is not None:
            return self.default
        raise FileReadError(
            message=f"Failed to read file: {file_path}",
            file_path=str(file_path),
            original_exception=FileNotFoundError(str(file_path)),
        )

    def read_text(self, file_path: Path) -> str:
        return self.read_bytes(file_path).decode("utf-8", errors="replace")


class MockDictionaryWriter:
    """In-memory DictionaryWriter that keeps every write for inspection."""

    def __init__(self) -> None:
        self.writes: list[str] = []

    @property
    def text(self) -> str | None:
        """Content after the last write, or None if nothing was written."""
        return self.writes[-1] if self.writes else None

    def write_words(self, text: str) -> None:
        self.writes.append(text)
