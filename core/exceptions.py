"""
Custom exception classes for the godict CLI.

This module defines application-specific exceptions raised while resolving
standard library packages, parsing Go source files, walking declarations and
reading or writing files. Every exception aborts the run: godict never emits a
partial dictionary. The exceptions carry structured error information and
diagnostic data to help with debugging and error reporting.
"""

import os
from typing import Optional


class GodictError(Exception):
    """
    Base exception for every fatal condition in the word harvesting pipeline.

    Attributes:
        message: A human-readable error message describing what went wrong.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing diagnostic information including
            exception type, details, and OS name.
    """

    default_message = "An error occurred while building the dictionary"

    def __init__(
        self,
        message: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class PackageResolutionError(GodictError):
    """
    Raised when the standard library cannot be listed or a package cannot be resolved.

    This covers a missing Go toolchain, a failing `go list` invocation and
    metadata that cannot be decoded.

    Attributes:
        import_path: The import path being resolved, or None when the failure
            happened while listing the standard library.
    """

    default_message = "Failed to resolve standard library packages"

    def __init__(
        self,
        message: Optional[str] = None,
        import_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.import_path = import_path


class SourceParseError(GodictError):
    """
    Raised when a Go source file does not parse cleanly.

    Attributes:
        file_path: The file that failed to parse.
        line: 1-based line of the first syntax error, if known.
        column: 1-based column of the first syntax error, if known.
    """

    default_message = "Failed to parse source file"

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.file_path = file_path
        self.line = line
        self.column = column


class UnsupportedConstructError(GodictError):
    """
    Raised when a declaration or identifier has a shape the extractor does not know.

    The set of top-level declaration kinds in Go is closed, so meeting anything
    else means the grammar changed under us and the dictionary can no longer
    be trusted.

    Attributes:
        construct: The node kind or identifier text that was not recognized.
        file_path: The file in which it was found.
    """

    default_message = "Unsupported syntax construct"

    def __init__(
        self,
        message: Optional[str] = None,
        construct: Optional[str] = None,
        file_path: Optional[str] = None,
    ):
        super().__init__(message=message)
        self.construct = construct
        self.file_path = file_path


class ConfigError(GodictError):
    """
    Raised when the settings file exists but cannot be used.

    Attributes:
        config_path: Path of the offending settings file.
    """

    default_message = "Invalid settings file"

    def __init__(
        self,
        message: Optional[str] = None,
        config_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.config_path = config_path


class FileIOError(GodictError):
    """
    Base exception for file I/O errors.

    Attributes:
        file_path: The path of the file involved, if any.
    """

    default_message = "An error occurred during file I/O operation"

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.file_path = file_path


class InvalidFilePathError(FileIOError):
    """Raised when a file path cannot be used (missing or unwritable parent, unset path)."""

    default_message = "Invalid file path provided"


class FileReadError(FileIOError):
    """Raised when a file exists but cannot be read."""

    default_message = "Failed to read file"


class FileWriteError(FileIOError):
    """Raised when data cannot be written to a file."""

    default_message = "Failed to write file"
