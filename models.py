"""
Type definitions and data models used across the godict CLI application.

This module contains shared type definitions including enums and TypedDict
structures that are used throughout the codebase for type safety and consistency.
"""

from enum import StrEnum
from typing import TypedDict


class NormalizeMode(StrEnum):
    """
    Enumeration of the word normalization policies supported by godict.

    STRICT keeps only the leading run of ASCII letters of a token and folds it
    to lowercase, so "uint8" and "Uint16" both become "uint". VERBATIM keeps
    the token exactly as it was found, digits and case included.
    """

    STRICT = "strict"
    VERBATIM = "verbatim"


class GoListPackage(TypedDict, total=False):
    """
    Subset of the JSON object printed by `go list -json <import path>`.

    Only the fields godict consumes are declared. `go list` omits empty
    fields entirely, hence `total=False`.

    Attributes:
        ImportPath: The package import path (e.g., "net/http").
        Name: The package name declared in its `package` clause.
        Dir: Absolute directory containing the package sources.
        GoFiles: Non-test, non-cgo .go files selected for the current build
            context, relative to Dir.
    """

    ImportPath: str
    Name: str
    Dir: str
    GoFiles: list[str]
