"""
Core data models for the word harvesting pipeline.

This module defines the data structures passed between the package
enumerator, the syntax extractor and the reporter.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator


@dataclass(frozen=True)
class PackageDescriptor:
    """
    A resolved standard library package, ready to be scanned.

    Descriptors are produced by a catalog provider, consumed once by the
    pipeline and then discarded.

    Attributes:
        import_path: The package import path (e.g., "net/http").
        dir: Directory holding the package sources.
        go_files: Source file names relative to `dir`, in build order.
        name: The package name declared in its `package` clause (e.g., "http").
    """

    import_path: str
    dir: Path
    go_files: tuple[str, ...] = field(default_factory=tuple)
    name: str = ""

    def file_paths(self) -> list[Path]:
        """Absolute paths of the package source files."""
        return [self.dir / f for f in self.go_files]


class WordSet:
    """
    Accumulator of dictionary words for a single run.

    Insertion is idempotent and empty strings are never stored. The set is
    created by the pipeline and handed to each step explicitly.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        self.add_words(words)

    def add_words(self, words: Iterable[str]) -> None:
        for w in words:
            if w:
                self._words.add(w)

    def sorted(self) -> list[str]:
        return sorted(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordSet({len(self._words)} words)"
