"""
Output of the finished dictionary: sorted, one word per line.
"""

import sys
from typing import Iterable, TextIO

from core.file_io import DictionaryWriter
from core.models import WordSet


def sorted_words(word_set: WordSet) -> list[str]:
    """
    Return the words in ascending order.

    Python compares strings by code point, which is the same order as
    comparing their UTF-8 bytes.
    """
    return word_set.sorted()


def render(words: Iterable[str]) -> str:
    """Join words into newline-terminated lines. No words renders as ""."""
    return "".join(f"{w}\n" for w in words)


def report(word_set: WordSet, stream: TextIO | None = None) -> list[str]:
    """
    Write the sorted dictionary to a text stream.

    Args:
        word_set: The finished word set.
        stream: Destination stream. Defaults to sys.stdout.

    Returns:
        list[str]: The words in the order they were written.
    """
    out = stream if stream is not None else sys.stdout
    words = sorted_words(word_set)
    out.write(render(words))
    out.flush()
    return words


def write_report(word_set: WordSet, writer: DictionaryWriter) -> list[str]:
    """
    Write the sorted dictionary through a DictionaryWriter, replacing any previous content.

    Raises:
        FileWriteError, InvalidFilePathError: If the file cannot be written.
    """
    words = sorted_words(word_set)
    writer.write_words(render(words))
    return words
