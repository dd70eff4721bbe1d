"""
The word harvesting pipeline.

`build_word_set` seeds a fresh WordSet with the static vocabulary, then walks
every public package of a catalog, adding the package name and the exported
identifiers of each of its files. Packages and files are handled one at a
time, in catalog order. The first fatal error propagates to the caller and
the partially filled set is discarded with it.
"""

from typing import Iterable

from constants import BUILTINS, EXTRA_WORDS, KEYWORDS
from core.catalog import CatalogProvider, enumerate_packages
from core.extraction import GoSyntaxExtractor
from core.models import PackageDescriptor, WordSet
from core.normalization import normalize, normalize_all
from models import NormalizeMode
from ui.progress_display import NoOpProgressDisplay, ProgressDisplay
from utils import debug


def seed_word_set(
    word_set: WordSet,
    mode: NormalizeMode = NormalizeMode.STRICT,
    extra_words: Iterable[str] = (),
) -> None:
    """Add keywords, builtins and extra words (built-in and configured) to word_set."""
    for words in (KEYWORDS, BUILTINS, EXTRA_WORDS, tuple(extra_words)):
        word_set.add_words(normalize_all(words, mode))


def process_package(
    package: PackageDescriptor,
    extractor: GoSyntaxExtractor,
    word_set: WordSet,
    mode: NormalizeMode = NormalizeMode.STRICT,
) -> None:
    """
    Add the words of one package to word_set.

    The declared package name is always added, even though Go package names
    are never exported. Every file is then parsed and its exported
    identifiers are normalized and added.

    Args:
        package: The package to scan.
        extractor: Extractor used to read and walk each source file.
        word_set: Accumulator receiving the words.
        mode: Normalization policy.

    Raises:
        FileReadError, SourceParseError, UnsupportedConstructError: On the first
            file that cannot be processed.
    """
    debug(f"processing package {package.import_path!r}")
    word_set.add_words(normalize(package.name, mode))

    for file_path in package.file_paths():
        for ident in extractor.extract(file_path):
            words = normalize(ident, mode)
            for w in words:
                if w not in word_set:
                    debug(f"adding {w!r}")
            word_set.add_words(words)


def build_word_set(
    catalog: CatalogProvider,
    extractor: GoSyntaxExtractor | None = None,
    mode: NormalizeMode = NormalizeMode.STRICT,
    extra_words: Iterable[str] = (),
    progress_display: ProgressDisplay | None = None,
) -> WordSet:
    """
    Build the complete dictionary for a catalog.

    Args:
        catalog: Source of library packages.
        extractor: Syntax extractor. Defaults to a GoSyntaxExtractor.
        mode: Normalization policy applied to every word.
        extra_words: Additional words to seed the dictionary with.
        progress_display: Progress reporter. Defaults to NoOpProgressDisplay.

    Returns:
        WordSet: The finished word set.

    Raises:
        GodictError: Any resolution, read, parse or unsupported-construct
            failure aborts the build.
    """
    extractor = extractor if extractor is not None else GoSyntaxExtractor()
    display = progress_display if progress_display is not None else NoOpProgressDisplay()

    word_set = WordSet()
    seed_word_set(word_set, mode, extra_words)

    packages_processed = 0
    with display as pd:
        pd.scan_started()

        for package in enumerate_packages(catalog):
            pd.package_started(package.import_path)
            process_package(package, extractor, word_set, mode)
            packages_processed += 1
            pd.package_finished(package.import_path)

        pd.scan_finished(packages_processed, len(word_set))

    return word_set
