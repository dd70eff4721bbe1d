"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
including Go source tree builders, descriptors and common test objects.
"""

from pathlib import Path

import pytest

from core.catalog import StaticCatalog
from core.extraction import GoSyntaxExtractor
from core.models import PackageDescriptor, WordSet
from ui.progress_display import NoOpProgressDisplay


WIDGET_SOURCE = """\
package widget

func DoThing() {}

type Widget struct{}

const MaxSize = 10

var helper int
"""


@pytest.fixture
def extractor():
    """A real tree-sitter backed extractor."""
    return GoSyntaxExtractor()


@pytest.fixture
def word_set():
    return WordSet()


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def go_package_factory(tmp_path):
    """
    Factory writing a Go package to disk and returning its descriptor.

    Args (of the returned callable):
        import_path: Import path of the package (also used as the directory).
        files: Mapping of file name to Go source.
        name: Declared package name. Defaults to the last path element.
    """

    def _factory(
        import_path: str, files: dict[str, str], name: str | None = None
    ) -> PackageDescriptor:
        pkg_dir = tmp_path / "src" / Path(import_path)
        pkg_dir.mkdir(parents=True, exist_ok=True)
        for file_name, source in files.items():
            (pkg_dir / file_name).write_text(source, encoding="utf-8")

        return PackageDescriptor(
            import_path=import_path,
            dir=pkg_dir,
            go_files=tuple(files),
            name=name or import_path.rsplit("/", 1)[-1],
        )

    return _factory


@pytest.fixture
def widget_catalog(go_package_factory):
    """Single-package catalog holding the widget example."""
    package = go_package_factory("widget", {"widget.go": WIDGET_SOURCE})
    return StaticCatalog.from_descriptors(package)
