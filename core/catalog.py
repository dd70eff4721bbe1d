"""
Standard library package discovery.

A catalog provider knows which import paths make up the library and how to
resolve each one to a directory and its source files. `enumerate_packages`
walks a provider, dropping internal packages, and yields descriptors one at a
time in catalog order.

Two providers are available:
- GoToolchainCatalog: asks the local Go toolchain (`go list`).
- StaticCatalog: serves a fixed, in-memory set of packages.
"""

from pathlib import Path
from typing import Generator, Mapping, Protocol

from adapters.go import GoClient, SubprocessGoClient
from constants import INTERNAL_MARKER
from core.exceptions import PackageResolutionError
from core.models import PackageDescriptor
from utils import debug


class CatalogProvider(Protocol):
    """Protocol for sources of library packages."""

    def list_import_paths(self) -> list[str]:
        """Return every import path of the library, in scan order."""

    def resolve(self, import_path: str) -> PackageDescriptor:
        """Resolve an import path to its descriptor."""


class GoToolchainCatalog:
    """
    Catalog backed by the local Go installation.

    Attributes:
        client: The Go toolchain client used for `go list` queries.
    """

    def __init__(self, client: GoClient | None = None):
        self.client = client if client is not None else SubprocessGoClient()

    def list_import_paths(self) -> list[str]:
        return self.client.list_std()

    def resolve(self, import_path: str) -> PackageDescriptor:
        """
        Resolve an import path through `go list -json`.

        Args:
            import_path: The import path to resolve.

        Returns:
            PackageDescriptor: The package name, directory and build files.

        Raises:
            PackageResolutionError: If the toolchain fails or the metadata lacks
                a directory or package name.
        """
        info = self.client.package_info(import_path)

        pkg_dir = info.get("Dir")
        name = info.get("Name")
        if not pkg_dir or not name:
            raise PackageResolutionError(
                message=f"Incomplete package metadata for {import_path!r}",
                import_path=import_path,
            )

        return PackageDescriptor(
            import_path=info.get("ImportPath") or import_path,
            dir=Path(pkg_dir),
            go_files=tuple(info.get("GoFiles") or ()),
            name=name,
        )


class StaticCatalog:
    """
    Catalog serving a fixed set of packages.

    Useful for scanning a hand-picked source tree and for tests. Import paths
    are listed in insertion order.
    """

    def __init__(self, packages: Mapping[str, PackageDescriptor]):
        self.packages = dict(packages)

    @classmethod
    def from_descriptors(cls, *descriptors: PackageDescriptor) -> "StaticCatalog":
        return cls({d.import_path: d for d in descriptors})

    def list_import_paths(self) -> list[str]:
        return list(self.packages)

    def resolve(self, import_path: str) -> PackageDescriptor:
        try:
            return self.packages[import_path]
        except KeyError as e:
            raise PackageResolutionError(
                message=f"Unknown package {import_path!r}",
                import_path=import_path,
                original_exception=e,
            ) from e


def is_internal(import_path: str) -> bool:
    """
    Check if an import path belongs to an internal package.

    Matches the marker anywhere in the path, so both "internal/trace" and
    "net/http/internal/ascii" are internal.
    """
    return INTERNAL_MARKER in import_path


def enumerate_packages(
    catalog: CatalogProvider,
) -> Generator[PackageDescriptor, None, None]:
    """
    Lazily yield the non-internal packages of a catalog.

    Internal packages are skipped before resolution. Any resolution failure
    propagates and ends the enumeration.

    Args:
        catalog: The package source to walk.

    Yields:
        PackageDescriptor: One descriptor per public package, in catalog order.

    Raises:
        PackageResolutionError: If listing or resolving a package fails.
    """
    for import_path in catalog.list_import_paths():
        if is_internal(import_path):
            debug(f"skipping internal package {import_path!r}")
            continue

        yield catalog.resolve(import_path)
