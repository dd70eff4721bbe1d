"""
Go toolchain adapter for standard library discovery.

This module provides a high-level interface over the `go` command. It
abstracts the subprocess calls used to list the standard library and to
resolve a single import path to its directory and source files.
"""

import json
import subprocess
from typing import Protocol

from constants import DEFAULT_GO_BINARY
from core.exceptions import PackageResolutionError
from models import GoListPackage


class GoClient(Protocol):
    """Protocol for the package-metadata queries godict needs from the toolchain."""

    def list_std(self) -> list[str]:
        """Return every standard library import path, in `go list` order."""

    def package_info(self, import_path: str) -> GoListPackage:
        """Return the `go list -json` metadata of one import path."""


class SubprocessGoClient:
    """
    Client for querying the local Go toolchain.

    Every query runs `go list` in a subprocess and waits for it. A missing
    binary, a non-zero exit status or undecodable output raises
    PackageResolutionError.

    Attributes:
        go_binary: Name or path of the `go` executable.
    """

    def __init__(self, go_binary: str = DEFAULT_GO_BINARY):
        self.go_binary = go_binary

    def list_std(self) -> list[str]:
        """
        List the import paths of the standard library.

        Returns:
            list[str]: Import paths such as "bufio" or "net/http/internal",
                in the order printed by `go list std`.

        Raises:
            PackageResolutionError: If `go list std` cannot be run or fails.
        """
        output = self._run(["list", "std"])
        return [line.strip() for line in output.splitlines() if line.strip()]

    def package_info(self, import_path: str) -> GoListPackage:
        """
        Resolve an import path with `go list -json`.

        Args:
            import_path: The import path to resolve (e.g., "net/http").

        Returns:
            GoListPackage: The decoded package metadata.

        Raises:
            PackageResolutionError: If the command fails or prints something
                other than a JSON object.
        """
        output = self._run(["list", "-json", import_path], import_path=import_path)
        try:
            info = json.loads(output)
        except json.JSONDecodeError as e:
            raise PackageResolutionError(
                message=f"Could not decode package metadata for {import_path!r}",
                import_path=import_path,
                original_exception=e,
            ) from e

        if not isinstance(info, dict):
            raise PackageResolutionError(
                message=f"Unexpected package metadata for {import_path!r}",
                import_path=import_path,
            )
        return info

    def _run(self, args: list[str], import_path: str | None = None) -> str:
        cmd = [self.go_binary, *args]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except FileNotFoundError as e:
            raise PackageResolutionError(
                message=f"Go toolchain not found: {self.go_binary!r}",
                import_path=import_path,
                original_exception=e,
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise PackageResolutionError(
                message=f"'{' '.join(cmd)}' failed: {stderr or f'exit status {e.returncode}'}",
                import_path=import_path,
                original_exception=e,
            ) from e
        except OSError as e:
            raise PackageResolutionError(
                message=f"Could not run {self.go_binary!r}",
                import_path=import_path,
                original_exception=e,
            ) from e

        return result.stdout
