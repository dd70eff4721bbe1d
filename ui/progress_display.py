"""
Scan progress reporting, decoupled from the harvesting pipeline.

build_word_set announces the scan, each package it enters and leaves, and the
final totals. RichProgressDisplay turns those events into a transient bar on
stderr; NoOpProgressDisplay ignores them for quiet and debug runs.
"""

from types import TracebackType
from typing import Optional, Protocol

from rich.console import Console
from rich.progress import Progress, TaskID
from ui.progress import ProgressState, advance, create_progress, create_task, set_state

SCAN_DESCRIPTION = "Scanning standard library..."


class ProgressDisplay(Protocol):
    """
    Receiver of scan events.

    Events arrive inside the context, in this order: scan_started once, then
    package_started / package_finished for every package, then scan_finished
    once. A failing scan leaves the context with the exception before
    scan_finished is called.
    """

    def __enter__(self) -> "ProgressDisplay": ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    def scan_started(self) -> None: ...

    def package_started(self, import_path: str) -> None: ...

    def package_finished(self, import_path: str) -> None: ...

    def scan_finished(self, packages: int, words: int) -> None:
        """
        Report the totals of a successful scan.

        Args:
            packages: Number of packages scanned.
            words: Number of distinct words in the finished dictionary.
        """


class RichProgressDisplay:
    """
    Progress bar for a standard library scan.

    The number of packages is not known up front (internal packages are
    filtered lazily), so the bar counts up without a total until the scan
    finishes.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress(self._console)
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if not self._progress:
            return
        if exc_type is not None and self._task is not None:
            set_state(self._progress, self._task, ProgressState.ERROR, "Scan aborted")
        self._progress.__exit__(exc_type, exc_val, exc_tb)

    def scan_started(self) -> None:
        """
        Add the scan task to the bar.

        Raises:
            RuntimeError: If called outside the context.
        """
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as display:"
            )
        self._task = create_task(self._progress, SCAN_DESCRIPTION, total=None)

    def package_started(self, import_path: str) -> None:
        progress, task = self._require_task("package_started")
        set_state(progress, task, ProgressState.IN_PROGRESS, f"Scanning {import_path}")

    def package_finished(self, import_path: str) -> None:
        progress, task = self._require_task("package_finished")
        advance(progress, task)

    def scan_finished(self, packages: int, words: int) -> None:
        progress, task = self._require_task("scan_finished")
        set_state(
            progress,
            task,
            ProgressState.COMPLETE,
            f"Scanned {packages} packages, {words} words.",
            completed=packages,
            total=packages,
        )

    def _require_task(self, event: str) -> tuple[Progress, TaskID]:
        if not self._progress or self._task is None:
            raise RuntimeError(f"scan_started() must be called before {event}()")
        return self._progress, self._task


class NoOpProgressDisplay:
    """ProgressDisplay that ignores every event."""

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        pass

    def scan_started(self) -> None:
        pass

    def package_started(self, import_path: str) -> None:
        pass

    def package_finished(self, import_path: str) -> None:
        pass

    def scan_finished(self, packages: int, words: int) -> None:
        pass
