"""
Rich progress bar helpers.

Bars render on the stderr console shared with debug output, so the word list
on stdout stays clean. A task's description is always shown in the color of
its current state.
"""

from enum import StrEnum
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from utils import console as stderr_console


class ProgressState(StrEnum):
    """
    Scan states, valued by the rich color used to render them.

    Attributes:
        IN_PROGRESS: Packages are being scanned.
        COMPLETE: The dictionary is built.
        ERROR: The scan was aborted.
    """

    IN_PROGRESS = "magenta"
    COMPLETE = "green"
    ERROR = "red"


def create_progress(console: Optional[Console] = None) -> Progress:
    """
    Build a transient, not yet started, Progress with godict's columns.

    Args:
        console: Console to render on. Defaults to the shared stderr console.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console if console is not None else stderr_console,
        transient=True,
    )


def styled(state: ProgressState, text: str) -> str:
    """Wrap text in the markup color of state. Text itself is never read as markup."""
    return f"[{state}]{escape(text)}"


def create_task(
    progress: Progress, description: str, total: Optional[int] = None
) -> TaskID:
    """Add a task in the IN_PROGRESS state. A None total shows a pulsing bar."""
    return progress.add_task(styled(ProgressState.IN_PROGRESS, description), total=total)


def set_state(
    progress: Progress,
    task: TaskID,
    state: ProgressState,
    description: str,
    *,
    completed: Optional[int] = None,
    total: Optional[int] = None,
) -> None:
    """
    Relabel a task and optionally move its counters.

    Args:
        progress: The Progress holding the task.
        task: Task to update.
        state: New state; picks the description color.
        description: New description text.
        completed: New completed count. None keeps the current count.
        total: New total. None keeps the current total.
    """
    progress.update(
        task,
        description=styled(state, description),
        completed=completed,
        total=total,
    )


def advance(progress: Progress, task: TaskID, steps: int = 1) -> None:
    progress.advance(task, steps)
