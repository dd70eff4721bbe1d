"""
godict CLI Entry Point.

godict builds a spell-checker allow-list from the Go language: its keywords,
its predeclared identifiers, and every exported identifier declared across the
standard library. The sorted, deduplicated word list is printed on stdout,
one word per line.

The pipeline operates in four stages:

1.  **Seeding**: Keywords, builtins and extra words (from `constants.py` and
    the settings file) are normalized into a fresh word set.
2.  **Enumeration**: `go list std` provides the import paths. Internal
    packages are skipped and the others are resolved with `go list -json`.
3.  **Extraction**: Each package source file is parsed with tree-sitter and
    its exported top-level names are normalized into the word set.
4.  **Reporting**: The words are sorted and written out.

Any failure along the way aborts the run with exit code 1 and no output: a
partial dictionary would silently accept words that should be flagged.

Usage:
    $ python main.py > go.dic
    $ python main.py --mode verbatim --debug -o go.dic

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI, colors, and progress visualization.
    - tree-sitter / tree-sitter-go: Go source parsing.
    - Go toolchain: External engine used to list and resolve std packages.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from adapters.go import SubprocessGoClient
from core.catalog import GoToolchainCatalog
from core.config import load_settings
from core.exceptions import (
    ConfigError,
    FileIOError,
    PackageResolutionError,
    SourceParseError,
    UnsupportedConstructError,
)
from core.file_io import AtomicFileWriter
from core.processing import build_word_set
from core.reporting import report, write_report
from models import NormalizeMode
from ui.progress_display import NoOpProgressDisplay, RichProgressDisplay
from utils import console, debug, set_debug

app = typer.Typer()


@app.command()
def main(
    debug_output: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Enable debug output on stderr.",
        ),
    ] = False,
    mode: Annotated[
        NormalizeMode | None,
        typer.Option(
            case_sensitive=False,
            help="Word normalization: 'strict' keeps the leading letters, lowercased; "
            "'verbatim' keeps identifiers as declared. Defaults to the settings file, "
            "then 'strict'.",
        ),
    ] = None,
    go_binary: Annotated[
        str | None,
        typer.Option(
            "--go",
            envvar="GODICT_GO",
            help="Go executable used to list the standard library.",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            dir_okay=False,
            resolve_path=True,
            help="Write the word list to this file instead of stdout.",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            exists=True,  # An explicit settings file must exist
            dir_okay=False,
            resolve_path=True,
            help="Settings file. Defaults to ~/.godict/settings.json.",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Do not show the progress bar."),
    ] = False,
):
    """
    Build the Go dictionary and print it, one word per line.

    Raises:
        typer.Exit: With code 1 if the settings, the toolchain, a package, or a
            source file cannot be processed.
    """
    set_debug(debug_output)

    try:
        settings = load_settings(config)
    except ConfigError as e:
        print_config_err(e)

    mode = mode or settings.mode
    go = go_binary or settings.go_binary
    debug(f"mode={mode} go={go!r} extra_words={len(settings.extra_words)}")

    catalog = GoToolchainCatalog(SubprocessGoClient(go))
    # Debug lines and a live bar on the same stream garble each other
    display = (
        NoOpProgressDisplay() if quiet or debug_output else RichProgressDisplay()
    )

    try:
        word_set = build_word_set(
            catalog,
            mode=mode,
            extra_words=settings.extra_words,
            progress_display=display,
        )
        debug(f"{len(word_set)} distinct words")

        if output is not None:
            write_report(word_set, AtomicFileWriter.from_path(output))
        else:
            report(word_set)
    except PackageResolutionError as e:
        print_resolution_err(e)
    except (SourceParseError, UnsupportedConstructError) as e:
        print_source_err(e)
    except FileIOError as e:
        print_file_io_err(e)
    except Exception as e:  # noqa: BLE001
        # Catch-all so users see a readable report instead of a raw traceback
        print_unexpected_err(e)


def print_config_err(e: ConfigError) -> None:
    """
    Displays a user-friendly error message for an unusable settings file.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    console.print("❌ [bold red]Settings Error[/bold red]")
    console.print(e.message, markup=False)
    if e.original_exception:
        console.print(f"\nTechnical details: {e.original_exception}", markup=False)
    console.print(
        "\n[yellow]Quick Fix:[/yellow] Fix or remove the settings file, or pass --config."
    )
    raise typer.Exit(code=1) from e


def print_resolution_err(e: PackageResolutionError) -> None:
    """
    Displays a user-friendly error message when the standard library cannot be resolved.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    console.print("❌ [bold red]Package Resolution Error[/bold red]")
    console.print(e.message, markup=False)
    if e.import_path:
        console.print(f"Package: [yellow]{escape(e.import_path)}[/yellow]")
    console.print(
        "\n[yellow]Quick Fix:[/yellow] Ensure a Go toolchain is installed and "
        "`go list std` works, or point --go at one."
    )
    raise typer.Exit(code=1) from e


def print_source_err(e: SourceParseError | UnsupportedConstructError) -> None:
    """
    Displays a user-friendly error message for a source file godict cannot walk.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    if isinstance(e, SourceParseError):
        console.print("❌ [bold red]Parse Error[/bold red]")
    else:
        console.print("❌ [bold red]Unsupported Construct[/bold red]")
    console.print(e.message, markup=False)
    if e.file_path:
        console.print(f"File path: [yellow]{escape(e.file_path)}[/yellow]")

    console.print(
        "\n[yellow]Note:[/yellow] Standard library sources are expected to parse "
        "cleanly. Your Go version may be newer than the bundled grammar."
    )
    raise typer.Exit(code=1) from e


def print_file_io_err(e: FileIOError) -> None:
    """
    Displays a user-friendly error message for file I/O operation failures.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    console.print("❌ [bold red]File I/O Error[/bold red]")
    console.print(
        f"The app encountered an error while working with files: {e.message}",
        markup=False,
    )
    if e.file_path:
        console.print(f"File path: [yellow]{escape(e.file_path)}[/yellow]")

    console.print(
        "\n[yellow]Quick Fix:[/yellow] Check file permissions and available disk space."
    )
    if e.original_exception:
        console.print(f"\nTechnical details: {e.original_exception}", markup=False)

    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    console.print("❌ [bold red]Unexpected Error[/bold red]")
    console.print("An unexpected error occurred while building the dictionary.")
    console.print(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    console.print(f"[yellow]Error Message:[/yellow] {escape(str(e))}")

    console.print("\n--- PLEASE REPORT THIS ---")
    console.print(f"Error Type: {type(e).__name__}")
    console.print(f"Error Message: {e}", markup=False)
    if e.__cause__:
        console.print(f"Caused by: {e.__cause__}", markup=False)

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
