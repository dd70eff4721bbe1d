"""
General utility functions for the CLI application.

Everything here writes to stderr: stdout is reserved for the word list.
"""

from rich.console import Console

console: Console = Console(stderr=True)

_debug_enabled: bool = False


def set_debug(enabled: bool) -> None:
    """Turn debug output on or off for the rest of the run."""
    global _debug_enabled
    _debug_enabled = enabled


def is_debug() -> bool:
    return _debug_enabled


def debug(
    *values: object,
    sep: str = " ",
    end: str = "\n",
) -> None:
    """
    Print debug message with orange formatting when debug output is enabled.

    Args:
        *values: Variable number of objects to print. All values are converted to strings.
        sep: Separator string between values. Defaults to a single space.
        end: String appended after the last value. Defaults to newline.

    Returns:
        None: This function only prints to console and returns nothing.
    """
    if not _debug_enabled:
        return

    if not values:
        console.print(end=end)
        return

    # Convert all values to strings
    str_values = [str(v) for v in values]

    # Join with separator
    message = sep.join(str_values)

    # markup=False: identifiers like "[]byte" must not be read as rich tags
    console.print(f"DEBUG: {message}", end=end, style="orange1", markup=False)
