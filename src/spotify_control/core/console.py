"""Centralized Rich Console management.

One console for stdout output and one for stderr, created on first use.
"""

from rich.console import Console

_console: Console | None = None
_error_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich Console instance.

    Returns:
        Console: The global Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def get_error_console() -> Console:
    """Get or create the Rich Console that writes to stderr."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True)
    return _error_console
