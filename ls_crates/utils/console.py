"""
Console output utilities for cargo-ls-crates using Rich.

User-facing output goes through this module: the crate list and help text
on standard output, error and warning messages on standard error.
For diagnostic or debug output, use :mod:`ls_crates.utils.logger`.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import IO, Iterable, Optional, Union

from rich.text import Text
from rich.theme import Theme
from rich.console import Console

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

LS_CRATES_THEME = Theme(
    {
        "crate.name": "bold green",
        "crate.version": "yellow",
        "crate.description": "blue",
        "crate.path": "dim",
        "error": "bold red",
        "warning": "bold yellow",
        "help.command": "bold blue",
        "help.manager": "red",
        "help.options": "bold yellow",
        "help.heading": "magenta",
    }
)

# ---------------------------------------------------------------------------
# Console lifecycle management
# ---------------------------------------------------------------------------

_console: Optional[Console] = None
_error_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color(stream: Optional[IO[str]] = None) -> bool:
    """Return True if colored output should be enabled for ``stream``."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    try:
        return (stream or sys.stdout).isatty()
    except (AttributeError, OSError):
        return False


def _make_console(*, stderr: bool) -> Console:
    use_color = _should_use_color(sys.stderr if stderr else sys.stdout)
    return Console(
        theme=LS_CRATES_THEME,
        stderr=stderr,
        no_color=not use_color,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def _get_console() -> Console:
    """Return the singleton Rich Console writing to standard output."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                _console = _make_console(stderr=False)
    return _console


def _get_error_console() -> Console:
    """Return the singleton Rich Console writing to standard error."""
    global _error_console

    if _error_console is None:
        with _console_lock:
            if _error_console is None:
                _error_console = _make_console(stderr=True)
    return _error_console


def reconfigure_console() -> None:
    """Reset the global console instances.

    Useful if environment variables (e.g. NO_COLOR) change at runtime.
    """
    global _console, _error_console
    with _console_lock:
        _console = None
        _error_console = None


# ---------------------------------------------------------------------------
# Status message helpers
# ---------------------------------------------------------------------------


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message on standard error."""
    _get_error_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message on standard error."""
    _get_error_console().print(f"{prefix} {message}", style="warning", markup=False)


# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------


def print_lines(lines: Iterable[Union[str, Text]]) -> None:
    """Print each line on standard output, newline-terminated.

    Plain strings are written verbatim; Rich markup is not interpreted.
    """
    console = _get_console()
    for line in lines:
        console.print(line, markup=False)
