"""Console output, an optional log file, and checked halts."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = ["HaltError", "log", "log_init", "log_term", "print_line", "print_log", "ensure"]

_log_file: Optional[TextIO] = None


class HaltError(RuntimeError):
    """Raised when an ensured condition does not hold."""


def log(message: str) -> None:
    """Write ``message`` to standard output exactly as given."""
    sys.stdout.write(message)


def log_init(filename) -> None:
    """Open (and truncate) the log file that :func:`print_log` also writes to."""
    global _log_file
    if _log_file is not None:
        _log_file.close()
    _log_file = open(filename, "w", encoding="utf-8")


def log_term() -> None:
    """Flush and close the log file, if one is open."""
    global _log_file
    if _log_file is None:
        return
    _log_file.flush()
    _log_file.close()
    _log_file = None


def print_line(message: str) -> None:
    """Write ``message`` followed by a newline to standard output."""
    sys.stdout.write(message + "\n")


def print_log(message: str) -> None:
    """Like :func:`print_line`, and also append the line to the log file."""
    line = message + "\n"
    sys.stdout.write(line)
    if _log_file is not None:
        _log_file.write(line)
        _log_file.flush()


def ensure(cond, message: str = "") -> None:
    """Report and raise :class:`HaltError` when ``cond`` is false.

    ``message`` names the condition in the report.
    """
    if not cond:
        log(f"HALT: Ensure '{message}' failed\n")
        raise HaltError(message)