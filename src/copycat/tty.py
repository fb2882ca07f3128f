"""Helpers for TTY detection."""

from __future__ import annotations

import sys


def stdin_is_tty() -> bool:
    """Return True if stdin is a TTY. Isolated for testability."""
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        # stdin replaced with an object lacking isatty(), or already closed
        return False


def stdout_is_tty() -> bool:
    """Return True if stdout is a TTY."""
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False
