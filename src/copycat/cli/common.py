"""Shared CLI helpers."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from copycat.constants import EXIT_SUCCESS, Mode

if TYPE_CHECKING:
    from collections.abc import Iterable

MODE_META_KEY = "copycat.mode"

LONG_MODE_FLAGS: dict[str, Mode] = {
    "--copy": Mode.COPY,
    "--paste": Mode.PASTE,
    "--delete": Mode.DELETE,
}
SHORT_MODE_FLAGS: dict[str, Mode] = {
    "c": Mode.COPY,
    "p": Mode.PASTE,
    "d": Mode.DELETE,
}
# Options whose value may be given as the following token.
LONG_VALUE_OPTIONS = {"--lines", "--tail", "--max-size", "--config", "--log-level"}
SHORT_VALUE_OPTIONS = {"l", "t", "m"}


def resolve_mode(args: Iterable[str]) -> Mode:
    """Return the mode selected by the last of ``-c``/``-p``/``-d`` in ``args``.

    Option values (``-l 3``) and everything after ``--`` are skipped. Short
    flags may be bundled, as in ``-pf``.
    """
    mode = Mode.COPY
    skip_next = False
    for token in args:
        if skip_next:
            skip_next = False
            continue
        if token == "--":
            break
        if token.startswith("--"):
            if token in LONG_VALUE_OPTIONS:
                skip_next = True
            elif token in LONG_MODE_FLAGS:
                mode = LONG_MODE_FLAGS[token]
            continue
        if not token.startswith("-") or token == "-":
            continue
        for index, char in enumerate(token[1:], start=1):
            if char in SHORT_MODE_FLAGS:
                mode = SHORT_MODE_FLAGS[char]
            elif char in SHORT_VALUE_OPTIONS:
                # value is either the rest of this token or the next one
                skip_next = index == len(token) - 1
                break
    return mode


def exit_on_broken_pipe() -> NoReturn:
    """Exit quietly when the reader of stdout went away."""
    try:
        sys.stdout.close()
    finally:
        raise SystemExit(EXIT_SUCCESS)  # noqa: B012
