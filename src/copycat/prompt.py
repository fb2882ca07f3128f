"""Interactive yes/no confirmation used before destructive actions."""

from __future__ import annotations

import logging
import os
import sys
from typing import Protocol

import click

from .constants import ASSUME_YES_ENV

logger = logging.getLogger(__name__)


class Prompter(Protocol):
    """Source of one line of interactive input."""

    def read_line(self, prompt: str) -> str | None:
        """Show ``prompt`` and return the answer, or ``None`` on EOF/failure."""
        ...


class StdinPrompter:
    """Prompt on stdout and read the answer from stdin."""

    def read_line(self, prompt: str) -> str | None:  # noqa: PLR6301
        click.echo(prompt, nl=False)
        try:
            line = sys.stdin.readline()
        except (OSError, ValueError):
            logger.debug("confirmation read failed", exc_info=True)
            return None
        if not line:
            return None
        return line.rstrip("\r\n")


class ConfirmationGate:
    """Ask a yes/no question with a default answer.

    End-of-input and read failures always decline so unreadable input never
    lets a destructive action proceed. Callers honour ``--force`` themselves
    and skip the gate entirely.
    """

    def __init__(self, prompter: Prompter) -> None:
        self.prompter = prompter

    @staticmethod
    def render(prompt: str, *, default_no: bool) -> str:
        choices = "y/N" if default_no else "Y/n"
        return f"{prompt} [{choices}]: "

    def ask(self, prompt: str, *, default_no: bool = True) -> bool:
        response = self.prompter.read_line(self.render(prompt, default_no=default_no))
        if response is None:
            return False
        if not response:
            return not default_no
        return response[0].lower() == "y"


def env_assume_yes() -> bool:
    """Return True if ``COPYCAT_ASSUME_YES`` is set to a true-like value."""
    value = os.environ.get(ASSUME_YES_ENV, "").strip().lower()
    return value in {"1", "true", "yes"}
