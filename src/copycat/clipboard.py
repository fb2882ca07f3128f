"""Clipboard backends used by the CLI."""

from __future__ import annotations

import logging
import shutil
import subprocess  # nosec B404
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

import pyperclip  # type: ignore[import-untyped]

from .constants import CONFIG_CLIPBOARD, CONFIG_COPY_COMMANDS, CONFIG_PASTE_COMMANDS
from .logging_utils import StructuredLogEvent, get_logger, log_event

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

DEFAULT_COPY_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)
DEFAULT_PASTE_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("xclip", "-selection", "clipboard", "-o"),
    ("xsel", "--clipboard", "--output"),
)


class ClipboardBackend(Protocol):
    """Capability exposing the system clipboard as text."""

    def set_text(self, text: str) -> bool: ...

    def get_text(self) -> str | None: ...


class PyperclipBackend:
    """Clipboard implementation using :mod:`pyperclip`."""

    def set_text(self, text: str) -> bool:  # noqa: PLR6301
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException:
            logger.debug("pyperclip copy failed", exc_info=True)
            return False
        return True

    def get_text(self) -> str | None:  # noqa: PLR6301
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException:
            logger.debug("pyperclip paste failed", exc_info=True)
            return None
        return text if isinstance(text, str) else None


@dataclass(frozen=True, slots=True)
class CommandBackend:
    """Clipboard implementation shelling out to helper programs like ``xclip``."""

    copy_command: tuple[str, ...] | None = None
    paste_command: tuple[str, ...] | None = None

    @staticmethod
    def _resolve(command: tuple[str, ...] | None) -> list[str] | None:
        if not command or shutil.which(command[0]) is None:
            return None
        return list(command)

    def set_text(self, text: str) -> bool:
        argv = self._resolve(self.copy_command)
        if argv is None:
            return False
        try:
            result = subprocess.run(  # noqa: S603  # nosec B603
                argv,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError:
            logger.debug("clipboard helper failed to start", exc_info=True)
            return False
        return result.returncode == 0

    def get_text(self) -> str | None:
        argv = self._resolve(self.paste_command)
        if argv is None:
            return None
        try:
            result = subprocess.run(  # noqa: S603  # nosec B603
                argv,
                capture_output=True,
                check=False,
            )
        except OSError:
            logger.debug("clipboard helper failed to start", exc_info=True)
            return None
        if result.returncode != 0:
            return None
        return result.stdout.decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class ChainedBackend:
    """Try each backend in order until one succeeds."""

    backends: tuple[ClipboardBackend, ...]

    def set_text(self, text: str) -> bool:
        for index, backend in enumerate(self.backends):
            if backend.set_text(text):
                return True
            self._log_fallback("clipboard.copy_fallback", index)
        return False

    def get_text(self) -> str | None:
        for index, backend in enumerate(self.backends):
            text = backend.get_text()
            if text is not None:
                return text
            self._log_fallback("clipboard.paste_fallback", index)
        return None

    def _log_fallback(self, name: str, index: int) -> None:
        log_event(
            logger,
            StructuredLogEvent(
                name=name,
                message="clipboard backend failed; trying next",
                level=logging.INFO,
                context={
                    "backend": type(self.backends[index]).__name__,
                    "attempt": index + 1,
                    "max_attempts": len(self.backends),
                },
            ),
        )


def _command_list(raw: object, default: Sequence[tuple[str, ...]]) -> list[tuple[str, ...]]:
    if not isinstance(raw, list):
        return list(default)
    return [tuple(str(part) for part in cmd) for cmd in raw if isinstance(cmd, list) and cmd]


def build_backend(cfg: dict[str, Any] | None = None, *, platform: str | None = None) -> ClipboardBackend:
    """Return the backend chain for this platform.

    ``pyperclip`` is tried first; on Linux the helper commands listed under
    ``[clipboard]`` in the configuration are tried after it.
    """
    platform = platform or sys.platform
    backends: list[ClipboardBackend] = [PyperclipBackend()]
    if platform.startswith("linux"):
        section = (cfg or {}).get(CONFIG_CLIPBOARD, {})
        if not isinstance(section, dict):
            section = {}
        copies = _command_list(section.get(CONFIG_COPY_COMMANDS), DEFAULT_COPY_COMMANDS)
        pastes = _command_list(section.get(CONFIG_PASTE_COMMANDS), DEFAULT_PASTE_COMMANDS)
        for index in range(max(len(copies), len(pastes))):
            backends.append(
                CommandBackend(
                    copy_command=copies[index] if index < len(copies) else None,
                    paste_command=pastes[index] if index < len(pastes) else None,
                )
            )
    return ChainedBackend(tuple(backends))


def install_hint(platform: str | None = None) -> list[str]:
    """Return lines suggesting how to get a working clipboard on ``platform``."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["  Windows: Built-in clipboard should work"]
    if platform == "darwin":
        return ["  macOS: Built-in clipboard should work"]
    return [
        "  Linux: Install 'xclip' or 'xsel':",
        "    sudo apt-get install xclip",
        "    sudo apt-get install xsel",
    ]
