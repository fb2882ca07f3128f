"""Project-wide constants and enums."""

from __future__ import annotations

from enum import StrEnum


class Mode(StrEnum):
    """Top-level operation selected on the command line."""

    COPY = "copy"
    PASTE = "paste"
    DELETE = "delete"


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 2

PROG_NAME = "copycat"

DEFAULT_MAX_SIZE = 100 * 1024 * 1024
STDIN_CHUNK_SIZE = 65536

SIZE_STEP = 1024
SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")

CONFIG_MAX_SIZE = "max_size"
CONFIG_CLIPBOARD = "clipboard"
CONFIG_COPY_COMMANDS = "copy_commands"
CONFIG_PASTE_COMMANDS = "paste_commands"

ASSUME_YES_ENV = "COPYCAT_ASSUME_YES"
CONFIG_PATH_ENV = "COPYCAT_CONFIG_PATH"
