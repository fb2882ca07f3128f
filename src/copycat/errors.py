"""Custom exception classes and error messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import EXIT_CANCELLED, EXIT_ERROR
from .formatter import format_size

if TYPE_CHECKING:
    from pathlib import Path

ERROR_MSG_CANCELLED = "Operation cancelled."
ERROR_MSG_CLIPBOARD = "Clipboard is empty or inaccessible"


class CopycatError(Exception):
    """Base class for failures reported to the user."""

    exit_code: int = EXIT_ERROR


class NotFoundError(CopycatError):
    """Raised when a path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File '{path}' does not exist")
        self.path = path


class NotRegularFileError(CopycatError):
    """Raised when a path exists but is not a plain file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"'{path}' is not a regular file")
        self.path = path


class TooLargeError(CopycatError):
    """Raised when a file exceeds the configured size ceiling."""

    def __init__(self, path: Path, size: int, limit: int) -> None:
        super().__init__(
            f"File too large: {format_size(size)} (max: {format_size(limit)}); use --max-size to raise the limit"
        )
        self.path = path
        self.size = size
        self.limit = limit


class ClipboardUnavailableError(CopycatError):
    """Raised when no clipboard backend could serve the request."""


class WriteFailedError(CopycatError):
    """Raised when a destination cannot be created or fully written."""


class ReadFailedError(CopycatError):
    """Raised when a source cannot be read."""


class UsageError(CopycatError):
    """Raised when the requested operation lacks a required argument."""


class ConfigLoadError(CopycatError):
    """Raised when a configuration file cannot be loaded."""


class UserCancelled(CopycatError):
    """Raised when the user declines a confirmation prompt."""

    exit_code = EXIT_CANCELLED

    def __init__(self, message: str = ERROR_MSG_CANCELLED) -> None:
        super().__init__(message)
