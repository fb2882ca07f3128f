"""Acquire :class:`~copycat.content.Content` from a file, the clipboard or stdin."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, BinaryIO

from .constants import DEFAULT_MAX_SIZE, STDIN_CHUNK_SIZE
from .content import Content
from .errors import (
    ERROR_MSG_CLIPBOARD,
    ClipboardUnavailableError,
    NotFoundError,
    NotRegularFileError,
    ReadFailedError,
    TooLargeError,
)
from .logging_utils import StructuredLogEvent, get_logger, log_event

if TYPE_CHECKING:
    from pathlib import Path

    from .clipboard import ClipboardBackend

logger = get_logger(__name__)


def check_regular_file(path: Path) -> int:
    """Return the size of ``path`` after checking it is an existing plain file."""
    if not path.exists():
        raise NotFoundError(path)
    if not path.is_file():
        raise NotRegularFileError(path)
    try:
        return path.stat().st_size
    except OSError as err:
        msg = f"Error opening file '{path}': {err.strerror}"
        raise ReadFailedError(msg) from err


def read_file(path: Path, *, max_size: int = DEFAULT_MAX_SIZE) -> Content:
    """Read ``path`` in full.

    The size ceiling is checked against the file's stat size before any data
    is read.
    """
    size = check_regular_file(path)
    if size > max_size:
        raise TooLargeError(path, size, max_size)
    try:
        data = path.read_bytes()
    except OSError as err:
        msg = f"Error opening file '{path}': {err.strerror}"
        raise ReadFailedError(msg) from err
    log_event(
        logger,
        StructuredLogEvent(name="source.file", message="read file", context={"path": path, "bytes": len(data)}),
    )
    return Content(data)


def read_clipboard(backend: ClipboardBackend) -> Content:
    """Return the clipboard text; empty is a valid result."""
    text = backend.get_text()
    if text is None:
        raise ClipboardUnavailableError(ERROR_MSG_CLIPBOARD)
    return Content.from_text(text)


def read_stdin(stream: BinaryIO | None = None) -> Content:
    """Read ``stream`` (binary stdin by default) until end of input."""
    stream = stream or sys.stdin.buffer
    buffer = bytearray()
    try:
        while chunk := stream.read(STDIN_CHUNK_SIZE):
            buffer.extend(chunk)
    except OSError as err:
        msg = f"Failed to read from stdin: {err}"
        raise ReadFailedError(msg) from err
    log_event(
        logger,
        StructuredLogEvent(
            name="source.stdin", message="read stdin", context={"bytes": len(buffer)}, level=logging.DEBUG
        ),
    )
    return Content(bytes(buffer))
