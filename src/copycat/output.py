"""Destinations for :class:`~copycat.content.Content`: files, clipboard and stdout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from .errors import ClipboardUnavailableError, NotRegularFileError, UserCancelled, WriteFailedError
from .formatter import format_size
from .logging_utils import StructuredLogEvent, get_logger, log_event
from .sources import check_regular_file

if TYPE_CHECKING:
    from pathlib import Path

    from .clipboard import ClipboardBackend
    from .console import Console
    from .content import Content
    from .prompt import ConfirmationGate

logger = get_logger(__name__)

APPEND_SEPARATOR = b"\n"


def confirm_overwrite(path: Path, *, gate: ConfirmationGate, console: Console) -> None:
    """Ask before replacing an existing non-empty file; raise on decline."""
    if not path.exists():
        return
    if not path.is_file():
        raise NotRegularFileError(path)
    size = path.stat().st_size
    if size == 0:
        console.info(f"Note: File '{path}' exists but is empty. Proceeding.")
        return
    console.warn(f"Warning: File '{path}' already exists ({format_size(size)}).")
    if not gate.ask("Do you want to overwrite it?", default_no=True):
        raise UserCancelled


def _ensure_parent(path: Path) -> None:
    parent = path.parent
    if parent.exists():
        return
    try:
        parent.mkdir()
    except OSError as err:
        msg = f"Error creating directory '{parent}': {err.strerror}"
        raise WriteFailedError(msg) from err


def _write_all(path: Path, payload: bytes, *, mode: str, separator: bytes = b"") -> None:
    try:
        with path.open(mode) as fh:
            if separator and fh.write(separator) != len(separator):
                msg = f"Short write to '{path}'"
                raise WriteFailedError(msg)
            if fh.write(payload) != len(payload):
                msg = f"Short write to '{path}'"
                raise WriteFailedError(msg)
    except OSError as err:
        msg = f"Error writing file '{path}': {err.strerror}"
        raise WriteFailedError(msg) from err


def write_file(
    path: Path,
    content: Content,
    *,
    append: bool,
    force: bool,
    gate: ConfirmationGate,
    console: Console,
) -> int:
    """Write ``content`` to ``path`` and return the number of payload bytes.

    Overwriting an existing non-empty file asks for confirmation unless
    ``force`` is set. Appending never asks; it separates the new content from
    a non-empty file with a single newline.
    """
    if append:
        has_content = path.is_file() and path.stat().st_size > 0
        _write_all(path, content.data, mode="ab", separator=APPEND_SEPARATOR if has_content else b"")
    else:
        if not force:
            confirm_overwrite(path, gate=gate, console=console)
        _ensure_parent(path)
        _write_all(path, content.data, mode="wb")
    log_event(
        logger,
        StructuredLogEvent(
            name="sink.file",
            message="wrote file",
            context={"path": path, "bytes": len(content), "append": append},
        ),
    )
    return len(content)


def write_clipboard(content: Content, backend: ClipboardBackend) -> int:
    """Place ``content`` on the clipboard and return its length in characters."""
    text = content.text
    if not backend.set_text(text):
        msg = "Failed to copy to clipboard"
        raise ClipboardUnavailableError(msg)
    return len(text)


def write_stdout(content: Content) -> None:
    """Write the payload bytes verbatim to stdout."""
    click.echo(content.data, nl=False)


def clear_file(path: Path, *, force: bool, gate: ConfirmationGate, console: Console) -> int:
    """Truncate ``path`` to zero length and return the number of bytes freed."""
    size = check_regular_file(path)
    if size == 0:
        return 0
    if not force:
        console.warn(f"Warning: This will delete all content from '{path}' ({format_size(size)}).")
        if not gate.ask("Do you want to continue?", default_no=True):
            raise UserCancelled
    try:
        path.write_bytes(b"")
    except OSError as err:
        msg = f"Error opening file: {err.strerror}"
        raise WriteFailedError(msg) from err
    log_event(
        logger,
        StructuredLogEvent(name="sink.clear", message="cleared file", context={"path": path, "bytes": size}),
    )
    return size
