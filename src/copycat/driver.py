"""Operation driver: pick source, transform and sink for one invocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO

from .clipboard import install_hint
from .console import Console
from .constants import DEFAULT_MAX_SIZE, EXIT_SUCCESS, PROG_NAME, Mode
from .content import Content
from .errors import ClipboardUnavailableError, CopycatError, UsageError, UserCancelled
from .formatter import format_size
from .logging_utils import get_logger
from .output import clear_file, write_clipboard, write_file, write_stdout
from .prompt import ConfirmationGate
from .sources import check_regular_file, read_clipboard, read_file, read_stdin
from .tty import stdin_is_tty
from .window import apply_window

if TYPE_CHECKING:
    from pathlib import Path

    from .clipboard import ClipboardBackend
    from .prompt import Prompter

logger = get_logger(__name__)

LINE_ENDINGS = b"\r\n"


@dataclass(frozen=True, slots=True)
class Options:
    """Flags resolved once from the command line."""

    mode: Mode = Mode.COPY
    append: bool = False
    use_stdin: bool = False
    use_stdout: bool = False
    force: bool = False
    strip_trailing_newline: bool = False
    binary: bool = False
    line_limit: int = 0
    tail_limit: int = 0
    target_path: Path | None = None
    max_size: int = DEFAULT_MAX_SIZE


class OperationDriver:
    """Run one copy, paste or delete operation and map it to an exit code.

    ``interactive`` reports whether stdin is a terminal; when it is not and no
    other source was named, stdin is used as the source.
    """

    def __init__(
        self,
        *,
        backend: ClipboardBackend,
        prompter: Prompter,
        console: Console | None = None,
        interactive: bool | None = None,
        stdin: BinaryIO | None = None,
    ) -> None:
        self.backend = backend
        self.gate = ConfirmationGate(prompter)
        self.console = console or Console()
        self.interactive = stdin_is_tty() if interactive is None else interactive
        self.stdin = stdin

    def run(self, options: Options) -> int:
        if options.binary:
            logger.debug("--binary has no effect; content is always handled as bytes")
        try:
            if self.wants_stdin(options):
                self._run_stdin(options)
            elif options.mode is Mode.DELETE:
                self._run_delete(options)
            elif options.mode is Mode.PASTE:
                self._run_paste(options)
            else:
                self._run_copy(options)
        except UserCancelled as err:
            self.console.info(str(err))
            return err.exit_code
        except ClipboardUnavailableError as err:
            self.console.error(f"✗ {err}")
            return err.exit_code
        except CopycatError as err:
            self.console.error(f"Error: {err}")
            return err.exit_code
        return EXIT_SUCCESS

    def wants_stdin(self, options: Options) -> bool:
        if options.use_stdin:
            return True
        return not self.interactive and options.mode is Mode.COPY and options.target_path is None

    def _write_target(self, path: Path, content: Content, options: Options) -> int:
        return write_file(
            path,
            content,
            append=options.append,
            force=options.force,
            gate=self.gate,
            console=self.console,
        )

    def _run_stdin(self, options: Options) -> None:
        content = read_stdin(self.stdin)
        if options.strip_trailing_newline:
            content = Content(content.data.rstrip(LINE_ENDINGS))

        if options.use_stdout:
            write_stdout(content)
            return
        if options.target_path is not None and options.mode is Mode.PASTE:
            written = self._write_target(options.target_path, content, options)
            verb = "Appended" if options.append else "Written"
            self.console.info(f"{verb} {written} bytes to '{options.target_path}'")
            return
        count = write_clipboard(content, self.backend)
        self.console.success(f"Copied {count} characters from stdin to clipboard")

    def _run_delete(self, options: Options) -> None:
        path = options.target_path
        if path is None:
            msg = "File name required for delete operation"
            raise UsageError(msg)
        freed = clear_file(path, force=options.force, gate=self.gate, console=self.console)
        if freed == 0:
            self.console.info(f"File '{path}' is already empty.")
            return
        self.console.success(f"All content successfully deleted from '{path}'")
        self.console.info(f"Bytes freed: {format_size(freed)}")

    def _run_paste(self, options: Options) -> None:
        content = read_clipboard(self.backend)
        if not content:
            self.console.info("Clipboard is empty. Nothing to paste.")
            return
        path = options.target_path
        if path is None or options.use_stdout:
            write_stdout(content)
            return
        written = self._write_target(path, content, options)
        verb = "Appended" if options.append else "Pasted"
        self.console.success(f"{verb} {written} bytes from clipboard to '{path}'")

    def _confirm(self, warning: str, question: str) -> None:
        self.console.warn(warning)
        if not self.gate.ask(question, default_no=True):
            raise UserCancelled

    def _run_copy(self, options: Options) -> None:
        path = options.target_path
        if path is None:
            msg = f"File name or input required for copy operation\nUse '{PROG_NAME} -h' for help"
            raise UsageError(msg)

        size = check_regular_file(path)
        if not options.force:
            if size == 0:
                self._confirm(f"Warning: File '{path}' is empty.", "Do you want to copy empty content?")
            elif size > options.max_size:
                self._confirm(f"Warning: File is large ({format_size(size)}).", "Do you want to continue?")

        content = read_file(path, max_size=options.max_size)
        content = apply_window(content, lines=options.line_limit, tail=options.tail_limit)

        if options.use_stdout:
            write_stdout(content)
            return
        try:
            count = write_clipboard(content, self.backend)
        except ClipboardUnavailableError as err:
            lines = [str(err), "You may need to install clipboard utilities:", *install_hint()]
            raise ClipboardUnavailableError("\n".join(lines)) from err
        self.console.success(f"Copied {count} characters from '{path}' to clipboard")
