"""Top-level Click command wiring options to the operation driver."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

import click
from rich.console import Console as RichConsole
from rich.table import Table

from copycat import __version__
from copycat.clipboard import build_backend
from copycat.config import read_config, resolve_max_size
from copycat.console import Console
from copycat.constants import EXIT_CANCELLED, EXIT_ERROR, EXIT_SUCCESS, PROG_NAME, Mode
from copycat.driver import OperationDriver, Options
from copycat.errors import ConfigLoadError
from copycat.logging_utils import configure_logging
from copycat.prompt import StdinPrompter, env_assume_yes
from copycat.tty import stdin_is_tty

from .common import MODE_META_KEY, exit_on_broken_pipe, resolve_mode

CLI_CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}

# Parameters listed under "Operations" in the help screen; the rest are "Options".
OPERATION_PARAMS = ("copy", "paste", "delete", "append", "use_stdin", "use_stdout", "version", "help")

EXIT_CODE_HELP = (
    (EXIT_SUCCESS, "Success"),
    (EXIT_ERROR, "Error"),
    (EXIT_CANCELLED, "User cancelled"),
)

HELP_WIDTH = 100


def _help_table() -> Table:
    table = Table(show_header=False, show_edge=False, box=None, pad_edge=False, expand=False)
    table.add_column(style="cyan", no_wrap=True)
    table.add_column(style="default")
    return table


class CopycatCommand(click.Command):
    """Click command resolving mode flags last-wins and rendering help with rich."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[MODE_META_KEY] = resolve_mode(args)
        return super().parse_args(ctx, args)

    def get_help(self, ctx: click.Context) -> str:
        """Return rich-formatted help.

        Layout:
          - Title and usage line
          - Operations (mode selectors and routing flags)
          - Options
          - Exit codes
        """
        console = RichConsole(record=True, file=io.StringIO(), width=HELP_WIDTH)

        title = f"Copy v{__version__} - File/Clipboard/Pipe Utility"
        console.print(f"[bold]{title}[/bold]")
        console.print("=" * len(title))
        console.print()
        console.print(f"[bold]Usage:[/bold] {PROG_NAME} [OPTIONS] [FILE]")
        console.print()

        records: dict[str, tuple[str, str]] = {}
        for param in self.get_params(ctx):
            if not isinstance(param, click.Option) or param.name is None:
                continue
            record = param.get_help_record(ctx)
            if record:
                records[param.name] = (record[0], record[1] or "")

        console.print("[bold]Operations:[/bold]")
        operations = _help_table()
        for name in OPERATION_PARAMS:
            if name in records:
                operations.add_row(*records[name])
        console.print(operations)
        console.print()

        console.print("[bold]Options:[/bold]")
        options = _help_table()
        for name, record in records.items():
            if name not in OPERATION_PARAMS:
                options.add_row(*record)
        console.print(options)
        console.print()

        console.print("[bold]Exit Codes:[/bold]")
        codes = _help_table()
        for code, meaning in EXIT_CODE_HELP:
            codes.add_row(str(code), meaning)
        console.print(codes)

        return console.export_text()


@click.command(cls=CopycatCommand, context_settings=CLI_CONTEXT_SETTINGS)
@click.option("-c", "--copy", is_flag=True, expose_value=False, help="Copy file/content to clipboard (default)")
@click.option("-p", "--paste", is_flag=True, expose_value=False, help="Paste clipboard to file (or stdout if no file)")
@click.option("-d", "--delete", is_flag=True, expose_value=False, help="Delete file content")
@click.option("-a", "--append", is_flag=True, help="Append to file instead of overwriting")
@click.option("-s", "--stdin", "use_stdin", is_flag=True, help="Read from stdin (pipe)")
@click.option("-o", "--stdout", "use_stdout", is_flag=True, help="Output to stdout")
@click.option("-f", "--force", is_flag=True, help="Force operation without confirmation")
@click.option("-n", "--no-newline", is_flag=True, help="Strip trailing newlines when reading from stdin")
@click.option("-b", "--binary", is_flag=True, help="Treat content as binary (accepted, no effect)")
@click.option("-l", "--lines", type=click.IntRange(min=0), default=0, metavar="N", help="Copy only first N lines")
@click.option("-t", "--tail", type=click.IntRange(min=0), default=0, metavar="N", help="Copy only last N lines")
@click.option(
    "-m",
    "--max-size",
    type=click.IntRange(min=0),
    default=None,
    metavar="N",
    help="Maximum size in bytes (default: 100MB)",
)
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Explicit config file path")
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default="WARNING",
    help="Set log level",
)
@click.version_option(__version__, "-v", "--version", prog_name="Copy", message="%(prog)s v%(version)s")
@click.argument("targets", nargs=-1, type=click.Path(path_type=Path))
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    append: bool,
    use_stdin: bool,
    use_stdout: bool,
    force: bool,
    no_newline: bool,
    binary: bool,
    lines: int,
    tail: int,
    max_size: int | None,
    config_path: Path | None,
    log_level: str,
    targets: tuple[Path, ...],
) -> None:
    """Move text between files, the clipboard and stdin/stdout."""
    configure_logging(getattr(logging, log_level.upper()))

    try:
        cfg = read_config(explicit_config=config_path)
        ceiling = resolve_max_size(cfg, max_size)
    except ConfigLoadError as err:
        Console().error(f"Error: {err}")
        ctx.exit(err.exit_code)

    options = Options(
        mode=ctx.meta.get(MODE_META_KEY, Mode.COPY),
        append=append,
        use_stdin=use_stdin,
        use_stdout=use_stdout,
        force=force or env_assume_yes(),
        strip_trailing_newline=no_newline,
        binary=binary,
        line_limit=lines,
        tail_limit=tail,
        target_path=targets[0] if targets else None,
        max_size=ceiling,
    )
    driver = OperationDriver(
        backend=build_backend(cfg),
        prompter=StdinPrompter(),
        interactive=stdin_is_tty(),
    )
    ctx.exit(driver.run(options))


def main(argv: list[str] | None = None) -> None:
    """Console entry point; usage errors exit with status 1."""
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        code = cli.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.ClickException as err:
        err.show()
        raise SystemExit(EXIT_ERROR) from err
    except click.Abort as err:
        raise SystemExit(EXIT_ERROR) from err
    except BrokenPipeError:
        exit_on_broken_pipe()
    raise SystemExit(code or EXIT_SUCCESS)
