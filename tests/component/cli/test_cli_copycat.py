from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from copycat import __version__
from copycat.cli import cli
from copycat.cli import root as cli_root
from copycat.cli.root import main
from tests.support import FakeClipboard

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.component


@pytest.fixture
def fake_clipboard(monkeypatch: pytest.MonkeyPatch) -> FakeClipboard:
    fake = FakeClipboard()
    monkeypatch.setattr(cli_root, "build_backend", lambda _cfg: fake)
    monkeypatch.setattr(cli_root, "stdin_is_tty", lambda: True)
    return fake


@pytest.fixture
def piped(monkeypatch: pytest.MonkeyPatch, fake_clipboard: FakeClipboard) -> FakeClipboard:
    monkeypatch.setattr(cli_root, "stdin_is_tty", lambda: False)
    return fake_clipboard


def test_help_lists_sections() -> None:
    res = CliRunner().invoke(cli, ["-h"])
    assert res.exit_code == 0
    assert f"Copy v{__version__} - File/Clipboard/Pipe Utility" in res.output
    for section in ("Usage:", "Operations:", "Options:", "Exit Codes:"):
        assert section in res.output
    assert "--lines" in res.output
    assert "User cancelled" in res.output


def test_version_flag() -> None:
    res = CliRunner().invoke(cli, ["-v"])
    assert res.exit_code == 0
    assert res.output.strip() == f"Copy v{__version__}"


def test_copy_first_lines(fake_clipboard: FakeClipboard, notes: Path) -> None:
    res = CliRunner().invoke(cli, ["-l", "2", str(notes)])
    assert res.exit_code == 0, res.output
    assert fake_clipboard.copied == ["line1\nline2\n"]
    assert "Copied 12 characters" in res.output


def test_tail_to_stdout(fake_clipboard: FakeClipboard, notes: Path) -> None:
    res = CliRunner().invoke(cli, ["-o", "-t", "1", str(notes)])
    assert res.exit_code == 0
    assert res.stdout_bytes == b"line3\n"
    assert fake_clipboard.copied == []


def test_last_mode_flag_wins(fake_clipboard: FakeClipboard, notes: Path) -> None:
    fake_clipboard.text = "from clipboard"
    res = CliRunner().invoke(cli, ["-p", "-c", str(notes)])
    assert res.exit_code == 0
    assert fake_clipboard.copied == ["line1\nline2\nline3\n"]

    res = CliRunner().invoke(cli, ["-c", "-d", "-f", str(notes)])
    assert res.exit_code == 0
    assert notes.read_bytes() == b""


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_paste_overwrite_declined(fake_clipboard: FakeClipboard, notes: Path) -> None:
    fake_clipboard.text = "new"
    res = CliRunner().invoke(cli, ["-p", str(notes)], input="n\n")
    assert res.exit_code == 2
    assert "Do you want to overwrite it? [y/N]:" in res.output
    assert "Operation cancelled." in res.output
    assert notes.read_bytes() == b"line1\nline2\nline3\n"


def test_paste_overwrite_accepted(fake_clipboard: FakeClipboard, notes: Path) -> None:
    fake_clipboard.text = "new"
    res = CliRunner().invoke(cli, ["-p", str(notes)], input="y\n")
    assert res.exit_code == 0
    assert notes.read_bytes() == b"new"


def test_paste_force_overwrites(fake_clipboard: FakeClipboard, notes: Path) -> None:
    fake_clipboard.text = "new"
    res = CliRunner().invoke(cli, ["-p", "-f", str(notes)])
    assert res.exit_code == 0
    assert notes.read_bytes() == b"new"


def test_paste_empty_clipboard(fake_clipboard: FakeClipboard) -> None:
    res = CliRunner().invoke(cli, ["-p"])
    assert res.exit_code == 0
    assert "Clipboard is empty. Nothing to paste." in res.output


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_piped_input_goes_to_clipboard(piped: FakeClipboard) -> None:
    res = CliRunner().invoke(cli, [], input="piped text\n")
    assert res.exit_code == 0
    assert piped.copied == ["piped text\n"]


def test_stdin_strip_newline_to_stdout(fake_clipboard: FakeClipboard) -> None:
    res = CliRunner().invoke(cli, ["-s", "-n", "-o"], input="hi\n\n")
    assert res.exit_code == 0
    assert res.stdout_bytes == b"hi"
    assert fake_clipboard.copied == []


def test_stdin_appends_to_file(fake_clipboard: FakeClipboard, notes: Path) -> None:
    res = CliRunner().invoke(cli, ["-s", "-p", "-a", str(notes)], input="line4")
    assert res.exit_code == 0
    assert notes.read_bytes() == b"line1\nline2\nline3\n\nline4"


def test_delete_requires_file(fake_clipboard: FakeClipboard) -> None:
    res = CliRunner().invoke(cli, ["-d"])
    assert res.exit_code == 1
    assert "File name required for delete operation" in res.output


def test_assume_yes_environment(fake_clipboard: FakeClipboard, notes: Path) -> None:
    res = CliRunner().invoke(cli, ["-d", str(notes)], env={"COPYCAT_ASSUME_YES": "1"})
    assert res.exit_code == 0
    assert notes.read_bytes() == b""
    assert "Bytes freed: 18.0 B" in res.output


def test_max_size_flag_enforced(fake_clipboard: FakeClipboard, notes: Path) -> None:
    res = CliRunner().invoke(cli, ["-m", "3", "-f", str(notes)])
    assert res.exit_code == 1
    assert "File too large" in res.output
    assert fake_clipboard.copied == []


def test_max_size_from_config_file(fake_clipboard: FakeClipboard, notes: Path, tmp_path: Path) -> None:
    cfg = tmp_path / "copycat.toml"
    cfg.write_text("max_size = 4\n", encoding="utf-8")
    res = CliRunner().invoke(cli, ["--config", str(cfg), "-f", str(notes)])
    assert res.exit_code == 1
    assert "File too large" in res.output

    res = CliRunner().invoke(cli, ["--config", str(cfg), "-m", "100", str(notes)])
    assert res.exit_code == 0


def test_missing_explicit_config(fake_clipboard: FakeClipboard, notes: Path, tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"
    res = CliRunner().invoke(cli, ["--config", str(missing), str(notes)])
    assert res.exit_code == 1
    assert "missing.toml" in res.output


def test_missing_file(fake_clipboard: FakeClipboard, tmp_path: Path) -> None:
    res = CliRunner().invoke(cli, [str(tmp_path / "absent.txt")])
    assert res.exit_code == 1
    assert "does not exist" in res.output


def test_main_exits_one_on_bad_option_value(fake_clipboard: FakeClipboard) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-l", "abc", "x"])
    assert excinfo.value.args[0] == 1


def test_main_returns_driver_exit_code(fake_clipboard: FakeClipboard) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-d"])
    assert excinfo.value.args[0] == 1
