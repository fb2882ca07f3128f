from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ._workspace_path import ensure_workspace_packages_importable

ensure_workspace_packages_importable()

from copycat.driver import OperationDriver  # noqa: E402

from .support import FakeClipboard, RefusingPrompter  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path
    from typing import Any


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user configuration and assume-yes settings out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))
    monkeypatch.delenv("COPYCAT_CONFIG_PATH", raising=False)
    monkeypatch.delenv("COPYCAT_ASSUME_YES", raising=False)


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def make_driver(clipboard: FakeClipboard) -> Callable[..., OperationDriver]:
    """Build a driver wired to the fake clipboard; prompts fail unless scripted."""

    def _make(prompter: Any = None, *, interactive: bool = True, **kwargs: Any) -> OperationDriver:
        kwargs.setdefault("backend", clipboard)
        return OperationDriver(prompter=prompter or RefusingPrompter(), interactive=interactive, **kwargs)

    return _make


@pytest.fixture
def notes(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_bytes(b"line1\nline2\nline3\n")
    return path
