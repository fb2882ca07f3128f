"""Test doubles shared by unit and component tests."""

from __future__ import annotations

import pytest


class FakeClipboard:
    """In-memory clipboard backend; ``available=False`` mimics a missing backend."""

    def __init__(self, text: str = "", *, available: bool = True) -> None:
        self.text = text
        self.available = available
        self.copied: list[str] = []

    def set_text(self, text: str) -> bool:
        if not self.available:
            return False
        self.copied.append(text)
        self.text = text
        return True

    def get_text(self) -> str | None:
        return self.text if self.available else None


class ScriptedPrompter:
    """Answer prompts from a fixed script; running out stands for end of input."""

    def __init__(self, *answers: str | None) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self.answers:
            return None
        return self.answers.pop(0)


class RefusingPrompter:
    """Prompter for paths that must never ask."""

    def read_line(self, prompt: str) -> str | None:  # noqa: PLR6301
        pytest.fail(f"unexpected prompt: {prompt!r}")
