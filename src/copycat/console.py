"""User-facing status messages rendered through :mod:`rich`."""

from __future__ import annotations

from rich.console import Console as RichConsole


class Console:
    """Thin wrapper keeping status output off the payload path.

    Markup and highlighting are disabled so file names containing brackets
    print verbatim. Consoles are created per call so a replaced
    ``sys.stdout``/``sys.stderr`` is always honoured.
    """

    @staticmethod
    def _console(*, stderr: bool) -> RichConsole:
        return RichConsole(stderr=stderr, markup=False, highlight=False, soft_wrap=True, emoji=False)

    def info(self, message: str) -> None:
        self._console(stderr=False).print(message)

    def success(self, message: str) -> None:
        self.info(f"✓ {message}")

    def warn(self, message: str) -> None:
        self._console(stderr=False).print(message, style="yellow")

    def error(self, message: str) -> None:
        self._console(stderr=True).print(message, style="red")
