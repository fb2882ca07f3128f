"""In-memory payload moved between sources and sinks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Content:
    """Raw bytes read from a file, the clipboard or stdin.

    The payload is kept as ``bytes`` end to end so embedded NUL bytes never
    truncate it. Text is only produced at the clipboard boundary.
    """

    data: bytes = b""

    @classmethod
    def from_text(cls, text: str) -> Content:
        return cls(text.encode("utf-8"))

    @property
    def text(self) -> str:
        """Return the payload decoded as UTF-8, replacing undecodable bytes."""
        return self.data.decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self.data)

    def __bool__(self) -> bool:
        return bool(self.data)
