"""Line-count bounded slices of :class:`~copycat.content.Content`."""

from __future__ import annotations

from .content import Content

NEWLINE = b"\n"


def first_n(content: Content, n: int) -> Content | None:
    """Return the first ``n`` lines of ``content``.

    The result ends on the n-th newline (inclusive). When fewer than ``n``
    newlines exist the whole content is returned. ``n <= 0`` returns ``None``
    so the caller keeps the original.
    """
    if n <= 0:
        return None
    data = content.data
    pos = -1
    for _ in range(n):
        pos = data.find(NEWLINE, pos + 1)
        if pos == -1:
            return Content(data)
    return Content(data[: pos + 1])


def last_n(content: Content, n: int) -> Content | None:
    """Return the last ``n`` lines of ``content``.

    A newline terminating the content belongs to the last line, so the window
    starts right after the (L-n)-th newline where L is the line count. When
    there are fewer than ``n`` lines the whole content is returned. ``n <= 0``
    returns ``None``.
    """
    if n <= 0:
        return None
    data = content.data
    end = len(data) - 1 if data.endswith(NEWLINE) else len(data)
    for _ in range(n):
        end = data.rfind(NEWLINE, 0, end)
        if end == -1:
            return Content(data)
    return Content(data[end + 1 :])


def apply_window(content: Content, *, lines: int, tail: int) -> Content:
    """Apply ``first_n`` when ``lines`` is set, otherwise ``last_n``."""
    if lines > 0:
        limited = first_n(content, lines)
    else:
        limited = last_n(content, tail)
    return content if limited is None else limited
