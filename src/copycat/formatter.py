"""Output formatting helpers."""

from .constants import SIZE_STEP, SIZE_UNITS


def format_size(num_bytes: float) -> str:
    """Return ``num_bytes`` as a human-readable size such as ``"1.5 KB"``."""
    size = float(num_bytes)
    unit = 0
    while size >= SIZE_STEP and unit < len(SIZE_UNITS) - 1:
        size /= SIZE_STEP
        unit += 1
    return f"{size:.1f} {SIZE_UNITS[unit]}"
