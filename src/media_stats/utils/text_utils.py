"""Text formatting utilities for report output."""

from typing import Iterable


def format_gigabytes(size_bytes: int) -> str:
    """Format a byte count as decimal gigabytes with two decimals.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Size in GB (1 GB = 1e9 bytes), e.g. ``"2.00"``.
    """
    return f"{size_bytes / 1e9:.2f}"


def join_languages(languages: Iterable[str]) -> str:
    """Join language codes for a single report cell."""
    return ", ".join(languages)


def format_elapsed(seconds: float) -> str:
    """Format an elapsed duration in a human readable form.

    Args:
        seconds: Elapsed time in seconds.

    Returns:
        Text such as ``"3 seconds"``, ``"2 minutes"`` or ``"1 hour"``.
    """
    units = (("hour", 3600), ("minute", 60), ("second", 1))
    for name, size in units:
        if seconds >= size:
            value = int(seconds // size)
            return f"{value} {name}" + ("" if value == 1 else "s")
    return f"{max(int(seconds * 1000), 0)} milliseconds"
