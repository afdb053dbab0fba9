"""File system and path utilities."""

from datetime import datetime
from pathlib import Path
from typing import Union

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def remove_trailing_slash(value: str) -> str:
    """Remove a single trailing slash.

    Args:
        value: Path string.

    Returns:
        Path string without one trailing ``/``.
    """
    return value[:-1] if value.endswith("/") else value


def remove_leading_slash(value: str) -> str:
    """Remove a single leading slash.

    Args:
        value: Pattern string.

    Returns:
        Pattern string without one leading ``/``.
    """
    return value[1:] if value.startswith("/") else value


def normalize_base(base: str) -> str:
    """Normalize the base directory used as traversal root."""
    return remove_trailing_slash(base)


def build_anchored_glob(base: str, pattern: str) -> str:
    """Anchor a relative glob pattern to a base directory.

    Args:
        base: Base directory as given by the user.
        pattern: Glob pattern relative to the base.

    Returns:
        Glob expression matching full paths under the base.
    """
    return f"{normalize_base(base)}/{remove_leading_slash(pattern)}"


def is_hidden_file(path: Union[str, Path]) -> bool:
    """Check if a file or directory is hidden.

    Args:
        path: Path to check.

    Returns:
        True if the final path segment starts with a dot.
    """
    return Path(path).name.startswith(".")


def build_csv_path(
    directory: Path,
    timestamp: datetime,
    prefix: str = "media-stats",
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> Path:
    """Build the timestamped CSV report path.

    Args:
        directory: Directory the report is written to.
        timestamp: Run start time.
        prefix: File name prefix.
        timestamp_format: strftime format for the timestamp part.

    Returns:
        Path such as ``<directory>/media-stats_2024-01-31_12-00-00.csv``.
    """
    return directory / f"{prefix}_{timestamp.strftime(timestamp_format)}.csv"
