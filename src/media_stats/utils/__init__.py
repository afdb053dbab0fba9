"""Utility functions and classes."""

from .exceptions import (
    ConfigurationError,
    ExtractionError,
    MediaStatsError,
    MissingDimensionError,
    ProbeError,
    SinkError,
    TraversalError,
)
from .file_utils import (
    build_anchored_glob,
    build_csv_path,
    is_hidden_file,
    normalize_base,
    remove_leading_slash,
    remove_trailing_slash,
)
from .glob_utils import compile_glob, translate_glob
from .text_utils import format_elapsed, format_gigabytes, join_languages

__all__ = [
    "MediaStatsError",
    "ConfigurationError",
    "TraversalError",
    "ProbeError",
    "ExtractionError",
    "MissingDimensionError",
    "SinkError",
    "build_anchored_glob",
    "build_csv_path",
    "is_hidden_file",
    "normalize_base",
    "remove_leading_slash",
    "remove_trailing_slash",
    "compile_glob",
    "translate_glob",
    "format_elapsed",
    "format_gigabytes",
    "join_languages",
]
