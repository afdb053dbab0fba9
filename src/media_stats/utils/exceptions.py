"""Custom exceptions for the application."""


class MediaStatsError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(MediaStatsError):
    """Invalid configuration, base directory or glob pattern."""

    pass


class TraversalError(MediaStatsError):
    """Directory entry could not be read during traversal."""

    pass


class ProbeError(MediaStatsError):
    """External probe could not be run or returned unusable output."""

    pass


class ExtractionError(MediaStatsError):
    """Probe output could not be normalized into media stats."""

    pass


class MissingDimensionError(ExtractionError):
    """No stream in the probe output exposes a width or a height."""

    pass


class SinkError(MediaStatsError):
    """Report sink could not be created or written."""

    pass
