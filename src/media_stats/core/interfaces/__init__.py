"""Core interfaces for dependency injection."""

from .file_scanner import IFileScanner, IPathMatcher
from .media_probe import IMediaProbe, IStatsExtractor
from .report_sink import IReportSink
from .stats_orchestrator import IStatsOrchestrator

__all__ = [
    "IFileScanner",
    "IPathMatcher",
    "IMediaProbe",
    "IStatsExtractor",
    "IReportSink",
    "IStatsOrchestrator",
]
