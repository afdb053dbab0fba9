"""Core service implementations."""

from .ffprobe_service import FFprobeService
from .file_scanner import FileScanner
from .path_matcher import PathMatcher
from .report_sinks import ConsoleTableSink, CsvReportSink
from .stats_extractor import StatsExtractor
from .stats_orchestrator import MediaStatsOrchestrator

__all__ = [
    "FFprobeService",
    "FileScanner",
    "PathMatcher",
    "StatsExtractor",
    "ConsoleTableSink",
    "CsvReportSink",
    "MediaStatsOrchestrator",
]
