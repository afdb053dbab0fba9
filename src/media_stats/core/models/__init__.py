"""Core data models."""

from .file_info import FileInfo
from .media_stats import NOT_AVAILABLE, REPORT_HEADER, MediaStats, ReportRow, RunSummary
from .probe import ProbeFormat, ProbeStream, ProbeTags, RawProbeResult

__all__ = [
    "FileInfo",
    "MediaStats",
    "ReportRow",
    "RunSummary",
    "NOT_AVAILABLE",
    "REPORT_HEADER",
    "RawProbeResult",
    "ProbeStream",
    "ProbeTags",
    "ProbeFormat",
]
