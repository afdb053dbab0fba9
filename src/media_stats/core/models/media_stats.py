"""Normalized media statistics models."""

from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ...utils.text_utils import format_gigabytes, join_languages
from .file_info import FileInfo

NOT_AVAILABLE = "N/A"

REPORT_HEADER: Tuple[str, ...] = (
    "Filename",
    "Width",
    "Height",
    "Duration (min)",
    "Size (GB)",
    "Codec",
    "Audio",
    "Subtitles",
)


class MediaStats(BaseModel):
    """Normalized technical metadata for one media file."""

    width: int = Field(..., description="Width of the first stream exposing one")
    height: int = Field(..., description="Height of the first stream exposing one")
    duration_minutes: str = Field(default="0", description="Duration rounded to whole minutes")
    file_size_bytes: int = Field(default=0, ge=0, description="File size in bytes")
    codec_name: str = Field(default=NOT_AVAILABLE, description="Codec of the first video stream")
    audio_languages: Tuple[str, ...] = Field(
        default_factory=tuple, description="One language per audio stream, in stream order"
    )
    subtitles: FrozenSet[str] = Field(
        default_factory=frozenset, description="Distinct subtitle languages"
    )

    model_config = ConfigDict(frozen=True)


class ReportRow(BaseModel):
    """One report line, shared by every output sink."""

    file_name: str
    width: int
    height: int
    duration_minutes: str
    size_gb: str
    codec_name: str
    audio: str
    subtitles: str

    @classmethod
    def from_stats(cls, file_info: FileInfo, stats: MediaStats) -> "ReportRow":
        """Build a report row, converting units for display."""
        return cls(
            file_name=file_info.file_name,
            width=stats.width,
            height=stats.height,
            duration_minutes=stats.duration_minutes,
            size_gb=format_gigabytes(stats.file_size_bytes),
            codec_name=stats.codec_name,
            audio=join_languages(stats.audio_languages),
            subtitles=join_languages(sorted(stats.subtitles)),
        )

    def as_cells(self) -> Tuple[str, ...]:
        """Get the row as display strings in header order."""
        return (
            self.file_name,
            str(self.width),
            str(self.height),
            self.duration_minutes,
            self.size_gb,
            self.codec_name,
            self.audio,
            self.subtitles,
        )

    model_config = ConfigDict(frozen=True)


class RunSummary(BaseModel):
    """Summary of a completed run."""

    total_files: int = Field(default=0, description="Rows emitted")
    skipped: int = Field(default=0, description="Files skipped for missing dimensions")
    elapsed_seconds: float = Field(default=0.0, description="Wall-clock duration of the run")
    csv_path: Optional[str] = Field(default=None, description="CSV report written, if any")
