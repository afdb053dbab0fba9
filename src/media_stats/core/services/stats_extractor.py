"""Stats extractor service implementation."""

import math
import re
from pathlib import Path
from typing import Iterator, List, Optional

from ...infrastructure.logging import LoggerMixin
from ...utils import ExtractionError, MissingDimensionError
from ..interfaces import IStatsExtractor
from ..models import NOT_AVAILABLE, MediaStats, ProbeStream, RawProbeResult

_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")
_MAX_FILE_SIZE = 2**64 - 1


class StatsExtractor(IStatsExtractor, LoggerMixin):
    """Normalizes raw probe output into :class:`MediaStats`.

    Resolution rules, all applied with a forward scan over the streams in
    probe order:

    - width and height come from the first stream exposing each; a file
      where no stream exposes one of them is rejected;
    - the codec is the one of the first ``video`` stream, ``"N/A"`` if there
      is none or it has no codec name;
    - audio languages keep one entry per audio stream, subtitle languages
      are collapsed into a set; untagged streams count as ``"N/A"``;
    - a missing duration means ``"0"`` minutes, a malformed one is rejected;
    - a missing, malformed or out-of-range size means ``0`` bytes.
    """

    def extract(self, probe_result: RawProbeResult, source: Optional[Path] = None) -> MediaStats:
        """Normalize probe output into media stats.

        Args:
            probe_result: Raw probe output.
            source: File the output belongs to, used in error messages.

        Returns:
            Normalized media stats.

        Raises:
            MissingDimensionError: If no stream exposes a width or a height.
            ExtractionError: If the duration is present but malformed.
        """
        label = str(source) if source is not None else probe_result.format.filename or "<unknown>"
        streams = probe_result.streams

        height = self._first_dimension(streams, "height", label)
        width = self._first_dimension(streams, "width", label)

        stats = MediaStats(
            width=width,
            height=height,
            duration_minutes=self._duration_minutes(probe_result.format.duration, label),
            file_size_bytes=self._file_size_bytes(probe_result.format.size),
            codec_name=self._video_codec(streams),
            audio_languages=tuple(self._languages(streams, "audio")),
            subtitles=frozenset(self._languages(streams, "subtitle")),
        )
        self.logger.debug(f"Extracted stats for {label}: {stats}")
        return stats

    @staticmethod
    def _first_dimension(streams: List[ProbeStream], attribute: str, label: str) -> int:
        value = next(
            (getattr(s, attribute) for s in streams if getattr(s, attribute) is not None), None
        )
        if value is None:
            raise MissingDimensionError(f"No stream exposes a {attribute} in file: {label}")
        return value

    @staticmethod
    def _duration_minutes(raw_duration: Optional[str], label: str) -> str:
        if raw_duration is None:
            return "0"

        try:
            seconds = float(raw_duration.strip())
        except ValueError as e:
            raise ExtractionError(f"Malformed duration {raw_duration!r} in file: {label}") from e

        if not math.isfinite(seconds) or seconds < 0:
            raise ExtractionError(f"Invalid duration {raw_duration!r} in file: {label}")

        if seconds == 0:
            return "0"

        # Fixed-point formatting rounds half to even
        return f"{seconds / 60:.0f}"

    @staticmethod
    def _file_size_bytes(raw_size: Optional[str]) -> int:
        if raw_size is None:
            return 0
        text = raw_size.strip()
        if not _UNSIGNED_INT_RE.fullmatch(text):
            return 0
        size = int(text)
        return size if size <= _MAX_FILE_SIZE else 0

    @staticmethod
    def _video_codec(streams: List[ProbeStream]) -> str:
        video = next((s for s in streams if s.codec_type == "video"), None)
        if video is None or not video.codec_name:
            return NOT_AVAILABLE
        return video.codec_name

    @staticmethod
    def _languages(streams: List[ProbeStream], codec_type: str) -> Iterator[str]:
        for stream in streams:
            if stream.codec_type == codec_type:
                yield stream.language if stream.language is not None else NOT_AVAILABLE
