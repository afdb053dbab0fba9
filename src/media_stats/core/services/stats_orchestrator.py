"""Stats orchestrator service implementation."""

import time
from typing import Callable, List, Optional, Sequence

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import MissingDimensionError
from ..interfaces import (
    IFileScanner,
    IMediaProbe,
    IPathMatcher,
    IReportSink,
    IStatsExtractor,
    IStatsOrchestrator,
)
from ..models import FileInfo, MediaStats, ReportRow, RunSummary


class MediaStatsOrchestrator(IStatsOrchestrator, LoggerMixin):
    """Stats orchestrator service implementation.

    Implements the sequential flow:
    - Walk the base directory, skipping hidden entries
    - For each file matching the anchored glob:
        - Probe it with the external tool
        - Normalize the probe output into media stats
        - Append one row to every sink
    The first failure aborts the run.
    """

    def __init__(
        self,
        config: Config,
        file_scanner: IFileScanner,
        media_probe: IMediaProbe,
        stats_extractor: IStatsExtractor,
    ):
        """Initialize stats orchestrator.

        Args:
            config: Application configuration.
            file_scanner: File scanner service.
            media_probe: Media probe service.
            stats_extractor: Stats extractor service.
        """
        self._config = config
        self._file_scanner = file_scanner
        self._media_probe = media_probe
        self._stats_extractor = stats_extractor

    def run(
        self,
        matcher: IPathMatcher,
        sinks: Sequence[IReportSink],
        on_file: Optional[Callable[[FileInfo], None]] = None,
    ) -> RunSummary:
        """Probe every matching file and write one row per file to each sink.

        Args:
            matcher: Path matcher carrying the traversal root.
            sinks: Opened report sinks.
            on_file: Callback invoked before each file is probed.

        Returns:
            Run summary with the row count and elapsed time.

        Raises:
            MediaStatsError: On the first traversal, probe, extraction or sink failure.
        """
        started = time.monotonic()
        summary = RunSummary()

        self.logger.info(f"Processing {matcher!r}")

        for file_info in self._file_scanner.iter_matches(matcher):
            if on_file is not None:
                on_file(file_info)

            stats = self._process_file(file_info)
            if stats is None:
                summary.skipped += 1
                continue

            row = ReportRow.from_stats(file_info, stats)
            for sink in sinks:
                sink.write_row(row)
            summary.total_files += 1

        summary.elapsed_seconds = time.monotonic() - started

        self.logger.info(
            f"Run completed: {summary.total_files} files reported, "
            f"{summary.skipped} skipped in {summary.elapsed_seconds:.2f}s"
        )

        return summary

    def validate_prerequisites(self) -> List[str]:
        """Validate that all prerequisites are met.

        Returns:
            List of validation errors (empty if all valid).
        """
        return self._media_probe.validate_prerequisites()

    def _process_file(self, file_info: FileInfo) -> Optional[MediaStats]:
        """Probe and extract a single file.

        Args:
            file_info: File to process.

        Returns:
            Media stats, or None if the file was skipped.
        """
        self.logger.debug(f"Probing {file_info.absolute_path}")
        probe_result = self._media_probe.probe(file_info.absolute_path)

        try:
            return self._stats_extractor.extract(probe_result, source=file_info.absolute_path)
        except MissingDimensionError as e:
            if not self._config.processing.skip_missing_dimensions:
                raise
            self.logger.warning(f"Skipping file: {e}")
            return None
