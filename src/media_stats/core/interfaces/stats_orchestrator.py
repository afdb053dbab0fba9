"""Stats orchestrator interface."""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from ..models import FileInfo, RunSummary
from .file_scanner import IPathMatcher
from .report_sink import IReportSink


class IStatsOrchestrator(ABC):
    """Interface for running the discovery-and-extraction pipeline."""

    @abstractmethod
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
        pass

    @abstractmethod
    def validate_prerequisites(self) -> List[str]:
        """Validate that all prerequisites are met.

        Returns:
            List of validation errors (empty if all valid).
        """
        pass
