"""Media probe and stats extractor interfaces."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..models import MediaStats, RawProbeResult


class IMediaProbe(ABC):
    """Interface for external media probing tools."""

    @abstractmethod
    def probe(self, path: Path) -> RawProbeResult:
        """Probe a media file.

        Args:
            path: File to probe.

        Returns:
            Structured probe output.

        Raises:
            ProbeError: If the tool cannot be run or its output is unusable.
        """
        pass

    @abstractmethod
    def validate_prerequisites(self) -> List[str]:
        """Validate that the probing tool is usable.

        Returns:
            List of validation errors (empty if all valid).
        """
        pass


class IStatsExtractor(ABC):
    """Interface for normalizing probe output."""

    @abstractmethod
    def extract(self, probe_result: RawProbeResult, source: Optional[Path] = None) -> MediaStats:
        """Normalize probe output into media stats.

        Args:
            probe_result: Raw probe output.
            source: File the output belongs to, used in error messages.

        Returns:
            Normalized media stats.

        Raises:
            ExtractionError: If mandatory fields are missing or malformed.
        """
        pass
