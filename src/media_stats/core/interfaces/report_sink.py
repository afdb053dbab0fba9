"""Report sink interface."""

from abc import ABC, abstractmethod
from typing import Any

from ..models import ReportRow


class IReportSink(ABC):
    """Interface for report outputs receiving rows one at a time."""

    @abstractmethod
    def open(self) -> None:
        """Prepare the sink and write the header.

        Raises:
            SinkError: If the sink cannot be created.
        """
        pass

    @abstractmethod
    def write_row(self, row: ReportRow) -> None:
        """Append a row.

        Args:
            row: Report row.

        Raises:
            SinkError: If the row cannot be written.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Flush and release the sink.

        Raises:
            SinkError: If pending output cannot be written.
        """
        pass

    def __enter__(self) -> "IReportSink":
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        self.close()
