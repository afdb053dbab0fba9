"""Report sink implementations."""

import csv
from pathlib import Path
from typing import IO, Any, Optional

from rich.console import Console
from rich.table import Table

from ...infrastructure.logging import LoggerMixin
from ...utils import SinkError
from ..interfaces import IReportSink
from ..models import REPORT_HEADER, ReportRow


class ConsoleTableSink(IReportSink, LoggerMixin):
    """Collects rows into a rich table printed when the sink is closed."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize console table sink.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self._console = console or Console()
        self._table: Optional[Table] = None

    @property
    def row_count(self) -> int:
        """Number of rows collected so far."""
        return self._table.row_count if self._table is not None else 0

    def open(self) -> None:
        """Create the table with the report header."""
        self._table = Table(*REPORT_HEADER)

    def write_row(self, row: ReportRow) -> None:
        """Append a row to the table."""
        if self._table is None:
            raise SinkError("Console table sink is not open")
        self._table.add_row(*row.as_cells())

    def close(self) -> None:
        """Print the table."""
        if self._table is None:
            return
        self._console.print(self._table)
        self._table = None

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Print the table only when the run completed."""
        if exc_type is None:
            self.close()
        else:
            self._table = None


class CsvReportSink(IReportSink, LoggerMixin):
    """Writes rows to a CSV file as they arrive.

    Each row is flushed immediately, so a run aborted by a fatal error
    leaves the rows written so far on disk.
    """

    def __init__(self, path: Path):
        """Initialize CSV report sink.

        Args:
            path: CSV file to create. Overwritten if it exists.
        """
        self._path = path
        self._file: Optional[IO[str]] = None
        self._writer: Any = None

    @property
    def path(self) -> Path:
        """CSV file path."""
        return self._path

    def open(self) -> None:
        """Create the CSV file and write the header.

        Raises:
            SinkError: If the file cannot be created.
        """
        try:
            self._file = open(self._path, "w", newline="", encoding="utf-8")
            self._writer = csv.writer(self._file)
            self._writer.writerow(REPORT_HEADER)
            self._file.flush()
        except OSError as e:
            raise SinkError(f"Failed to create csv file {self._path}: {e}") from e
        self.logger.debug(f"Writing CSV report to {self._path}")

    def write_row(self, row: ReportRow) -> None:
        """Append and flush a row.

        Raises:
            SinkError: If the sink is not open or the row cannot be written.
        """
        if self._file is None:
            raise SinkError(f"CSV sink for {self._path} is not open")
        try:
            self._writer.writerow(row.as_cells())
            self._file.flush()
        except OSError as e:
            raise SinkError(f"Failed to write row to csv file {self._path}: {e}") from e

    def close(self) -> None:
        """Flush and close the CSV file.

        Raises:
            SinkError: If pending output cannot be written.
        """
        if self._file is None:
            return
        try:
            self._file.flush()
            self._file.close()
        except OSError as e:
            raise SinkError(f"Failed to flush csv writer for {self._path}: {e}") from e
        finally:
            self._file = None
            self._writer = None

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Close the file, keeping partial output when the run failed."""
        if exc_type is not None:
            self.logger.warning(f"Run aborted, partial CSV report left at {self._path}")
        self.close()
