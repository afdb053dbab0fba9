"""File scanner service implementation."""

import os
from pathlib import Path
from typing import Iterator, List, Union

from ...infrastructure.logging import LoggerMixin
from ...utils import ConfigurationError, TraversalError, is_hidden_file
from ..interfaces import IFileScanner, IPathMatcher
from ..models import FileInfo


class FileScanner(IFileScanner, LoggerMixin):
    """File scanner service implementation.

    Walks the tree depth-first, visiting the entries of every directory in
    name order. Hidden entries are skipped together with everything below
    them, and symlinked directories are never descended into.
    """

    def walk(self, root: str) -> Iterator[str]:
        """Lazily yield regular files under a directory.

        Args:
            root: Directory to traverse.

        Returns:
            Iterator over file paths, joined onto ``root`` as given, in deterministic order.

        Raises:
            ConfigurationError: If the root is not a readable directory.
            TraversalError: If an entry cannot be read.
        """
        if not os.path.exists(root):
            raise ConfigurationError(f"Base directory does not exist: {root!r}")

        if not os.path.isdir(root):
            raise ConfigurationError(f"Base path is not a directory: {root!r}")

        if not os.access(root, os.R_OK | os.X_OK):
            raise ConfigurationError(f"Base directory is not readable: {root!r}")

        self.logger.info(f"Scanning directory: {root}")
        return self._walk(root)

    def iter_matches(self, matcher: IPathMatcher) -> Iterator[FileInfo]:
        """Lazily yield files under the matcher's root that it selects.

        Args:
            matcher: Path matcher.

        Returns:
            Iterator over selected files.

        Raises:
            ConfigurationError: If the root is not a readable directory.
            TraversalError: If an entry cannot be read.
        """
        return self._iter_matches(self.walk(matcher.root), matcher)

    def should_ignore_file(self, path: Union[str, Path]) -> bool:
        """Check if an entry should be excluded from traversal.

        Args:
            path: Path to check.

        Returns:
            True if the entry is hidden.
        """
        return is_hidden_file(path)

    def _iter_matches(self, paths: Iterator[str], matcher: IPathMatcher) -> Iterator[FileInfo]:
        for path in paths:
            if matcher.matches(path):
                self.logger.debug(f"Matched file: {path}")
                yield FileInfo.from_path(Path(path))

    def _walk(self, directory: str) -> Iterator[str]:
        """Recursively walk a directory.

        Args:
            directory: Directory being walked.
        """
        for entry in self._sorted_entries(directory):
            if self.should_ignore_file(entry.name):
                continue

            try:
                if entry.is_dir(follow_symlinks=False):
                    yield from self._walk(entry.path)
                elif entry.is_file():
                    yield entry.path
                elif entry.is_symlink() and not os.path.exists(entry.path):
                    raise TraversalError(f"Broken symbolic link: {entry.path}")
            except OSError as e:
                raise TraversalError(f"Failed to read entry {entry.path}: {e}") from e

    def _sorted_entries(self, directory: str) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as entries:
                return sorted(entries, key=lambda entry: entry.name)
        except OSError as e:
            raise TraversalError(f"Failed to read directory {directory}: {e}") from e
