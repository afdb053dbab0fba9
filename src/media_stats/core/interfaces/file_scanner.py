"""File scanner interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Union

from ..models import FileInfo


class IPathMatcher(ABC):
    """Interface for deciding whether a path is selected."""

    @property
    @abstractmethod
    def root(self) -> str:
        """Normalized base directory that traversal starts from."""
        pass

    @abstractmethod
    def matches(self, path: Union[str, Path]) -> bool:
        """Check whether a path is selected.

        Args:
            path: Candidate path.

        Returns:
            True if the path matches the anchored glob.
        """
        pass


class IFileScanner(ABC):
    """Interface for file discovery services."""

    @abstractmethod
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
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def should_ignore_file(self, path: Union[str, Path]) -> bool:
        """Check if an entry should be excluded from traversal.

        Args:
            path: Path to check.

        Returns:
            True if the entry should be ignored.
        """
        pass
