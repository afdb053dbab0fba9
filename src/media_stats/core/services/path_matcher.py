"""Path matcher service implementation."""

import os
from pathlib import Path
from typing import Union

from ...infrastructure.logging import LoggerMixin
from ...utils import build_anchored_glob, compile_glob, normalize_base
from ..interfaces import IPathMatcher


class PathMatcher(IPathMatcher, LoggerMixin):
    """Matches paths against a glob anchored to a base directory.

    The glob is compiled eagerly so that malformed patterns are reported
    before any traversal starts.
    """

    def __init__(self, base: str, pattern: str):
        """Initialize path matcher.

        Args:
            base: Base directory as given by the user.
            pattern: Glob pattern relative to the base.

        Raises:
            ConfigurationError: If the glob is malformed.
        """
        self._base = base
        self._pattern = pattern
        self._glob = build_anchored_glob(base, pattern)
        self._regex = compile_glob(self._glob)
        # A base of "/" normalizes to "", traversal still needs the filesystem root
        self._root = normalize_base(base) or base
        self.logger.debug(f"Anchored glob {self._glob!r} compiled to {self._regex.pattern!r}")

    @property
    def root(self) -> str:
        """Normalized base directory that traversal starts from."""
        return self._root

    @property
    def glob(self) -> str:
        """Anchored glob expression."""
        return self._glob

    def matches(self, path: Union[str, Path]) -> bool:
        """Check whether a path is selected.

        Args:
            path: Candidate path, compared lexically.

        Returns:
            True if the whole path matches the anchored glob.
        """
        return self._regex.match(os.fspath(path)) is not None

    def __repr__(self) -> str:
        return f"PathMatcher(base={self._base!r}, pattern={self._pattern!r})"
