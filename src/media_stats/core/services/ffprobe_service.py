"""ffprobe service implementation."""

import json
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import ProbeError
from ..interfaces import IMediaProbe
from ..models import RawProbeResult

STDERR_EXCERPT_CHARS = 500


class FFprobeService(IMediaProbe, LoggerMixin):
    """Media probe backed by the ``ffprobe`` executable.

    Runs one ``ffprobe`` process per file and waits for it to finish. No
    timeout is applied.
    """

    def __init__(self, config: Config):
        """Initialize ffprobe service.

        Args:
            config: Application configuration.
        """
        self._ffprobe_bin = config.probe.ffprobe_bin
        self._resolved_bin: Optional[str] = None

    def probe(self, path: Path) -> RawProbeResult:
        """Probe a media file.

        Args:
            path: File to probe.

        Returns:
            Structured probe output.

        Raises:
            ProbeError: If ffprobe cannot be run, fails, or prints unusable output.
        """
        cmd = [
            self._resolve_binary(),
            "-v",
            "error",
            "-print_format",
            "json",
            "-show_format",
            "-show_streams",
            str(path),
        ]
        self.logger.debug(f"Running: {' '.join(cmd)}")

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise ProbeError(f"Failed to run {cmd[0]} for file: {path}: {e}") from e

        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()[:STDERR_EXCERPT_CHARS]
            message = f"Failed to get media info for file: {path} (exit code {proc.returncode})"
            if stderr:
                message = f"{message}: {stderr}"
            raise ProbeError(message)

        try:
            data = json.loads(proc.stdout or "")
        except json.JSONDecodeError as e:
            raise ProbeError(f"ffprobe produced invalid JSON for file: {path}: {e}") from e

        try:
            return RawProbeResult.model_validate(data)
        except ValidationError as e:
            raise ProbeError(f"Unexpected ffprobe output for file: {path}: {e}") from e

    def validate_prerequisites(self) -> List[str]:
        """Validate that ffprobe is available.

        Returns:
            List of validation errors (empty if all valid).
        """
        try:
            self._resolve_binary()
        except ProbeError as e:
            return [str(e)]
        return []

    def _resolve_binary(self) -> str:
        """Resolve the configured executable to an absolute path.

        Raises:
            ProbeError: If the executable cannot be found.
        """
        if self._resolved_bin is None:
            resolved = shutil.which(self._ffprobe_bin)
            if not resolved:
                raise ProbeError(
                    f"{self._ffprobe_bin} not found; install ffmpeg or set probe.ffprobe_bin"
                )
            self._resolved_bin = resolved
            self.logger.debug(f"Using ffprobe at {resolved}")
        return self._resolved_bin
