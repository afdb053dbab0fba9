"""Pytest configuration and fixtures."""

import json
import stat
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pytest

from media_stats.config import Config, ConfigManager, ProbeConfig
from media_stats.core.interfaces import IMediaProbe, IReportSink
from media_stats.core.models import RawProbeResult, ReportRow
from media_stats.infrastructure import Container
from media_stats.utils import ProbeError

FAKE_FFPROBE_SCRIPT = """#!/bin/sh
for last; do :; done
name=$(basename "$last")
if [ ! -f "{fixtures}/$name.json" ]; then
  echo "$last: Invalid data found when processing input" >&2
  exit 1
fi
cat "{fixtures}/$name.json"
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: tests that need real ffmpeg tools")


def build_probe_payload(
    width: Optional[int] = 1920,
    height: Optional[int] = 1080,
    codec: Optional[str] = "h264",
    duration: Optional[str] = "600.000000",
    size: Optional[str] = "2000000000",
    audio: Sequence[Optional[str]] = ("en",),
    subtitles: Sequence[Optional[str]] = (),
    filename: Optional[str] = None,
) -> Dict[str, Any]:
    """Build an ffprobe-style JSON payload."""
    streams: List[Dict[str, Any]] = []

    video: Dict[str, Any] = {"index": 0, "codec_type": "video"}
    for key, value in (("codec_name", codec), ("width", width), ("height", height)):
        if value is not None:
            video[key] = value
    streams.append(video)

    for codec_type, codec_name, languages in (
        ("audio", "aac", audio),
        ("subtitle", "subrip", subtitles),
    ):
        for language in languages:
            stream: Dict[str, Any] = {
                "index": len(streams),
                "codec_type": codec_type,
                "codec_name": codec_name,
            }
            if language is not None:
                stream["tags"] = {"language": language, "title": "Track"}
            streams.append(stream)

    fmt: Dict[str, Any] = {"format_name": "mov,mp4,m4a,3gp,3g2,mj2", "nb_streams": len(streams)}
    for key, value in (("filename", filename), ("duration", duration), ("size", size)):
        if value is not None:
            fmt[key] = value

    return {"streams": streams, "format": fmt}


class FakeMediaProbe(IMediaProbe):
    """In-memory media probe keyed by file name."""

    def __init__(self, payloads: Optional[Dict[str, Dict[str, Any]]] = None):
        self.payloads = dict(payloads or {})
        self.calls: List[Path] = []

    def probe(self, path: Path) -> RawProbeResult:
        self.calls.append(Path(path))
        payload = self.payloads.get(Path(path).name)
        if payload is None:
            raise ProbeError(f"Failed to get media info for file: {path}")
        return RawProbeResult.model_validate(payload)

    def validate_prerequisites(self) -> List[str]:
        return []


class RecordingSink(IReportSink):
    """Report sink keeping rows in memory."""

    def __init__(self):
        self.rows: List[ReportRow] = []
        self.opened = False
        self.closed = False

    def open(self) -> None:
        self.opened = True

    def write_row(self, row: ReportRow) -> None:
        self.rows.append(row)

    def close(self) -> None:
        self.closed = True


class FakeFFprobe:
    """Shell script standing in for the ffprobe executable.

    Prints ``<fixtures>/<file name>.json`` for the probed file, or fails like
    ffprobe does on unreadable input when no fixture exists.
    """

    def __init__(self, root: Path):
        self.fixtures = root / "ffprobe-fixtures"
        self.fixtures.mkdir()
        self.path = root / "ffprobe"
        self.path.write_text(FAKE_FFPROBE_SCRIPT.format(fixtures=self.fixtures))
        self.path.chmod(self.path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    def add(self, file_name: str, payload: Dict[str, Any]) -> None:
        self.add_raw(file_name, json.dumps(payload))

    def add_raw(self, file_name: str, output: str) -> None:
        (self.fixtures / f"{file_name}.json").write_text(output)


@pytest.fixture
def probe_payload():
    """Factory for ffprobe-style payloads."""
    return build_probe_payload


@pytest.fixture
def config():
    """Default configuration."""
    return Config()


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file."""
    config_content = """
probe:
  ffprobe_bin: "ffprobe"

report:
  csv_prefix: "media-stats"

processing:
  skip_missing_dimensions: false

logging:
  level: "info"
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file)


@pytest.fixture
def fake_probe():
    """In-memory media probe."""
    return FakeMediaProbe()


@pytest.fixture
def container(config_manager, fake_probe):
    """Create a test container wired to the in-memory probe."""
    container = Container(config_manager)
    container.configure_default_services()
    container.register_instance(IMediaProbe, fake_probe)  # type: ignore
    return container


@pytest.fixture
def recording_sink():
    """In-memory report sink."""
    return RecordingSink()


@pytest.fixture
def make_sink():
    """Factory for in-memory report sinks."""
    return RecordingSink


@pytest.fixture
def fake_ffprobe(tmp_path):
    """Executable fake ffprobe."""
    if sys.platform == "win32":
        pytest.skip("fake ffprobe is a POSIX shell script")
    return FakeFFprobe(tmp_path)


@pytest.fixture
def fake_ffprobe_config(fake_ffprobe):
    """Configuration pointing at the fake ffprobe."""
    return Config(probe=ProbeConfig(ffprobe_bin=str(fake_ffprobe.path)))


@pytest.fixture
def media_tree(tmp_path):
    """Create a small media directory.

    videos/
        .b.mp4
        .hidden/d.mp4
        a.mp4
        notes.txt
        sub/c.mp4
    """
    base = tmp_path / "videos"
    (base / "sub").mkdir(parents=True)
    (base / ".hidden").mkdir()

    for relative in ("a.mp4", ".b.mp4", "sub/c.mp4", ".hidden/d.mp4"):
        (base / relative).write_bytes(b"fake video content")
    (base / "notes.txt").write_text("not a video")

    return base
