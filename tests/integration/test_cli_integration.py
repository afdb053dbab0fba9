"""CLI integration tests."""

import csv
import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from media_stats import __version__
from media_stats.cli import cli
from media_stats.core.models import REPORT_HEADER


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def probed_tree(media_tree, fake_ffprobe, probe_payload):
    """Media tree whose visible videos have probe fixtures."""
    fake_ffprobe.add("a.mp4", probe_payload(audio=("en",), subtitles=()))
    fake_ffprobe.add(
        "c.mp4",
        probe_payload(width=1280, height=720, codec="hevc", audio=("en", "fr"), subtitles=("de",)),
    )
    return media_tree


def _invoke(runner, config_file, *args):
    return runner.invoke(cli, ["--config", str(config_file), *args])


def test_cli_reports_top_level_matches(runner, integration_config, probed_tree):
    """Test the console report for a non-recursive pattern."""
    result = _invoke(runner, integration_config, "--base", str(probed_tree), "--pattern", "*.mp4")

    assert result.exit_code == 0, result.output
    assert "Searching for files..." in result.output
    assert "a.mp4" in result.output
    assert "c.mp4" not in result.output
    assert ".b.mp4" not in result.output
    assert "Total files found: 1" in result.output
    assert "Done in" in result.output
    assert "CSV file written to" not in result.output


def test_cli_recursive_pattern(runner, integration_config, probed_tree):
    """Test that ** descends into visible subdirectories only."""
    result = _invoke(runner, integration_config, "-b", str(probed_tree), "-p", "**/*.mp4")

    assert result.exit_code == 0, result.output
    assert "c.mp4" in result.output
    assert "hevc" in result.output
    assert "d.mp4" not in result.output
    assert "Total files found: 2" in result.output


def test_cli_writes_csv_report(runner, integration_config, probed_tree, report_dir):
    """Test CSV output next to the console table."""
    result = _invoke(
        runner,
        integration_config,
        "--base",
        str(probed_tree),
        "--pattern",
        "**/*.mp4",
        "--csv",
        "--output-dir",
        str(report_dir),
    )

    assert result.exit_code == 0, result.output
    reports = list(report_dir.glob("media-stats_*.csv"))
    assert len(reports) == 1
    assert f"CSV file written to: {reports[0]}" in result.output

    with open(reports[0], newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))

    assert rows == [
        list(REPORT_HEADER),
        ["a.mp4", "1920", "1080", "10", "2.00", "h264", "en", ""],
        ["c.mp4", "1280", "720", "10", "2.00", "hevc", "en, fr", "de"],
    ]


def test_cli_csv_defaults_to_working_directory(
    runner, integration_config, probed_tree, report_dir, monkeypatch
):
    """Test that the CSV report lands in the current directory by default."""
    monkeypatch.chdir(report_dir)

    result = _invoke(runner, integration_config, "-b", str(probed_tree), "-p", "*.mp4", "-c")

    assert result.exit_code == 0, result.output
    assert len(list(Path(report_dir).glob("media-stats_*.csv"))) == 1


def test_cli_malformed_pattern(runner, integration_config, probed_tree):
    """Test that a malformed glob is a configuration error."""
    result = _invoke(runner, integration_config, "-b", str(probed_tree), "-p", "[abc")

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_cli_missing_base(runner, integration_config, tmp_path):
    """Test that a missing base folder fails the run."""
    result = _invoke(
        runner, integration_config, "-b", str(tmp_path / "nowhere"), "-p", "*.mp4"
    )

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_cli_probe_failure_aborts(runner, integration_config, media_tree, fake_ffprobe, report_dir):
    """Test that a file ffprobe cannot read aborts the run."""
    result = _invoke(
        runner,
        integration_config,
        "-b",
        str(media_tree),
        "-p",
        "*.mp4",
        "--csv",
        "--output-dir",
        str(report_dir),
    )

    assert result.exit_code == 1
    assert "Error: Failed to get media info for file" in result.output
    assert "a.mp4" in result.output
    assert "Total files found" not in result.output

    reports = list(report_dir.glob("media-stats_*.csv"))
    assert len(reports) == 1
    assert reports[0].read_text(encoding="utf-8").splitlines() == [",".join(REPORT_HEADER)]


def test_cli_missing_dimensions(runner, integration_config, media_tree, fake_ffprobe, probe_payload):
    """Test fatal and skipped handling of files without dimensions."""
    fake_ffprobe.add("a.mp4", probe_payload(width=None, height=None))
    fake_ffprobe.add("c.mp4", probe_payload())

    fatal = _invoke(runner, integration_config, "-b", str(media_tree), "-p", "**/*.mp4")

    assert fatal.exit_code == 1
    assert "No stream exposes" in fatal.output

    skipped = _invoke(
        runner,
        integration_config,
        "-b",
        str(media_tree),
        "-p",
        "**/*.mp4",
        "--skip-missing-dimensions",
    )

    assert skipped.exit_code == 0, skipped.output
    assert "Total files found: 1" in skipped.output
    assert "Files skipped without dimensions: 1" in skipped.output


def test_cli_missing_ffprobe(runner, tmp_path, media_tree):
    """Test that an unavailable ffprobe fails before traversal."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(f"probe:\n  ffprobe_bin: {tmp_path / 'missing-ffprobe'}\n")

    result = _invoke(runner, config_file, "-b", str(media_tree), "-p", "*.mp4")

    assert result.exit_code == 1
    assert "✗" in result.output
    assert "Prerequisites not met" in result.output


def test_cli_requires_base_and_pattern(runner):
    """Test that both options are mandatory."""
    result = runner.invoke(cli, ["--pattern", "*.mp4"])

    assert result.exit_code == 2
    assert "--base" in result.output


def test_cli_version(runner):
    """Test the version option."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.integration
def test_cli_help():
    """Test CLI help command."""
    result = subprocess.run(
        [sys.executable, "-m", "media_stats.cli", "--help"],
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent.parent,
    )

    assert result.returncode == 0
    assert "--base" in result.stdout
    assert "--pattern" in result.stdout
    assert "--csv" in result.stdout


def test_cli_announces_csv_before_table(runner, integration_config, probed_tree, report_dir):
    """Test that the CSV path is printed before the console table."""
    result = _invoke(
        runner,
        integration_config,
        "-b",
        str(probed_tree),
        "-p",
        "*.mp4",
        "--csv",
        "--output-dir",
        str(report_dir),
    )

    assert result.exit_code == 0, result.output
    assert result.output.index("CSV file written to") < result.output.index("a.mp4")
    assert result.output.index("a.mp4") < result.output.index("Total files found: 1")


def test_cli_unopenable_log_file(runner, tmp_path, media_tree):
    """Test that a log file that cannot be opened is reported as a configuration error."""
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("")
    config_file = tmp_path / "config.yaml"
    config_file.write_text(f"logging:\n  file: {blocker / 'media-stats.log'}\n")

    result = _invoke(runner, config_file, "-b", str(media_tree), "-p", "*.mp4")

    assert result.exit_code == 1
    assert "Configuration error: Cannot open log file" in result.output
