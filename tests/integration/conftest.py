"""Integration test fixtures and configuration."""

import logging

import pytest
import yaml


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging setup performed by CLI runs."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def integration_config(tmp_path, fake_ffprobe):
    """Create integration test configuration using the fake ffprobe."""
    config_content = {
        "probe": {"ffprobe_bin": str(fake_ffprobe.path)},
        "report": {
            "csv_prefix": "media-stats",
            "timestamp_format": "%Y-%m-%d_%H-%M-%S",
        },
        "processing": {"skip_missing_dimensions": False},
        "logging": {
            "level": "WARNING",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    }

    config_file = tmp_path / "integration_config.yaml"
    with open(config_file, "w") as f:
        yaml.dump(config_content, f, default_flow_style=False, indent=2)

    return config_file


@pytest.fixture
def report_dir(tmp_path):
    """Directory receiving CSV reports."""
    path = tmp_path / "reports"
    path.mkdir()
    return path
