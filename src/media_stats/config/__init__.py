"""Configuration management module."""

from .config_manager import ConfigManager
from .models import Config, LoggingConfig, ProbeConfig, ProcessingConfig, ReportConfig

__all__ = [
    "ConfigManager",
    "Config",
    "LoggingConfig",
    "ProbeConfig",
    "ProcessingConfig",
    "ReportConfig",
]
