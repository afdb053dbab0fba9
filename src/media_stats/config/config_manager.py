"""Configuration management."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from ..utils import ConfigurationError
from .models import Config

CONFIG_ENV_VAR = "MEDIA_STATS_CONFIG"


class ConfigManager:
    """Manages application configuration loading and validation."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file. If None, searches standard locations
                and falls back to built-in defaults.
        """
        self._config_path = config_path
        self._config: Optional[Config] = None

    def load_config(self) -> Config:
        """Load and validate configuration.

        Returns:
            Validated configuration object.

        Raises:
            ConfigurationError: If the file is missing, unparsable or invalid.
        """
        if self._config is not None:
            return self._config

        config_path = self._find_config_file()
        raw_config = self._load_yaml_file(config_path) if config_path else {}

        try:
            self._config = Config(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        return self._config

    def reload_config(self) -> Config:
        """Reload configuration from file.

        Returns:
            Newly loaded configuration object.
        """
        self._config = None
        return self.load_config()

    def get_config(self) -> Config:
        """Get current configuration, loading if necessary.

        Returns:
            Current configuration object.
        """
        if self._config is None:
            return self.load_config()
        return self._config

    @property
    def config_path(self) -> Optional[Path]:
        """Configuration file in use, or None when running on defaults."""
        return self._find_config_file()

    def _search_paths(self) -> List[Path]:
        search_paths = [
            Path.cwd() / "config" / "config.yaml",
            Path.cwd() / "media-stats.yaml",
            Path.home() / ".config" / "media_stats" / "config.yaml",
        ]

        env_config = os.getenv(CONFIG_ENV_VAR)
        if env_config:
            search_paths.insert(0, Path(env_config))

        return search_paths

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in standard locations.

        Returns:
            Path to configuration file, or None if no file exists.

        Raises:
            ConfigurationError: If an explicitly given file does not exist.
        """
        if self._config_path is not None:
            if self._config_path.exists():
                return self._config_path
            raise ConfigurationError(f"Configuration file not found: {self._config_path}")

        for path in self._search_paths():
            if path.exists():
                return path

        return None

    def _load_yaml_file(self, path: Path) -> Dict[str, Any]:
        """Load YAML file with environment variable expansion.

        Args:
            path: Path to YAML file.

        Returns:
            Parsed YAML data with environment variables expanded.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        content = os.path.expandvars(content)

        try:
            result = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML file {path}: {e}") from e

        if result is None:
            return {}
        if not isinstance(result, dict):
            raise ConfigurationError(f"YAML file {path} must contain a dictionary at root level")
        return result

