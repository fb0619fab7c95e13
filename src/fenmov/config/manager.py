"""Configuration management - locating, loading and validating the YAML file."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import FenmovConfig


class ConfigManager:
    """Manages loading configuration."""

    DEFAULT_CONFIG_LOCATIONS = [
        Path.home() / ".config" / "fenmov" / "config.yaml",
        Path.home() / ".fenmov" / "config.yaml",
    ]

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.
        """
        self.config_path = config_path
        self._config: FenmovConfig | None = None

    def load(self) -> FenmovConfig:
        """
        Load configuration from file, falling back to defaults when none exists.

        Returns:
            Loaded and validated configuration.

        Raises:
            FileNotFoundError: If an explicit config path was given but does not exist.
            ValueError: If the config file is invalid.
        """
        if self.config_path is not None and not Path(self.config_path).exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        config_file = self._find_config_file()

        if config_file is None:
            self._config = FenmovConfig()
            return self._config

        try:
            with open(config_file, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            self._config = FenmovConfig(**config_dict)
            self.config_path = config_file
            return self._config

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e
        except TypeError as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e

    def _find_config_file(self) -> Path | None:
        """Find the explicit config file or the first existing default location."""
        if self.config_path is not None:
            return Path(self.config_path)

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if location.exists():
                return location

        return None

    @property
    def config(self) -> FenmovConfig:
        """Get current configuration."""
        if self._config is None:
            self._config = self.load()
        return self._config
