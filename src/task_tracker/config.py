"""Configuration management for the task tracker."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .utils.datetime import DEFAULT_DISPLAY_FORMAT

logger = logging.getLogger(__name__)


@dataclass
class ConfigModel:
    """Global configuration model for the task tracker."""

    # File paths
    data_dir: str = "~/.task_tracker"
    data_file: str = "tasks.txt"

    # Display preferences
    display_datetime_format: str = DEFAULT_DISPLAY_FORMAT
    no_color: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(self.data_dir)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "data_file": self.data_file,
            "display_datetime_format": self.display_datetime_format,
            "no_color": self.no_color,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning("Ignoring unknown configuration key: %s", key)

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_data_path(self) -> Path:
        """Get the file path tasks are stored in."""
        return Path(self.data_dir) / self.data_file

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"


class Config:
    """Configuration manager for the task tracker."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or create default."""
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r', encoding="utf-8") as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug("Loaded configuration from %s", config_path)
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning("Failed to load config from %s: %s", config_path, e)
                logger.warning("Using default configuration.")
        else:
            # Create default config file
            cls.save(config, config_path)

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, 'w', encoding="utf-8") as f:
                f.write(config.to_yaml())
            logger.debug("Configuration saved to %s", config_path)
        except OSError as e:
            logger.error("Failed to save config to %s: %s", config_path, e)

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        return cls.load()

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()
