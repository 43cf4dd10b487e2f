"""YAML-based configuration provider implementation."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from youtube_podcaster.domain.exceptions import ConfigurationError
from youtube_podcaster.domain.models.channel import ChannelConfig
from youtube_podcaster.domain.services.configuration_provider import ConfigurationProvider
from youtube_podcaster.infrastructure.config.models import AppConfig, HttpSettings, LoggingConfig

# ${VAR_NAME} or ${VAR_NAME:default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def expand_env_vars(obj: Any) -> Any:
    """
    Replace ${VAR_NAME} references in every string of a parsed YAML tree.

    An unset variable without a default expands to an empty string.
    """
    if isinstance(obj, dict):
        return {key: expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [expand_env_vars(item) for item in obj]
    if isinstance(obj, str):
        return ENV_VAR_PATTERN.sub(lambda m: os.getenv(m.group(1), m.group(2) or ""), obj)
    return obj


class YamlConfigurationProvider(ConfigurationProvider):
    """
    Configuration provider that loads settings from YAML files.

    This implementation supports loading configuration from YAML files
    with environment variable substitution and validation using Pydantic models.
    Tokens are usually supplied through environment variables.
    """

    def __init__(self, config_path: str | Path) -> None:
        """
        Initialize the YAML configuration provider.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ConfigurationError: If the configuration file cannot be loaded or is invalid
        """
        self.config_path = Path(config_path)
        self._config: AppConfig | None = None
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate configuration from YAML file."""
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML configuration: {e}", e) from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}", e) from e

        if not raw_config:
            raise ConfigurationError("Configuration file is empty")
        if not isinstance(raw_config, dict):
            raise ConfigurationError("Configuration file must contain a mapping at the top level")

        raw_config = expand_env_vars(raw_config)

        try:
            self._config = AppConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}", e) from e

    @property
    def config(self) -> AppConfig:
        """Get the loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded")
        return self._config

    def get_channels(self) -> list[ChannelConfig]:
        """Get the list of configured channels."""
        return self.config.channels

    def get_media_folder(self) -> Path:
        """Get the root folder channel media is downloaded into."""
        return Path(self.config.media_folder)

    def get_config_dir(self) -> Path:
        """Get the folder holding episode counters and scratch files."""
        return Path(self.config.config_dir)

    def get_playlist_items(self) -> str:
        """Get the default playlist item range."""
        return self.config.playlist_items

    def get_user_token(self) -> str:
        """Get the notification user token."""
        return self.config.pushover_user_token

    def get_retention_hours(self) -> int:
        """Get the retention window in hours."""
        return self.config.processing.retention_hours

    def get_strict_mode(self) -> bool:
        """Get whether channel-level failures abort the whole run."""
        return self.config.processing.strict

    def get_downloader_binary(self) -> str:
        """Get the downloader executable."""
        return self.config.processing.downloader_binary

    def get_http_settings(self) -> HttpSettings:
        """Get timeouts and endpoints for outbound calls."""
        return self.config.http

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging

    def reload(self) -> None:
        """Reload configuration from source."""
        self._config = None
        self._load_config()
