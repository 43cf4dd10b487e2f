"""Abstract base class for configuration management."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from youtube_podcaster.domain.models.channel import ChannelConfig


class ConfigurationProvider(ABC):
    """
    Abstract service for providing application configuration.

    This interface defines the contract for loading and validating
    configuration data from various sources (files, environment variables,
    etc.).
    """

    @abstractmethod
    def get_channels(self) -> list[ChannelConfig]:
        """
        Get the list of configured channels.

        Channels are returned as configured, including disabled and
        incomplete ones; the orchestrator decides which of them to skip.

        Raises:
            ConfigurationError: If configuration is invalid or cannot be loaded
        """
        pass

    @abstractmethod
    def get_media_folder(self) -> Path:
        """Get the root folder channel media is downloaded into."""
        pass

    @abstractmethod
    def get_config_dir(self) -> Path:
        """Get the folder holding episode counters and scratch files."""
        pass

    @abstractmethod
    def get_playlist_items(self) -> str:
        """Get the default playlist item range passed to the downloader."""
        pass

    @abstractmethod
    def get_user_token(self) -> str:
        """Get the notification user token shared by all channels."""
        pass

    @abstractmethod
    def get_retention_hours(self) -> int:
        """
        Get the retention window in hours.

        Downloaded files whose description is older than this are swept.
        """
        pass

    @abstractmethod
    def get_strict_mode(self) -> bool:
        """
        Get whether channel-level failures abort the whole run.

        Returns:
            True to stop at the first failing channel, False to move on
        """
        pass

    @abstractmethod
    def get_downloader_binary(self) -> str:
        """Get the name or path of the downloader executable."""
        pass

    @abstractmethod
    def get_http_settings(self) -> Any:
        """
        Get HTTP settings.

        Returns:
            Settings object with probe, fetch, notification and downloader
            timeouts and the notification endpoint
        """
        pass

    @abstractmethod
    def get_logging_config(self) -> Any:
        """
        Get logging configuration.

        Returns:
            Settings object with level, format and file handler options
        """
        pass

    @abstractmethod
    def reload(self) -> None:
        """
        Reload configuration from source.

        Raises:
            ConfigurationError: If configuration cannot be reloaded or is invalid
        """
        pass
