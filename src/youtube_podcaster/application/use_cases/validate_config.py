"""Use case for validating application configuration."""

from __future__ import annotations

import shutil
from pathlib import Path

from youtube_podcaster.domain.services.configuration_provider import ConfigurationProvider


class ValidateConfigUseCase:
    """
    Use case for validating the application configuration.

    This use case checks what the pipeline needs before a run: the shared
    folders, the downloader executable and each channel's required settings.
    Channel problems are reported as warnings since those channels are only
    skipped at run time.
    """

    def __init__(self, config_provider: ConfigurationProvider) -> None:
        """
        Initialize the validation use case.

        Args:
            config_provider: Configuration provider to validate
        """
        self.config_provider = config_provider

    def execute(self) -> list[str]:
        """
        Execute configuration validation.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: list[str] = []

        try:
            for label, path in (
                ("Media folder", self.config_provider.get_media_folder()),
                ("Config directory", self.config_provider.get_config_dir()),
            ):
                if not Path(path).is_dir():
                    errors.append(f"{label} does not exist: {path}")

            binary = self.config_provider.get_downloader_binary()
            if shutil.which(binary) is None:
                errors.append(f"Downloader executable not found on PATH: {binary}")

            channels = self.config_provider.get_channels()
            if not channels:
                errors.append("No channels configured")
            elif not any(self.channel_warning(c.channel_id) is None for c in channels if c.channel_id):
                errors.append("No channel is ready to run")

        except Exception as e:
            errors.append(f"Configuration validation failed: {e}")

        return errors

    def channel_warning(self, channel_id: str) -> str | None:
        """
        Explain why a configured channel would be skipped.

        Args:
            channel_id: YouTube channel ID to check

        Returns:
            Reason the channel would be skipped, None if it is ready
        """
        channel = next(
            (c for c in self.config_provider.get_channels() if c.channel_id == channel_id), None
        )
        if channel is None:
            return f"Channel not configured: {channel_id}"
        if not channel.enabled:
            return "Disabled"

        missing = channel.missing_fields()
        if missing:
            return f"Missing required fields: {', '.join(missing)}"

        if not Path(channel.download_archive).exists():
            return f"Download archive not found: {channel.download_archive}"

        return None
