"""Tests for YAML configuration provider."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from youtube_podcaster.domain.exceptions import ConfigurationError
from youtube_podcaster.infrastructure.config.models import HttpSettings, LoggingConfig
from youtube_podcaster.infrastructure.config.yaml_provider import YamlConfigurationProvider


def write_yaml(path: Path, data: Any) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


class TestYamlConfigurationProvider:
    """Tests for YamlConfigurationProvider."""

    def test_yaml_provider_creation(self, temp_config_file: Path) -> None:
        """Test YAML provider creation with valid config file."""
        provider = YamlConfigurationProvider(temp_config_file)
        assert provider.config_path == temp_config_file
        assert provider._config is not None

    def test_yaml_provider_nonexistent_file(self) -> None:
        """Test YAML provider with nonexistent config file."""
        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            YamlConfigurationProvider("nonexistent.yml")

    def test_yaml_provider_invalid_yaml(self, tmp_path: Path) -> None:
        """Test YAML provider with invalid YAML file."""
        path = tmp_path / "config.yml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            YamlConfigurationProvider(path)

    def test_yaml_provider_empty_file(self, tmp_path: Path) -> None:
        """Test YAML provider with empty config file."""
        path = tmp_path / "config.yml"
        path.write_text("")

        with pytest.raises(ConfigurationError, match="Configuration file is empty"):
            YamlConfigurationProvider(path)

    def test_yaml_provider_not_a_mapping(self, tmp_path: Path) -> None:
        """Test YAML provider with a list at the top level."""
        path = write_yaml(tmp_path / "config.yml", ["a", "b"])

        with pytest.raises(ConfigurationError, match="mapping at the top level"):
            YamlConfigurationProvider(path)

    def test_yaml_provider_invalid_config_structure(self, tmp_path: Path) -> None:
        """Test YAML provider with invalid config structure."""
        invalid_config = {
            "media_folder": "/media",
            "config_dir": "/config",
            "channels": [],
        }
        path = write_yaml(tmp_path / "config.yml", invalid_config)

        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            YamlConfigurationProvider(path)

    def test_get_channels(self, temp_config_file: Path) -> None:
        """Test getting channels from config."""
        provider = YamlConfigurationProvider(temp_config_file)
        channels = provider.get_channels()

        assert len(channels) == 3
        assert channels[0].name == "Test Channel 1"
        assert channels[0].channel_id == "UCTestChannelID000000001"
        assert channels[0].enabled is True
        assert channels[2].enabled is False

    def test_get_global_settings(
        self, temp_config_file: Path, media_folder: Path, config_dir: Path
    ) -> None:
        """Test getting the global settings."""
        provider = YamlConfigurationProvider(temp_config_file)

        assert provider.get_media_folder() == media_folder
        assert provider.get_config_dir() == config_dir
        assert provider.get_playlist_items() == "1-5"
        assert provider.get_user_token() == "test-user-token"

    def test_get_processing_settings(self, temp_config_file: Path) -> None:
        """Test getting pipeline settings."""
        provider = YamlConfigurationProvider(temp_config_file)

        assert provider.get_retention_hours() == 168
        assert provider.get_strict_mode() is False
        assert provider.get_downloader_binary() == "yt-dlp"

    def test_get_http_settings(self, temp_config_file: Path) -> None:
        """Test getting HTTP settings."""
        provider = YamlConfigurationProvider(temp_config_file)
        settings = provider.get_http_settings()

        assert isinstance(settings, HttpSettings)
        assert settings.probe_timeout == 5.0
        assert settings.fetch_timeout == 15.0
        assert settings.notification_timeout == 20.0
        assert settings.downloader_timeout is None

    def test_get_logging_config(self, temp_config_file: Path) -> None:
        """Test getting logging configuration."""
        provider = YamlConfigurationProvider(temp_config_file)
        logging_config = provider.get_logging_config()

        assert isinstance(logging_config, LoggingConfig)
        assert logging_config.level == "INFO"
        assert logging_config.file_path is None

    def test_environment_variable_substitution(
        self,
        sample_config_data: dict[str, Any],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test environment variable substitution in config."""
        monkeypatch.setenv("TEST_PUSHOVER_USER", "env-user-token")
        monkeypatch.setenv("TEST_PUSHOVER_APP", "env-app-token")
        monkeypatch.delenv("TEST_UNSET_PLAYLIST", raising=False)

        sample_config_data["pushover_user_token"] = "${TEST_PUSHOVER_USER}"
        sample_config_data["playlist_items"] = "${TEST_UNSET_PLAYLIST:1-3}"
        sample_config_data["channels"][0]["pushover_app_token"] = "${TEST_PUSHOVER_APP}"
        path = write_yaml(tmp_path / "env.yml", sample_config_data)

        provider = YamlConfigurationProvider(path)

        assert provider.get_user_token() == "env-user-token"
        assert provider.get_playlist_items() == "1-3"
        assert provider.get_channels()[0].pushover_app_token == "env-app-token"

    def test_unset_variable_without_default_is_blank(
        self,
        sample_config_data: dict[str, Any],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that an unset token makes its channel incomplete."""
        monkeypatch.delenv("TEST_MISSING_APP_TOKEN", raising=False)
        sample_config_data["channels"][0]["pushover_app_token"] = "${TEST_MISSING_APP_TOKEN}"
        path = write_yaml(tmp_path / "env.yml", sample_config_data)

        provider = YamlConfigurationProvider(path)

        assert provider.get_channels()[0].missing_fields() == ["pushover_app_token"]

    def test_reload_config(self, sample_config_data: dict[str, Any], tmp_path: Path) -> None:
        """Test configuration reload."""
        path = write_yaml(tmp_path / "config.yml", sample_config_data)
        provider = YamlConfigurationProvider(path)
        assert provider.get_retention_hours() == 168

        sample_config_data["processing"]["retention_hours"] = 24
        write_yaml(path, sample_config_data)
        provider.reload()

        assert provider.get_retention_hours() == 24
