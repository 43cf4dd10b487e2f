"""Integration tests for CLI commands."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from youtube_podcaster.cli.main import cli
from youtube_podcaster.domain.models.processing import (
    BatchProcessingResult,
    ChannelProcessingResult,
    EpisodeResult,
    ErrorAction,
)

GET_SERVICE = "youtube_podcaster.cli.main.get_podcast_service"
WHICH = "youtube_podcaster.application.use_cases.validate_config.shutil.which"


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Put back the root logger handlers replaced by the commands."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def clean_result(*episodes: EpisodeResult) -> BatchProcessingResult:
    """A batch result for one channel with only successful episodes."""
    channel_result = ChannelProcessingResult(
        channel_id="UCTestChannelID000000001",
        channel_name="Test Channel 1",
    )
    for episode in episodes:
        channel_result.add_result(episode)
    result = BatchProcessingResult()
    result.add_channel_result(channel_result)
    result.complete()
    return result


class TestCLIIntegration:
    """Integration tests for CLI commands."""

    @pytest.fixture
    def cli_runner(self) -> CliRunner:
        """Create a CLI runner for testing."""
        return CliRunner()

    def test_cli_help(self, cli_runner: CliRunner) -> None:
        """Test CLI help command."""
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "YouTube Podcaster" in result.output
        assert "process" in result.output
        assert "validate" in result.output
        assert "sweep" in result.output

    def test_cli_version(self, cli_runner: CliRunner) -> None:
        """Test CLI version command."""
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_verbose_shows_config_path(self, cli_runner: CliRunner, temp_config_file: Path) -> None:
        """Test that --verbose reports the configuration file in use."""
        with patch(WHICH, return_value="/usr/bin/yt-dlp"):
            result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "--verbose", "validate"])

        assert result.exit_code == 0
        assert "Using configuration" in result.output

    def test_validate_command_success(self, cli_runner: CliRunner, temp_config_file: Path) -> None:
        """Test validate command with valid configuration."""
        with patch(WHICH, return_value="/usr/bin/yt-dlp"):
            result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "validate"])

        assert result.exit_code == 0
        assert "Found 3 configured channels" in result.output
        assert "Test Channel 1: ready" in result.output
        assert "Disabled" in result.output
        assert "Validation complete!" in result.output

    def test_validate_command_missing_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test validate command with a configuration file that does not exist."""
        result = cli_runner.invoke(cli, ["--config", str(tmp_path / "missing.yml"), "validate"])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output

    def test_validate_command_missing_downloader(
        self, cli_runner: CliRunner, temp_config_file: Path
    ) -> None:
        """Test validate command when yt-dlp is not installed."""
        with patch(WHICH, return_value=None):
            result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "validate"])

        assert result.exit_code == 1
        assert "Error(s) Found" in result.output

    def test_process_all_channels(
        self,
        cli_runner: CliRunner,
        temp_config_file: Path,
        sample_episode_success: EpisodeResult,
    ) -> None:
        """Test process command for every configured channel."""
        service = Mock()
        service.process_all_channels.return_value = clean_result(sample_episode_success)

        with patch(GET_SERVICE, return_value=service):
            result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "process"])

        assert result.exit_code == 0
        assert "Processing all configured channels" in result.output
        assert "Processing Results" in result.output
        assert "Published 1 new episodes!" in result.output
        service.process_all_channels.assert_called_once_with()

    def test_process_specific_channels(self, cli_runner: CliRunner, temp_config_file: Path) -> None:
        """Test process command limited to selected channels."""
        service = Mock()
        service.process_specific_channels.return_value = clean_result()

        with patch(GET_SERVICE, return_value=service):
            result = cli_runner.invoke(
                cli,
                [
                    "--config", str(temp_config_file),
                    "process",
                    "--channels", "UCTestChannelID000000001",
                    "--channels", "UCTestChannelID000000002",
                ],
            )

        assert result.exit_code == 0
        assert "Processing 2 specific channels" in result.output
        assert "up to date" in result.output
        service.process_specific_channels.assert_called_once_with(
            ["UCTestChannelID000000001", "UCTestChannelID000000002"]
        )

    def test_process_with_errors_exits_nonzero(
        self,
        cli_runner: CliRunner,
        temp_config_file: Path,
        sample_batch_result: BatchProcessingResult,
    ) -> None:
        """Test that failed episodes make the process command fail."""
        service = Mock()
        service.process_all_channels.return_value = sample_batch_result

        with patch(GET_SERVICE, return_value=service):
            result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "process"])

        assert result.exit_code == 1
        assert "Errors occurred during processing" in result.output

    def test_process_global_error(self, cli_runner: CliRunner, temp_config_file: Path) -> None:
        """Test that a run-level error is reported."""
        batch = BatchProcessingResult()
        batch.global_error = "Run aborted at Test Channel 1: [boom]"
        batch.complete()
        service = Mock()
        service.process_all_channels.return_value = batch

        with patch(GET_SERVICE, return_value=service):
            result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "process"])

        assert result.exit_code == 1
        assert "Global error: Run aborted at Test Channel 1: [boom]" in result.output

    def test_process_aborted_run(self, cli_runner: CliRunner, temp_config_file: Path) -> None:
        """Test that an aborted run says the remaining channels were not processed."""
        batch = BatchProcessingResult(global_error="Run aborted by Test Channel 1: corrupt counter")
        batch.add_channel_result(
            ChannelProcessingResult(
                channel_id="UCTestChannelID000000001",
                channel_name="Test Channel 1",
                error_message="corrupt counter",
                error_action=ErrorAction.ABORT_RUN,
            )
        )
        batch.complete()
        service = Mock()
        service.process_all_channels.return_value = batch

        with patch(GET_SERVICE, return_value=service):
            result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "process"])

        assert result.exit_code == 1
        assert "Remaining channels were not processed" in result.output

    def test_process_unexpected_exception(self, cli_runner: CliRunner, temp_config_file: Path) -> None:
        """Test that an exception escaping the service is reported."""
        service = Mock()
        service.process_all_channels.side_effect = RuntimeError("disk on fire")

        with patch(GET_SERVICE, return_value=service):
            result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "process"])

        assert result.exit_code == 1
        assert "Unexpected Error" in result.output
        assert "disk on fire" in result.output

    def test_sweep_command_with_service(self, cli_runner: CliRunner, temp_config_file: Path) -> None:
        """Test sweep command passes the channel selection to the service."""
        service = Mock()
        service.sweep_all_channels.return_value = clean_result()

        with patch(GET_SERVICE, return_value=service):
            result = cli_runner.invoke(
                cli,
                ["--config", str(temp_config_file), "sweep", "--channels", "UCTestChannelID000000001"],
            )

        assert result.exit_code == 0
        assert "Retention Sweep" in result.output
        assert "Deleted 0 expired files." in result.output
        service.sweep_all_channels.assert_called_once_with(["UCTestChannelID000000001"])

    def test_sweep_command_deletes_expired_files(
        self,
        cli_runner: CliRunner,
        temp_config_file: Path,
        media_folder: Path,
        write_download: Callable[..., Path],
    ) -> None:
        """Test a real sweep removes downloads past the retention window."""
        season_dir = media_folder / "UCTestChannelID000000001" / "Season_1"
        old_description = write_download(season_dir, "old")
        new_description = write_download(season_dir, "new")
        month_ago = time.time() - 30 * 24 * 3600
        os.utime(old_description, (month_ago, month_ago))

        result = cli_runner.invoke(cli, ["--config", str(temp_config_file), "sweep"])

        assert result.exit_code == 0
        assert not old_description.exists()
        assert not (season_dir / "old.mp4").exists()
        assert not (season_dir / "old.info.json").exists()
        assert new_description.exists()
        assert (season_dir / "new.mp4").exists()

    def test_sweep_command_missing_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test sweep command with a configuration file that does not exist."""
        result = cli_runner.invoke(cli, ["--config", str(tmp_path / "missing.yml"), "sweep"])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output
