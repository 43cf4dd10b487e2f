"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import requests
import yaml

from youtube_podcaster.domain.models.channel import ChannelConfig, ChannelTask
from youtube_podcaster.domain.models.processing import (
    BatchProcessingResult,
    ChannelProcessingResult,
    EpisodeResult,
)
from youtube_podcaster.domain.models.video import VideoMetadata, VideoStatus
from youtube_podcaster.infrastructure.config.models import AppConfig

CHANNEL_ID_1 = "UCTestChannelID000000001"
CHANNEL_ID_2 = "UCTestChannelID000000002"
CHANNEL_ID_3 = "UCTestChannelID000000003"


@pytest.fixture
def media_folder(tmp_path: Path) -> Path:
    """Root folder channels are downloaded into."""
    path = tmp_path / "media"
    path.mkdir()
    return path


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Folder holding episode counters and download archives."""
    path = tmp_path / "config"
    path.mkdir()
    return path


@pytest.fixture
def download_archives(config_dir: Path) -> dict[str, Path]:
    """Existing yt-dlp download archive files for the test channels."""
    archives = {}
    for channel_id in (CHANNEL_ID_1, CHANNEL_ID_2, CHANNEL_ID_3):
        archive = config_dir / f"{channel_id}_archive.txt"
        archive.write_text("")
        archives[channel_id] = archive
    return archives


@pytest.fixture
def sample_config_data(
    media_folder: Path, config_dir: Path, download_archives: dict[str, Path]
) -> dict[str, Any]:
    """Sample configuration data for testing."""
    return {
        "media_folder": str(media_folder),
        "config_dir": str(config_dir),
        "playlist_items": "1-5",
        "pushover_user_token": "test-user-token",
        "email": "test@example.com",
        "channels": [
            {
                "name": "Test Channel 1",
                "channel_id": CHANNEL_ID_1,
                "file_format": "mp4",
                "file_quality": "bv*+ba/b",
                "download_archive": str(download_archives[CHANNEL_ID_1]),
                "youtube_url": f"https://www.youtube.com/channel/{CHANNEL_ID_1}/videos",
                "pushover_app_token": "test-app-token-1",
                "enabled": True,
            },
            {
                "name": "Test Channel 2",
                "channel_id": CHANNEL_ID_2,
                "file_format": "mp4",
                "file_quality": "bv*+ba/b",
                "download_archive": str(download_archives[CHANNEL_ID_2]),
                "youtube_url": f"https://www.youtube.com/channel/{CHANNEL_ID_2}/videos",
                "pushover_app_token": "test-app-token-2",
                "playlist_items": "1-2",
                "enabled": True,
            },
            {
                "name": "Test Channel 3",
                "channel_id": CHANNEL_ID_3,
                "file_format": "mp4",
                "file_quality": "bv*+ba/b",
                "download_archive": str(download_archives[CHANNEL_ID_3]),
                "youtube_url": f"https://www.youtube.com/channel/{CHANNEL_ID_3}/videos",
                "pushover_app_token": "test-app-token-3",
                "enabled": False,
            },
        ],
        "processing": {
            "retention_hours": 168,
            "strict": False,
            "downloader_binary": "yt-dlp",
        },
        "http": {
            "probe_timeout": 5,
            "fetch_timeout": 15,
            "notification_timeout": 20,
            "downloader_timeout": None,
        },
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "file_path": None,
            "max_file_size": 10485760,
            "backup_count": 5,
        },
    }


@pytest.fixture
def temp_config_file(sample_config_data: dict[str, Any], tmp_path: Path) -> Path:
    """Create a temporary configuration file for testing."""
    path = tmp_path / "config.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config_data, f)
    return path


@pytest.fixture
def app_config(sample_config_data: dict[str, Any]) -> AppConfig:
    """Create an AppConfig instance for testing."""
    return AppConfig(**sample_config_data)


@pytest.fixture
def sample_channel_config(download_archives: dict[str, Path]) -> ChannelConfig:
    """Create a sample channel config for testing."""
    return ChannelConfig(
        name="ChannelName",
        channel_id=CHANNEL_ID_1,
        file_format="mp4",
        file_quality="bv*+ba/b",
        download_archive=str(download_archives[CHANNEL_ID_1]),
        youtube_url=f"https://www.youtube.com/channel/{CHANNEL_ID_1}/videos",
        pushover_app_token="test-app-token-1",
    )


@pytest.fixture
def sample_channel_task(download_archives: dict[str, Path]) -> ChannelTask:
    """Create a sample channel task for testing."""
    return ChannelTask(
        name="ChannelName",
        channel_id=CHANNEL_ID_1,
        file_format="mp4",
        file_quality="bv*+ba/b",
        download_archive=download_archives[CHANNEL_ID_1],
        youtube_url=f"https://www.youtube.com/channel/{CHANNEL_ID_1}/videos",
        playlist_items="1-5",
        app_token="test-app-token-1",
        user_token="test-user-token",
    )


@pytest.fixture
def sample_video() -> VideoMetadata:
    """Create sample video metadata for testing."""
    return VideoMetadata(
        id="xyz",
        title="Sunday Sermon",
        description="A sermon about patience & kindness",
        webpage_url="https://www.youtube.com/watch?v=xyz",
        uploader_url="https://www.youtube.com/@channel",
        channel_url=f"https://www.youtube.com/channel/{CHANNEL_ID_1}",
        duration="12:34",
        thumbnail_url="https://i.ytimg.com/vi/xyz/hqdefault.jpg",
    )


@pytest.fixture
def write_download() -> Callable[..., Path]:
    """
    Create the files yt-dlp leaves behind for one video.

    Returns a function taking the directory, the video ID and optionally the
    sidecar JSON, whether to write the media file and the media extension.
    It returns the description file path.
    """

    def _write(
        directory: Path,
        video_id: str,
        info: dict[str, Any] | None = None,
        media: bool = True,
        metadata: bool = True,
        extension: str = "mp4",
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        description = directory / f"{video_id}.description"
        description.write_text(f"Description of {video_id}")
        if metadata:
            payload = info if info is not None else {"id": video_id, "title": f"Video {video_id}"}
            (directory / f"{video_id}.info.json").write_text(json.dumps(payload))
        if media:
            (directory / f"{video_id}.{extension}").write_bytes(b"\x00\x00\x00\x18ftypmp42")
        return description

    return _write


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Build a stand-in for a requests.Response."""

    def _make(
        status_code: int = 200,
        content: bytes = b"image-bytes",
        json_data: Any = None,
        text: str = "",
    ) -> Mock:
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.iter_content.return_value = [content]
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Client Error")
        else:
            response.raise_for_status.return_value = None
        if json_data is None:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            response.json.return_value = json_data
        return response

    return _make


@pytest.fixture
def sample_episode_success(sample_video: VideoMetadata, media_folder: Path) -> EpisodeResult:
    """Create a published episode result."""
    return EpisodeResult(
        video=sample_video,
        status=VideoStatus.PROCESSED,
        episode_number=1,
        media_path=media_folder / "s01e01 - xyz.mp4",
        notified=True,
    )


@pytest.fixture
def sample_episode_failed(sample_video: VideoMetadata) -> EpisodeResult:
    """Create a failed episode result."""
    return EpisodeResult(
        video=sample_video,
        status=VideoStatus.FAILED,
        error_message="Failed to download thumbnail",
    )


@pytest.fixture
def sample_channel_result(
    sample_episode_success: EpisodeResult,
    sample_episode_failed: EpisodeResult,
) -> ChannelProcessingResult:
    """Create a sample channel processing result."""
    result = ChannelProcessingResult(
        channel_id=CHANNEL_ID_1,
        channel_name="Test Channel 1",
    )
    result.add_result(sample_episode_success)
    result.add_result(sample_episode_failed)
    return result


@pytest.fixture
def sample_batch_result(sample_channel_result: ChannelProcessingResult) -> BatchProcessingResult:
    """Create a sample batch processing result."""
    result = BatchProcessingResult()
    result.add_channel_result(sample_channel_result)
    result.complete()
    return result


@pytest.fixture
def mock_config_provider(app_config: AppConfig) -> Mock:
    """Create a mock configuration provider."""
    mock = Mock()
    mock.get_channels.return_value = app_config.channels
    mock.get_media_folder.return_value = Path(app_config.media_folder)
    mock.get_config_dir.return_value = Path(app_config.config_dir)
    mock.get_playlist_items.return_value = app_config.playlist_items
    mock.get_user_token.return_value = app_config.pushover_user_token
    mock.get_retention_hours.return_value = app_config.processing.retention_hours
    mock.get_strict_mode.return_value = app_config.processing.strict
    mock.get_downloader_binary.return_value = app_config.processing.downloader_binary
    mock.get_http_settings.return_value = app_config.http
    mock.get_logging_config.return_value = app_config.logging
    return mock


@pytest.fixture
def mock_downloader() -> Mock:
    """Create a mock video downloader that creates the season directory only."""
    mock = Mock()
    mock.download.side_effect = lambda task, media_folder: task.season_dir(media_folder).mkdir(
        parents=True, exist_ok=True
    )
    return mock


@pytest.fixture
def mock_ledger() -> Mock:
    """Create a mock episode ledger counting up from zero per channel."""
    counters: dict[str, int] = {}

    def allocate(channel_id: str) -> int:
        counters[channel_id] = counters.get(channel_id, 0) + 1
        return counters[channel_id]

    mock = Mock()
    mock.allocate.side_effect = allocate
    mock.read.side_effect = lambda channel_id: counters.get(channel_id, 0)
    return mock


@pytest.fixture
def mock_thumbnail_service() -> Mock:
    """Create a mock thumbnail service that keeps the metadata thumbnail."""
    mock = Mock()
    mock.resolve.side_effect = lambda video: video.thumbnail_url
    mock.fetch.side_effect = lambda url, destination: destination
    return mock


@pytest.fixture
def mock_notifier() -> Mock:
    """Create a mock notifier."""
    mock = Mock()
    mock.notify.return_value = None
    return mock


@pytest.fixture
def mock_sweeper() -> Mock:
    """Create a mock retention sweeper that finds nothing to delete."""
    mock = Mock()
    mock.sweep.return_value = []
    return mock
