"""Dependency injection container configuration."""

from __future__ import annotations

from pathlib import Path

from dependency_injector import containers, providers

from youtube_podcaster.application.services.error_policy import ErrorPolicy
from youtube_podcaster.application.services.podcast_service import DefaultPodcastService
from youtube_podcaster.domain.services.configuration_provider import ConfigurationProvider
from youtube_podcaster.domain.services.episode_ledger import EpisodeLedger
from youtube_podcaster.domain.services.notifier import Notifier
from youtube_podcaster.domain.services.podcast_service import PodcastService
from youtube_podcaster.domain.services.thumbnail_service import ThumbnailService
from youtube_podcaster.domain.services.video_downloader import VideoDownloader
from youtube_podcaster.infrastructure.config.yaml_provider import YamlConfigurationProvider
from youtube_podcaster.infrastructure.downloader.ytdlp_downloader import YtDlpDownloader
from youtube_podcaster.infrastructure.filesystem.episode_ledger import FileEpisodeLedger
from youtube_podcaster.infrastructure.filesystem.retention import RetentionSweeper
from youtube_podcaster.infrastructure.http.session import create_session
from youtube_podcaster.infrastructure.http.thumbnail_resolver import HttpThumbnailService
from youtube_podcaster.infrastructure.http.url_prober import UrlProber
from youtube_podcaster.infrastructure.notifications.pushover import PushoverNotifier


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container for the YouTube Podcaster application.

    This container manages the configuration provider and the HTTP session
    shared by every outbound call of a run. Services are built in the getter
    functions below from the loaded configuration.
    """

    # Configuration
    config_file_path = providers.Configuration()

    # Configuration Provider
    configuration_provider = providers.Singleton(
        YamlConfigurationProvider,
        config_path=config_file_path,
    )

    # One session per run
    http_session = providers.Singleton(create_session)


def create_container(config_path: str | Path) -> Container:
    """
    Create and configure the dependency injection container.

    Args:
        config_path: Path to the configuration file

    Returns:
        Configured container instance

    Raises:
        ConfigurationError: If the configuration file cannot be loaded
    """
    container = Container()
    container.config_file_path.override(str(config_path))
    # Load eagerly so configuration problems surface here
    container.configuration_provider()
    return container


def get_configuration_provider(container: Container) -> ConfigurationProvider:
    """
    Get the configuration provider from the container.

    Args:
        container: The dependency injection container

    Returns:
        Configuration provider instance
    """
    return container.configuration_provider()


def get_video_downloader(container: Container) -> VideoDownloader:
    """Get the yt-dlp downloader."""
    config_provider = get_configuration_provider(container)
    return YtDlpDownloader(
        binary=config_provider.get_downloader_binary(),
        timeout=config_provider.get_http_settings().downloader_timeout,
    )


def get_episode_ledger(container: Container) -> EpisodeLedger:
    """Get the episode number ledger."""
    return FileEpisodeLedger(get_configuration_provider(container).get_config_dir())


def get_thumbnail_service(container: Container) -> ThumbnailService:
    """Get the thumbnail resolver and fetcher."""
    http = get_configuration_provider(container).get_http_settings()
    session = container.http_session()
    return HttpThumbnailService(
        session=session,
        prober=UrlProber(session, timeout=http.probe_timeout),
        fetch_timeout=http.fetch_timeout,
    )


def get_notifier(container: Container) -> Notifier:
    """Get the Pushover notifier."""
    config_provider = get_configuration_provider(container)
    http = config_provider.get_http_settings()
    return PushoverNotifier(
        session=container.http_session(),
        config_dir=config_provider.get_config_dir(),
        api_url=http.notification_url,
        timeout=http.notification_timeout,
    )


def get_retention_sweeper(container: Container) -> RetentionSweeper:
    """Get the retention sweeper."""
    return RetentionSweeper(get_configuration_provider(container).get_retention_hours())


def get_podcast_service(container: Container) -> PodcastService:
    """Get the main podcast service."""
    config_provider = get_configuration_provider(container)

    return DefaultPodcastService(
        config_provider=config_provider,
        downloader=get_video_downloader(container),
        ledger=get_episode_ledger(container),
        thumbnail_service=get_thumbnail_service(container),
        notifier=get_notifier(container),
        sweeper=get_retention_sweeper(container),
        error_policy=ErrorPolicy(strict=config_provider.get_strict_mode()),
    )
