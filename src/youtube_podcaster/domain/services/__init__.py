"""Abstract base classes for domain services."""

from youtube_podcaster.domain.services.configuration_provider import (
    ConfigurationProvider,
)
from youtube_podcaster.domain.services.episode_ledger import EpisodeLedger
from youtube_podcaster.domain.services.notifier import Notifier
from youtube_podcaster.domain.services.podcast_service import PodcastService
from youtube_podcaster.domain.services.thumbnail_service import ThumbnailService
from youtube_podcaster.domain.services.video_downloader import VideoDownloader

__all__ = [
    "ConfigurationProvider",
    "EpisodeLedger",
    "Notifier",
    "PodcastService",
    "ThumbnailService",
    "VideoDownloader",
]
