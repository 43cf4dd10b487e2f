"""Domain models for the YouTube Podcaster application."""

from youtube_podcaster.domain.models.channel import ChannelConfig, ChannelTask
from youtube_podcaster.domain.models.files import RetentionCandidate, SidecarFiles
from youtube_podcaster.domain.models.notification import Notification
from youtube_podcaster.domain.models.processing import (
    BatchProcessingResult,
    ChannelProcessingResult,
    ChannelState,
    EpisodeResult,
    ErrorAction,
    ProcessingStats,
)
from youtube_podcaster.domain.models.video import ThumbnailCandidate, VideoMetadata, VideoStatus

__all__ = [
    "ChannelTask",
    "ChannelConfig",
    "VideoMetadata",
    "VideoStatus",
    "ThumbnailCandidate",
    "SidecarFiles",
    "RetentionCandidate",
    "Notification",
    "EpisodeResult",
    "ChannelProcessingResult",
    "BatchProcessingResult",
    "ProcessingStats",
    "ChannelState",
    "ErrorAction",
]
