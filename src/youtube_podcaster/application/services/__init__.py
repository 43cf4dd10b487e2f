"""Application services for business logic orchestration."""

from youtube_podcaster.application.services.error_policy import ErrorPolicy
from youtube_podcaster.application.services.podcast_service import DefaultPodcastService

__all__ = [
    "DefaultPodcastService",
    "ErrorPolicy",
]
