"""Abstract base class for episode thumbnail handling."""

from abc import ABC, abstractmethod
from pathlib import Path

from youtube_podcaster.domain.models.video import VideoMetadata


class ThumbnailService(ABC):
    """Picks a working thumbnail URL for a video and downloads it."""

    @abstractmethod
    def resolve(self, video: VideoMetadata) -> str:
        """
        Choose the thumbnail URL for a video.

        Known image variants are probed in order and the last one that
        answers wins. When none answers, the URL from the metadata is kept.
        """
        pass

    @abstractmethod
    def fetch(self, url: str, destination: Path) -> Path:
        """
        Download a thumbnail to a file.

        Raises:
            ThumbnailError: On any HTTP or I/O failure
        """
        pass
