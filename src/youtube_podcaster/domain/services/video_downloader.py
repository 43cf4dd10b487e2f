"""Abstract base class for the external video downloader."""

from abc import ABC, abstractmethod
from pathlib import Path

from youtube_podcaster.domain.models.channel import ChannelTask


class VideoDownloader(ABC):
    """
    Abstract service that downloads a channel's videos to disk.

    The downloader is a black box: for every new video in the playlist range
    it leaves a media file, a ``.info.json`` sidecar and a ``.description``
    file named by video ID in the channel's season directory, and it records
    downloaded IDs in the channel's download archive.
    """

    @abstractmethod
    def download(self, task: ChannelTask, media_folder: Path) -> None:
        """
        Download the configured playlist range of a channel.

        This is a single blocking call over the whole range.

        Args:
            task: The channel to download
            media_folder: Root folder holding one sub-directory per channel

        Raises:
            DownloaderError: If the downloader cannot run or exits non-zero
        """
        pass
