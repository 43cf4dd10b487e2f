"""yt-dlp subprocess implementation of the video downloader."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

from youtube_podcaster.domain.exceptions import DownloaderError
from youtube_podcaster.domain.models.channel import ChannelTask
from youtube_podcaster.domain.services.video_downloader import VideoDownloader

logger = logging.getLogger(__name__)

OUTPUT_TEMPLATE = "%(id)s.%(ext)s"


class YtDlpDownloader(VideoDownloader):
    """
    Runs ``yt-dlp`` once per channel as a blocking child process.

    Files are named by video ID inside the channel's season directory; the
    download archive keeps already fetched videos from being downloaded
    again on the next run.
    """

    def __init__(
        self,
        binary: str = "yt-dlp",
        timeout: float | None = None,
        runner: Callable[..., Any] = subprocess.run,
    ) -> None:
        """
        Initialize the downloader.

        Args:
            binary: Name or path of the yt-dlp executable
            timeout: Seconds to wait for the process (None for no limit)
            runner: Callable with the signature of ``subprocess.run``
        """
        self.binary = binary
        self.timeout = timeout
        self.runner = runner

    def build_command(self, task: ChannelTask, media_folder: Path) -> list[str]:
        """Build the yt-dlp argument list for a channel."""
        output = task.season_dir(media_folder) / OUTPUT_TEMPLATE
        return [
            self.binary,
            "-v",
            "-o", str(output),
            "--playlist-items", task.playlist_items,
            "--write-info-json",
            "--no-write-playlist-metafiles",
            "--download-archive", str(task.download_archive),
            "--restrict-filenames",
            "--add-metadata",
            "--merge-output-format", task.file_format,
            "--format", task.file_quality,
            "--abort-on-error",
            "--abort-on-unavailable-fragment",
            "--no-overwrites",
            "--continue",
            "--write-description",
            task.youtube_url,
        ]

    def download(self, task: ChannelTask, media_folder: Path) -> None:
        command = self.build_command(task, media_folder)
        logger.info(f"Downloading {task.name} ({task.channel_id}) items {task.playlist_items}")
        logger.debug(f"Running: {' '.join(command)}")

        # later scans of the channel directory expect it to exist even when nothing is new
        try:
            task.season_dir(media_folder).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DownloaderError(task.channel_id, f"cannot create output directory: {e}", cause=e) from e

        try:
            completed = self.runner(command, check=False, timeout=self.timeout)
        except FileNotFoundError as e:
            raise DownloaderError(task.channel_id, f"executable not found: {self.binary}", cause=e) from e
        except subprocess.TimeoutExpired as e:
            raise DownloaderError(task.channel_id, f"timed out after {self.timeout} seconds", cause=e) from e
        except OSError as e:
            raise DownloaderError(task.channel_id, f"cannot start {self.binary}: {e}", cause=e) from e

        if completed.returncode != 0:
            raise DownloaderError(
                task.channel_id,
                f"{self.binary} exited with status {completed.returncode}",
                returncode=completed.returncode,
            )
        logger.info(f"Download finished for {task.channel_id}")
