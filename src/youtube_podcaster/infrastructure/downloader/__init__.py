"""Video downloader implementations."""

from youtube_podcaster.infrastructure.downloader.ytdlp_downloader import YtDlpDownloader

__all__ = ["YtDlpDownloader"]
