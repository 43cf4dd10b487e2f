"""HTTP-backed pipeline components."""

from youtube_podcaster.infrastructure.http.session import create_session, download_to_file
from youtube_podcaster.infrastructure.http.thumbnail_resolver import HttpThumbnailService
from youtube_podcaster.infrastructure.http.url_prober import UrlProber

__all__ = [
    "HttpThumbnailService",
    "UrlProber",
    "create_session",
    "download_to_file",
]
