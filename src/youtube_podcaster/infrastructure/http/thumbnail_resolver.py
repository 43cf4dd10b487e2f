"""Thumbnail resolution and download over HTTP."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from youtube_podcaster.domain.exceptions import ThumbnailError
from youtube_podcaster.domain.models.video import ThumbnailCandidate, VideoMetadata
from youtube_podcaster.domain.services.thumbnail_service import ThumbnailService
from youtube_podcaster.infrastructure.http.session import download_to_file
from youtube_podcaster.infrastructure.http.url_prober import UrlProber

logger = logging.getLogger(__name__)


class HttpThumbnailService(ThumbnailService):
    """
    Probes YouTube's max-resolution thumbnail variants and downloads the winner.

    Every candidate is probed even after one succeeds. The last variant that
    answers replaces earlier ones, so WEBP is chosen over JPEG when both
    exist.
    """

    def __init__(
        self,
        session: requests.Session,
        prober: UrlProber,
        fetch_timeout: float = 30.0,
    ) -> None:
        self.session = session
        self.prober = prober
        self.fetch_timeout = fetch_timeout

    def resolve(self, video: VideoMetadata) -> str:
        resolved = None
        for url in ThumbnailCandidate.for_video(video.id).urls:
            if self.prober.is_available(url):
                resolved = url

        if resolved is None:
            logger.info(f"No thumbnail variant available for {video.id}, using metadata thumbnail")
            return video.thumbnail_url
        logger.info(f"Resolved thumbnail for {video.id}: {resolved}")
        return resolved

    def fetch(self, url: str, destination: Path) -> Path:
        try:
            path = download_to_file(self.session, url, destination, self.fetch_timeout)
        except (requests.RequestException, OSError) as e:
            raise ThumbnailError(url, e) from e
        logger.info(f"Downloaded thumbnail: {url}")
        return path
