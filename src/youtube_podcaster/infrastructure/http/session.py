"""Shared HTTP helpers built on requests."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from youtube_podcaster import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"youtube-podcaster/{__version__}"
CHUNK_SIZE = 8192


def create_session() -> requests.Session:
    """Create the session every outbound call of a run goes through."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def download_to_file(
    session: requests.Session, url: str, destination: str | Path, timeout: float
) -> Path:
    """
    Stream ``url`` into ``destination``.

    Raises:
        requests.RequestException: On connection problems or a non-2xx status
        OSError: If the destination cannot be written
    """
    destination = Path(destination)
    response = session.get(url, stream=True, timeout=timeout)
    try:
        response.raise_for_status()
        destination.parent.mkdir(parents=True, exist_ok=True)
        with open(destination, "wb") as f:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                f.write(chunk)
    finally:
        response.close()
    logger.debug(f"Downloaded {url} -> {destination}")
    return destination
