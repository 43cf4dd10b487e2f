"""Blocking HTTP existence check."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)


class UrlProber:
    """Answers whether a URL currently serves content."""

    def __init__(self, session: requests.Session, timeout: float = 10.0) -> None:
        self.session = session
        self.timeout = timeout

    def is_available(self, url: str) -> bool:
        """
        Probe ``url`` with a GET request.

        Only an HTTP 200 answer counts as available. Connection failures and
        timeouts count as unavailable.
        """
        logger.debug(f"URL check: {url}")
        try:
            response = self.session.get(url, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            logger.info(f"URL check failed for {url}: {e}")
            return False

        status_code = response.status_code
        response.close()

        logger.debug(f"URL status {status_code}: {url}")
        return status_code == 200
