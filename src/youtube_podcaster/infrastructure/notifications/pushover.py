"""Pushover implementation of the episode notifier."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from youtube_podcaster.domain.exceptions import NotificationError
from youtube_podcaster.domain.models.notification import Notification
from youtube_podcaster.domain.models.video import thumbnail_extension
from youtube_podcaster.domain.services.notifier import Notifier
from youtube_podcaster.infrastructure.config.models import PUSHOVER_MESSAGES_URL
from youtube_podcaster.infrastructure.http.session import download_to_file

logger = logging.getLogger(__name__)

ATTACHMENT_BASENAME = "maxresdefault"
IMAGE_CONTENT_TYPES = {"jpg": "image/jpeg", "webp": "image/webp"}


class PushoverNotifier(Notifier):
    """
    Sends episode announcements through the Pushover messages API.

    The thumbnail is first saved to ``{config_dir}/maxresdefault.{ext}`` and
    then posted as the message attachment along with an HTML body.
    """

    def __init__(
        self,
        session: requests.Session,
        config_dir: str | Path,
        api_url: str = PUSHOVER_MESSAGES_URL,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize the notifier.

        Args:
            session: HTTP session for the thumbnail download and the POST
            config_dir: Folder the attachment image is written to
            api_url: Pushover messages endpoint
            timeout: Timeout in seconds for each HTTP call
        """
        self.session = session
        self.config_dir = Path(config_dir)
        self.api_url = api_url
        self.timeout = timeout

    def attachment_path(self, thumbnail_url: str) -> Path:
        """Local file the thumbnail is saved to before being attached."""
        return self.config_dir / f"{ATTACHMENT_BASENAME}.{thumbnail_extension(thumbnail_url)}"

    def notify(self, notification: Notification) -> None:
        logger.info(f"Sending notification: {notification.title}")

        attachment = self.attachment_path(notification.thumbnail_url)
        try:
            download_to_file(self.session, notification.thumbnail_url, attachment, self.timeout)
        except (requests.RequestException, OSError) as e:
            raise NotificationError(
                f"Failed to download notification thumbnail {notification.thumbnail_url}: {e}",
                cause=e,
            ) from e

        data = {
            "token": notification.app_token,
            "user": notification.user_token,
            "title": notification.title,
            "message": notification.html_body,
            "html": "1",
        }
        if notification.webpage_url:
            data["url"] = notification.webpage_url

        content_type = IMAGE_CONTENT_TYPES[thumbnail_extension(notification.thumbnail_url)]
        try:
            with open(attachment, "rb") as image:
                response = self.session.post(
                    self.api_url,
                    data=data,
                    files={"attachment": (attachment.name, image, content_type)},
                    timeout=self.timeout,
                )
        except (requests.RequestException, OSError) as e:
            raise NotificationError(f"Failed to send notification: {e}", cause=e) from e

        self._check_response(response)
        logger.info(f"Notification delivered: {notification.title}")

    def _check_response(self, response: requests.Response) -> None:
        """Raise unless Pushover accepted the message."""
        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.status_code != 200 or payload.get("status") != 1:
            errors = payload.get("errors") or [response.text[:200]]
            raise NotificationError(
                f"Pushover rejected the notification ({response.status_code}): {'; '.join(map(str, errors))}",
                status_code=response.status_code,
            )
