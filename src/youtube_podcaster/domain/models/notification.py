"""Notification model for newly published episodes."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from youtube_podcaster.domain.models.channel import ChannelTask
from youtube_podcaster.domain.models.video import VideoMetadata

TITLE_TEMPLATE = "RSS Podcast Downloaded ({name})"
SEPARATOR = "-" * 44

# Pushover rejects messages longer than this
MAX_MESSAGE_LENGTH = 1024


@dataclass(frozen=True)
class Notification:
    """A rich push notification: HTML body plus a thumbnail attachment."""

    app_token: str
    user_token: str
    title: str
    html_body: str
    thumbnail_url: str
    webpage_url: str = ""

    @classmethod
    def for_episode(cls, task: ChannelTask, video: VideoMetadata) -> Notification:
        """Build the notification announcing a new episode of a channel."""
        return cls(
            app_token=task.app_token,
            user_token=task.user_token,
            title=TITLE_TEMPLATE.format(name=task.name),
            html_body=render_body(video.title, video.description),
            thumbnail_url=video.thumbnail_url,
            webpage_url=video.webpage_url,
        )

    def __repr__(self) -> str:
        """Developer-friendly string representation without tokens."""
        return f"Notification(title='{self.title}', thumbnail_url='{self.thumbnail_url}')"


def render_body(title: str, description: str) -> str:
    """
    Render the HTML notification body.

    The description is shortened so that the whole body fits within the
    Pushover message limit.
    """
    head = f"<html><body>{escape(title)}<br /><br />{SEPARATOR}<br /><br />"
    tail = "</body></html>"
    room = MAX_MESSAGE_LENGTH - len(head) - len(tail)
    text = escape(description)
    if len(text) > room:
        text = text[: max(room - 3, 0)]
        # do not leave half an HTML entity behind
        amp = text.rfind("&")
        if amp != -1 and ";" not in text[amp:]:
            text = text[:amp]
        text = text.rstrip() + "..."
    return f"{head}{text}{tail}"
