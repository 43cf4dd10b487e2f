"""Notification delivery implementations."""

from youtube_podcaster.infrastructure.notifications.pushover import PushoverNotifier

__all__ = ["PushoverNotifier"]
