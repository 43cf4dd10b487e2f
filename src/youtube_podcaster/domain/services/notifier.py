"""Abstract base class for episode notifications."""

from abc import ABC, abstractmethod

from youtube_podcaster.domain.models.notification import Notification


class Notifier(ABC):
    """
    Abstract service for announcing new episodes.

    Implementations deliver a titled HTML message with the episode thumbnail
    attached.
    """

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """
        Send one notification.

        Raises:
            NotificationError: If the thumbnail cannot be fetched or the
                message cannot be delivered
        """
        pass
