"""Abstract base class for the per-channel episode counter."""

from abc import ABC, abstractmethod


class EpisodeLedger(ABC):
    """
    Durable store of the last episode number assigned to each channel.

    One integer per channel ID. The value only ever grows: ``allocate`` is
    the sole mutation and persists the new value before returning it.
    Implementations are not required to be safe for concurrent use by several
    processes on the same channel.
    """

    @abstractmethod
    def read(self, channel_id: str) -> int:
        """
        Read the last episode number assigned to a channel.

        A channel without a counter starts at 0, and the counter is created.

        Raises:
            LedgerError: If the stored value is not an integer or cannot be read
        """
        pass

    @abstractmethod
    def allocate(self, channel_id: str) -> int:
        """
        Allocate the next episode number for a channel.

        Returns:
            The new episode number, already persisted

        Raises:
            LedgerError: If the counter cannot be read or written
        """
        pass
