"""Abstract base class for the main podcast pipeline orchestration."""

from abc import ABC, abstractmethod

from youtube_podcaster.domain.models.channel import ChannelConfig
from youtube_podcaster.domain.models.processing import (
    BatchProcessingResult,
    ChannelProcessingResult,
)


class PodcastService(ABC):
    """
    Abstract service for orchestrating the download-and-reconcile workflow.

    This is the main business logic interface that coordinates the
    downloader, the episode ledger, thumbnails, notifications and retention
    to turn configured channels into numbered podcast episodes.
    """

    @abstractmethod
    def process_all_channels(self) -> BatchProcessingResult:
        """
        Process all configured channels, one at a time.

        This is the main entry point for the workflow. It should:
        1. Check the global configuration
        2. Run each channel's cycle in configuration order
        3. Stop early when an error calls for aborting the run
        4. Aggregate results and statistics

        Returns:
            BatchProcessingResult with overall statistics and channel results
        """
        pass

    @abstractmethod
    def process_channel(self, channel: ChannelConfig) -> ChannelProcessingResult:
        """
        Run one channel's cycle.

        This method should:
        1. Validate the channel and skip it when incomplete
        2. Run the downloader over the playlist range
        3. Reconcile every complete download into a numbered episode
        4. Notify about each new episode
        5. Sweep expired files

        Errors are recorded on the result, never raised.

        Args:
            channel: The channel configuration to process

        Returns:
            ChannelProcessingResult with state history and episode results
        """
        pass

    @abstractmethod
    def process_specific_channels(self, channel_ids: list[str]) -> BatchProcessingResult:
        """
        Process only specific channels by ID.

        Args:
            channel_ids: List of YouTube channel IDs to process

        Returns:
            BatchProcessingResult for the specified channels
        """
        pass

    @abstractmethod
    def sweep_all_channels(self, channel_ids: list[str] | None = None) -> BatchProcessingResult:
        """
        Run only the retention sweep over each channel directory.

        Args:
            channel_ids: Restrict the sweep to these channels (None for all)

        Returns:
            BatchProcessingResult listing the swept files per channel
        """
        pass
