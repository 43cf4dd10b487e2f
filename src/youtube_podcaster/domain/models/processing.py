"""Processing result models for tracking podcast runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from youtube_podcaster.domain.models.video import VideoMetadata, VideoStatus


class ChannelState(str, Enum):
    """States a channel moves through during one cycle."""

    IDLE = "idle"
    VALIDATING = "validating"
    DOWNLOADING = "downloading"
    RECONCILING = "reconciling"
    NOTIFYING = "notifying"
    CLEANING = "cleaning"
    DONE = "done"


class ErrorAction(str, Enum):
    """What the orchestrator does after an error."""

    CONTINUE = "continue"
    ABORT_CHANNEL = "abort_channel"
    ABORT_RUN = "abort_run"


@dataclass
class EpisodeResult:
    """
    Result of reconciling a single downloaded video.

    Tracks the episode number it was given, where its files ended up and any
    non-fatal error met along the way.
    """

    video: VideoMetadata
    status: VideoStatus
    episode_number: int | None = None
    media_path: Path | None = None
    thumbnail_path: Path | None = None
    notified: bool = False
    error_message: str | None = None
    processed_at: datetime = field(default_factory=datetime.now)

    @property
    def is_failure(self) -> bool:
        """Whether reconciling the episode failed."""
        return self.status == VideoStatus.FAILED

    def __str__(self) -> str:
        """Human-readable string representation."""
        number = f"e{self.episode_number:02d} " if self.episode_number is not None else ""
        error_part = f" - {self.error_message}" if self.error_message else ""
        return f"{number}{self.video.title[:50]} ({self.status.value}){error_part}"


@dataclass
class ProcessingStats:
    """
    Statistics for a batch processing operation.

    Provides aggregate information about episodes reconciled across one or
    more channels.
    """

    total_videos_checked: int = 0
    videos_processed: int = 0
    videos_failed: int = 0
    channels_processed: int = 0
    channels_skipped: int = 0
    files_swept: int = 0
    processing_time_seconds: float = 0.0
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    @property
    def success_rate(self) -> float:
        """Calculate the success rate as a percentage."""
        if self.total_videos_checked == 0:
            return 0.0
        return (self.videos_processed / self.total_videos_checked) * 100

    def add_result(self, result: EpisodeResult) -> None:
        """Add an episode result to the statistics."""
        self.total_videos_checked += 1

        if result.status == VideoStatus.PROCESSED:
            self.videos_processed += 1
        elif result.status == VideoStatus.FAILED:
            self.videos_failed += 1

    def complete(self) -> None:
        """Mark the processing batch as completed."""
        self.completed_at = datetime.now()
        delta = self.completed_at - self.started_at
        self.processing_time_seconds = delta.total_seconds()

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"ProcessingStats(checked={self.total_videos_checked}, "
            f"processed={self.videos_processed}, "
            f"failed={self.videos_failed}, success_rate={self.success_rate:.1f}%)"
        )


@dataclass
class ChannelProcessingResult:
    """
    Result of one channel's download-and-reconcile cycle.

    Records every state the channel passed through, the episodes it produced
    and, when the cycle stopped early, why.
    """

    channel_id: str
    channel_name: str
    results: list[EpisodeResult] = field(default_factory=list)
    states: list[ChannelState] = field(default_factory=lambda: [ChannelState.IDLE])
    skip_reason: str | None = None
    error_message: str | None = None
    error_action: ErrorAction | None = None
    swept_files: list[Path] = field(default_factory=list)
    processed_at: datetime = field(default_factory=datetime.now)

    @property
    def state(self) -> ChannelState:
        """The state the channel is currently in."""
        return self.states[-1]

    @property
    def stats(self) -> ProcessingStats:
        """Generate statistics for this channel's processing."""
        stats = ProcessingStats(
            channels_processed=0 if self.is_skipped else 1,
            channels_skipped=1 if self.is_skipped else 0,
            files_swept=len(self.swept_files),
            started_at=self.processed_at,
        )

        for result in self.results:
            stats.add_result(result)

        stats.complete()
        return stats

    @property
    def is_skipped(self) -> bool:
        """Whether the channel was skipped during validation."""
        return self.skip_reason is not None

    @property
    def has_errors(self) -> bool:
        """Whether this channel had any processing errors."""
        return self.error_message is not None or any(r.is_failure for r in self.results)

    @property
    def aborts_run(self) -> bool:
        """Whether this channel's error stops the remaining channels."""
        return self.error_action == ErrorAction.ABORT_RUN

    def transition(self, state: ChannelState) -> None:
        """Move the channel to a new state."""
        self.states.append(state)

    def add_result(self, result: EpisodeResult) -> None:
        """Add an episode result for this channel."""
        self.results.append(result)

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.is_skipped:
            return f"{self.channel_name}: skipped ({self.skip_reason})"
        error_part = f" (ERROR: {self.error_message})" if self.error_message else ""
        return f"{self.channel_name}: {self.stats}{error_part}"


@dataclass
class BatchProcessingResult:
    """
    Result of processing multiple channels in one run.

    Top-level result that aggregates all channel results and provides overall
    statistics for the run.
    """

    channel_results: dict[str, ChannelProcessingResult] = field(default_factory=dict)
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None
    global_error: str | None = None

    @property
    def overall_stats(self) -> ProcessingStats:
        """Generate overall statistics across all channels."""
        stats = ProcessingStats(started_at=self.started_at)

        for channel_result in self.channel_results.values():
            if channel_result.is_skipped:
                stats.channels_skipped += 1
            else:
                stats.channels_processed += 1
            stats.files_swept += len(channel_result.swept_files)
            for result in channel_result.results:
                stats.add_result(result)

        if self.completed_at:
            stats.completed_at = self.completed_at
            delta = self.completed_at - self.started_at
            stats.processing_time_seconds = delta.total_seconds()

        return stats

    @property
    def is_aborted(self) -> bool:
        """Whether the run stopped before visiting every channel."""
        return any(cr.aborts_run for cr in self.channel_results.values())

    @property
    def has_errors(self) -> bool:
        """Whether any channel had processing errors."""
        return self.global_error is not None or any(
            cr.has_errors for cr in self.channel_results.values()
        )

    @property
    def failed_channels(self) -> list[ChannelProcessingResult]:
        """Get channels that had processing errors."""
        return [cr for cr in self.channel_results.values() if cr.has_errors]

    def add_channel_result(self, channel_result: ChannelProcessingResult) -> None:
        """
        Add a channel processing result.

        Results are keyed by channel ID. Channels sharing a key, such as two
        with neither ID nor name configured, get a numbered key so that none
        is dropped from the summary.
        """
        key = channel_result.channel_id
        copy_number = 2
        while key in self.channel_results:
            key = f"{channel_result.channel_id} #{copy_number}"
            copy_number += 1
        self.channel_results[key] = channel_result

    def complete(self) -> None:
        """Mark the batch processing as completed."""
        self.completed_at = datetime.now()

    def __str__(self) -> str:
        """Human-readable string representation."""
        stats = self.overall_stats
        error_part = (
            f" (GLOBAL ERROR: {self.global_error})" if self.global_error else ""
        )
        return f"BatchProcessingResult: {stats}{error_part}"
