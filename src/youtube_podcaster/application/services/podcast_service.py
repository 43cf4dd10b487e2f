"""Default implementation of the podcast pipeline."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from youtube_podcaster.application.services.error_policy import ErrorPolicy
from youtube_podcaster.domain.exceptions import ConfigurationError, PodcasterError, RenameError
from youtube_podcaster.domain.models.channel import ChannelConfig, ChannelTask
from youtube_podcaster.domain.models.files import (
    DEFAULT_MEDIA_EXTENSION,
    DESCRIPTION_SUFFIX,
    SidecarFiles,
    episode_basename,
)
from youtube_podcaster.domain.models.notification import Notification
from youtube_podcaster.domain.models.processing import (
    BatchProcessingResult,
    ChannelProcessingResult,
    ChannelState,
    EpisodeResult,
    ErrorAction,
)
from youtube_podcaster.domain.models.video import VideoMetadata, VideoStatus, thumbnail_extension
from youtube_podcaster.domain.services.configuration_provider import ConfigurationProvider
from youtube_podcaster.domain.services.episode_ledger import EpisodeLedger
from youtube_podcaster.domain.services.notifier import Notifier
from youtube_podcaster.domain.services.podcast_service import PodcastService
from youtube_podcaster.domain.services.thumbnail_service import ThumbnailService
from youtube_podcaster.domain.services.video_downloader import VideoDownloader
from youtube_podcaster.infrastructure.filesystem.metadata_extractor import extract_metadata
from youtube_podcaster.infrastructure.filesystem.renamer import rename_episode
from youtube_podcaster.infrastructure.filesystem.retention import RetentionSweeper
from youtube_podcaster.infrastructure.filesystem.scanner import walk_match

logger = logging.getLogger(__name__)

UNNAMED_CHANNEL = "<unnamed channel>"


class DefaultPodcastService(PodcastService):
    """
    Default implementation of the podcast service.

    Channels run one at a time and videos within a channel one at a time.
    Each channel moves through validating, downloading, reconciling (with a
    notification per new episode) and cleaning. Errors are routed through the
    ErrorPolicy, which decides whether to carry on with the video, drop the
    channel or stop the run.
    """

    def __init__(
        self,
        config_provider: ConfigurationProvider,
        downloader: VideoDownloader,
        ledger: EpisodeLedger,
        thumbnail_service: ThumbnailService,
        notifier: Notifier,
        sweeper: RetentionSweeper,
        error_policy: ErrorPolicy | None = None,
    ) -> None:
        """
        Initialize the podcast service.

        Args:
            config_provider: Provider for configuration settings
            downloader: Runs the external downloader for a channel
            ledger: Allocates episode numbers
            thumbnail_service: Resolves and downloads episode thumbnails
            notifier: Announces new episodes
            sweeper: Deletes expired downloads
            error_policy: Error routing, strict mode taken from configuration by default
        """
        self.config_provider = config_provider
        self.downloader = downloader
        self.ledger = ledger
        self.thumbnail_service = thumbnail_service
        self.notifier = notifier
        self.sweeper = sweeper
        self.error_policy = error_policy or ErrorPolicy(strict=config_provider.get_strict_mode())

    def process_all_channels(self) -> BatchProcessingResult:
        logger.info("Starting processing of all channels")
        batch_result = BatchProcessingResult()

        try:
            self._check_directories()
        except ConfigurationError as e:
            logger.error(f"Cannot start run: {e}")
            batch_result.global_error = str(e)
            batch_result.complete()
            return batch_result

        channels = self.config_provider.get_channels()
        if not channels:
            logger.warning("No channels found in configuration")
            batch_result.global_error = "No channels configured"
            batch_result.complete()
            return batch_result

        logger.info(f"Processing {len(channels)} configured channels")
        return self._run_channels(batch_result, channels)

    def process_specific_channels(self, channel_ids: list[str]) -> BatchProcessingResult:
        logger.info(f"Processing specific channels: {channel_ids}")
        batch_result = BatchProcessingResult()

        try:
            self._check_directories()
        except ConfigurationError as e:
            logger.error(f"Cannot start run: {e}")
            batch_result.global_error = str(e)
            batch_result.complete()
            return batch_result

        all_channels = self.config_provider.get_channels()
        target_channels = []
        for channel_id in channel_ids:
            channel_config = next(
                (c for c in all_channels if c.channel_id == channel_id), None
            )
            if channel_config is None:
                logger.error(f"Channel ID {channel_id} not found in configuration")
                batch_result.add_channel_result(
                    ChannelProcessingResult(
                        channel_id=channel_id,
                        channel_name="Unknown",
                        error_message="Channel not found in configuration",
                        error_action=ErrorAction.ABORT_CHANNEL,
                    )
                )
            else:
                target_channels.append(channel_config)

        if not target_channels:
            batch_result.global_error = "No valid channels found"
            batch_result.complete()
            return batch_result

        return self._run_channels(batch_result, target_channels)

    def process_channel(self, channel: ChannelConfig) -> ChannelProcessingResult:
        channel_result = self._new_channel_result(channel)
        logger.info(f"Processing channel: {channel_result.channel_name} ({channel_result.channel_id})")

        channel_result.transition(ChannelState.VALIDATING)
        skip_reason = self._validate_channel(channel)
        if skip_reason:
            logger.warning(f"Skipping channel {channel_result.channel_name}: {skip_reason}")
            channel_result.skip_reason = skip_reason
            channel_result.transition(ChannelState.DONE)
            return channel_result

        task = channel.to_domain(
            playlist_items=self.config_provider.get_playlist_items(),
            user_token=self.config_provider.get_user_token(),
        )
        logger.debug(f"Channel settings: {task!r}, artwork: {channel.channel_thumbnail or 'none'}")

        try:
            self._run_cycle(task, channel_result)
        except PodcasterError as e:
            self._record_channel_error(channel_result, e)
            logger.error(
                f"Channel {task.name} stopped in state {channel_result.state.value} "
                f"({channel_result.error_action.value}): {e}"
            )
        except Exception as e:
            self._record_channel_error(channel_result, e)
            logger.exception(f"Unexpected error processing channel {task.name}: {e}")

        channel_result.transition(ChannelState.DONE)

        stats = channel_result.stats
        logger.info(
            f"Channel {task.name} complete: {stats.videos_processed} episodes published, "
            f"{stats.videos_failed} failed, {stats.files_swept} files swept"
        )
        return channel_result

    def sweep_all_channels(self, channel_ids: list[str] | None = None) -> BatchProcessingResult:
        logger.info("Starting retention sweep")
        batch_result = BatchProcessingResult()

        try:
            self._check_directories()
        except ConfigurationError as e:
            logger.error(f"Cannot start sweep: {e}")
            batch_result.global_error = str(e)
            batch_result.complete()
            return batch_result

        media_folder = self.config_provider.get_media_folder()
        for channel in self.config_provider.get_channels():
            if channel_ids and channel.channel_id not in channel_ids:
                continue

            channel_result = self._new_channel_result(channel)
            if not channel.enabled or not channel.channel_id:
                channel_result.skip_reason = "disabled" if not channel.enabled else "missing channel_id"
                batch_result.add_channel_result(channel_result)
                continue

            channel_dir = media_folder / channel.channel_id
            if not channel_dir.is_dir():
                channel_result.skip_reason = "nothing downloaded yet"
                batch_result.add_channel_result(channel_result)
                continue

            channel_result.transition(ChannelState.CLEANING)
            try:
                swept = self.sweeper.sweep(
                    channel_dir,
                    channel.file_format or DEFAULT_MEDIA_EXTENSION,
                )
                channel_result.swept_files = [path for candidate in swept for path in candidate.files]
            except PodcasterError as e:
                self._record_channel_error(channel_result, e)
                logger.error(f"Sweep failed for {channel_result.channel_name}: {e}")
            channel_result.transition(ChannelState.DONE)

            batch_result.add_channel_result(channel_result)
            if channel_result.aborts_run:
                batch_result.global_error = f"Sweep aborted at {channel_result.channel_name}: {channel_result.error_message}"
                break

        batch_result.complete()
        logger.info(f"Retention sweep complete: {batch_result.overall_stats.files_swept} files deleted")
        return batch_result

    def _run_channels(
        self, batch_result: BatchProcessingResult, channels: list[ChannelConfig]
    ) -> BatchProcessingResult:
        for channel in channels:
            channel_result = self.process_channel(channel)
            batch_result.add_channel_result(channel_result)

            if channel_result.aborts_run:
                batch_result.global_error = (
                    f"Run aborted by {channel_result.channel_name}: {channel_result.error_message}"
                )
                logger.error(batch_result.global_error)
                break

        batch_result.complete()

        stats = batch_result.overall_stats
        logger.info(
            f"Run complete: {stats.videos_processed} episodes published, "
            f"{stats.videos_failed} failed, {stats.channels_skipped} channels skipped"
        )
        return batch_result

    def _run_cycle(self, task: ChannelTask, channel_result: ChannelProcessingResult) -> None:
        """Download, reconcile and clean one validated channel."""
        media_folder = self.config_provider.get_media_folder()

        channel_result.transition(ChannelState.DOWNLOADING)
        self.downloader.download(task, media_folder)

        channel_result.transition(ChannelState.RECONCILING)
        channel_dir = task.channel_dir(media_folder)
        for description in walk_match(channel_dir, f"*{DESCRIPTION_SUFFIX}"):
            sidecar = SidecarFiles.from_description(description, task.media_extension)
            if not sidecar.is_complete:
                logger.debug(f"Skipping {sidecar.name}: metadata or media file not present")
                continue

            try:
                episode = self._reconcile_video(task, sidecar, channel_result)
            except PodcasterError as e:
                channel_result.add_result(
                    EpisodeResult(
                        video=VideoMetadata(id=sidecar.name),
                        status=VideoStatus.FAILED,
                        error_message=str(e),
                    )
                )
                raise
            channel_result.add_result(episode)

        channel_result.transition(ChannelState.CLEANING)
        swept = self.sweeper.sweep(channel_dir, task.media_extension)
        channel_result.swept_files = [path for candidate in swept for path in candidate.files]

    def _reconcile_video(
        self,
        task: ChannelTask,
        sidecar: SidecarFiles,
        channel_result: ChannelProcessingResult,
    ) -> EpisodeResult:
        """Turn one complete download into a numbered, announced episode."""
        video = extract_metadata(sidecar.metadata)
        if not video.id:
            logger.warning(f"{sidecar.metadata.name} has no video id, using file name {sidecar.name}")
            video = replace(video, id=sidecar.name)

        video = video.with_thumbnail(self.thumbnail_service.resolve(video))

        episode_number = self.ledger.allocate(task.channel_id)
        basename = episode_basename(episode_number, video.id)
        logger.info(f"Episode {episode_number:02d} of {task.name}: {video.title}")

        thumbnail_path = self.thumbnail_service.fetch(
            video.thumbnail_url,
            sidecar.stem.parent / f"{basename}.{thumbnail_extension(video.thumbnail_url)}",
        )

        episode = EpisodeResult(
            video=video,
            status=VideoStatus.PROCESSED,
            episode_number=episode_number,
            thumbnail_path=thumbnail_path,
        )

        try:
            episode.media_path = rename_episode(sidecar.media, episode_number, video.id)
        except RenameError as e:
            if self.error_policy.decide(e) != ErrorAction.CONTINUE:
                raise
            logger.warning(f"Keeping original file name for episode {episode_number:02d}: {e}")
            episode.media_path = sidecar.media
            episode.error_message = str(e)

        channel_result.transition(ChannelState.NOTIFYING)
        self.notifier.notify(Notification.for_episode(task, video))
        episode.notified = True
        channel_result.transition(ChannelState.RECONCILING)

        return episode

    def _validate_channel(self, channel: ChannelConfig) -> str | None:
        """Reason to skip a channel, or None when it is ready to run."""
        if not channel.enabled:
            return "disabled"

        missing = channel.missing_fields()
        if missing:
            return f"missing required fields: {', '.join(missing)}"

        if not Path(channel.download_archive).exists():
            return f"download archive not found: {channel.download_archive}"

        return None

    def _check_directories(self) -> None:
        """Make sure the media and config folders exist before anything runs."""
        for label, path in (
            ("media_folder", self.config_provider.get_media_folder()),
            ("config_dir", self.config_provider.get_config_dir()),
        ):
            if not Path(path).is_dir():
                raise ConfigurationError(f"{label} does not exist or is not a directory: {path}")

    def _record_channel_error(self, channel_result: ChannelProcessingResult, error: Exception) -> None:
        action = self.error_policy.decide(error)
        if action == ErrorAction.CONTINUE:
            action = ErrorAction.ABORT_CHANNEL
        channel_result.error_action = action
        channel_result.error_message = str(error)

    @staticmethod
    def _new_channel_result(channel: ChannelConfig) -> ChannelProcessingResult:
        return ChannelProcessingResult(
            channel_id=channel.channel_id or channel.name or UNNAMED_CHANNEL,
            channel_name=channel.name or channel.channel_id or UNNAMED_CHANNEL,
        )
