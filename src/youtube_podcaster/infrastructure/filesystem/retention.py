"""Delete downloaded files once they fall out of the retention window."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

from youtube_podcaster.domain.exceptions import ScanError
from youtube_podcaster.domain.models.files import (
    DEFAULT_MEDIA_EXTENSION,
    DESCRIPTION_SUFFIX,
    RetentionCandidate,
    SidecarFiles,
)
from youtube_podcaster.infrastructure.filesystem.scanner import walk_match

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_HOURS = 168


class RetentionSweeper:
    """
    Purges stale downloads from a channel directory.

    Each ``.description`` file anchors a triad of files sharing its stem. When
    the description is older than the retention window, the description, media
    and ``.info.json`` files of that stem are deleted.
    """

    def __init__(
        self,
        retention_hours: int = DEFAULT_RETENTION_HOURS,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.retention = timedelta(hours=retention_hours)
        self.clock = clock

    def find_candidates(
        self, directory: str | Path, media_extension: str = DEFAULT_MEDIA_EXTENSION
    ) -> list[RetentionCandidate]:
        """
        List every description-anchored triad under ``directory``.

        Raises:
            ScanError: If the directory cannot be listed or a description
                file cannot be inspected
        """
        candidates = []
        for description in walk_match(directory, f"*{DESCRIPTION_SUFFIX}"):
            try:
                mtime = description.stat().st_mtime
            except OSError as e:
                raise ScanError(str(description), e) from e
            stem = SidecarFiles.from_description(description, media_extension).stem
            candidates.append(
                RetentionCandidate(
                    stem=stem,
                    media_extension=media_extension,
                    modified_at=datetime.fromtimestamp(mtime),
                )
            )
        return candidates

    def sweep(
        self, directory: str | Path, media_extension: str = DEFAULT_MEDIA_EXTENSION
    ) -> list[RetentionCandidate]:
        """
        Delete every expired triad under ``directory``.

        Missing siblings are not an error. A file that exists but cannot be
        removed is logged and the sweep moves on.

        Returns:
            The expired candidates that were swept
        """
        now = self.clock()
        expired = [
            candidate
            for candidate in self.find_candidates(directory, media_extension)
            if candidate.is_expired(now, self.retention)
        ]

        for candidate in expired:
            for path in candidate.files:
                logger.info(f"Deleting expired file: {path}")
                try:
                    path.unlink(missing_ok=True)
                except OSError as e:
                    logger.warning(f"Could not delete {path}: {e}")

        if expired:
            logger.info(f"Swept {len(expired)} expired downloads from {directory}")
        return expired
