"""Move downloaded media to its episode file name."""

from __future__ import annotations

import logging
from pathlib import Path

from youtube_podcaster.domain.exceptions import RenameError
from youtube_podcaster.domain.models.files import episode_basename

logger = logging.getLogger(__name__)


def episode_path(source: Path, episode_number: int, video_id: str) -> Path:
    """Episode-numbered path next to ``source``, keeping its extension."""
    return source.with_name(f"{episode_basename(episode_number, video_id)}{source.suffix}")


def rename_episode(source: str | Path, episode_number: int, video_id: str) -> Path:
    """
    Rename ``{video_id}.{ext}`` to ``s01e{NN} - {video_id}.{ext}`` in place.

    Raises:
        RenameError: If the source is missing or the move fails
    """
    source = Path(source)
    destination = episode_path(source, episode_number, video_id)
    try:
        source.rename(destination)
    except OSError as e:
        raise RenameError(str(source), str(destination), e) from e
    logger.info(f"Renamed {source.name} -> {destination.name}")
    return destination
