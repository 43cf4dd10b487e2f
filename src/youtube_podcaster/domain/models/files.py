"""Models for the files the downloader leaves next to each video."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path

DESCRIPTION_SUFFIX = ".description"
METADATA_SUFFIX = ".info.json"
DEFAULT_MEDIA_EXTENSION = "mp4"
SEASON_NUMBER = 1


def format_episode_number(episode_number: int) -> str:
    """Zero-pad an episode number to at least two digits."""
    return f"{episode_number:02d}"


def episode_basename(episode_number: int, video_id: str) -> str:
    """Base file name for an episode, e.g. ``s01e03 - abc123``."""
    return f"s{SEASON_NUMBER:02d}e{format_episode_number(episode_number)} - {video_id}"


@dataclass(frozen=True)
class SidecarFiles:
    """
    The files sharing one stem in one directory.

    The downloader writes ``{stem}.description``, ``{stem}.info.json`` and the
    merged media file ``{stem}.{ext}`` side by side. They are associated by
    name only.
    """

    stem: Path
    media_extension: str = DEFAULT_MEDIA_EXTENSION

    @classmethod
    def from_description(
        cls, description: Path, media_extension: str = DEFAULT_MEDIA_EXTENSION
    ) -> SidecarFiles:
        """Build the group from the path of its description file."""
        name = description.name
        if name.endswith(DESCRIPTION_SUFFIX):
            name = name[: -len(DESCRIPTION_SUFFIX)]
        return cls(stem=description.with_name(name), media_extension=media_extension)

    @property
    def name(self) -> str:
        """The stem's base name."""
        return self.stem.name

    @property
    def description(self) -> Path:
        return self._with_suffix(DESCRIPTION_SUFFIX)

    @property
    def metadata(self) -> Path:
        return self._with_suffix(METADATA_SUFFIX)

    @property
    def media(self) -> Path:
        return self._with_suffix(f".{self.media_extension.lstrip('.')}")

    @property
    def files(self) -> tuple[Path, Path, Path]:
        """Description, media and metadata paths, in deletion order."""
        return (self.description, self.media, self.metadata)

    @property
    def is_complete(self) -> bool:
        """Whether both the metadata JSON and the media file are on disk."""
        return self.metadata.is_file() and self.media.is_file()

    def _with_suffix(self, suffix: str) -> Path:
        return self.stem.with_name(self.stem.name + suffix)


@dataclass(frozen=True)
class RetentionCandidate(SidecarFiles):
    """A sidecar group together with the age of its description file."""

    modified_at: datetime = datetime.min

    def is_expired(self, now: datetime, retention: timedelta) -> bool:
        """Whether the description file is strictly older than the retention window."""
        return now - self.modified_at > retention
