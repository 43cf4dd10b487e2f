"""Video domain model and related enums."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

DEFAULT_DURATION = "0:0"

THUMBNAIL_HOST = "https://i.ytimg.com/vi_webp"
THUMBNAIL_EXTENSIONS = ("jpg", "webp")


class VideoStatus(str, Enum):
    """Video reconciliation status."""

    PROCESSED = "processed"
    FAILED = "failed"


@dataclass(frozen=True)
class VideoMetadata:
    """
    Facts extracted from one downloaded video's JSON sidecar.

    Every field has a default so that a sidecar missing optional keys still
    produces a usable record.
    """

    id: str = ""
    title: str = ""
    description: str = ""
    webpage_url: str = ""
    uploader_url: str = ""
    channel_url: str = ""
    duration: str = DEFAULT_DURATION
    thumbnail_url: str = ""

    def with_thumbnail(self, thumbnail_url: str) -> VideoMetadata:
        """Create a new VideoMetadata instance with a resolved thumbnail."""
        return replace(self, thumbnail_url=thumbnail_url)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"VideoMetadata(id={self.id}, title='{self.title[:50]}')"


@dataclass(frozen=True)
class ThumbnailCandidate:
    """
    Ordered thumbnail URL variants for one video.

    Variants are probed in order and the last one that responds wins, so later
    entries take precedence over earlier ones.
    """

    video_id: str
    urls: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def for_video(cls, video_id: str) -> ThumbnailCandidate:
        """Build the known max-resolution variants for a video ID."""
        urls = tuple(
            f"{THUMBNAIL_HOST}/{video_id}/maxresdefault.{ext}" for ext in THUMBNAIL_EXTENSIONS
        )
        return cls(video_id=video_id, urls=urls)


def thumbnail_extension(url: str) -> str:
    """Image extension to save a thumbnail URL under (``jpg`` unless it is WEBP)."""
    return "webp" if url.endswith(".webp") else "jpg"
