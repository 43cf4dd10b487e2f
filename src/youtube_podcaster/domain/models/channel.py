"""Channel domain model and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, validator

from youtube_podcaster.domain.exceptions import ValidationError

SEASON_DIRECTORY = "Season_1"

REQUIRED_CHANNEL_FIELDS = (
    "name",
    "channel_id",
    "file_format",
    "file_quality",
    "download_archive",
    "youtube_url",
    "pushover_app_token",
)


@dataclass(frozen=True)
class ChannelTask:
    """
    One configured channel to download and publish as a podcast season.

    This is an immutable domain entity built from validated configuration.
    It stays fixed for the duration of a run.
    """

    name: str
    channel_id: str
    file_format: str
    file_quality: str
    download_archive: Path
    youtube_url: str
    playlist_items: str
    app_token: str
    user_token: str

    def __post_init__(self) -> None:
        """Validate channel data after initialization."""
        for field in ("channel_id", "name", "playlist_items"):
            if not getattr(self, field):
                raise ValidationError(field, "", "cannot be empty")

    @property
    def media_extension(self) -> str:
        """Extension of the merged media files written by the downloader."""
        return self.file_format.lstrip(".")

    def channel_dir(self, media_folder: Path) -> Path:
        """Directory holding everything downloaded for this channel."""
        return Path(media_folder) / self.channel_id

    def season_dir(self, media_folder: Path) -> Path:
        """Directory the downloader writes episodes into."""
        return self.channel_dir(media_folder) / SEASON_DIRECTORY

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"ChannelTask(name='{self.name}', id={self.channel_id})"

    def __repr__(self) -> str:
        """Developer-friendly string representation without tokens."""
        return (
            f"ChannelTask(name='{self.name}', channel_id='{self.channel_id}', "
            f"file_format='{self.file_format}', playlist_items='{self.playlist_items}')"
        )


class ChannelConfig(BaseModel):
    """
    Configuration for a YouTube channel.

    Fields may be left blank in the configuration file. A channel with blank
    required fields is skipped at run time instead of failing the whole
    configuration, see ``missing_fields``.
    """

    name: str = Field(default="", description="Display name used in notifications")
    channel_id: str = Field(default="", description="YouTube channel ID, also the media sub-directory")
    file_format: str = Field(default="", description="Merge output format, e.g. mp4")
    file_quality: str = Field(default="", description="yt-dlp format selector")
    download_archive: str = Field(default="", description="Path to the yt-dlp download archive file")
    youtube_url: str = Field(default="", description="Channel or playlist URL to download from")
    pushover_app_token: str = Field(default="", description="Pushover application token for this channel")
    channel_thumbnail: str = Field(default="", description="Optional channel artwork URL")
    playlist_items: str | None = Field(
        default=None, description="Playlist item range overriding the global setting"
    )
    enabled: bool = Field(default=True, description="Whether to process this channel")

    @validator(
        "name",
        "channel_id",
        "file_format",
        "file_quality",
        "download_archive",
        "youtube_url",
        "pushover_app_token",
        "channel_thumbnail",
        pre=True,
    )
    def blank_if_missing(cls, v: object) -> str:
        """Treat null values as blank and strip surrounding whitespace."""
        if v is None:
            return ""
        return str(v).strip()

    @validator("playlist_items", pre=True)
    def playlist_items_as_text(cls, v: object) -> str | None:
        """Read numeric ranges such as ``5`` as text; blank means no override."""
        if v is None:
            return None
        return str(v).strip() or None

    def missing_fields(self) -> list[str]:
        """Names of required fields that are blank."""
        return [name for name in REQUIRED_CHANNEL_FIELDS if not getattr(self, name)]

    def to_domain(self, playlist_items: str, user_token: str) -> ChannelTask:
        """Convert to a domain ChannelTask entity."""
        return ChannelTask(
            name=self.name,
            channel_id=self.channel_id,
            file_format=self.file_format,
            file_quality=self.file_quality,
            download_archive=Path(self.download_archive),
            youtube_url=self.youtube_url,
            playlist_items=self.playlist_items or playlist_items,
            app_token=self.pushover_app_token,
            user_token=user_token,
        )

    class Config:
        """Pydantic configuration."""

        extra = "forbid"  # Don't allow extra fields
        validate_assignment = True
