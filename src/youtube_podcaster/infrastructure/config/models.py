"""Pydantic configuration models for application settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, validator

from youtube_podcaster.domain.models.channel import ChannelConfig

PUSHOVER_MESSAGES_URL = "https://api.pushover.net/1/messages.json"


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    file_path: str | None = Field(default=None, description="Log file path (None for console only)")
    max_file_size: int = Field(default=10485760, ge=1024, description="Max log file size in bytes (10MB)")
    backup_count: int = Field(default=5, ge=1, description="Number of backup log files to keep")

    @validator("level")
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class ProcessingSettings(BaseModel):
    """Configuration for pipeline behavior."""

    retention_hours: int = Field(default=168, ge=1, description="Hours to keep downloaded files")
    strict: bool = Field(
        default=False, description="Abort the whole run when any channel fails"
    )
    downloader_binary: str = Field(default="yt-dlp", min_length=1, description="Downloader executable")

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class HttpSettings(BaseModel):
    """Timeouts and endpoints for outbound calls."""

    probe_timeout: float = Field(default=10.0, gt=0, description="Thumbnail probe timeout in seconds")
    fetch_timeout: float = Field(default=30.0, gt=0, description="Thumbnail download timeout in seconds")
    notification_timeout: float = Field(default=30.0, gt=0, description="Notification timeout in seconds")
    downloader_timeout: float | None = Field(
        default=None, gt=0, description="Downloader timeout in seconds (None for no limit)"
    )
    notification_url: str = Field(default=PUSHOVER_MESSAGES_URL, description="Pushover messages endpoint")

    @validator("notification_url")
    def validate_notification_url(cls, v: str) -> str:
        """Validate the notification endpoint scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Notification URL must be http(s): {v}")
        return v

    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class AppConfig(BaseModel):
    """
    Main application configuration model.

    This is the root configuration object that contains all application settings,
    validated using Pydantic for type safety and runtime validation.
    """

    # Core settings
    media_folder: str = Field(..., min_length=1, description="Root folder for downloaded channels")
    config_dir: str = Field(..., min_length=1, description="Folder for episode counters")
    playlist_items: str = Field(..., min_length=1, description="Default playlist item range")
    pushover_user_token: str = Field(..., min_length=1, description="Pushover user key")
    email: str | None = Field(default=None, description="Contact address, informational only")
    channels: list[ChannelConfig] = Field(..., description="List of channels to process", min_length=1)

    # Pipeline configuration
    processing: ProcessingSettings = Field(default_factory=ProcessingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)

    # Infrastructure settings
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @validator("media_folder", "config_dir", "playlist_items", "pushover_user_token", pre=True)
    def validate_not_blank(cls, v: Any) -> str:
        """Reject null or whitespace-only values; numbers are read as text."""
        if v is None or not str(v).strip():
            raise ValueError("Value cannot be blank")
        return str(v).strip()

    @validator("channels")
    def validate_channels(cls, v: list[ChannelConfig]) -> list[ChannelConfig]:
        """Validate channel configurations."""
        if not v:
            raise ValueError("At least one channel must be configured")

        # Check for duplicate channel IDs
        channel_ids = [channel.channel_id for channel in v if channel.channel_id]
        if len(channel_ids) != len(set(channel_ids)):
            raise ValueError("Duplicate channel IDs found in configuration")

        return v

    class Config:
        """Pydantic configuration."""
        extra = "forbid"
        validate_assignment = True
