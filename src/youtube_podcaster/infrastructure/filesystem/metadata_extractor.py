"""Parse the downloader's ``.info.json`` sidecar into VideoMetadata."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, validator

from youtube_podcaster.domain.exceptions import MetadataError
from youtube_podcaster.domain.models.video import DEFAULT_DURATION, VideoMetadata

logger = logging.getLogger(__name__)


def scalar_to_text(value: Any) -> str | None:
    """
    Render a JSON scalar as text.

    Booleans become ``true``/``false`` and whole floats lose their fractional
    part. ``null``, arrays and objects have no text form and yield None.
    """
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SidecarDocument(BaseModel):
    """
    The keys of a sidecar file this application reads.

    Every key is optional and unknown keys are ignored; the downloader writes
    far more than is consumed here.
    """

    id: str | None = None
    title: str | None = None
    thumbnail: str | None = None
    description: str | None = None
    uploader_url: str | None = None
    channel_url: str | None = None
    webpage_url: str | None = None
    duration_string: str | None = None

    @validator("*", pre=True)
    def coerce_scalar(cls, v: Any) -> str | None:
        """Coerce any JSON scalar to its text form."""
        return scalar_to_text(v)

    def to_domain(self) -> VideoMetadata:
        """Convert to a VideoMetadata record, filling defaults for absent keys."""
        return VideoMetadata(
            id=_or_default(self.id, ""),
            title=_or_default(self.title, ""),
            description=_or_default(self.description, ""),
            webpage_url=_or_default(self.webpage_url, ""),
            uploader_url=_or_default(self.uploader_url, ""),
            channel_url=_or_default(self.channel_url, ""),
            duration=_or_default(self.duration_string, DEFAULT_DURATION),
            thumbnail_url=_or_default(self.thumbnail, ""),
        )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


def _or_default(value: str | None, default: str) -> str:
    return default if value is None else value


def extract_metadata(path: str | Path) -> VideoMetadata:
    """
    Read a sidecar JSON file.

    Args:
        path: Path to a ``.info.json`` file

    Returns:
        The video's metadata with defaults for absent fields

    Raises:
        MetadataError: If the file cannot be read, is not valid JSON or is not
            a JSON object
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataError(str(path), f"cannot read file: {e}", e) from e

    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        raise MetadataError(str(path), f"invalid JSON: {e}", e) from e

    if not isinstance(raw, dict):
        raise MetadataError(str(path), f"expected a JSON object, got {type(raw).__name__}")

    metadata = SidecarDocument.parse_obj(raw).to_domain()
    logger.debug(f"Extracted metadata from {path.name}: {metadata}")
    return metadata
