"""YouTube Podcaster - Turn YouTube channels into locally archived podcast seasons."""

__version__ = "0.1.0"

from youtube_podcaster.domain.models import ChannelTask, VideoMetadata

__all__ = ["ChannelTask", "VideoMetadata"]
