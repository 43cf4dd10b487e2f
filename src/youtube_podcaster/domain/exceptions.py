"""Domain-specific exceptions for the YouTube Podcaster application."""

from typing import Optional


class PodcasterError(Exception):
    """Base exception for all YouTube Podcaster errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(PodcasterError):
    """Raised when there are configuration-related errors."""

    pass


class ValidationError(PodcasterError):
    """Raised when data validation fails."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        message = f"Validation failed for {field}='{value}': {reason}"
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason


class DownloaderError(PodcasterError):
    """Raised when the external video downloader fails."""

    def __init__(
        self,
        channel_id: str,
        reason: str,
        returncode: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        message = f"Downloader failed for channel {channel_id}: {reason}"
        super().__init__(message, cause)
        self.channel_id = channel_id
        self.returncode = returncode


class ScanError(PodcasterError):
    """Raised when a channel directory cannot be listed or inspected."""

    def __init__(self, path: str, cause: Optional[Exception] = None) -> None:
        message = f"Cannot scan directory: {path}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message, cause)
        self.path = path


class MetadataError(PodcasterError):
    """Raised when a sidecar metadata file cannot be read or parsed."""

    def __init__(self, path: str, reason: str, cause: Optional[Exception] = None) -> None:
        message = f"Invalid metadata file {path}: {reason}"
        super().__init__(message, cause)
        self.path = path
        self.reason = reason


class LedgerError(PodcasterError):
    """Raised when an episode counter file is unreadable or corrupt."""

    def __init__(self, channel_id: str, reason: str, cause: Optional[Exception] = None) -> None:
        message = f"Episode ledger error for channel {channel_id}: {reason}"
        super().__init__(message, cause)
        self.channel_id = channel_id
        self.reason = reason


class ThumbnailError(PodcasterError):
    """Raised when an episode thumbnail cannot be downloaded."""

    def __init__(self, url: str, cause: Optional[Exception] = None) -> None:
        message = f"Failed to download thumbnail: {url or '<empty url>'}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message, cause)
        self.url = url


class RenameError(PodcasterError):
    """Raised when a downloaded media file cannot be moved to its episode name."""

    def __init__(self, source: str, destination: str, cause: Optional[Exception] = None) -> None:
        message = f"Failed to rename {source} to {destination}"
        super().__init__(message, cause)
        self.source = source
        self.destination = destination


class NotificationError(PodcasterError):
    """Raised when a push notification cannot be delivered."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code
