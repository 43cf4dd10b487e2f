"""Filesystem-backed pipeline components."""

from youtube_podcaster.infrastructure.filesystem.episode_ledger import FileEpisodeLedger
from youtube_podcaster.infrastructure.filesystem.metadata_extractor import extract_metadata
from youtube_podcaster.infrastructure.filesystem.renamer import rename_episode
from youtube_podcaster.infrastructure.filesystem.retention import RetentionSweeper
from youtube_podcaster.infrastructure.filesystem.scanner import walk_match

__all__ = [
    "FileEpisodeLedger",
    "RetentionSweeper",
    "extract_metadata",
    "rename_episode",
    "walk_match",
]
