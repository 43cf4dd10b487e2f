"""Plain-text file implementation of the episode ledger."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

from youtube_podcaster.domain.exceptions import LedgerError
from youtube_podcaster.domain.services.episode_ledger import EpisodeLedger

logger = logging.getLogger(__name__)

COUNTER_FILENAME = "{channel_id}_EpisodeNumber.txt"
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class FileEpisodeLedger(EpisodeLedger):
    """
    Keeps each channel's counter in ``{config_dir}/{channel_id}_EpisodeNumber.txt``.

    The file holds a single base-10 integer and nothing else. A corrupt value
    is reported, never reset, so episode numbers cannot collide.
    """

    def __init__(self, config_dir: str | Path) -> None:
        self.config_dir = Path(config_dir)

    def path_for(self, channel_id: str) -> Path:
        """Location of a channel's counter file."""
        return self.config_dir / COUNTER_FILENAME.format(channel_id=channel_id)

    def read(self, channel_id: str) -> int:
        path = self.path_for(channel_id)
        if not path.exists():
            logger.info(f"Creating episode counter for {channel_id} at {path}")
            self._write(channel_id, 0)

        try:
            text = path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise LedgerError(channel_id, f"cannot read {path}: {e}", e) from e

        if not INTEGER_PATTERN.fullmatch(text):
            raise LedgerError(channel_id, f"{path} does not contain an integer: {text!r}")
        return int(text, 10)

    def allocate(self, channel_id: str) -> int:
        episode_number = self.read(channel_id) + 1
        self._write(channel_id, episode_number)
        logger.info(f"Allocated episode {episode_number} for {channel_id}")
        return episode_number

    def _write(self, channel_id: str, value: int) -> None:
        """Replace the counter file in one step so readers never see a partial value."""
        path = self.path_for(channel_id)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.config_dir, prefix=f".{channel_id}_", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(str(value))
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise LedgerError(channel_id, f"cannot write {path}: {e}", e) from e
