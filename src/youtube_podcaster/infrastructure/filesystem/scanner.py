"""Recursive file matching under a channel directory."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path

from youtube_podcaster.domain.exceptions import ScanError


def walk_match(root: str | Path, pattern: str) -> list[Path]:
    """
    Find every file below ``root`` whose base name matches ``pattern``.

    Sub-directories are searched recursively; directories themselves never
    match. Results are sorted by path so callers see a stable order.

    Args:
        root: Directory to search
        pattern: Shell-style glob applied to base names, e.g. ``*.description``

    Returns:
        Matching file paths

    Raises:
        ScanError: If ``root`` or any directory below it cannot be listed
    """
    root = Path(root)

    def on_error(error: OSError) -> None:
        raise ScanError(str(error.filename or root), error) from error

    if not root.is_dir():
        raise ScanError(str(root), NotADirectoryError(f"Not a directory: {root}"))

    matches: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=on_error):
        for filename in filenames:
            if fnmatch.fnmatchcase(filename, pattern):
                matches.append(Path(dirpath) / filename)
    return sorted(matches)
