"""Logging configuration for the command line application."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from youtube_podcaster.infrastructure.config.models import LoggingConfig


def setup_logging(
    config: LoggingConfig,
    verbose: bool = False,
    console: Console | None = None,
) -> logging.Logger:
    """
    Configure the root logger from the logging settings.

    Console output goes through Rich. When ``file_path`` is set, records are
    also written to a size-rotated log file using the configured format.

    Args:
        config: Logging settings from the configuration file
        verbose: Force DEBUG level regardless of the configured level
        console: Console to attach the Rich handler to

    Returns:
        The configured root logger
    """
    level = logging.DEBUG if verbose else getattr(logging, config.level)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)

    console_handler = RichHandler(console=console, show_path=verbose, rich_tracebacks=True)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(console_handler)

    if config.file_path:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(config.format))
        root.addHandler(file_handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return root
