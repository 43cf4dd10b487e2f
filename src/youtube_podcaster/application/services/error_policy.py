"""Decides how far an error reaches: the video, the channel or the run."""

from __future__ import annotations

from youtube_podcaster.domain.exceptions import (
    ConfigurationError,
    LedgerError,
    PodcasterError,
    RenameError,
)
from youtube_podcaster.domain.models.processing import ErrorAction


class ErrorPolicy:
    """
    Maps pipeline errors to an ErrorAction.

    - A failed rename only affects that episode's file name: continue.
    - Broken configuration or a corrupt episode counter would make every
      later channel wrong as well: abort the run.
    - Any other application error stops the current channel; in strict mode
      it stops the run instead.
    - Anything unexpected aborts the run.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def decide(self, error: BaseException) -> ErrorAction:
        if isinstance(error, RenameError):
            return ErrorAction.CONTINUE
        if isinstance(error, (ConfigurationError, LedgerError)):
            return ErrorAction.ABORT_RUN
        if isinstance(error, PodcasterError):
            return ErrorAction.ABORT_RUN if self.strict else ErrorAction.ABORT_CHANNEL
        return ErrorAction.ABORT_RUN
