"""Failures the upload session reports without a server answer."""

from __future__ import annotations


class UploadClientError(RuntimeError):
    """Raised for failures detected before or while talking to the server."""


class AudioDecodeError(UploadClientError):
    """Recording could not be decoded to measure its length."""


class DurationLimitExceeded(UploadClientError):
    """Recording is longer than the configured maximum."""

    def __init__(self, duration_seconds: float, max_duration_seconds: float) -> None:
        super().__init__(
            f"Audio too long! Maximum {max_duration_seconds:g} seconds allowed. "
            f"Your file is {round(duration_seconds)} seconds."
        )
        self.duration_seconds = duration_seconds
        self.max_duration_seconds = max_duration_seconds


class SessionBusyError(UploadClientError):
    """Raised when a file is offered while the session is not idle."""


__all__ = [
    "AudioDecodeError",
    "DurationLimitExceeded",
    "SessionBusyError",
    "UploadClientError",
]
