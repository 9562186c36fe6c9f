"""Failure taxonomy for the meeting pipeline.

Every failure carries the HTTP status the controller should answer with and
a single human-readable message. Nothing here is retried.
"""

from __future__ import annotations

from fastapi import status


class MeetingProcessingError(RuntimeError):
    """Base class for a request that ends without a ProcessingResult."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SubmissionRejected(MeetingProcessingError):
    """Input rejected before any external service was contacted."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamFailure(MeetingProcessingError):
    """Transcription, analysis or publishing failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, stage: str) -> None:
        super().__init__(message)
        self.stage = stage


__all__ = ["MeetingProcessingError", "SubmissionRejected", "UpstreamFailure"]
