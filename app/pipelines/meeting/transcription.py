"""Transcription stage (Stage 02) of the meeting pipeline."""

from __future__ import annotations

import logging

from app.services import TranscribeService, TranscriptionError

from .errors import UpstreamFailure
from .types import AudioSubmission

logger = logging.getLogger("app.services.meeting_pipeline")


async def transcribe_submission(
    service: TranscribeService,
    submission: AudioSubmission,
) -> str:
    """Delegate to Whisper and surface the upstream message on failure."""

    try:
        result = await service.transcribe(
            submission.payload,
            filename=submission.filename,
            content_type=submission.content_type,
        )
    except TranscriptionError as exc:
        logger.exception("Transcription failed file=%s", submission.filename)
        raise UpstreamFailure(str(exc), stage="transcribe") from exc

    return result.transcript


__all__ = ["transcribe_submission"]
