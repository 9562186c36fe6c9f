"""Request ingestion helpers (Stage 01 of the meeting pipeline)."""

from __future__ import annotations

from typing import Final

from fastapi import UploadFile

from .errors import SubmissionRejected
from .locales import LocaleStrings
from .types import AudioSubmission

ALLOWED_CONTENT_TYPES: Final[frozenset[str]] = frozenset(
    {
        "audio/mpeg",
        "audio/mp3",
        "audio/wav",
        "audio/m4a",
        "audio/mp4",
    }
)


def resolve_content_type(content_type: str | None) -> str:
    """Normalize the declared media type; an undeclared type stays empty."""

    return (content_type or "").split(";", 1)[0].strip().lower()


async def read_upload(audio_file: UploadFile | None) -> AudioSubmission | None:
    """Load the multipart upload fully into memory; absent or empty uploads yield None."""

    if audio_file is None:
        return None

    payload = await audio_file.read()
    await audio_file.close()

    if not payload:
        return None
    return AudioSubmission(
        payload=payload,
        content_type=resolve_content_type(audio_file.content_type),
        filename=audio_file.filename or "audio",
    )


def validate_submission(
    submission: AudioSubmission | None,
    strings: LocaleStrings,
) -> AudioSubmission:
    """Reject missing files and disallowed media types."""

    if submission is None or not submission.payload:
        raise SubmissionRejected(strings.missing_audio)
    if submission.content_type not in ALLOWED_CONTENT_TYPES:
        raise SubmissionRejected(strings.invalid_file_type)
    return submission


__all__ = [
    "ALLOWED_CONTENT_TYPES",
    "read_upload",
    "resolve_content_type",
    "validate_submission",
]
