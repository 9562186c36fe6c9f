"""Groq Whisper integration for speech-to-text."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from app.config.settings import settings
from app.services.http import create_http_client, extract_error_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptionResult:
    """Structured transcription outcome returned to the pipeline."""

    transcript: str
    model: str


class TranscriptionError(RuntimeError):
    """Raised when Groq fails to transcribe the audio."""


class TranscribeService:
    """High-level facade for Groq's audio transcription endpoint."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        model: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._model = model
        self._client = create_http_client(base_url, api_key=api_key, transport=transport)

    async def transcribe(
        self,
        audio_bytes: bytes,
        *,
        filename: str,
        content_type: str,
    ) -> TranscriptionResult:
        """Upload the recording and return its plain-text transcript.

        No language is sent, so Whisper detects it and the transcript keeps
        the speakers' own language. The response text is returned as sent,
        including any surrounding whitespace.
        """

        if not audio_bytes:
            raise TranscriptionError("The uploaded audio file is empty.")

        logger.info(
            "Sending %d bytes to transcription model=%s file=%s",
            len(audio_bytes),
            self._model,
            filename,
        )
        try:
            response = await self._client.post(
                "/audio/transcriptions",
                files={"file": (filename, audio_bytes, content_type)},
                data={"model": self._model, "response_format": "text"},
            )
        except httpx.HTTPError as exc:
            raise TranscriptionError(f"Transcription request failed: {exc}") from exc

        if response.is_error:
            raise TranscriptionError(extract_error_message(response))

        transcript = response.text
        logger.info("Transcription complete. Length: %d", len(transcript))
        return TranscriptionResult(transcript=transcript, model=self._model)

    async def aclose(self) -> None:
        await self._client.aclose()


def get_transcribe_service() -> TranscribeService:
    """Return the process-wide transcribe service singleton."""
    return _DEFAULT_SERVICE


_DEFAULT_SERVICE = TranscribeService(
    base_url=settings.groq.base_url,
    api_key=settings.groq.api_key.get_secret_value() if settings.groq.api_key else None,
    model=settings.groq.transcription_model,
)


__all__ = [
    "TranscribeService",
    "TranscriptionError",
    "TranscriptionResult",
    "get_transcribe_service",
]
