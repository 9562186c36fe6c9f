"""Client-side upload session for the meeting processing endpoint.

``UploadSession`` walks one recording through the phases shown to users:
``idle``, ``uploading``, ``transcribing``, ``analyzing``, ``publishing`` and
finally ``complete``, or ``error`` from any phase in between. The middle
phases are display pacing around a single HTTP request; only ``complete``
and ``error`` reflect the server's answer. Both are terminal until
``reset()`` is called.
"""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Optional

import httpx
from pydantic import ValidationError

from app.services.response_contract import ProcessingResult

from .duration import probe_duration
from .errors import DurationLimitExceeded, SessionBusyError, UploadClientError
from .status import UploadStatus

logger = logging.getLogger(__name__)

PROCESS_ENDPOINT = "/api/process-meeting"
DEMO_MODE_HEADER = "x-demo-mode"
DATABASE_ID_HEADER = "x-notion-database-id"

PROCESSING_FALLBACK_MESSAGE = "Failed to process meeting"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

DurationProbe = Callable[[bytes, Optional[str]], float]
CompletionCallback = Callable[[ProcessingResult], Optional[Awaitable[None]]]
StatusListener = Callable[[UploadStatus], None]


@dataclass(frozen=True)
class AudioFile:
    """A recording selected by the user."""

    name: str
    content: bytes
    content_type: str

    @classmethod
    def from_path(cls, path: str | Path) -> "AudioFile":
        file_path = Path(path)
        guessed_type, _ = mimetypes.guess_type(file_path.name)
        return cls(
            name=file_path.name,
            content=file_path.read_bytes(),
            content_type=guessed_type or "application/octet-stream",
        )


@dataclass(frozen=True)
class StepDelays:
    """Cosmetic pauses between display phases, in seconds."""

    after_uploading: float = 0.5
    after_analyzing: float = 0.3
    after_publishing: float = 0.3


def _default_probe(content: bytes, filename: Optional[str]) -> float:
    return probe_duration(content, filename=filename)


class UploadSession:
    """One user's upload widget: at most one submission in flight."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        demo_mode: bool = False,
        destination_id: str | None = None,
        max_duration_seconds: float | None = 60.0,
        on_complete: CompletionCallback | None = None,
        on_status_change: StatusListener | None = None,
        duration_probe: DurationProbe = _default_probe,
        delays: StepDelays = StepDelays(),
    ) -> None:
        self._http = http_client
        self.demo_mode = demo_mode
        self.destination_id = destination_id
        self.max_duration_seconds = max_duration_seconds
        self._on_complete = on_complete
        self._on_status_change = on_status_change
        self._probe = duration_probe
        self._delays = delays

        self._status = UploadStatus.IDLE
        self._file_name: str | None = None
        self._error: str | None = None
        self._result: ProcessingResult | None = None
        self._generation = 0
        self._active: int | None = None

    @property
    def status(self) -> UploadStatus:
        return self._status

    @property
    def file_name(self) -> str | None:
        return self._file_name

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def result(self) -> ProcessingResult | None:
        return self._result

    @property
    def progress(self) -> int:
        return self._status.progress

    @property
    def status_message(self) -> str:
        return self._status.message

    @property
    def accepts_input(self) -> bool:
        """New files are only taken from a fresh or reset session."""
        return self._status is UploadStatus.IDLE and self._active is None

    def reset(self) -> None:
        """Return to ``idle`` and forget the last file, error and result.

        Any request still in flight is orphaned: its answer is discarded.
        """

        self._generation += 1
        self._active = None
        self._file_name = None
        self._error = None
        self._result = None
        self._set_status(UploadStatus.IDLE)

    async def submit(self, audio: AudioFile) -> UploadStatus:
        """Process one recording and return the phase the session ends in.

        ``on_complete`` runs after the session is already ``complete`` with
        its result stored; an exception raised by the callback propagates
        to the caller and leaves that state untouched.
        """

        if not self.accepts_input:
            raise SessionBusyError(
                f"Cannot accept a new file while the session is {self._status.value}"
            )

        self._generation += 1
        generation = self._active = self._generation
        self._file_name = audio.name
        self._error = None
        self._result = None

        try:
            result = await self._process(audio, generation)
        except (UploadClientError, httpx.HTTPError) as exc:
            if self._is_current(generation):
                self._fail(str(exc) or UNEXPECTED_ERROR_MESSAGE)
            return self._status
        finally:
            if self._active == generation:
                self._active = None

        if result is None or not self._is_current(generation):
            logger.info("Discarding outcome for a session that was reset")
            return self._status

        self._result = result
        self._set_status(UploadStatus.COMPLETE)
        if self._on_complete is not None:
            outcome = self._on_complete(result)
            if outcome is not None:
                await outcome
        return self._status

    async def _process(self, audio: AudioFile, generation: int) -> ProcessingResult | None:
        """Run the phases; returns None as soon as the session was reset."""

        await self._check_duration(audio)
        if not self._is_current(generation):
            return None

        self._set_status(UploadStatus.UPLOADING)
        await asyncio.sleep(self._delays.after_uploading)
        if not self._is_current(generation):
            return None

        self._set_status(UploadStatus.TRANSCRIBING)
        response = await self._post(audio)
        if not self._is_current(generation):
            return None

        self._set_status(UploadStatus.ANALYZING)
        await asyncio.sleep(self._delays.after_analyzing)
        result = self._read_result(response)
        if not self._is_current(generation):
            return None

        self._set_status(UploadStatus.PUBLISHING)
        await asyncio.sleep(self._delays.after_publishing)
        return result

    async def _check_duration(self, audio: AudioFile) -> None:
        if self.demo_mode or not self.max_duration_seconds:
            return
        duration = await asyncio.to_thread(self._probe, audio.content, audio.name)
        if duration > self.max_duration_seconds:
            raise DurationLimitExceeded(duration, self.max_duration_seconds)

    async def _post(self, audio: AudioFile) -> httpx.Response:
        headers: dict[str, str] = {}
        if self.demo_mode:
            headers[DEMO_MODE_HEADER] = "true"
        if self.destination_id:
            headers[DATABASE_ID_HEADER] = self.destination_id

        return await self._http.post(
            PROCESS_ENDPOINT,
            headers=headers,
            files={"audio": (audio.name, audio.content, audio.content_type)},
        )

    @staticmethod
    def _read_result(response: httpx.Response) -> ProcessingResult:
        try:
            payload = response.json()
        except ValueError as exc:
            raise UploadClientError(PROCESSING_FALLBACK_MESSAGE) from exc

        if not isinstance(payload, dict) or not payload.get("success"):
            message = payload.get("error") if isinstance(payload, dict) else None
            raise UploadClientError(message or PROCESSING_FALLBACK_MESSAGE)

        try:
            return ProcessingResult.model_validate(payload.get("data"))
        except ValidationError as exc:
            raise UploadClientError(PROCESSING_FALLBACK_MESSAGE) from exc

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _fail(self, message: str) -> None:
        self._error = message
        self._set_status(UploadStatus.ERROR)

    def _set_status(self, status: UploadStatus) -> None:
        self._status = status
        if self._on_status_change is not None:
            self._on_status_change(status)


__all__ = [
    "AudioFile",
    "StepDelays",
    "UploadSession",
]
