"""End-to-end execution of one meeting submission.

``MeetingPipeline`` holds references to the long-lived service clients and
nothing else, so a single instance serves concurrent requests.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

from app.services import GroqLlmClient, NotionPublisher, TranscribeService
from app.services.response_contract import ProcessingResult
from app.telemetry import observe_stage, record_meeting_outcome

from .analysis import analyze_transcript
from .demo import demo_result
from .destination import resolve_destination
from .errors import MeetingProcessingError, SubmissionRejected
from .ingestion import validate_submission
from .locales import LocaleStrings, get_locale_strings
from .publishing import TRANSCRIPT_EXCERPT_CHARS, build_page_document, publish_meeting
from .transcription import transcribe_submission
from .types import AudioSubmission, ProcessingConfig

logger = logging.getLogger("app.services.meeting_pipeline")
transcript_logger = logging.getLogger("app.logs.transcript")


@contextmanager
def _timed(stage: str) -> Iterator[None]:
    started = time.perf_counter()
    try:
        yield
    finally:
        observe_stage(stage, time.perf_counter() - started)


class MeetingPipeline:
    """Validate, transcribe, analyze and publish one recording."""

    def __init__(
        self,
        *,
        transcriber: TranscribeService,
        llm_client: GroqLlmClient,
        publisher: NotionPublisher,
        production: bool = False,
        default_destination: str | None = None,
        locale: str = "en",
        excerpt_chars: int = TRANSCRIPT_EXCERPT_CHARS,
    ) -> None:
        self._transcriber = transcriber
        self._llm_client = llm_client
        self._publisher = publisher
        self._production = production
        self._default_destination = default_destination
        self._locale = locale
        self._strings = get_locale_strings(locale)
        self._excerpt_chars = excerpt_chars

    @property
    def strings(self) -> LocaleStrings:
        return self._strings

    async def run(
        self,
        submission: AudioSubmission | None,
        config: ProcessingConfig,
    ) -> ProcessingResult:
        """Return a ProcessingResult or raise MeetingProcessingError."""

        try:
            result = await self._run(submission, config)
        except SubmissionRejected as exc:
            logger.info("Submission rejected: %s", exc.message)
            record_meeting_outcome("rejected")
            raise
        except MeetingProcessingError:
            record_meeting_outcome("failed")
            raise

        record_meeting_outcome("demo" if config.demo_mode else "success")
        return result

    async def _run(
        self,
        submission: AudioSubmission | None,
        config: ProcessingConfig,
    ) -> ProcessingResult:
        audio = validate_submission(submission, self._strings)

        if config.demo_mode:
            logger.info("Demo mode: returning canned result for %s", audio.filename)
            return demo_result(self._locale)

        database_id = resolve_destination(
            config,
            production=self._production,
            default_destination=self._default_destination,
            strings=self._strings,
        )

        with _timed("transcribe"):
            transcript = await transcribe_submission(self._transcriber, audio)
        logger.info("Transcript received file=%s chars=%d", audio.filename, len(transcript))
        transcript_logger.info("file=%s | text=%s", audio.filename, transcript)

        with _timed("analyze"):
            analysis = await analyze_transcript(self._llm_client, transcript, self._strings)
        logger.info(
            "Analysis complete sentiment=%s action_items=%d",
            analysis.sentiment.value,
            len(analysis.action_items),
        )

        page_url: str | None = None
        if database_id and self._publisher.is_configured:
            document = build_page_document(
                transcript,
                analysis,
                self._strings,
                excerpt_chars=self._excerpt_chars,
            )
            with _timed("publish"):
                page_url = await publish_meeting(self._publisher, database_id, document)
        else:
            logger.info("Publishing skipped: no Notion destination or credentials")

        return ProcessingResult(
            transcript=transcript,
            analysis=analysis,
            notion_page_url=page_url,
        )


__all__ = ["MeetingPipeline"]
