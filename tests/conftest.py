"""Shared fakes and fixtures for the meeting pipeline tests."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.pipelines.meeting import MeetingPipeline  # noqa: E402
from app.services import (  # noqa: E402
    LlmInvocationError,
    NotionPublishError,
    PublishedPage,
    TranscriptionError,
    TranscriptionResult,
)
from app.services.notion import page_url  # noqa: E402

SAMPLE_TRANSCRIPT = (
    "Let's discuss the Q1 launch. Lisa will get approval from the brand team by "
    "Friday and Mike will check the API with engineering."
)
SAMPLE_ANALYSIS_JSON = (
    '{"summary": "The team aligned on the Q1 launch.", '
    '"actionItems": ["Lisa to get approval by Friday", "Mike to check API stability"], '
    '"sentiment": "positive", '
    '"sentimentExplanation": "Upbeat and focused."}'
)
SAMPLE_PAGE_ID = "1a2b3c4d-5e6f-7a8b-9c0d-1e2f3a4b5c6d"


class FakeTranscriber:
    def __init__(self, transcript: str = SAMPLE_TRANSCRIPT, error: str | None = None) -> None:
        self.transcript = transcript
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def transcribe(self, audio_bytes, *, filename, content_type):
        self.calls.append(
            {"audio_bytes": audio_bytes, "filename": filename, "content_type": content_type}
        )
        if self.error:
            raise TranscriptionError(self.error)
        return TranscriptionResult(transcript=self.transcript, model="whisper-large-v3")


class FakeLlmClient:
    def __init__(self, response: str | None = SAMPLE_ANALYSIS_JSON, error: str | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def invoke_json(self, *, system_prompt, user_prompt, **kwargs):
        self.calls.append({"system_prompt": system_prompt, "user_prompt": user_prompt})
        if self.error:
            raise LlmInvocationError(self.error)
        return self.response


class FakePublisher:
    def __init__(self, *, configured: bool = True, error: str | None = None) -> None:
        self.configured = configured
        self.error = error
        self.calls: list[dict[str, Any]] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def create_page(self, database_id, *, properties, children):
        self.calls.append(
            {"database_id": database_id, "properties": properties, "children": children}
        )
        if self.error:
            raise NotionPublishError(self.error)
        return PublishedPage(
            page_id=SAMPLE_PAGE_ID,
            url=page_url(SAMPLE_PAGE_ID, "https://notion.so"),
        )


class FakeServices:
    def __init__(self) -> None:
        self.transcriber = FakeTranscriber()
        self.llm_client = FakeLlmClient()
        self.publisher = FakePublisher()

    @property
    def external_calls(self) -> int:
        return (
            len(self.transcriber.calls)
            + len(self.llm_client.calls)
            + len(self.publisher.calls)
        )

    def pipeline(self, **kwargs: Any) -> MeetingPipeline:
        return MeetingPipeline(
            transcriber=self.transcriber,
            llm_client=self.llm_client,
            publisher=self.publisher,
            **kwargs,
        )


@pytest.fixture
def services() -> FakeServices:
    return FakeServices()
