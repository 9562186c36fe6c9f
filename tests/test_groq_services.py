"""Request-shape tests for the Groq transcription and chat clients."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from app.pipelines.meeting import parse_analysis
from app.pipelines.meeting.prompts import MEETING_ANALYSIS_PROMPT
from app.services import GroqLlmClient, LlmInvocationError, TranscribeService, TranscriptionError
from app.services.response_contract import ResponseContractError, Sentiment

from conftest import SAMPLE_ANALYSIS_JSON

BASE_URL = "https://api.groq.com/openai/v1"


def _transcriber(handler):
    return TranscribeService(
        base_url=BASE_URL,
        api_key="gsk_test",
        model="whisper-large-v3",
        transport=httpx.MockTransport(handler),
    )


def _llm(handler):
    return GroqLlmClient(
        base_url=BASE_URL,
        api_key="gsk_test",
        model="llama-3.3-70b-versatile",
        temperature=0.3,
        max_tokens=1024,
        transport=httpx.MockTransport(handler),
    )


def test_transcription_exports():
    import app.services.transcribe as transcribe_module

    assert set(transcribe_module.__all__) == {
        "TranscribeService",
        "TranscriptionError",
        "TranscriptionResult",
        "get_transcribe_service",
    }


def test_transcription_requests_plain_text_without_language():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, text=" Guten Morgen zusammen.\n")

    result = asyncio.run(
        _transcriber(handler).transcribe(b"audio-bytes", filename="m.mp3", content_type="audio/mpeg")
    )

    request = captured["request"]
    body = request.content
    assert request.url.path == "/openai/v1/audio/transcriptions"
    assert request.headers["Authorization"] == "Bearer gsk_test"
    assert b'name="model"' in body and b"whisper-large-v3" in body
    assert b'name="response_format"' in body and b"text" in body
    assert b'name="language"' not in body
    assert b"audio-bytes" in body
    assert result.transcript == " Guten Morgen zusammen.\n"


def test_transcription_error_uses_upstream_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Invalid API Key"}})

    with pytest.raises(TranscriptionError, match="Invalid API Key"):
        asyncio.run(
            _transcriber(handler).transcribe(b"x", filename="m.mp3", content_type="audio/mpeg")
        )


def test_transcription_rejects_empty_audio_locally():
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - never reached
        raise AssertionError("no request expected")

    with pytest.raises(TranscriptionError):
        asyncio.run(_transcriber(handler).transcribe(b"", filename="m.mp3", content_type="audio/mpeg"))


def test_chat_completion_forces_json_object():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"choices": [{"message": {"role": "assistant", "content": SAMPLE_ANALYSIS_JSON}}]},
        )

    content = asyncio.run(
        _llm(handler).invoke_json(system_prompt=MEETING_ANALYSIS_PROMPT, user_prompt="Transcript:\n\nhi")
    )

    body = captured["body"]
    assert body["model"] == "llama-3.3-70b-versatile"
    assert body["temperature"] == 0.3
    assert body["max_tokens"] == 1024
    assert body["response_format"] == {"type": "json_object"}
    assert body["messages"][0] == {"role": "system", "content": MEETING_ANALYSIS_PROMPT}
    assert body["messages"][1] == {"role": "user", "content": "Transcript:\n\nhi"}
    assert content == SAMPLE_ANALYSIS_JSON


def test_chat_completion_without_choices_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    assert asyncio.run(_llm(handler).invoke_json(system_prompt="s", user_prompt="u")) is None


def test_chat_completion_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": {"message": "upstream exploded"}})

    with pytest.raises(LlmInvocationError, match="upstream exploded"):
        asyncio.run(_llm(handler).invoke_json(system_prompt="s", user_prompt="u"))


def test_parse_analysis_reads_all_four_fields():
    analysis = parse_analysis(SAMPLE_ANALYSIS_JSON)

    assert analysis.summary == "The team aligned on the Q1 launch."
    assert analysis.action_items == ["Lisa to get approval by Friday", "Mike to check API stability"]
    assert analysis.sentiment is Sentiment.POSITIVE
    assert analysis.sentiment_explanation == "Upbeat and focused."


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "```json\n" + SAMPLE_ANALYSIS_JSON + "\n```",
        SAMPLE_ANALYSIS_JSON.replace('"positive"', '"Positive"'),
        SAMPLE_ANALYSIS_JSON.replace('"positive"', '"mixed"'),
    ],
)
def test_parse_analysis_rejects_unusable_output(raw):
    with pytest.raises(ResponseContractError):
        parse_analysis(raw)


def test_prompt_pins_language_mirroring_and_team_default():
    assert "SAME LANGUAGE as the transcript" in MEETING_ANALYSIS_PROMPT
    assert 'use "Team"' in MEETING_ANALYSIS_PROMPT
    assert '"positive", "neutral", "negative" (lowercase only)' in MEETING_ANALYSIS_PROMPT
