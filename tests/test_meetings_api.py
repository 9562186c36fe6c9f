"""Integration-style tests for the /api/process-meeting endpoint."""

from __future__ import annotations

import json
import re

import pytest
from fastapi.testclient import TestClient

from app.controllers.dependencies import get_meeting_pipeline
from app.main import app

from conftest import SAMPLE_ANALYSIS_JSON, SAMPLE_TRANSCRIPT

ENDPOINT = "/api/process-meeting"
AUDIO = ("meeting.mp3", b"ID3-fake-mp3-bytes", "audio/mpeg")


@pytest.fixture
def use_pipeline():
    """Route the endpoint through a pipeline built from fake services."""

    def _install(pipeline):
        app.dependency_overrides[get_meeting_pipeline] = lambda: pipeline
        return TestClient(app)

    yield _install

    app.dependency_overrides.clear()


def test_missing_audio_is_rejected_without_external_calls(services, use_pipeline):
    client = use_pipeline(services.pipeline())

    response = client.post(ENDPOINT)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No audio file provided"}
    assert services.external_calls == 0


def test_empty_audio_counts_as_missing(services, use_pipeline):
    client = use_pipeline(services.pipeline())

    response = client.post(ENDPOINT, files={"audio": ("empty.mp3", b"", "audio/mpeg")})

    assert response.status_code == 400
    assert response.json()["error"] == "No audio file provided"


@pytest.mark.parametrize("content_type", ["text/plain", "video/webm", "audio/ogg", "application/pdf"])
def test_disallowed_media_type_is_rejected(services, use_pipeline, content_type):
    client = use_pipeline(services.pipeline())

    response = client.post(ENDPOINT, files={"audio": ("notes.bin", b"data", content_type)})

    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["error"].startswith("Invalid file type")
    assert services.external_calls == 0


def test_part_without_media_type_is_rejected(services, use_pipeline):
    client = use_pipeline(services.pipeline(default_destination="operator-db"))
    boundary = "meeting-boundary"
    body = (
        f"--{boundary}\r\n"
        'Content-Disposition: form-data; name="audio"; filename="m.mp3"\r\n'
        "\r\n"
        "ID3-fake-mp3-bytes\r\n"
        f"--{boundary}--\r\n"
    ).encode()

    response = client.post(
        ENDPOINT,
        content=body,
        headers={"Content-Type": f"multipart/form-data; boundary={boundary}"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Invalid file type. Please upload MP3, WAV or M4A files.",
    }
    assert services.external_calls == 0


def test_text_field_in_place_of_file_is_rejected(services, use_pipeline):
    client = use_pipeline(services.pipeline(default_destination="operator-db"))

    response = client.post(ENDPOINT, data={"audio": "not a file"})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Invalid file type. Please upload MP3, WAV or M4A files.",
    }
    assert services.external_calls == 0


def test_demo_mode_returns_canned_result_without_external_calls(services, use_pipeline):
    client = use_pipeline(services.pipeline(production=True))

    response = client.post(ENDPOINT, files={"audio": AUDIO}, headers={"x-demo-mode": "true"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["isDemo"] is True
    assert payload["data"]["transcript"].startswith("[Demo transcript]")
    assert payload["data"]["analysis"]["sentiment"] == "positive"
    assert payload["data"]["notionPageUrl"] == "https://notion.so/demo-page"
    assert services.external_calls == 0


def test_demo_mode_is_deterministic_regardless_of_content(services, use_pipeline):
    client = use_pipeline(services.pipeline())

    first = client.post(ENDPOINT, files={"audio": AUDIO}, headers={"x-demo-mode": "true"})
    second = client.post(
        ENDPOINT,
        files={"audio": ("other.wav", b"RIFF-different", "audio/wav")},
        headers={"x-demo-mode": "true"},
    )

    assert first.json() == second.json()


def test_demo_mode_follows_deployment_locale(services, use_pipeline):
    client = use_pipeline(services.pipeline(locale="de"))

    response = client.post(ENDPOINT, files={"audio": AUDIO}, headers={"x-demo-mode": "true"})

    data = response.json()["data"]
    assert data["transcript"].startswith("[Demo-Transkript]")
    assert data["analysis"]["actionItems"][0].startswith("Lisa soll")


def test_production_requires_destination_before_any_call(services, use_pipeline):
    client = use_pipeline(services.pipeline(production=True, default_destination="operator-db"))

    response = client.post(ENDPOINT, files={"audio": AUDIO})

    assert response.status_code == 400
    assert response.json()["error"].startswith("Notion database ID required")
    assert services.external_calls == 0


def test_successful_run_returns_transcript_and_analysis_unchanged(services, use_pipeline):
    client = use_pipeline(services.pipeline(production=True))

    response = client.post(
        ENDPOINT,
        files={"audio": AUDIO},
        headers={"x-notion-database-id": "caller-db"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert "isDemo" not in payload
    assert payload["data"]["transcript"] == SAMPLE_TRANSCRIPT
    assert payload["data"]["analysis"] == json.loads(SAMPLE_ANALYSIS_JSON)
    assert re.fullmatch(r"https://notion\.so/[0-9a-f]{32}", payload["data"]["notionPageUrl"])

    assert services.transcriber.calls[0]["audio_bytes"] == AUDIO[1]
    assert services.transcriber.calls[0]["content_type"] == "audio/mpeg"
    assert services.llm_client.calls[0]["user_prompt"] == f"Transcript:\n\n{SAMPLE_TRANSCRIPT}"
    assert services.publisher.calls[0]["database_id"] == "caller-db"


def test_operator_default_destination_applies_outside_production(services, use_pipeline):
    client = use_pipeline(services.pipeline(default_destination="operator-db"))

    response = client.post(ENDPOINT, files={"audio": AUDIO})

    assert response.status_code == 200
    assert services.publisher.calls[0]["database_id"] == "operator-db"


def test_publishing_skipped_without_destination(services, use_pipeline):
    client = use_pipeline(services.pipeline())

    response = client.post(ENDPOINT, files={"audio": AUDIO})

    assert response.status_code == 200
    assert "notionPageUrl" not in response.json()["data"]
    assert services.publisher.calls == []


def test_publishing_skipped_without_notion_credentials(services, use_pipeline):
    services.publisher.configured = False
    client = use_pipeline(services.pipeline(default_destination="operator-db"))

    response = client.post(ENDPOINT, files={"audio": AUDIO})

    assert response.status_code == 200
    assert "notionPageUrl" not in response.json()["data"]
    assert services.publisher.calls == []


@pytest.mark.parametrize("llm_response", [None, "", "not json at all", '{"summary": "only"}'])
def test_unusable_analysis_fails_before_publishing(services, use_pipeline, llm_response):
    services.llm_client.response = llm_response
    client = use_pipeline(services.pipeline(default_destination="operator-db"))

    response = client.post(ENDPOINT, files={"audio": AUDIO})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "No response from AI analysis"}
    assert services.publisher.calls == []


def test_transcription_failure_surfaces_upstream_message(services, use_pipeline):
    services.transcriber.error = "Rate limit reached for model whisper-large-v3"
    client = use_pipeline(services.pipeline(default_destination="operator-db"))

    response = client.post(ENDPOINT, files={"audio": AUDIO})

    assert response.status_code == 500
    assert response.json()["error"] == "Rate limit reached for model whisper-large-v3"
    assert services.llm_client.calls == []
    assert services.publisher.calls == []


def test_publish_failure_discards_computed_results(services, use_pipeline):
    services.publisher.error = "Could not find database with ID: operator-db"
    client = use_pipeline(services.pipeline(default_destination="operator-db"))

    response = client.post(ENDPOINT, files={"audio": AUDIO})

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Could not find database with ID: operator-db",
    }


def test_health_endpoint_reports_service():
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
