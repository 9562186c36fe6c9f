"""Service layer helpers for external integrations."""

from .llm_client import GroqLlmClient, LlmInvocationError, get_llm_client
from .notion import (
    NotionPublishError,
    NotionPublisher,
    PublishedPage,
    get_notion_publisher,
)
from .transcribe import (
    TranscribeService,
    TranscriptionError,
    TranscriptionResult,
    get_transcribe_service,
)

__all__ = [
    "GroqLlmClient",
    "LlmInvocationError",
    "get_llm_client",
    "NotionPublisher",
    "NotionPublishError",
    "PublishedPage",
    "get_notion_publisher",
    "TranscribeService",
    "TranscriptionError",
    "TranscriptionResult",
    "get_transcribe_service",
]
