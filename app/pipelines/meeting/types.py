"""Typed containers shared across the meeting pipeline.

These live in their own module so the stages (`ingestion`, `transcription`,
`analysis`, `publishing`) can import them without circular dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AudioSubmission:
    """One uploaded recording, held in memory until it is transcribed."""

    payload: bytes
    content_type: str
    filename: str


@dataclass(frozen=True)
class ProcessingConfig:
    """Per-request switches sent by the caller."""

    demo_mode: bool = False
    destination_id: str | None = None


__all__ = ["AudioSubmission", "ProcessingConfig"]
