"""High-level map of the meeting pipeline.

``MeetingPipeline.run`` in ``runner.py`` executes these stages in order.
This module lists them so contributors can jump straight to the code for
each one:

1. ``ingestion`` - reject missing uploads and disallowed media types.
2. ``demo`` - short-circuit with canned output when demo mode is requested.
3. ``destination`` - pick the Notion database, enforcing production rules.
4. ``transcription`` - Whisper speech-to-text with language auto-detection.
5. ``analysis`` - LLM summary, action items and sentiment as strict JSON.
6. ``publishing`` - build the Notion page and create it.

Stages 1-3 never touch the network; stages 4-6 each make one call and are
never retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class PipelineStage:
    """Human-readable description of one stage in the meeting pipeline."""

    order: int
    name: str
    module: str
    summary: str
    external: bool = False


class MeetingPipelineFlow:
    """Utility wrapper for documenting the `/api/process-meeting` flow."""

    _STAGES: List[PipelineStage] = [
        PipelineStage(
            1,
            "Ingestion",
            "app.pipelines.meeting.ingestion",
            "Read the upload into memory and check its media type.",
        ),
        PipelineStage(
            2,
            "Demo Short-circuit",
            "app.pipelines.meeting.demo",
            "Return the canned transcript and analysis without any API keys.",
        ),
        PipelineStage(
            3,
            "Destination",
            "app.pipelines.meeting.destination",
            "Resolve the Notion database from the header or the operator default.",
        ),
        PipelineStage(
            4,
            "Transcription",
            "app.pipelines.meeting.transcription",
            "Send the audio to Groq Whisper and receive plain text.",
            external=True,
        ),
        PipelineStage(
            5,
            "Analysis",
            "app.pipelines.meeting.analysis",
            "Ask the LLM for summary, action items and sentiment as JSON.",
            external=True,
        ),
        PipelineStage(
            6,
            "Publishing",
            "app.pipelines.meeting.publishing",
            "Create a Notion page; skipped when no destination resolves.",
            external=True,
        ),
    ]

    @classmethod
    def describe(cls) -> Iterable[PipelineStage]:
        """Expose the ordered list of stages for debugging and documentation."""

        return tuple(cls._STAGES)


__all__ = ["MeetingPipelineFlow", "PipelineStage"]
