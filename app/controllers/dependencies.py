"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config.settings import settings
from app.pipelines.meeting import MeetingPipeline
from app.services import get_llm_client, get_notion_publisher, get_transcribe_service


@lru_cache(maxsize=1)
def get_meeting_pipeline() -> MeetingPipeline:
    """Build the pipeline once around the process-wide service clients."""

    return MeetingPipeline(
        transcriber=get_transcribe_service(),
        llm_client=get_llm_client(),
        publisher=get_notion_publisher(),
        production=settings.is_production,
        default_destination=settings.notion.database_id,
        locale=settings.pipeline.locale,
        excerpt_chars=settings.pipeline.transcript_excerpt_chars,
    )


PipelineDep = Annotated[MeetingPipeline, Depends(get_meeting_pipeline)]


__all__ = ["get_meeting_pipeline", "PipelineDep"]
