"""Publishing stage (Stage 04): write the meeting notes into Notion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from app.services import NotionPublisher, NotionPublishError
from app.services.response_contract import MeetingAnalysis

from .errors import UpstreamFailure
from .locales import LocaleStrings

logger = logging.getLogger("app.services.meeting_pipeline")

TRANSCRIPT_EXCERPT_CHARS = 2000

TITLE_PROPERTY = "Meeting name"
DATE_PROPERTY = "Meeting date"
SENTIMENT_PROPERTY = "Sentiment"


@dataclass(frozen=True)
class PageDocument:
    """Properties and body blocks of one Notion page."""

    properties: dict[str, Any]
    children: list[dict[str, Any]]


def _rich_text(content: str) -> list[dict[str, Any]]:
    return [{"type": "text", "text": {"content": content}}]


def _heading(content: str) -> dict[str, Any]:
    return {
        "object": "block",
        "type": "heading_2",
        "heading_2": {"rich_text": _rich_text(content)},
    }


def _paragraph(content: str) -> dict[str, Any]:
    return {
        "object": "block",
        "type": "paragraph",
        "paragraph": {"rich_text": _rich_text(content)},
    }


def _divider() -> dict[str, Any]:
    return {"object": "block", "type": "divider", "divider": {}}


def _todo(content: str) -> dict[str, Any]:
    return {
        "object": "block",
        "type": "to_do",
        "to_do": {"rich_text": _rich_text(content), "checked": False},
    }


def build_page_document(
    transcript: str,
    analysis: MeetingAnalysis,
    strings: LocaleStrings,
    *,
    today: date | None = None,
    excerpt_chars: int = TRANSCRIPT_EXCERPT_CHARS,
) -> PageDocument:
    """Lay out summary, action items, sentiment and transcript in that order."""

    meeting_date = (today or date.today()).isoformat()
    sentiment_label = strings.sentiment_label(analysis.sentiment)

    properties = {
        TITLE_PROPERTY: {
            "title": _rich_text(f"{strings.page_title_prefix} - {meeting_date}"),
        },
        DATE_PROPERTY: {"date": {"start": meeting_date}},
        SENTIMENT_PROPERTY: {"select": {"name": sentiment_label}},
    }

    children: list[dict[str, Any]] = [
        _heading(strings.summary_heading),
        _paragraph(analysis.summary),
        _divider(),
        _heading(strings.action_items_heading),
        *(_todo(item) for item in analysis.action_items),
        _divider(),
        _heading(f"{strings.sentiment_heading}: {sentiment_label}"),
        _paragraph(analysis.sentiment_explanation),
        _divider(),
        _heading(strings.transcript_heading),
        _paragraph(transcript[:excerpt_chars]),
    ]
    return PageDocument(properties=properties, children=children)


async def publish_meeting(
    publisher: NotionPublisher,
    database_id: str,
    document: PageDocument,
) -> str:
    """Create the page and return its user-facing URL."""

    try:
        page = await publisher.create_page(
            database_id,
            properties=document.properties,
            children=document.children,
        )
    except NotionPublishError as exc:
        logger.exception("Notion publish failed database=%s", database_id)
        raise UpstreamFailure(str(exc), stage="publish") from exc
    return page.url


__all__ = [
    "PageDocument",
    "TRANSCRIPT_EXCERPT_CHARS",
    "build_page_document",
    "publish_meeting",
]
