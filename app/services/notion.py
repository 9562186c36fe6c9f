"""Notion page publishing helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import httpx

from app.config.settings import settings
from app.services.http import create_http_client, extract_error_message

logger = logging.getLogger(__name__)


class NotionPublishError(RuntimeError):
    """Raised when Notion rejects or fails to create a page."""


@dataclass(frozen=True)
class PublishedPage:
    """Identifier of the created page plus the link handed back to users."""

    page_id: str
    url: str


def page_url(page_id: str, base_url: str) -> str:
    """Compose the user-facing link: the page id with its dashes removed."""
    return f"{base_url.rstrip('/')}/{page_id.replace('-', '')}"


class NotionPublisher:
    """Create pages under a Notion database."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        version: str,
        page_url_base: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._page_url_base = page_url_base
        self._configured = bool(api_key)
        self._client = create_http_client(
            base_url,
            api_key=api_key,
            headers={"Notion-Version": version},
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        """Publishing is skipped entirely when no integration token is set."""
        return self._configured

    async def create_page(
        self,
        database_id: str,
        *,
        properties: Mapping[str, Any],
        children: Sequence[Mapping[str, Any]],
    ) -> PublishedPage:
        payload = {
            "parent": {"database_id": database_id},
            "properties": dict(properties),
            "children": list(children),
        }

        try:
            response = await self._client.post("/pages", json=payload)
        except httpx.HTTPError as exc:
            raise NotionPublishError(f"Notion request failed: {exc}") from exc

        if response.is_error:
            raise NotionPublishError(extract_error_message(response))

        try:
            page_id = str(response.json()["id"])
        except (ValueError, KeyError, TypeError) as exc:
            raise NotionPublishError("Notion response did not include a page id") from exc

        url = page_url(page_id, self._page_url_base)
        logger.info("Notion page created database=%s page=%s", database_id, page_id)
        return PublishedPage(page_id=page_id, url=url)

    async def aclose(self) -> None:
        await self._client.aclose()


def get_notion_publisher() -> NotionPublisher:
    """Return the process-wide Notion publisher singleton."""
    return _DEFAULT_PUBLISHER


_DEFAULT_PUBLISHER = NotionPublisher(
    base_url=settings.notion.base_url,
    api_key=settings.notion.api_key.get_secret_value() if settings.notion.api_key else None,
    version=settings.notion.version,
    page_url_base=settings.notion.page_url_base,
)


__all__ = [
    "NotionPublishError",
    "NotionPublisher",
    "PublishedPage",
    "get_notion_publisher",
    "page_url",
]
