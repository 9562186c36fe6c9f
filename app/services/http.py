"""Shared httpx helpers for service clients."""

from __future__ import annotations

from typing import Any

import httpx

DEFAULT_TIMEOUT = httpx.Timeout(None)


def create_http_client(
    base_url: str,
    *,
    api_key: str | None = None,
    headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Instantiate an async client with bearer credentials if available.

    No timeout is applied: waiting on the upstream is bounded only by the
    upstream itself.
    """

    client_headers: dict[str, str] = dict(headers or {})
    if api_key:
        client_headers["Authorization"] = f"Bearer {api_key}"

    client_kwargs: dict[str, Any] = {
        "base_url": base_url.rstrip("/"),
        "headers": client_headers,
        "timeout": DEFAULT_TIMEOUT,
    }
    if transport is not None:
        client_kwargs["transport"] = transport
    return httpx.AsyncClient(**client_kwargs)


def extract_error_message(response: httpx.Response) -> str:
    """Pull the upstream error message out of a failed response."""

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        if payload.get("message"):
            return str(payload["message"])

    text = response.text.strip()
    if text:
        return text
    return f"HTTP {response.status_code}"


__all__ = ["create_http_client", "extract_error_message"]
