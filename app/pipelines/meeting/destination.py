"""Destination resolution for the publishing stage."""

from __future__ import annotations

from .errors import SubmissionRejected
from .locales import LocaleStrings
from .types import ProcessingConfig


def resolve_destination(
    config: ProcessingConfig,
    *,
    production: bool,
    default_destination: str | None,
    strings: LocaleStrings,
) -> str | None:
    """Pick the Notion database to publish into.

    In production the caller must name one. Elsewhere the operator default
    applies, and ``None`` means the publish stage is skipped.
    """

    requested = (config.destination_id or "").strip() or None
    if production:
        if requested is None:
            raise SubmissionRejected(strings.destination_required)
        return requested
    return requested or ((default_destination or "").strip() or None)


__all__ = ["resolve_destination"]
