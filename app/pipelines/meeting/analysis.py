"""Analysis stage (Stage 03): turn a transcript into a MeetingAnalysis."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from app.services import GroqLlmClient, LlmInvocationError
from app.services.response_contract import MeetingAnalysis, ResponseContractError

from .errors import UpstreamFailure
from .locales import LocaleStrings
from .prompts import MEETING_ANALYSIS_PROMPT, build_user_prompt

logger = logging.getLogger("app.services.meeting_pipeline")


def _truncate(value: str, max_length: int = 500) -> str:
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


def parse_analysis(raw_response: str | None) -> MeetingAnalysis:
    """Read the model output as a MeetingAnalysis or raise ResponseContractError."""

    if not raw_response:
        raise ResponseContractError("Analysis model returned an empty response.")
    try:
        return MeetingAnalysis.from_json(raw_response)
    except ValidationError as exc:
        raise ResponseContractError(str(exc)) from exc


async def analyze_transcript(
    client: GroqLlmClient,
    transcript: str,
    strings: LocaleStrings,
) -> MeetingAnalysis:
    """Single attempt; an empty or malformed reply fails the request."""

    try:
        raw_response = await client.invoke_json(
            system_prompt=MEETING_ANALYSIS_PROMPT,
            user_prompt=build_user_prompt(transcript),
        )
    except LlmInvocationError as exc:
        logger.exception("Analysis call failed")
        raise UpstreamFailure(str(exc), stage="analyze") from exc

    if raw_response:
        logger.info("Raw analysis response: %s", _truncate(raw_response))

    try:
        return parse_analysis(raw_response)
    except ResponseContractError as exc:
        logger.warning("Unusable analysis response: %s", exc)
        raise UpstreamFailure(strings.no_analysis_response, stage="analyze") from exc


__all__ = ["analyze_transcript", "parse_analysis"]
