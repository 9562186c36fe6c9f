"""Pydantic models for validating the meeting analysis JSON.

The analysis stage, the HTTP envelope and the upload client all share these
schemas so every layer agrees on the same four fields.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Sentiment(str, Enum):
    """Overall tone of a meeting as reported by the analysis model."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class MeetingAnalysis(BaseModel):
    summary: str
    action_items: List[str] = Field(alias="actionItems")
    sentiment: Sentiment
    sentiment_explanation: str = Field(alias="sentimentExplanation")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_json(cls, payload: str) -> "MeetingAnalysis":
        """Parse the raw model output strictly; no fence stripping or repair."""
        return cls.model_validate_json(payload)


class ProcessingResult(BaseModel):
    """Outcome of one successful pipeline run."""

    transcript: str
    analysis: MeetingAnalysis
    notion_page_url: Optional[str] = Field(default=None, alias="notionPageUrl")

    model_config = ConfigDict(populate_by_name=True)


class ResponseContractError(RuntimeError):
    """Raised when the analysis response cannot be read as a MeetingAnalysis."""


__all__ = [
    "MeetingAnalysis",
    "ProcessingResult",
    "ResponseContractError",
    "Sentiment",
]
