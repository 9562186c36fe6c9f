"""Fixed user-facing strings for each supported deployment locale."""

from __future__ import annotations

from dataclasses import dataclass

from app.services.response_contract import Sentiment


@dataclass(frozen=True)
class LocaleStrings:
    missing_audio: str
    invalid_file_type: str
    destination_required: str
    no_analysis_response: str
    processing_failed: str

    page_title_prefix: str
    summary_heading: str
    action_items_heading: str
    sentiment_heading: str
    transcript_heading: str

    sentiment_positive: str
    sentiment_neutral: str
    sentiment_negative: str

    def sentiment_label(self, sentiment: Sentiment) -> str:
        """Map a sentiment onto the display vocabulary used in Notion."""

        if sentiment is Sentiment.POSITIVE:
            return self.sentiment_positive
        if sentiment is Sentiment.NEUTRAL:
            return self.sentiment_neutral
        if sentiment is Sentiment.NEGATIVE:
            return self.sentiment_negative
        raise ValueError(f"Unhandled sentiment: {sentiment!r}")


ENGLISH = LocaleStrings(
    missing_audio="No audio file provided",
    invalid_file_type="Invalid file type. Please upload MP3, WAV or M4A files.",
    destination_required=(
        "Notion database ID required. Please provide your own Notion database ID."
    ),
    no_analysis_response="No response from AI analysis",
    processing_failed="Meeting could not be processed",
    page_title_prefix="Meeting Notes",
    summary_heading="Summary",
    action_items_heading="Action Items",
    sentiment_heading="Sentiment",
    transcript_heading="Full Transcript",
    sentiment_positive="Positive",
    sentiment_neutral="Neutral",
    sentiment_negative="Negative",
)

GERMAN = LocaleStrings(
    missing_audio="Keine Audiodatei bereitgestellt",
    invalid_file_type=(
        "Ungültiger Dateityp. Bitte laden Sie MP3-, WAV- oder M4A-Dateien hoch."
    ),
    destination_required=(
        "Notion-Datenbank-ID erforderlich. "
        "Bitte geben Sie Ihre eigene Notion-Datenbank-ID an."
    ),
    no_analysis_response="Keine Antwort von der KI-Analyse",
    processing_failed="Meeting konnte nicht verarbeitet werden",
    page_title_prefix="Meeting-Notizen",
    summary_heading="Zusammenfassung",
    action_items_heading="Aktionspunkte",
    sentiment_heading="Stimmung",
    transcript_heading="Vollständiges Transkript",
    sentiment_positive="Positiv",
    sentiment_neutral="Neutral",
    sentiment_negative="Negativ",
)

_LOCALES = {"en": ENGLISH, "de": GERMAN}


def get_locale_strings(locale: str) -> LocaleStrings:
    try:
        return _LOCALES[locale.lower()]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale}") from None


__all__ = ["ENGLISH", "GERMAN", "LocaleStrings", "get_locale_strings"]
