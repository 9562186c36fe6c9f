"""Canned output returned in demo mode, with no external calls."""

from __future__ import annotations

from app.services.response_contract import MeetingAnalysis, ProcessingResult, Sentiment

DEMO_PAGE_URL = "https://notion.so/demo-page"

_ENGLISH_TRANSCRIPT = """[Demo transcript]

Sarah: Good morning everyone. Let's discuss the timeline for the Q1 product launch.

Mike: I've finished the initial designs. We're on track for the January 15th milestone.

Sarah: Excellent! What about the marketing materials?

Lisa: The social media campaign is ready. I just need final approval from the brand team by Friday.

Mike: I'll coordinate with engineering to make sure the API is stable by next week.

Sarah: Perfect. Let's reconvene on Monday to review progress. I have a good feeling about this launch!"""

_GERMAN_TRANSCRIPT = """[Demo-Transkript]

Sarah: Guten Morgen zusammen. Lassen Sie uns den Zeitplan für die Produkteinführung im ersten Quartal besprechen.

Mike: Ich habe die ersten Designs fertiggestellt. Wir sind auf Kurs für den Meilenstein am 15. Januar.

Sarah: Ausgezeichnet! Was ist mit den Marketingmaterialien?

Lisa: Die Social-Media-Kampagne ist bereit. Ich brauche nur noch die endgültige Freigabe vom Markenteam bis Freitag.

Mike: Ich werde mich mit der Technik abstimmen, um sicherzustellen, dass die API bis nächste Woche stabil ist.

Sarah: Perfekt. Lassen Sie uns am Montag wieder zusammenkommen, um den Fortschritt zu überprüfen. Ich habe ein gutes Gefühl bei diesem Launch!"""

_DEMO_RESULTS = {
    "en": ProcessingResult(
        transcript=_ENGLISH_TRANSCRIPT,
        analysis=MeetingAnalysis(
            summary=(
                "The team reviewed the Q1 product launch timeline and confirmed they are "
                "on track for the January 15th milestone. Design work is complete, and "
                "the marketing materials are ready pending brand approval."
            ),
            action_items=[
                "Lisa to get final approval from the brand team by Friday",
                "Mike to coordinate with engineering on API stability by next week",
                "Team to reconvene on Monday to review progress",
            ],
            sentiment=Sentiment.POSITIVE,
            sentiment_explanation=(
                "The meeting had an optimistic and productive tone with clear action "
                "items and confident leadership."
            ),
        ),
        notion_page_url=DEMO_PAGE_URL,
    ),
    "de": ProcessingResult(
        transcript=_GERMAN_TRANSCRIPT,
        analysis=MeetingAnalysis(
            summary=(
                "Das Team besprach den Zeitplan für die Produkteinführung im ersten "
                "Quartal und bestätigte, dass sie auf Kurs für den Meilenstein am "
                "15. Januar sind. Die Designarbeit ist abgeschlossen, und die "
                "Marketingmaterialien sind bereit und warten auf die Markenfreigabe."
            ),
            action_items=[
                "Lisa soll die endgültige Freigabe vom Markenteam bis Freitag einholen",
                "Mike soll sich mit der Technik für API-Stabilität bis nächste Woche abstimmen",
                "Team soll sich am Montag wieder treffen, um den Fortschritt zu überprüfen",
            ],
            sentiment=Sentiment.POSITIVE,
            sentiment_explanation=(
                "Das Meeting hatte einen optimistischen und produktiven Ton mit klaren "
                "Aktionspunkten und selbstbewusster Führung."
            ),
        ),
        notion_page_url=DEMO_PAGE_URL,
    ),
}


def demo_result(locale: str) -> ProcessingResult:
    """Return a fresh copy of the canned result for ``locale``."""
    return _DEMO_RESULTS[locale.lower()].model_copy(deep=True)


__all__ = ["DEMO_PAGE_URL", "demo_result"]
