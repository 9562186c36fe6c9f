"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    MEETINGS_PROCESSED,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    STAGE_LATENCY,
    observe_request,
    observe_stage,
    record_meeting_outcome,
)

__all__ = [
    "ERROR_COUNTER",
    "MEETINGS_PROCESSED",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "STAGE_LATENCY",
    "observe_request",
    "observe_stage",
    "record_meeting_outcome",
]
