"""Meeting processing pipeline package.

Modules are organised by the order in which `/api/process-meeting` executes
them; see `flow` for the stage map and `runner` for the code that ties them
together.
"""

from .analysis import analyze_transcript, parse_analysis
from .demo import DEMO_PAGE_URL, demo_result
from .destination import resolve_destination
from .errors import MeetingProcessingError, SubmissionRejected, UpstreamFailure
from .flow import MeetingPipelineFlow, PipelineStage
from .ingestion import (
    ALLOWED_CONTENT_TYPES,
    read_upload,
    resolve_content_type,
    validate_submission,
)
from .locales import LocaleStrings, get_locale_strings
from .publishing import PageDocument, build_page_document, publish_meeting
from .runner import MeetingPipeline
from .transcription import transcribe_submission
from .types import AudioSubmission, ProcessingConfig

__all__ = [
    "ALLOWED_CONTENT_TYPES",
    "AudioSubmission",
    "DEMO_PAGE_URL",
    "LocaleStrings",
    "MeetingPipeline",
    "MeetingPipelineFlow",
    "MeetingProcessingError",
    "PageDocument",
    "PipelineStage",
    "ProcessingConfig",
    "SubmissionRejected",
    "UpstreamFailure",
    "analyze_transcript",
    "build_page_document",
    "demo_result",
    "get_locale_strings",
    "parse_analysis",
    "publish_meeting",
    "read_upload",
    "resolve_content_type",
    "resolve_destination",
    "transcribe_submission",
    "validate_submission",
]
