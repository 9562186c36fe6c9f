"""Python client for the meeting processing service."""

from .duration import probe_duration
from .errors import (
    AudioDecodeError,
    DurationLimitExceeded,
    SessionBusyError,
    UploadClientError,
)
from .status import UploadStatus
from .uploader import AudioFile, StepDelays, UploadSession

__all__ = [
    "AudioDecodeError",
    "AudioFile",
    "DurationLimitExceeded",
    "SessionBusyError",
    "StepDelays",
    "UploadClientError",
    "UploadSession",
    "UploadStatus",
    "probe_duration",
]
